"""Tokenizer, parser and semantic analysis for a small example language."""