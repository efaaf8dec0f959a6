"""Snapshot test runner for compiler tools."""