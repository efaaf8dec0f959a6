"""AST, diagnostics and file helpers of a small C front end."""