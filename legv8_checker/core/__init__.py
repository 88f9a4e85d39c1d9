"""Core lexing, grammar and validation modules.

WHY: The core package contains the stable heart of the checker — the IR
types, the static keyword and grammar tables, the line lexer and the
validators. These are consumed by the CLI, the formatters and the API.

HOW: ir.py defines the data structures, keywords.py and grammar.py hold the
read-only tables, lexer.py turns a line into tokens, validator.py runs the
whole document.

RULES:
- Tables are built once at import and never mutated
- No I/O in this package; callers supply lines and consume diagnostics
"""
