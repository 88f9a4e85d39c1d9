"""LEGv8 Syntax Checker — line lexer and grammar validator for LEGv8 assembly.

WHY: Editors and CI jobs need fast, precise feedback on malformed LEGv8
assembly lines. This package turns raw source text into position-addressed
diagnostics that any client (terminal, editor, HTTP caller) can render.

HOW: Three-stage pipeline — lex (one token list per line), validate (compare
each line against the grammar of its leading instruction), format (pluggable
renderers). Each stage is independently testable.

RULES:
- Lexing and validation are pure functions of one line plus static tables
- At most one diagnostic per line, always severity Error
- Adding a new output format = one new formatter module, no core changes
"""

__version__ = "0.1.0"
