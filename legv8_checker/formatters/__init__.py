"""Diagnostic formatter registry — pluggable output hub.

WHY: The CLI and API layers need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new formats:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["lsp_json"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API paths)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from legv8_checker.formatters.github import GitHubAnnotationFormatter
from legv8_checker.formatters.lsp_json import LspJsonFormatter
from legv8_checker.formatters.text import TextFormatter

if TYPE_CHECKING:
    from legv8_checker.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "text": TextFormatter,
    "lsp_json": LspJsonFormatter,
    "github": GitHubAnnotationFormatter,
}
