"""Abstract base formatter and output container.

WHY: Every output format renders the same DocumentReport list but
produces different text. This base class enforces a consistent interface
so the CLI and API layers can work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles the rendered content with its MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` renders all reports into one output
- Diagnostic coordinates in reports are zero-based; formatters convert
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from legv8_checker.core.ir import DocumentReport


@dataclass
class FormatterOutput:
    """Rendered diagnostics.

    Attributes:
        content: The rendered text (plain text, JSON, workflow commands).
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all diagnostic formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'LSP JSON'."""

    @abstractmethod
    def format(self, reports: List[DocumentReport]) -> FormatterOutput:
        """Render the diagnostics of one or more checked documents.

        Args:
            reports: Checked documents in the order they were given.

        Returns:
            A FormatterOutput with the rendered content and its MIME type.
        """


def clamp_end(end_char: int, line: str, start_char: int) -> int:
    """Bound a diagnostic's end column by the line it points into.

    Unbounded end-of-line ranges (and ranges one past a trailing token)
    are clipped to the line length, but never below start_char + 1.
    """
    return max(start_char + 1, min(end_char, len(line)))
