"""GitHub Actions workflow-command formatter.

WHY: When the checker runs in CI, GitHub turns ``::error`` workflow
commands into inline annotations on the pull request diff.

HOW: One ``::error file=...,line=...,col=...,endColumn=...,title=...::msg``
line per diagnostic. Property values and messages are escaped as the
workflow command syntax requires.

RULES:
- line and col are 1-based; endColumn is the 1-based column of the last
  highlighted character, clamped to the line
- ``%``, CR and LF are escaped in messages; ``:`` and ``,`` additionally
  in property values
"""

from __future__ import annotations

from typing import List

from legv8_checker.core.ir import DocumentReport
from legv8_checker.formatters.base import BaseFormatter, FormatterOutput, clamp_end


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


class GitHubAnnotationFormatter(BaseFormatter):
    """Render diagnostics as GitHub Actions ``::error`` commands."""

    @property
    def name(self) -> str:
        return "GitHub Actions annotations"

    def format(self, reports: List[DocumentReport]) -> FormatterOutput:
        out: List[str] = []
        for report in reports:
            for diagnostic in report.diagnostics:
                line = ""
                if diagnostic.start_line < len(report.lines):
                    line = report.lines[diagnostic.start_line]
                end = clamp_end(diagnostic.end_char, line, diagnostic.start_char)
                out.append("::error file={},line={},col={},endColumn={},title={}::{}".format(
                    _escape_property(report.name),
                    diagnostic.start_line + 1,
                    diagnostic.start_char + 1,
                    end,
                    _escape_property("LEGv8 syntax ({})".format(diagnostic.source)),
                    _escape_data(diagnostic.message),
                ))
        content = "\n".join(out) + "\n" if out else ""
        return FormatterOutput(content=content, media_type="text/plain")
