"""Compiler-style plain text formatter.

WHY: Humans reading a terminal expect the familiar
``file:line:col: error: message`` layout that editors and terminals
already know how to hyperlink, with the offending line quoted below.

HOW: For each diagnostic, print the location header (1-based line and
column), the source line, and a marker line with ``^`` under the first
character and ``~`` under the rest of the range. A summary line closes
the output.

RULES:
- Line and column are 1-based in the header
- The marker is clamped to the line; unbounded ranges run to its end
- Tabs in the line prefix are kept so the marker stays aligned
- Summary: "No problems found in N file(s)." or "N error(s) in M file(s)."
"""

from __future__ import annotations

from typing import List

from legv8_checker.core.ir import Diagnostic, DocumentReport
from legv8_checker.formatters.base import BaseFormatter, FormatterOutput, clamp_end


def _marker(line: str, diagnostic: Diagnostic) -> str:
    start = diagnostic.start_char
    end = clamp_end(diagnostic.end_char, line, start)
    prefix = "".join("\t" if ch == "\t" else " " for ch in line[:start])
    return prefix + "^" + "~" * (end - start - 1)


def _plural(count: int, word: str) -> str:
    return "{} {}{}".format(count, word, "" if count == 1 else "s")


class TextFormatter(BaseFormatter):
    """Render diagnostics as compiler-style text with source excerpts."""

    def __init__(self, show_source: bool = True):
        self.show_source = show_source

    @property
    def name(self) -> str:
        return "Plain text"

    def format(self, reports: List[DocumentReport]) -> FormatterOutput:
        out: List[str] = []
        total = 0
        failing_files = 0
        for report in reports:
            if report.diagnostics:
                failing_files += 1
            for diagnostic in report.diagnostics:
                total += 1
                out.append("{}:{}:{}: error: {} [{}]".format(
                    report.name,
                    diagnostic.start_line + 1,
                    diagnostic.start_char + 1,
                    diagnostic.message,
                    diagnostic.source,
                ))
                if self.show_source and diagnostic.start_line < len(report.lines):
                    line = report.lines[diagnostic.start_line]
                    out.append("    " + line)
                    out.append("    " + _marker(line, diagnostic))

        if total:
            out.append("{} in {}.".format(_plural(total, "error"), _plural(failing_files, "file")))
        else:
            out.append("No problems found in {}.".format(_plural(len(reports), "file")))

        return FormatterOutput(content="\n".join(out) + "\n", media_type="text/plain")
