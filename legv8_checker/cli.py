"""Command-line interface for the LEGv8 syntax checker.

WHY: Users need a simple way to check assembly files from the terminal
or from CI. The CLI wires together the full pipeline — path expansion,
file reading, lexing and validation, and pluggable formatter output —
behind a single command.

HOW: Uses argparse to accept files, directories or ``-`` (stdin), an
output format, an optional output file, and the diagnostic options.
Each document is checked with check_text(); the selected formatter
renders all reports at once. Status messages go to stderr; rendered
output goes to stdout (or --output).

RULES:
- Positional arguments: files, directories (searched recursively by
  SOURCE_EXTENSIONS) or ``-`` for stdin
- --format: one formatter key (default: config.DEFAULT_FORMAT)
- Exit status: 0 no diagnostics, 1 diagnostics found, 2 usage or I/O error
  (including an unknown LEGV8_DEFAULT_FORMAT)
- Status output goes to stderr (not stdout)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from legv8_checker import __version__, config
from legv8_checker.core.ir import DocumentReport
from legv8_checker.core.validator import check_text
from legv8_checker.formatters import FORMATTERS

EXIT_OK = 0
EXIT_DIAGNOSTICS = 1
EXIT_ERROR = 2

STDIN_NAME = "-"

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _expand_paths(raw_paths: List[str]) -> List[str]:
    """Expand directories into the assembly files they contain.

    RULES:
    - ``-`` is passed through unchanged (stdin)
    - Directories are searched recursively; matches are sorted
    - Files are kept as given, whatever their extension
    - Missing paths raise FileNotFoundError
    """
    expanded: List[str] = []
    for raw in raw_paths:
        if raw == STDIN_NAME:
            expanded.append(raw)
            continue
        path = Path(raw)
        if path.is_dir():
            found = sorted(
                p for p in path.rglob("*")
                if p.is_file() and p.suffix.lower() in config.SOURCE_EXTENSIONS
            )
            if not found:
                _status("  No assembly files under {}".format(path))
            expanded.extend(str(p) for p in found)
        elif path.is_file():
            expanded.append(raw)
        else:
            raise FileNotFoundError("File not found: {}".format(raw))
    return expanded


def _read_source(name: str) -> str:
    """Read a document's text from a file or stdin."""
    if name == STDIN_NAME:
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8", errors="replace")


def check_paths(
    paths: List[str],
    source: Optional[str] = None,
    exact_line_end: Optional[bool] = None,
) -> List[DocumentReport]:
    """Check every path and return one report per document.

    Raises:
        FileNotFoundError / OSError: If a path cannot be read.
    """
    reports: List[DocumentReport] = []
    for name in _expand_paths(paths):
        text = _read_source(name)
        report_name = "untitled:stdin" if name == STDIN_NAME else name
        report = check_text(text, report_name, source=source, exact_line_end=exact_line_end)
        reports.append(report)
        logger.debug(
            "%s: %d lines, %d diagnostics", report_name, len(report.lines), len(report.diagnostics)
        )
    return reports


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable — tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="legv8-check",
        description="Check LEGv8 assembly source for syntax errors.",
    )

    parser.add_argument(
        "paths",
        nargs="+",
        help="Assembly files or directories to check. Use '-' to read stdin.",
    )

    parser.add_argument(
        "--format",
        default=config.DEFAULT_FORMAT,
        choices=sorted(FORMATTERS.keys()),
        help="Output format (default: %(default)s).",
    )

    parser.add_argument(
        "--output",
        default=None,
        help="Write the rendered diagnostics to this file instead of stdout.",
    )

    parser.add_argument(
        "--source",
        default=None,
        help="Tag placed in each diagnostic's source field "
             "(default: {}).".format(config.DIAGNOSTIC_SOURCE),
    )

    parser.add_argument(
        "--exact-line-end",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="End 'Expected end of line.' ranges at the real line length "
             "instead of the unbounded sentinel (default: {}).".format(config.EXACT_LINE_END),
    )

    parser.add_argument(
        "--no-source-lines",
        action="store_true",
        help="Text format only: do not quote the offending source line.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Returns the process exit status instead of exiting, for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # The default comes from LEGV8_DEFAULT_FORMAT and bypasses argparse choices.
    if args.format not in FORMATTERS:
        print(
            "Error: Unknown format '{}'. Available: {}".format(
                args.format, ", ".join(sorted(FORMATTERS.keys()))
            ),
            file=sys.stderr,
        )
        return EXIT_ERROR

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    try:
        reports = check_paths(args.paths, source=args.source, exact_line_end=args.exact_line_end)
    except OSError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return EXIT_ERROR

    if args.format == "text":
        formatter = FORMATTERS[args.format](show_source=not args.no_source_lines)
    else:
        formatter = FORMATTERS[args.format]()
    output = formatter.format(reports)

    if args.output:
        try:
            Path(args.output).write_text(output.content, encoding="utf-8")
        except OSError as e:
            print("Error: {}".format(e), file=sys.stderr)
            return EXIT_ERROR
        _status("Saved: {}".format(args.output))
    else:
        sys.stdout.write(output.content)

    total = sum(len(r.diagnostics) for r in reports)
    _status("Checked {} file(s), {} diagnostic(s)".format(len(reports), total))
    return EXIT_DIAGNOSTICS if total else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
