"""LSP ``publishDiagnostics`` JSON formatter.

WHY: Editor integrations and other tools already speak the Language
Server Protocol's diagnostic shape. Emitting exactly that shape lets a
thin client forward the checker's output with no translation.

HOW: Each DocumentReport becomes one ``{uri, diagnostics}`` object, the
params of a ``textDocument/publishDiagnostics`` notification. The whole
batch is a JSON array, validated with jsonschema against the bundled
schema before returning.

RULES:
- Coordinates stay zero-based and count UTF-16 code units, as LSP requires
- The end-of-line sentinel is passed through unchanged
- Report names that are already URIs are kept; file paths become file:// URIs
- Validate output against the schema before returning; raise on failure
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

import jsonschema

from legv8_checker.core.ir import DocumentReport
from legv8_checker.formatters.base import BaseFormatter, FormatterOutput

_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schemas" / "publish_diagnostics.schema.json"

_CACHED_SCHEMA: dict[str, Any] | None = None


def _get_schema() -> dict[str, Any]:
    """Load the publishDiagnostics schema, cached after the first call."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def to_uri(name: str) -> str:
    """Turn a report name into a document URI.

    Names containing a scheme (``file://...``, ``untitled:...``) are kept.
    """
    if "://" in name or name.startswith("untitled:"):
        return name
    return Path(name).resolve().as_uri()


def build_publish_params(report: DocumentReport) -> dict[str, Any]:
    """The ``publishDiagnostics`` params for one report."""
    return {
        "uri": to_uri(report.name),
        "diagnostics": [
            d.to_lsp(report.line_text(d.start_line)) for d in report.diagnostics
        ],
    }


class LspJsonFormatter(BaseFormatter):
    """Render reports as a JSON array of LSP publishDiagnostics params."""

    @property
    def name(self) -> str:
        return "LSP JSON"

    def format(self, reports: List[DocumentReport]) -> FormatterOutput:
        """Render and schema-validate the batch.

        Raises:
            jsonschema.ValidationError: If the generated JSON does not
                conform to publish_diagnostics.schema.json.
        """
        output = [build_publish_params(report) for report in reports]
        jsonschema.validate(instance=output, schema=_get_schema())
        return FormatterOutput(
            content=json.dumps(output, indent=2) + "\n",
            media_type="application/json",
        )
