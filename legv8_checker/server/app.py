"""FastAPI application exposing the checker over HTTP with OpenAPI docs.

WHY: Editor plugins, web playgrounds and CI services that cannot shell
out to the CLI still need diagnostics. FastAPI provides automatic OpenAPI
documentation and request validation on top of the pure core.

HOW: A single FastAPI app exposes endpoints grouped by tags. Requests
carry the document text; every request is a full, independent re-scan
of the text. No document state is kept between requests.

RULES:
- Error responses use a consistent ErrorResponse schema
- Text longer than config.MAX_SOURCE_CHARS is rejected with 413
- Unknown format keys are rejected with 404
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from legv8_checker import __version__, config
from legv8_checker.core.grammar import GRAMMARS
from legv8_checker.core.keywords import KEYWORDS
from legv8_checker.core.lexer import tokenize_document
from legv8_checker.core.validator import check_text, split_lines
from legv8_checker.formatters import FORMATTERS
from legv8_checker.server.models import (
    CheckRequest,
    DiagnosticModel,
    ErrorResponse,
    FormatInfo,
    HealthResponse,
    InstructionInfo,
    PublishDiagnosticsResponse,
    TokenizeRequest,
    TokenizeResponse,
    TokenModel,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="LEGv8 Syntax Checker API",
    description=(
        "REST API for checking LEGv8 assembly source. Submit document text "
        "and receive LSP-shaped diagnostics, raw tokens, or a rendered report."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

_TOO_LARGE = {413: {"model": ErrorResponse, "description": "Document text too large"}}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _check_size(text: str) -> None:
    """Raise HTTPException if the text exceeds the configured limit."""
    if len(text) > config.MAX_SOURCE_CHARS:
        raise HTTPException(
            status_code=413,
            detail="Document too large ({} chars, max {})".format(
                len(text), config.MAX_SOURCE_CHARS
            ),
        )


# ---------------------------------------------------------------------------
# Endpoints: Diagnostics
# ---------------------------------------------------------------------------


@app.post(
    "/diagnostics",
    response_model=PublishDiagnosticsResponse,
    tags=["diagnostics"],
    summary="Check a document",
    description=(
        "Lex and validate every line of the document. Returns at most one "
        "diagnostic per line, in line order, shaped like LSP publishDiagnostics params."
    ),
    responses=_TOO_LARGE,
)
async def check_document(request: CheckRequest) -> PublishDiagnosticsResponse:
    _check_size(request.text)
    report = check_text(request.text, request.uri, exact_line_end=request.exact_line_end)
    logger.info("Checked %s: %d diagnostics", request.uri, len(report.diagnostics))
    return PublishDiagnosticsResponse(
        uri=request.uri,
        diagnostics=[
            DiagnosticModel(**d.to_lsp(report.line_text(d.start_line)))
            for d in report.diagnostics
        ],
    )


@app.post(
    "/reports/{format_key}",
    tags=["diagnostics"],
    summary="Check a document and render the result",
    description="Check the document and render the diagnostics with one of the formatters.",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown format"},
        **_TOO_LARGE,
    },
)
async def render_report(format_key: str, request: CheckRequest) -> Response:
    formatter_cls = FORMATTERS.get(format_key)
    if formatter_cls is None:
        raise HTTPException(
            status_code=404,
            detail="Unknown format '{}'. Available: {}".format(
                format_key, ", ".join(sorted(FORMATTERS.keys()))
            ),
        )
    _check_size(request.text)
    report = check_text(request.text, request.uri, exact_line_end=request.exact_line_end)
    output = formatter_cls().format([report])
    return Response(content=output.content, media_type=output.media_type)


@app.post(
    "/tokens",
    response_model=TokenizeResponse,
    tags=["diagnostics"],
    summary="Tokenize a document",
    description="Return the lexer's token list for every physical line.",
    responses=_TOO_LARGE,
)
async def tokenize(request: TokenizeRequest) -> TokenizeResponse:
    _check_size(request.text)
    token_lines = tokenize_document(split_lines(request.text))
    return TokenizeResponse(lines=[
        [
            TokenModel(
                kind=t.kind,
                instruction_kind=t.instruction_kind,
                value=t.value,
                start=t.start,
                end=t.end,
            )
            for t in tokens
        ]
        for tokens in token_lines
    ])


# ---------------------------------------------------------------------------
# Endpoints: Reference
# ---------------------------------------------------------------------------


@app.get(
    "/instructions",
    response_model=List[InstructionInfo],
    tags=["reference"],
    summary="List instruction mnemonics",
    description="Every known mnemonic with its instruction kind and expected operand shape.",
)
async def list_instructions() -> List[InstructionInfo]:
    return [
        InstructionInfo(mnemonic=mnemonic, kind=kind, grammar=list(GRAMMARS[kind]))
        for mnemonic, kind in sorted(KEYWORDS.items())
    ]


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["reference"],
    summary="List available output formats",
)
async def list_formats() -> List[FormatInfo]:
    return [
        FormatInfo(key=key, name=formatter_cls().name)
        for key, formatter_cls in sorted(FORMATTERS.items())
    ]


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the legv8-api console script."""
    import uvicorn
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
