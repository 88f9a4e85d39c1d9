"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. Pydantic
models enforce field types at runtime and generate JSON Schema that
appears in the /docs UI.

HOW: Request bodies carry document text; response models mirror the
core IR (tokens) and the LSP diagnostic shape (positions, ranges).
Enums represent closed sets like token and instruction kinds.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Enum values match the core IR enum values exactly
- Diagnostic coordinates are zero-based, as in LSP
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from legv8_checker.core.ir import InstructionKind, TokenKind


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class CheckRequest(BaseModel):
    """A document to check.

    RULES:
    - uri is echoed back unchanged; it is never opened
    - exact_line_end=None falls back to the server configuration
    """

    uri: str = Field(
        default="untitled:document",
        min_length=1,
        description="Document identifier echoed in the response.",
    )
    text: str = Field(description="Full document text. Lines are separated by '\\n'.")
    exact_line_end: Optional[bool] = Field(
        default=None,
        description=(
            "End 'Expected end of line.' ranges at the real line length "
            "instead of the 4294967295 sentinel."
        ),
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "uri": "file:///home/student/lab1.s",
                "text": "loop:\nADDI X0, X1, #12\nSUBI X1, XZR, #9 uh oh\n",
            }
        ]
    }}


class TokenizeRequest(BaseModel):
    """Text to tokenize, line by line."""

    text: str = Field(description="Full document text. Lines are separated by '\\n'.")


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class Position(BaseModel):
    line: int = Field(ge=0, description="Zero-based line number.")
    character: int = Field(ge=0, description="Zero-based character offset.")


class Range(BaseModel):
    start: Position = Field(description="Inclusive start position.")
    end: Position = Field(description="Exclusive end position.")


class DiagnosticModel(BaseModel):
    """One syntax diagnostic in LSP shape."""

    range: Range = Field(description="Character range the diagnostic applies to.")
    severity: int = Field(description="LSP severity (1 = Error).")
    source: str = Field(description="Tag identifying the checker.")
    message: str = Field(description="Human-readable description of the problem.")


class PublishDiagnosticsResponse(BaseModel):
    """Diagnostics for one document, shaped like LSP publishDiagnostics params."""

    uri: str = Field(description="The document identifier from the request.")
    diagnostics: List[DiagnosticModel] = Field(description="Diagnostics in line order.")


class TokenModel(BaseModel):
    kind: TokenKind = Field(description="Lexical class of the token.")
    instruction_kind: InstructionKind = Field(
        description="Instruction family; NONE unless kind is Instruction.",
    )
    value: str = Field(description="Exact matched text.")
    start: int = Field(ge=0, description="Zero-based start offset (inclusive).")
    end: int = Field(ge=0, description="Zero-based end offset (exclusive).")


class TokenizeResponse(BaseModel):
    lines: List[List[TokenModel]] = Field(description="Tokens for each physical line.")


class InstructionInfo(BaseModel):
    """One mnemonic and the operand shape it requires."""

    mnemonic: str = Field(description="Instruction keyword, e.g. 'ADDI'.")
    kind: InstructionKind = Field(description="Grammar family of the mnemonic.")
    grammar: List[TokenKind] = Field(description="Expected token kinds, in order.")


class FormatInfo(BaseModel):
    """Description of an available output format."""

    key: str = Field(description="Format identifier used in API paths and CLI flags.")
    name: str = Field(description="Human-readable format name.")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
