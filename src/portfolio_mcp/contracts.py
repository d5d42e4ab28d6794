"""JSON envelopes returned by the portfolio tools.

Every tool answers with ``{"ok": true, "data": {...}}`` or
``{"ok": false, "error": {...}}``. ``data`` always names the tool family
(``source``) and the operation (``action``) and carries a list of entries
plus a free-form summary, so an MCP client can render search hits, tree
listings and shell output with one code path.

Error codes:

- ``path_not_found``: ``portfolio_browse`` got a path outside the virtual
  tree; details hold the requested path, the nearest existing directory
  and its listing.
- ``invalid_session``: no usable shell session id, e.g. a malformed
  ``PORTFOLIO_MCP_SESSION_ID`` default.

Bad arguments (blank query, limit out of range) never reach this module;
the tool schema rejects them.
"""

from __future__ import annotations

from typing import Any, Final, Literal

from pydantic import BaseModel, Field, model_validator

ToolSource = Literal["search", "tree", "shell"]
ToolAction = Literal["browse", "query", "submit", "complete"]
ErrorCode = Literal["path_not_found", "invalid_session"]

PATH_NOT_FOUND: Final = "path_not_found"
INVALID_SESSION: Final = "invalid_session"


class ToolError(BaseModel):
    """Why a tool call produced no data."""

    code: ErrorCode = Field(description="One of the documented error codes")
    message: str = Field(description="Short explanation for the caller")
    details: dict[str, Any] | None = Field(
        default=None, description="Context for recovering, such as nearby paths"
    )


class ToolEnvelope(BaseModel):
    """Top-level answer of every portfolio tool."""

    ok: bool = Field(description="False when the call failed")
    data: Any | None = Field(default=None, description="Search hits, tree entries or shell output")
    error: ToolError | None = Field(default=None, description="Set exactly when ok is false")

    @model_validator(mode="after")
    def _validate_coherence(self) -> "ToolEnvelope":
        if self.ok and self.error is not None:
            raise ValueError("a successful envelope cannot carry an error")
        if not self.ok and self.error is None:
            raise ValueError("a failed envelope needs an error")
        return self


class ToolData(BaseModel):
    """Payload of a successful call: what ran, its entries and a summary."""

    source: ToolSource
    action: ToolAction
    entries: list[dict[str, Any]]
    summary: dict[str, Any] = Field(default_factory=dict)


def build_ok(data: Any) -> dict[str, Any]:
    return ToolEnvelope(ok=True, data=data).model_dump(exclude_none=True)


def build_error(
    code: ErrorCode,
    message: str,
    details: dict[str, Any] | None = None,
    *,
    data: Any | None = None,
) -> dict[str, Any]:
    """Wrap a failure; ``data`` may carry partial results next to the error."""
    return ToolEnvelope(
        ok=False,
        data=data,
        error=ToolError(code=code, message=message, details=details),
    ).model_dump(exclude_none=True)


def build_tool_data(
    *,
    source: ToolSource,
    action: ToolAction,
    entries: list[dict[str, Any]],
    summary: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Validate and serialize the ``data`` member of a success envelope."""
    return ToolData(
        source=source,
        action=action,
        entries=entries,
        summary=summary or {},
    ).model_dump(exclude_none=True)
