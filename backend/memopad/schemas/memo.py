"""
MemoPad Backend — Pydantic Request/Response Schemas
=====================================================

What:  Pydantic models defining the API contract for /memos and /health.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI document.
Who:   Used by route handlers (request bodies, response_model) and MemoService.

Design Decision:
    Schemas are separate from the Memo record so the wire format can change
    without touching MemoStore. Presence rules (which fields PUT/PATCH require)
    are NOT encoded here: both fields are optional at the schema level and
    MemoService enforces per-operation rules, so a missing field surfaces as
    the service's ValidationError rather than FastAPI's 422.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What clients send
# ══════════════════════════════════════════════════════════════════════════


class MemoRequest(BaseModel):
    """
    What:  Body of POST, PUT and PATCH /memos requests.

    Absent keys and explicit nulls are treated the same: the field is None.
    JSON numbers are accepted and stored as their string form.
    Unknown keys are ignored.
    """
    title: Optional[str] = Field(default=None, description="Memo title")
    contents: Optional[str] = Field(default=None, description="Memo body text")

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class MemoResponse(BaseModel):
    """
    What:  Full representation of a stored memo.
    Who:   Returned by every /memos endpoint except DELETE.
    """
    id: int = Field(description="Store-assigned memo identifier")
    title: Optional[str] = Field(default=None, description="Memo title (null if never set)")
    contents: Optional[str] = Field(default=None, description="Memo body (null if never set)")

    model_config = ConfigDict(from_attributes=True)


class HealthResponse(BaseModel):
    """
    What:  Health check response.
    Who:   Returned by GET /health for liveness probes.
    """
    status: str = Field(description="Overall service status: healthy")
    version: str = Field(description="Application version")
    memo_count: int = Field(description="Number of memos currently held in memory")
    uptime_seconds: float = Field(description="Seconds since the service started")
