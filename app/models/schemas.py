from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Attack Schemas
# ============================================================================


class AttackOptions(BaseModel):
    """Tuning options for a key recovery run."""

    strict: bool = False
    max_workers: int = Field(default=1, ge=1, le=32)


class PositionConstraintSchema(BaseModel):
    """Letters possible at one key position."""

    position: int
    letters: str


class CandidateSchema(BaseModel):
    """A verified key and its decoded words."""

    secret: str
    plain_texts: list[str]


# ============================================================================
# Request Schemas
# ============================================================================


class AttackRequest(BaseModel):
    """Request schema for /attack endpoint."""

    ciphertexts: list[list[int]] | None = None
    words: list[str] | None = None
    options: AttackOptions = Field(default_factory=AttackOptions)


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    words: list[str] = Field(min_length=1)
    key: str


# ============================================================================
# Response Schemas
# ============================================================================


class AttackResponse(BaseModel):
    """Response schema for /attack endpoint."""

    run_id: int | None = None
    pattern: str
    constraints: list[PositionConstraintSchema]
    dictionary_size: int
    length_matches: int
    candidate_keys: list[str]
    solutions: list[CandidateSchema]


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertexts: list[list[int]]
    key_used: str


class XorTableResponse(BaseModel):
    """Response schema for /table endpoint."""

    alphabet: str
    matrix: list[list[int]]
    rendered: str


class AttackHistoryItem(BaseModel):
    """Single history item."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    pattern: str
    ciphertext_count: int
    candidate_count: int
    solution_count: int
    created_at: datetime


class HistoryResponse(BaseModel):
    """Response schema for /history endpoint."""

    items: list[AttackHistoryItem]
    total: int
    page: int
    page_size: int


class AttackDetailResponse(BaseModel):
    """Full stored attack run."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    ciphertexts: list[list[int]]
    key_length: int
    pattern: str
    dictionary_size: int
    length_matches: int
    candidate_keys: list[str]
    solutions: list[dict[str, Any]]
    parameters_used: dict[str, Any]
    created_at: datetime


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
