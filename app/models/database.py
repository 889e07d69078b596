from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class AttackRun(Base):
    """Stores key recovery runs and their results."""

    __tablename__ = "attack_runs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ciphertexts: Mapped[list[list[int]]] = mapped_column(JSON, default=list)
    key_length: Mapped[int] = mapped_column(Integer, default=4)

    # Derived constraints
    pattern: Mapped[str] = mapped_column(String(512))

    # Stage counts
    dictionary_size: Mapped[int] = mapped_column(Integer, default=0)
    length_matches: Mapped[int] = mapped_column(Integer, default=0)
    candidate_keys: Mapped[list[str]] = mapped_column(JSON, default=list)

    # Verified keys
    solutions: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)

    # Metadata
    parameters_used: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
