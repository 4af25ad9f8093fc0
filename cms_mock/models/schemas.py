"""Pydantic v2 schemas for API request bodies."""

from __future__ import annotations

from pydantic import BaseModel, Field

# ─── Students ──────────────────────────────────────────────────────────────────


class StudentCreate(BaseModel):
    """Body of POST /students/add.

    ``type`` is the student type id (``typeId`` on the stored record).
    """

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=1, max_length=200)
    area: str = Field("", max_length=100)
    type: int


class StudentUpdate(StudentCreate):
    """Body of POST /students/update."""

    id: int
