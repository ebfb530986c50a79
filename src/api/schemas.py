"""Pydantic response schemas for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DistanceResponse(BaseModel):
    distance: float = Field(
        ..., ge=0, description="Distance from (0, 0, 0), rounded to 2 decimals."
    )


class ErrorResponse(BaseModel):
    error: str
