"""Pydantic models describing manifest entries."""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, Field


class ManifestEntry(Protocol):
    """Anything that can be written as a feature line."""

    name: str


class Feature(BaseModel):
    """Named feature toggle emitted into the ``[features]`` table."""

    name: str = Field(..., description="Feature name written verbatim as the table key.")
