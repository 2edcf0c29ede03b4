"""Positioned validation diagnostics."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class ErrorKind(StrEnum):
    PRESENCE = "presence"
    SHAPE = "shape"
    TYPE = "type"
    VALUE = "value"
    CARDINALITY = "cardinality"
    UNIQUENESS = "uniqueness"


class Diagnostic(BaseModel):
    """One rule violation. ``line == 0`` means no specific source location."""

    line: int = Field(default=0, ge=0)
    message: str
    kind: ErrorKind = ErrorKind.VALUE

    @property
    def located(self) -> bool:
        return self.line > 0
