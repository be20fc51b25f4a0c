"""Errors raised while decoding and rendering documents."""

from __future__ import annotations

from dataclasses import dataclass


class YamlTableError(Exception):
    """Base class for yamltable errors."""


@dataclass(frozen=True)
class DecodeError(YamlTableError):
    """Raised when input is neither a list of records nor a single record."""

    reason: str

    def __str__(self) -> str:
        return f"unable to decode document: {self.reason}"


@dataclass(frozen=True)
class ShapeError(YamlTableError):
    """Raised when a record list holds something other than a record."""

    shape: str
    context: str = "record list"

    def __str__(self) -> str:
        return f"{self.context}: expected a record, got {self.shape}"
