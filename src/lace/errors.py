"""Exceptions raised by lace.

The combinators report failure as ``Err`` values. Exceptions are reserved for
inputs outside a function's supported shapes.
"""

from __future__ import annotations

from typing import Self


class LaceError(Exception):
    """Base class for lace exceptions."""


class UnsupportedShapeError(LaceError, ValueError):
    """Tagged tuple outside the supported payload arity (1 to 5 fields)."""

    __slots__ = ("value",)

    def __init__(self, value: object, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"unsupported resultish shape: {value!r}")

    @classmethod
    def for_arity(cls, value: tuple[object, ...], max_payload: int) -> Self:
        """Create from a tagged tuple whose payload count is out of range."""
        n = len(value) - 1
        return cls(value, f"tagged tuple carries {n} payload field(s), expected 1 to {max_payload}: {value!r}")
