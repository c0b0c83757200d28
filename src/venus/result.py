"""
Two-variant result values returned by the parsers, assemblers and pipeline.

Every stage either produces ``Ok(value)`` or ``Err(message)``; failures are
passed upward unchanged so the first error encountered wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying a human-readable ``message``."""

    message: str

    @property
    def is_ok(self) -> bool:
        return False

    def display(self) -> str:
        """Return the message as shown to the operator."""
        return f"Error: {self.message}"


Result = Union[Ok[T], Err]


__all__ = ["Err", "Ok", "Result"]
