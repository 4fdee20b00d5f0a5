"""Minimal result type for validation outcomes."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from core.exceptions import FieldErrors

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome holding the cleaned value."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed outcome holding every field error that was found."""

    errors: FieldErrors


Result = Ok[T] | Err
