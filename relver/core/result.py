"""Result type for explicit error handling.

Fallible operations return ``Ok(value)`` or ``Err(error)`` instead of
raising, so expected failures (a git command failing, a config file that
does not parse) are part of the signature.

Usage:
    match repo.merged_tags():
        case Ok(tags):
            print(", ".join(tags))
        case Err(error):
            print(f"git failed: {error.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")

__all__ = ["Err", "Ok", "Result"]


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result.

    Attributes:
        value: The success value.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result.

    Attributes:
        error: The error payload.
    """

    error: E


Result: TypeAlias = Ok[T] | Err[E]
