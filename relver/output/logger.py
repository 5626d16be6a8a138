"""Logger capability.

Components that report progress receive a logger instead of reaching for
a global one. The protocol has a single printf-style operation so the
message template and its arguments stay separate until rendering, which
is what tests assert on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from rich.console import Console
from rich.markup import escape

__all__ = [
    "LoggerProtocol",
    "MockLogger",
    "RichLogger",
]


class LoggerProtocol(Protocol):
    """Protocol for informational log output."""

    def log(self, message: str, *args: object) -> None:
        """Log a message.

        Args:
            message: printf-style template (``%s`` placeholders)
            args: Values substituted into the template
        """
        ...


def _format(message: str, args: tuple[object, ...]) -> str:
    return message % args if args else message


class RichLogger:
    """Logger that prints to the terminal with Rich.

    Args:
        prefix: Dimmed label printed before every line
        stderr: Write to stderr instead of stdout
    """

    def __init__(self, prefix: str = "relver", *, stderr: bool = False) -> None:
        self._console = Console(stderr=stderr, highlight=False)
        self._prefix = prefix

    def log(self, message: str, *args: object) -> None:
        text = escape(_format(message, args))
        if self._prefix:
            self._console.print(f"[dim]\\[{self._prefix}][/dim] {text}")
        else:
            self._console.print(text)


def _empty_calls() -> list[tuple[object, ...]]:
    return []


@dataclass
class MockLogger:
    """Logger that records calls for testing.

    Each call is stored as ``(message, *args)``.
    """

    calls: list[tuple[object, ...]] = field(default_factory=_empty_calls)

    def log(self, message: str, *args: object) -> None:
        self.calls.append((message, *args))

    @property
    def messages(self) -> list[str]:
        """Rendered messages, in call order."""
        return [_format(str(c[0]), tuple(c[1:])) for c in self.calls]

    def clear(self) -> None:
        self.calls.clear()
