"""Error types for the release package."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Release error payload, renderable by the CLI.

    Attributes:
        kind: Stable machine-readable category (e.g. "invalid_tag_format")
        message: Human-readable description
        hint: Optional suggestion for fixing the problem
    """

    kind: str
    message: str
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
