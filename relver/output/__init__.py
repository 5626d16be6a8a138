"""Output abstraction layer."""

from .logger import (
    LoggerProtocol,
    MockLogger,
    RichLogger,
)

__all__ = [
    "LoggerProtocol",
    "MockLogger",
    "RichLogger",
]
