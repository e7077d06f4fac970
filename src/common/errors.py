"""Shared error codes and exceptions for augmentation agents."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    CONFIG_ERROR = "CONFIG_ERROR"
    SCHEMA_ERROR = "SCHEMA_ERROR"
    IO_ERROR = "IO_ERROR"
    NOT_FOUND = "NOT_FOUND"


class BackendError(RuntimeError):
    """Exception carrying a structured error code for CLI/agents."""

    def __init__(self, code: ErrorCode, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.code = code
        self.context = context or {}

    def __str__(self) -> str:  # pragma: no cover - formatting sugar
        base = RuntimeError.__str__(self)
        return f"[{self.code.value}] {base}" if base else self.code.value


class EntityNotFoundError(BackendError, KeyError):
    """Raised when an entity value provider is requested for an unknown name."""

    def __init__(self, name: str) -> None:
        super().__init__(
            ErrorCode.NOT_FOUND,
            f"Could not find an entity with the name: {name}",
            context={"entity": name},
        )
        self.name = name
