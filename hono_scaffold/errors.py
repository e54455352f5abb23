"""Error types raised while scaffolding an application.

Every fatal condition maps to one ErrorKind so callers (and tests) can
tell the failure classes apart without matching on message text.
"""

from __future__ import annotations

import enum
from typing import Any


class ErrorKind(str, enum.Enum):
    UNSUPPORTED_REFERENCE = "unsupported-reference"
    MISSING_INPUT = "missing-input"
    DECODE_ERROR = "decode-error"


class ScaffoldError(Exception):
    """Base exception for all scaffolding errors."""

    kind: ErrorKind

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class UnsupportedReferenceError(ScaffoldError):
    """Raised when a parameter or response is a $ref instead of inline."""

    kind = ErrorKind.UNSUPPORTED_REFERENCE

    def __init__(self, what: str, method: str, path: str, ref: str):
        super().__init__(
            f"{what} references are not supported ({method} {path}: {ref})",
            {"method": method, "path": path, "ref": ref},
        )
        self.ref = ref


class MissingInputError(ScaffoldError):
    """Raised when required input is absent or unusable."""

    kind = ErrorKind.MISSING_INPUT


class DecodeError(ScaffoldError):
    """Raised when the OpenAPI file cannot be decoded as JSON/YAML."""

    kind = ErrorKind.DECODE_ERROR

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not decode {path}: {reason}", {"path": path})
        self.path = path
