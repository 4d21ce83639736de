"""Error Types

Validators never raise: a rejected value is a ``False`` return plus the
paths recorded in the caller's context. Exceptions exist only for
programmer errors at construction time and for the opt-in ``ensure``
helper that turns a failed check into a raise.

Codes:
    E2xxx: Validation failures
    E7xxx: Schema definition errors
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from shapecheck.validation.report import ValidationReport


class ErrorCode(Enum):
    """Error code taxonomy."""
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000

    # Schema definition (E7xxx)
    E7000_SCHEMA_GENERIC = 7000
    E7001_NOT_A_VALIDATOR = 7001
    E7002_INVALID_FIELD_MAP = 7002
    E7003_INVALID_PATTERN = 7003
    E7004_INVALID_BOUND = 7004

    @property
    def category(self) -> str:
        """Human-readable error category."""
        return "validation" if self.value < 7000 else "schema"


class ShapecheckError(Exception):
    """Base class for every exception raised by shapecheck."""

    code: ErrorCode = ErrorCode.E7000_SCHEMA_GENERIC

    def __init__(self, message: str, *, code: ErrorCode | None = None, **metadata: Any):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.metadata = metadata

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"code": self.code.name, "category": self.code.category,
            "message": self.message, "metadata": self.metadata}}


class SchemaDefinitionError(ShapecheckError, TypeError):
    """A validator tree was built from malformed configuration."""

    code = ErrorCode.E7000_SCHEMA_GENERIC


@dataclass
class ValidationError(ShapecheckError):
    """Raised by ``ensure`` when a value does not conform.

    Carries the full report so callers can inspect every failing path.
    """
    message: str
    report: ValidationReport

    def __post_init__(self):
        super().__init__(self.message, code=ErrorCode.E2000_VALIDATION_GENERIC)

    def __str__(self) -> str:
        return self.message

    @property
    def errors(self) -> tuple[tuple[Any, ...], ...]:
        return self.report.errors

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"type": "validation_error", "code": self.code.name, "message": self.message,
            "error_count": len(self.report.errors), "errors": self.report.paths()}}
