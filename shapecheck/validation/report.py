"""Validation at the Boundary

Thin helpers over the validator calling convention for callers that want
a result object or an exception instead of a bool and a context.

Usage:
    report = check(user_schema, payload)
    if not report:
        for path, value in report.failures():
            ...

    user = ensure(user_schema, payload)  # raises ValidationError
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from shapecheck.config import settings
from shapecheck.errors import ValidationError

from .access import access, format_path
from .base import AccessPath, ValidationContext, Validator, as_validator, log

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of one top-level validation call."""
    value: Any
    valid: bool
    errors: tuple[AccessPath, ...] = ()

    def __bool__(self) -> bool:
        return self.valid

    def paths(self) -> list[str]:
        return [format_path(p) for p in self.errors]

    def failures(self) -> list[tuple[AccessPath, Any]]:
        """Each recorded path paired with the value found there."""
        return [(p, access(self.value, p)) for p in self.errors]

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "error_count": len(self.errors), "errors": self.paths()}


def check(validator: Any, value: Any) -> ValidationReport:
    """Run ``validator`` on ``value`` with a fresh context."""
    ctx = ValidationContext()
    valid = as_validator(validator)(value, ctx)
    log.debug("check_completed", valid=bool(valid), error_count=len(ctx))
    return ValidationReport(value=value, valid=bool(valid), errors=tuple(ctx.errors))


def _summary(report: ValidationReport, limit: int) -> str:
    if not report.errors:
        return "Validation failed"
    shown = report.paths()[:limit]
    more = len(report.errors) - len(shown)
    suffix = f" (+{more} more)" if more > 0 else ""
    return f"Validation failed at {', '.join(shown)}{suffix}"


def ensure(validator: Validator[T], value: Any) -> T:
    """Return ``value`` unchanged if it conforms, otherwise raise ``ValidationError``."""
    report = check(validator, value)
    if report.valid:
        return value
    log.debug("ensure_failed", error_count=len(report.errors), paths=report.paths()[:settings.ERROR_PREVIEW_LIMIT])
    raise ValidationError(message=_summary(report, settings.ERROR_PREVIEW_LIMIT), report=report)
