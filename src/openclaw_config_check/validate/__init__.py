"""Validation helpers."""

from openclaw_config_check.validate.models import ValidationIssue, ValidationResult
from openclaw_config_check.validate.reports import (
    SUCCESS_LINE,
    Validator,
    check_document,
    load_config_document,
    run_validator,
)

__all__ = [
    "ValidationIssue",
    "ValidationResult",
    "SUCCESS_LINE",
    "Validator",
    "check_document",
    "load_config_document",
    "run_validator",
]
