"""Config document loading, validator invocation, and console reporting."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

from pydantic import ValidationError

from openclaw_config_check.errors import ConfigReadOrParseError, InvalidValidationResult, ValidationFailed
from openclaw_config_check.validate.models import ValidationResult

LOGGER = logging.getLogger(__name__)

SUCCESS_LINE = "openclaw config validation: ok"

Validator = Callable[[Any], Any]


def load_config_document(path: Path) -> Any:
    """Read and parse the JSON config document."""

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadOrParseError(path, str(exc)) from exc
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigReadOrParseError(path, f"invalid JSON ({exc})") from exc


def run_validator(validator: Validator, document: Any, logger: logging.Logger | None = None) -> ValidationResult:
    """Invoke the validator and coerce whatever it returns into a ValidationResult."""

    effective_logger = logger or LOGGER
    raw = validator(document)
    if raw is None:
        raise InvalidValidationResult("Validator returned no result")
    try:
        result = ValidationResult.from_raw(raw)
    except ValidationError as exc:
        raise InvalidValidationResult(
            f"Validator returned an unexpected result ({exc.error_count()} schema errors): {raw!r}"
        ) from exc
    effective_logger.debug("validate.result ok=%s issues=%s", result.ok, len(result.issues))
    return result


def check_document(validator: Validator, document: Any, logger: logging.Logger | None = None) -> ValidationResult:
    """Validate a document, raising ValidationFailed when the validator rejects it."""

    result = run_validator(validator, document, logger=logger)
    if not result.ok:
        raise ValidationFailed(result)
    return result
