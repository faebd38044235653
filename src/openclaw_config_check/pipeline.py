"""End-to-end config check orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from openclaw_config_check.config import CONFIG_PATH_ENV, SRC_ENV, CheckSettings
from openclaw_config_check.errors import MissingEnvironmentVariable
from openclaw_config_check.resolve.resolver import ResolvedValidator, ValidatorResolver, build_resolver
from openclaw_config_check.validate.models import ValidationResult
from openclaw_config_check.validate.reports import check_document, load_config_document

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CheckOutcome:
    """Result of a passing check run."""

    config_path: Path
    resolved: ResolvedValidator
    result: ValidationResult


def require_env_path(value: Path | None, env_name: str) -> Path:
    """Return value or raise MissingEnvironmentVariable naming env_name."""

    if value is None:
        raise MissingEnvironmentVariable(env_name)
    return value


def run_resolve(
    settings: CheckSettings,
    *,
    resolver: ValidatorResolver | None = None,
    logger: logging.Logger | None = None,
) -> ResolvedValidator:
    """Resolve the validator for the configured build root."""

    effective_logger = logger or LOGGER
    build_root = require_env_path(settings.src, SRC_ENV)
    effective_resolver = resolver or build_resolver(settings, logger=effective_logger)
    return effective_resolver.resolve(build_root)


def run_check(
    settings: CheckSettings,
    *,
    resolver: ValidatorResolver | None = None,
    logger: logging.Logger | None = None,
) -> CheckOutcome:
    """Resolve the validator, load the config document, and validate it.

    Inputs are checked in order: config path, build root, validator, document.
    Raises a ConfigCheckError subclass on the first failure.
    """

    effective_logger = logger or LOGGER
    config_path = require_env_path(settings.config_path, CONFIG_PATH_ENV)
    resolved = run_resolve(settings, resolver=resolver, logger=effective_logger)
    effective_logger.info("check.validator source=%s symbol=%s", resolved.source, resolved.symbol)

    document = load_config_document(config_path)
    result = check_document(resolved.validator, document, logger=effective_logger)
    effective_logger.info("check.passed config_path=%s", config_path)
    return CheckOutcome(config_path=config_path, resolved=resolved, result=result)
