"""Exceptions raised by config check runs."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from openclaw_config_check.validate.models import ValidationResult


class ConfigCheckError(Exception):
    """Base class for failures that end a check run with exit code 1."""


class MissingEnvironmentVariable(ConfigCheckError):
    """Raised when a required environment input is unset or blank."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is not set")
        self.name = name


class ConfigReadOrParseError(ConfigCheckError):
    """Raised when the config document cannot be read or is not valid JSON."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read config {path}: {reason}")
        self.path = path


class MissingValidator(ConfigCheckError):
    """Raised when no callable validator could be resolved."""

    def __init__(self, location: str, *, kind: str = "module") -> None:
        super().__init__(f"Missing validation {kind}: {location}")
        self.location = location


class ValidatorLoadError(ConfigCheckError):
    """Raised when a validator module fails to load under the abort policy."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to load validation module {path}: {type(cause).__name__}: {cause}")
        self.path = path


class ValidatorReadError(ConfigCheckError):
    """Raised when a candidate artifact cannot be read under the abort policy."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to read validation module {path}: {cause}")
        self.path = path


class InvalidValidationResult(ConfigCheckError):
    """Raised when the validator returns something that is not a validation result."""


class ValidationFailed(ConfigCheckError):
    """Raised when the validator rejects the config document."""

    HEADER = "OpenClaw config validation failed:"

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        super().__init__("\n".join(self.lines()))

    def lines(self) -> list[str]:
        """Header line followed by one line per issue, in validator order."""

        return [self.HEADER, *(issue.render() for issue in self.result.issues)]
