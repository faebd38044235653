"""Records returned by the external config validator."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ValidationIssue(BaseModel):
    """One problem reported by the validator."""

    model_config = ConfigDict(from_attributes=True, extra="ignore", frozen=True)

    path: str | None = None
    message: str

    @field_validator("path", mode="before")
    @classmethod
    def _render_path(cls, value: Any) -> Any:
        """Join structured paths into a dotted label."""

        if value is None or isinstance(value, str):
            return value
        if isinstance(value, Sequence):
            return ".".join(str(part) for part in value)
        return str(value)

    @field_validator("message", mode="before")
    @classmethod
    def _stringify_message(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    def render(self) -> str:
        """Console line for this issue; an absent path renders as an empty label."""

        return f"- {self.path or ''}: {self.message}"


class ValidationResult(BaseModel):
    """Outcome of one validator call."""

    model_config = ConfigDict(from_attributes=True, extra="ignore", frozen=True)

    ok: bool
    issues: list[ValidationIssue] = Field(default_factory=list)

    @field_validator("ok", mode="before")
    @classmethod
    def _truthy_ok(cls, value: Any) -> bool:
        """Truthiness decides pass or fail."""

        return bool(value)

    @field_validator("issues", mode="before")
    @classmethod
    def _null_issues(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def from_raw(cls, raw: Any) -> "ValidationResult":
        """Coerce a mapping or attribute-bearing object into a result."""

        if isinstance(raw, cls):
            return raw
        if isinstance(raw, Mapping):
            return cls.model_validate(dict(raw))
        return cls.model_validate(raw, from_attributes=True)
