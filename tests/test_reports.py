"""Tests for validation result coercion, document loading and reporting."""

from types import SimpleNamespace

import pytest

from openclaw_config_check.errors import ConfigReadOrParseError, InvalidValidationResult, ValidationFailed
from openclaw_config_check.validate.models import ValidationIssue, ValidationResult
from openclaw_config_check.validate.reports import check_document, load_config_document, run_validator


def test_result_from_mapping_without_issues() -> None:
    result = ValidationResult.from_raw({"ok": True})

    assert result.ok is True
    assert result.issues == []


def test_result_from_null_issues() -> None:
    assert ValidationResult.from_raw({"ok": False, "issues": None}).issues == []


def test_result_from_attributes() -> None:
    raw = SimpleNamespace(ok=False, issues=[SimpleNamespace(path="gateway.port", message="must be a number")])

    result = ValidationResult.from_raw(raw)

    assert result.ok is False
    assert result.issues == [ValidationIssue(path="gateway.port", message="must be a number")]


def test_issue_structured_path_renders_dotted() -> None:
    issue = ValidationIssue.model_validate({"path": ["agents", 0, "model"], "message": "unknown model"})

    assert issue.path == "agents.0.model"
    assert issue.render() == "- agents.0.model: unknown model"


def test_issue_without_path_renders_empty_label() -> None:
    assert ValidationIssue(message="root must be an object").render() == "- : root must be an object"
    assert ValidationIssue(path="", message="x").render() == "- : x"


def test_load_config_document(config_file) -> None:
    path = config_file('{"port": 8080, "agents": []}')

    assert load_config_document(path) == {"port": 8080, "agents": []}


def test_load_config_document_missing_file(tmp_path) -> None:
    path = tmp_path / "absent.json"

    with pytest.raises(ConfigReadOrParseError) as excinfo:
        load_config_document(path)

    assert str(excinfo.value).startswith(f"Failed to read config {path}:")


def test_load_config_document_invalid_json(config_file) -> None:
    path = config_file("{port: 8080}")

    with pytest.raises(ConfigReadOrParseError, match="invalid JSON"):
        load_config_document(path)


def test_run_validator_passes_document_through() -> None:
    seen = []

    def validator(config):
        seen.append(config)
        return {"ok": True}

    result = run_validator(validator, {"port": 8080})

    assert result.ok is True
    assert seen == [{"port": 8080}]


def test_run_validator_rejects_none() -> None:
    with pytest.raises(InvalidValidationResult):
        run_validator(lambda config: None, {})


@pytest.mark.parametrize(
    ("raw_ok", "expected"),
    [(2, True), ("false", True), (["x"], True), (0, False), ("", False), (None, False)],
)
def test_result_ok_follows_truthiness(raw_ok, expected) -> None:
    assert ValidationResult.from_raw({"ok": raw_ok}).ok is expected


def test_falsy_non_bool_ok_fails_the_check() -> None:
    with pytest.raises(ValidationFailed):
        check_document(lambda config: {"ok": 0, "issues": [{"message": "nope"}]}, {})


def test_truthy_non_bool_ok_passes_the_check() -> None:
    result = check_document(lambda config: {"ok": "yes"}, {})

    assert result.ok is True


def test_run_validator_rejects_shapeless_result() -> None:
    with pytest.raises(InvalidValidationResult):
        run_validator(lambda config: {"issues": []}, {})


def test_validator_exceptions_propagate() -> None:
    def validator(config):
        raise KeyError("gateway")

    with pytest.raises(KeyError):
        run_validator(validator, {})


def test_check_document_failure_keeps_issue_order() -> None:
    issues = [
        {"path": "port", "message": "must be a number"},
        {"message": "unexpected key"},
        {"path": "agents", "message": "must be a list"},
    ]

    with pytest.raises(ValidationFailed) as excinfo:
        check_document(lambda config: {"ok": False, "issues": issues}, {"port": "x"})

    assert excinfo.value.lines() == [
        "OpenClaw config validation failed:",
        "- port: must be a number",
        "- : unexpected key",
        "- agents: must be a list",
    ]
    assert str(excinfo.value).splitlines() == excinfo.value.lines()
