import logging
import os
import textwrap
from pathlib import Path

import pytest


class BuildTree:
    """Temporary OPENCLAW_SRC tree with helpers to write build artifacts."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.dist = root / "dist"

    @property
    def preferred(self) -> Path:
        return self.dist / "config" / "validation.py"

    def write(self, relative: str, source: str) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source).lstrip(), encoding="utf-8")
        return path

    def write_preferred(self, source: str) -> Path:
        return self.write("dist/config/validation.py", source)

    def write_candidate(self, name: str, source: str) -> Path:
        return self.write(f"dist/{name}", source)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep host OPENCLAW_* variables, .env files and settings YAML out of tests."""
    for name in ("OPENCLAW_CONFIG_PATH", "OPENCLAW_SRC"):
        monkeypatch.delenv(name, raising=False)
    for name in list(os.environ):
        if name.startswith(("OPENCLAW_DISCOVERY__", "OPENCLAW_RESOLVER__", "OPENCLAW_LOGGING__")):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("OPENCLAW_CHECK_SETTINGS_FILE", str(tmp_path / "no-settings.yaml"))
    monkeypatch.chdir(tmp_path)
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.WARNING)


@pytest.fixture
def build_tree(tmp_path) -> BuildTree:
    root = tmp_path / "openclaw"
    root.mkdir()
    return BuildTree(root)


@pytest.fixture
def config_file(tmp_path):
    def _write(payload: str) -> Path:
        path = tmp_path / "openclaw.json"
        path.write_text(payload, encoding="utf-8")
        return path

    return _write
