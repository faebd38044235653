"""Load a Python module from an arbitrary file path."""

from __future__ import annotations

import hashlib
import re
import sys
from importlib.machinery import SourceFileLoader
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from types import ModuleType


def module_name_for(path: Path) -> str:
    """Stable, importable module name derived from the absolute file path."""

    resolved = path.resolve()
    stem = re.sub(r"\W", "_", resolved.stem)
    digest = hashlib.sha1(str(resolved).encode("utf-8")).hexdigest()[:12]
    return f"_openclaw_dist_{stem}_{digest}"


class _ReadOnlySourceLoader(SourceFileLoader):
    """Source loader that never writes bytecode caches next to build artifacts."""

    def set_data(self, path: str, data: bytes, *, _mode: int = 0o666) -> None:
        return None


def load_module_from_path(path: Path) -> ModuleType:
    """Execute the file as a fresh module and return it.

    Artifacts do not need a `.py` suffix; the source loader is chosen explicitly.
    """

    name = module_name_for(path)
    loader = _ReadOnlySourceLoader(name, str(path))
    spec = spec_from_file_location(name, str(path), loader=loader)
    if spec is None or spec.loader is None:
        raise ImportError(f"Failed to create module spec for: {path}")

    module = module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(name, None)
        raise
    return module
