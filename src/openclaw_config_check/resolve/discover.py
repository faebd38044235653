"""Discover validator candidate modules in a build output directory."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Candidate:
    """A build artifact that may export the validator."""

    path: Path
    text: str


def is_candidate_name(name: str, prefix: str, suffix: str) -> bool:
    """Return True for names following the generated config artifact convention."""

    return name.startswith(prefix) and name.endswith(suffix)


def list_candidate_paths(dist_dir: Path, prefix: str, suffix: str) -> list[Path]:
    """List immediate files of dist_dir matching prefix/suffix, sorted by name."""

    if not dist_dir.is_dir():
        return []
    return sorted(
        entry
        for entry in dist_dir.iterdir()
        if entry.is_file() and is_candidate_name(entry.name, prefix, suffix)
    )


def renamed_export(text: str, symbol: str) -> str | None:
    """Return the alias in the first `<symbol> as <alias>` occurrence, if any."""

    match = re.search(rf"{re.escape(symbol)} as ([A-Za-z0-9_$]+)", text)
    return match.group(1) if match else None


def read_candidate(
    path: Path,
    *,
    symbol: str,
    aggregator_marker: str,
    logger: logging.Logger | None = None,
) -> Candidate | None:
    """Read one artifact; None when it does not mention the symbol or is an aggregator.

    Undecodable bytes are replaced rather than rejected. OSError propagates.
    """

    effective_logger = logger or LOGGER
    text = path.read_text(encoding="utf-8", errors="replace")
    if symbol not in text:
        effective_logger.debug("discover.skip_no_symbol path=%s", path)
        return None
    if aggregator_marker and aggregator_marker in text:
        effective_logger.debug("discover.skip_aggregator path=%s", path)
        return None
    return Candidate(path=path, text=text)
