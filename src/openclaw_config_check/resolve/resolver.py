"""Resolve the config validator callable from a build output tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import metadata
from pathlib import Path
from types import ModuleType
from typing import Literal, Protocol

from openclaw_config_check.config import CheckSettings, DiscoveryConfig, ResolverConfig
from openclaw_config_check.errors import MissingValidator, ValidatorLoadError, ValidatorReadError
from openclaw_config_check.resolve.discover import Candidate, list_candidate_paths, read_candidate, renamed_export
from openclaw_config_check.resolve.loader import load_module_from_path
from openclaw_config_check.validate.reports import Validator

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedValidator:
    """A validator callable and where it came from."""

    validator: Validator
    source: str
    symbol: str


class ValidatorResolver(Protocol):
    """Anything that can turn a build root into a validator."""

    def resolve(self, build_root: Path) -> ResolvedValidator: ...


def _callable_attr(module: ModuleType, name: str) -> Validator | None:
    value = getattr(module, name, None)
    return value if callable(value) else None


class FilesystemValidatorResolver:
    """Preferred fixed module first, then a scan of generated config artifacts."""

    def __init__(self, discovery: DiscoveryConfig | None = None, logger: logging.Logger | None = None) -> None:
        self.discovery = discovery or DiscoveryConfig()
        self.logger = logger or LOGGER

    @property
    def on_load_error(self) -> Literal["abort", "skip"]:
        return self.discovery.on_load_error

    def preferred_path(self, build_root: Path) -> Path:
        return build_root / self.discovery.preferred_module

    def _load(self, path: Path) -> ModuleType | None:
        try:
            return load_module_from_path(path)
        except Exception as exc:
            if self.on_load_error == "skip":
                self.logger.warning("resolve.load_failed_skipped path=%s error=%s: %s", path, type(exc).__name__, exc)
                return None
            raise ValidatorLoadError(path, exc) from exc

    def _read(self, path: Path) -> Candidate | None:
        try:
            return read_candidate(
                path,
                symbol=self.discovery.symbol,
                aggregator_marker=self.discovery.aggregator_marker,
                logger=self.logger,
            )
        except OSError as exc:
            if self.on_load_error == "skip":
                self.logger.warning("resolve.read_failed_skipped path=%s error=%s", path, exc)
                return None
            raise ValidatorReadError(path, exc) from exc

    def _from_preferred(self, path: Path) -> ResolvedValidator | None:
        module = self._load(path)
        if module is None:
            return None
        validator = _callable_attr(module, self.discovery.symbol)
        if validator is None:
            self.logger.debug("resolve.preferred_without_symbol path=%s symbol=%s", path, self.discovery.symbol)
            return None
        return ResolvedValidator(validator=validator, source=str(path), symbol=self.discovery.symbol)

    def _from_candidate(self, candidate: Candidate) -> ResolvedValidator | None:
        module = self._load(candidate.path)
        if module is None:
            return None

        symbol = self.discovery.symbol
        validator = _callable_attr(module, symbol)
        if validator is not None:
            return ResolvedValidator(validator=validator, source=str(candidate.path), symbol=symbol)

        alias = renamed_export(candidate.text, symbol)
        if alias is not None:
            validator = _callable_attr(module, alias)
            if validator is not None:
                return ResolvedValidator(validator=validator, source=str(candidate.path), symbol=alias)
        self.logger.debug("resolve.candidate_without_callable path=%s alias=%s", candidate.path, alias)
        return None

    def resolve(self, build_root: Path) -> ResolvedValidator:
        preferred = self.preferred_path(build_root)
        if preferred.exists():
            resolved = self._from_preferred(preferred)
            if resolved is None:
                raise MissingValidator(str(preferred))
            self.logger.info("resolve.preferred path=%s", preferred)
            return resolved
        self.logger.debug("resolve.preferred_missing path=%s", preferred)

        dist_dir = build_root / self.discovery.dist_dir
        paths = list_candidate_paths(dist_dir, self.discovery.candidate_prefix, self.discovery.candidate_suffix)
        self.logger.debug("resolve.candidates dist_dir=%s count=%s", dist_dir, len(paths))
        for path in paths:
            candidate = self._read(path)
            if candidate is None:
                continue
            resolved = self._from_candidate(candidate)
            if resolved is not None:
                self.logger.info("resolve.candidate path=%s symbol=%s", resolved.source, resolved.symbol)
                return resolved

        raise MissingValidator(str(preferred))


class EntryPointValidatorResolver:
    """Validator registered explicitly through a package entry point."""

    def __init__(
        self,
        group: str = "openclaw.config_validators",
        name: str = "validateConfigObject",
        logger: logging.Logger | None = None,
    ) -> None:
        self.group = group
        self.name = name
        self.logger = logger or LOGGER

    @property
    def label(self) -> str:
        return f"{self.group}:{self.name}"

    def resolve(self, build_root: Path) -> ResolvedValidator:
        matches = [entry for entry in metadata.entry_points(group=self.group) if entry.name == self.name]
        if not matches:
            raise MissingValidator(self.label, kind="entry point")
        if len(matches) > 1:
            self.logger.warning("resolve.entry_point_ambiguous label=%s count=%s", self.label, len(matches))

        entry = matches[0]
        validator = entry.load()
        if not callable(validator):
            raise MissingValidator(self.label, kind="entry point")
        self.logger.info("resolve.entry_point label=%s value=%s", self.label, getattr(entry, "value", "?"))
        return ResolvedValidator(validator=validator, source=self.label, symbol=self.name)


class StaticValidatorResolver:
    """Returns a fixed callable; the build root is ignored."""

    def __init__(self, validator: Validator, source: str = "<static>") -> None:
        self.validator = validator
        self.source = source

    def resolve(self, build_root: Path) -> ResolvedValidator:
        name = getattr(self.validator, "__name__", type(self.validator).__name__)
        return ResolvedValidator(validator=self.validator, source=self.source, symbol=name)


def build_resolver(settings: CheckSettings, logger: logging.Logger | None = None) -> ValidatorResolver:
    """Construct the resolver selected by settings."""

    config: ResolverConfig = settings.resolver
    if config.strategy == "entry_point":
        return EntryPointValidatorResolver(
            group=config.entry_point_group,
            name=config.entry_point_name,
            logger=logger,
        )
    return FilesystemValidatorResolver(settings.discovery, logger=logger)


def resolve_validator(
    build_root: Path,
    discovery: DiscoveryConfig | None = None,
    logger: logging.Logger | None = None,
) -> ResolvedValidator:
    """Resolve the validator from build_root with the filesystem strategy."""

    return FilesystemValidatorResolver(discovery, logger=logger).resolve(build_root)
