"""Validator discovery and resolution."""

from openclaw_config_check.resolve.discover import (
    Candidate,
    is_candidate_name,
    list_candidate_paths,
    read_candidate,
    renamed_export,
)
from openclaw_config_check.resolve.loader import load_module_from_path, module_name_for
from openclaw_config_check.resolve.resolver import (
    EntryPointValidatorResolver,
    FilesystemValidatorResolver,
    ResolvedValidator,
    StaticValidatorResolver,
    ValidatorResolver,
    build_resolver,
    resolve_validator,
)

__all__ = [
    "Candidate",
    "read_candidate",
    "is_candidate_name",
    "list_candidate_paths",
    "renamed_export",
    "load_module_from_path",
    "module_name_for",
    "EntryPointValidatorResolver",
    "FilesystemValidatorResolver",
    "ResolvedValidator",
    "StaticValidatorResolver",
    "ValidatorResolver",
    "build_resolver",
    "resolve_validator",
]
