"""Versioning Module.

Semantic version parsing, bump-type resolution and increment rules.
"""

from bumpforge.core.versioning.version_manager import (
    BUMP_ALIASES,
    DEFAULT_BUMP_TYPE,
    MAX_VERSION_LENGTH,
    BumpType,
    SemanticVersion,
    increment_version,
    parse_version,
    resolve_bump_type,
)

__all__ = [
    "BUMP_ALIASES",
    "DEFAULT_BUMP_TYPE",
    "MAX_VERSION_LENGTH",
    "BumpType",
    "SemanticVersion",
    "increment_version",
    "parse_version",
    "resolve_bump_type",
]
