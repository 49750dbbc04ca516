"""Semantic Version Arithmetic.

Parses version strings and computes the next version for a bump category,
following the increment rules used by npm-style manifests:

- A release version bumps the requested segment and zeroes the lower ones.
- A prerelease version that already sits on the target release is promoted
  to that release instead (``1.2.3-rc.1`` patch -> ``1.2.3``).
- Build metadata never survives an increment.

Bump categories are also resolved here from loose user input such as
``--minor`` or ``MAJOR``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

MAX_VERSION_LENGTH = 256


class BumpType(str, Enum):
    """Version bump types following SemVer."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


DEFAULT_BUMP_TYPE = BumpType.PATCH

# Accepted spellings, matched after lowercasing
BUMP_ALIASES: Dict[str, BumpType] = {
    "major": BumpType.MAJOR,
    "-major": BumpType.MAJOR,
    "--major": BumpType.MAJOR,
    "minor": BumpType.MINOR,
    "-minor": BumpType.MINOR,
    "--minor": BumpType.MINOR,
    "patch": BumpType.PATCH,
    "-patch": BumpType.PATCH,
    "--patch": BumpType.PATCH,
}


def resolve_bump_type(value: Any) -> BumpType:
    """Map loose user input to a bump category.

    Args:
        value: Anything; only strings are considered.

    Returns:
        The matching BumpType, or PATCH when the input is not recognized.
    """
    if isinstance(value, BumpType):
        return value
    if not isinstance(value, str):
        return DEFAULT_BUMP_TYPE
    return BUMP_ALIASES.get(value.lower(), DEFAULT_BUMP_TYPE)


@dataclass(frozen=True)
class SemanticVersion:
    """Immutable semantic version following SemVer 2.0.0."""

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build_metadata: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    def __str__(self) -> str:
        """Format as version string.

        Returns:
            Formatted version string (e.g., "1.2.3-alpha+build123").
        """
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build_metadata:
            version += f"+{self.build_metadata}"
        return version

    def bump(self, bump_type: BumpType) -> "SemanticVersion":
        """Create new version with specified bump.

        Args:
            bump_type: Type of version bump.

        Returns:
            New SemanticVersion without prerelease or build metadata.

        Raises:
            ValueError: If bump_type is not a BumpType member.
        """
        if bump_type == BumpType.MAJOR:
            # 1.0.0-rc.1 -> 1.0.0
            if self.prerelease and self.minor == 0 and self.patch == 0:
                return SemanticVersion(self.major, 0, 0)
            return SemanticVersion(self.major + 1, 0, 0)
        if bump_type == BumpType.MINOR:
            # 1.2.0-rc.1 -> 1.2.0
            if self.prerelease and self.patch == 0:
                return SemanticVersion(self.major, self.minor, 0)
            return SemanticVersion(self.major, self.minor + 1, 0)
        if bump_type == BumpType.PATCH:
            if self.prerelease:
                return SemanticVersion(self.major, self.minor, self.patch)
            return SemanticVersion(self.major, self.minor, self.patch + 1)
        raise ValueError(f"invalid bump type: {bump_type!r}")


_NUMERIC = r"0|[1-9]\d*"
_PRERELEASE_ID = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][a-zA-Z0-9-]*)"
_BUILD_ID = r"[0-9A-Za-z-]+"

VERSION_PATTERN = re.compile(
    r"^v?"  # Optional 'v' prefix
    rf"(?P<major>{_NUMERIC})\."
    rf"(?P<minor>{_NUMERIC})\."
    rf"(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?"
    rf"(?:\+(?P<build>{_BUILD_ID}(?:\.{_BUILD_ID})*))?$"
)


def parse_version(version_str: str) -> Optional[SemanticVersion]:
    """Parse a version string into SemanticVersion.

    Args:
        version_str: Version string to parse.

    Returns:
        SemanticVersion or None if invalid.
    """
    if not isinstance(version_str, str) or len(version_str) > MAX_VERSION_LENGTH:
        return None

    match = VERSION_PATTERN.match(version_str.strip())
    if not match:
        return None

    return SemanticVersion(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        prerelease=match.group("prerelease"),
        build_metadata=match.group("build"),
    )


def increment_version(version: Any, bump_type: Union[BumpType, str]) -> str:
    """Compute the next version string.

    Args:
        version: Current version; must be a SemVer string.
        bump_type: A BumpType or its exact value ("major", "minor", "patch").

    Returns:
        The incremented version string.

    Raises:
        ValueError: If the version or the bump category is invalid.
    """
    try:
        category = BumpType(bump_type)
    except ValueError:
        raise ValueError(f"Invalid bump type: {bump_type!r}") from None

    if not isinstance(version, str):
        raise ValueError(f"Invalid version: {version!r} is not a string")

    parsed = parse_version(version)
    if parsed is None:
        raise ValueError(f"Invalid version: {version!r}")

    return str(parsed.bump(category))
