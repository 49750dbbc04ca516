"""
Transform configuration.

TransformOptions is the single configuration object of the version bump
transform. It accepts the camelCase option names used by build scripts
(``numSpaces``, ``regenerateLock``) as well as the Python field names:

    TransformOptions(num_spaces=4)
    TransformOptions.model_validate({"numSpaces": 4, "regenerateLock": False})

Options that carry a value of the wrong type are not rejected. They fall back
to their default and the substitution is logged at DEBUG level.

The process argument fallback is captured once by the caller with
process_bump_argument() and passed in as ``fallback_bump_type``; the
transform itself never reads ``sys.argv``.
"""

import sys
from typing import Any, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, field_validator

from bumpforge.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_NUM_SPACES = 2
MIN_NUM_SPACES = 1
MAX_NUM_SPACES = 8
DEFAULT_REGENERATE_LOCK = True
DEFAULT_LOCK_COMMAND: Tuple[str, ...] = ("npm", "install")


class TransformOptions(BaseModel):
    """Options for the version bump transform."""

    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}

    num_spaces: Optional[int] = Field(
        None,
        alias="numSpaces",
        description=f"Indentation override ({MIN_NUM_SPACES}-{MAX_NUM_SPACES})",
    )
    regenerate_lock: bool = Field(
        DEFAULT_REGENERATE_LOCK,
        alias="regenerateLock",
        description="Run the lock command after bumping",
    )
    lock_command: Tuple[str, ...] = Field(
        DEFAULT_LOCK_COMMAND,
        alias="lockCommand",
        min_length=1,
        description="Command line that regenerates the lock file",
    )
    fallback_bump_type: Optional[str] = Field(
        None,
        alias="fallbackBumpType",
        description="Bump type captured from the process arguments",
    )

    @field_validator("num_spaces", mode="before")
    @classmethod
    def validate_num_spaces(cls, v: Any) -> Optional[int]:
        """Drop indentation overrides that are not an int in range."""
        if v is None:
            return None
        if isinstance(v, bool) or not isinstance(v, int):
            logger.debug("Ignoring non-integer numSpaces", value=repr(v))
            return None
        if not MIN_NUM_SPACES <= v <= MAX_NUM_SPACES:
            logger.debug("Ignoring out-of-range numSpaces", value=v)
            return None
        return v

    @field_validator("regenerate_lock", mode="before")
    @classmethod
    def validate_regenerate_lock(cls, v: Any) -> bool:
        """Fall back to the default for anything that is not a bool."""
        if isinstance(v, bool):
            return v
        logger.debug("Ignoring non-boolean regenerateLock", value=repr(v))
        return DEFAULT_REGENERATE_LOCK

    @field_validator("fallback_bump_type", mode="before")
    @classmethod
    def validate_fallback(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None

    def effective_spaces(self, detected: int) -> int:
        """
        Pick the indentation width for serialization.

        Args:
            detected: Width detected from the original text (0 if none).

        Returns:
            The explicit override, else the detected width, else 2.
        """
        if self.num_spaces is not None:
            return self.num_spaces
        if detected > 0:
            return detected
        return DEFAULT_NUM_SPACES


def process_bump_argument(argv: Optional[Sequence[str]] = None) -> Optional[str]:
    """
    Capture the last process argument as a bump type candidate.

    Args:
        argv: Argument vector; defaults to sys.argv.

    Returns:
        The last argument, or None for an empty vector.
    """
    args = sys.argv if argv is None else argv
    if not args:
        return None
    return args[-1]
