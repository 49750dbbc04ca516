"""
Centralized Exception Hierarchy for bumpforge.

All exceptions inherit from BumpForgeError for easy catching.

Each exception includes:
- user_message: Human-readable description of what went wrong
- why_it_happened: Explanation of the root cause
- how_to_fix: Actionable steps to resolve the issue
- error_code: Unique identifier for documentation lookup (e.g., "BF-IN-001")

Usage
-----
    from bumpforge.core.exceptions import TransformError, VersionComputeError

    try:
        transform.process(manifest_file, emit)
    except VersionComputeError as e:
        logger.error(f"Cannot bump {e.file_name}: {e}")
    except TransformError as e:
        logger.error(f"{e.kind}: {e}")

Exception Hierarchy
-------------------
    BumpForgeError (base)
    ├── TransformError
    │   ├── UnsupportedInputKindError
    │   ├── InvalidFileKindError
    │   ├── ManifestParseError
    │   └── VersionComputeError
    └── ConfigValidationError
"""

import builtins
import subprocess
from typing import Any, List, Optional

PLUGIN_NAME = "bumpforge"


class BumpForgeError(Exception):
    """
    Base exception for all bumpforge errors.

    Example
    -------
        try:
            list(transform.pipe(files))
        except BumpForgeError as e:
            print(f"[{e.error_code}] {e}")
            print(f"Fix: {e.how_to_fix}")
    """

    error_code: str = "BF-ERR-000"
    why_it_happened: str = "An unexpected error occurred"
    how_to_fix: List[str] = ["Check the error message for details"]

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        why_it_happened: Optional[str] = None,
        how_to_fix: Optional[List[str]] = None,
    ) -> None:
        """Initialize BumpForgeError with helpful information.

        Args:
            message: Human-readable error message
            error_code: Unique identifier (e.g., "BF-IN-001")
            why_it_happened: Explanation of root cause
            how_to_fix: List of actionable fix suggestions
        """
        super().__init__(message)

        if error_code is not None:
            self.error_code = error_code
        if why_it_happened is not None:
            self.why_it_happened = why_it_happened
        if how_to_fix is not None:
            self.how_to_fix = how_to_fix

    @property
    def user_message(self) -> str:
        """Get the user-friendly error message."""
        return str(self)


# ============================================================================
# Transform Exceptions
# ============================================================================


class TransformError(BumpForgeError):
    """
    Base exception for failures of a file transform.

    Attributes
    ----------
    plugin : str
        Name of the component that raised the error
    kind : str
        Stable failure category
    file_name : str or None
        Path of the file unit being processed
    """

    error_code = "BF-TX-000"
    kind = "TransformError"
    why_it_happened = "The file could not be transformed"
    how_to_fix = ["Check the error message for details"]

    def __init__(
        self,
        message: str,
        file_name: Optional[str] = None,
        *,
        error_code: Optional[str] = None,
        why_it_happened: Optional[str] = None,
        how_to_fix: Optional[List[str]] = None,
    ) -> None:
        super().__init__(
            message,
            error_code=error_code,
            why_it_happened=why_it_happened,
            how_to_fix=how_to_fix,
        )
        self.plugin = PLUGIN_NAME
        self.file_name = file_name


class UnsupportedInputKindError(TransformError):
    """Raised when a file unit carries a live stream instead of a buffer."""

    error_code = "BF-IN-001"
    kind = "UnsupportedInputKind"
    why_it_happened = "The file contents were supplied as a stream"
    how_to_fix = [
        "Read the file fully into memory before passing it to the transform",
        "Use ManifestFile.from_path() to build buffered file units",
    ]


class InvalidFileKindError(TransformError):
    """Raised when the contents of a file unit look like binary data."""

    error_code = "BF-IN-002"
    kind = "InvalidFileKind"
    why_it_happened = "The file contents do not look like text"
    how_to_fix = [
        "Check that the path points at a JSON manifest such as package.json",
        "Make sure the file is saved as UTF-8 text",
    ]


class ManifestParseError(TransformError):
    """
    Raised when the manifest text is not a JSON object.

    Example
    -------
        transform.process(ManifestFile("package.json", b"{oops"), emit)
        # Raises: ManifestParseError("Expecting property name ...")
    """

    error_code = "BF-MAN-001"
    kind = "ParseError"
    why_it_happened = "The manifest could not be parsed as a JSON object"
    how_to_fix = [
        "Validate the manifest syntax: python -m json.tool package.json",
        "Remove trailing commas and comments from the manifest",
    ]


class VersionComputeError(TransformError):
    """
    Raised when the current version cannot be incremented.

    This can occur when:
    - The manifest has no "version" field
    - The version is not a string
    - The version is not a valid semantic version
    - The bump category is not one of major, minor or patch
    """

    error_code = "BF-VER-001"
    kind = "VersionComputeError"
    why_it_happened = "The current version could not be incremented"
    how_to_fix = [
        'Make sure the manifest has a "version" string field',
        "Use the MAJOR.MINOR.PATCH format, e.g. 1.2.3",
        "Use one of the bump types: major, minor, patch",
    ]


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigValidationError(BumpForgeError):
    """
    Raised when transform options cannot be built.

    Attributes
    ----------
    field : str
        The option that failed validation
    value : any
        The invalid value
    """

    error_code = "BF-CFG-001"
    why_it_happened = "A transform option has an invalid value"
    how_to_fix = [
        "Check the option names: numSpaces, regenerateLock, lockCommand",
        "Verify the value type matches what's expected",
    ]

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        *,
        error_code: Optional[str] = None,
        why_it_happened: Optional[str] = None,
        how_to_fix: Optional[List[str]] = None,
    ) -> None:
        super().__init__(
            message,
            error_code=error_code,
            why_it_happened=why_it_happened,
            how_to_fix=how_to_fix,
        )
        self.field = field
        self.value = value


# ============================================================================
# Error Info Lookup
# ============================================================================


# Mapping from standard exceptions to helpful error info
STANDARD_ERROR_INFO: dict[type, dict[str, Any]] = {
    builtins.FileNotFoundError: {
        "error_code": "BF-FILE-001",
        "why_it_happened": "The specified file or directory could not be found",
        "how_to_fix": [
            "Check that the file path is correct",
            "Ensure you have read permissions for the file",
        ],
    },
    builtins.PermissionError: {
        "error_code": "BF-FILE-002",
        "why_it_happened": "You don't have permission to access this file",
        "how_to_fix": [
            "Check file permissions: ls -la <file>",
            "Ensure you own the file or have read/write access",
        ],
    },
    subprocess.SubprocessError: {
        "error_code": "BF-CMD-001",
        "why_it_happened": "The lock regeneration command could not be run",
        "how_to_fix": [
            "Check that npm is installed: npm --version",
            "Run the install command by hand in the manifest directory",
        ],
    },
    OSError: {
        "error_code": "BF-SYS-001",
        "why_it_happened": "A system-level error occurred",
        "how_to_fix": [
            "Check disk space and permissions",
            "Review system logs for more details",
        ],
    },
}


def get_error_info(exc: BaseException) -> dict[str, Any]:
    """Get helpful error information for any exception.

    Looks up the exception type in STANDARD_ERROR_INFO or extracts
    info from BumpForgeError subclasses.

    Args:
        exc: Exception to get info for

    Returns:
        Dict with error_code, why_it_happened, how_to_fix
    """
    if isinstance(exc, BumpForgeError):
        return {
            "error_code": exc.error_code,
            "why_it_happened": exc.why_it_happened,
            "how_to_fix": exc.how_to_fix,
        }

    exc_type = type(exc)
    if exc_type in STANDARD_ERROR_INFO:
        return STANDARD_ERROR_INFO[exc_type]

    # Check parent classes
    for parent_type, info in STANDARD_ERROR_INFO.items():
        if isinstance(exc, parent_type):
            return info

    return {
        "error_code": "BF-ERR-999",
        "why_it_happened": "An unexpected error occurred",
        "how_to_fix": [
            "Check the error message for details",
            "Run again with --debug for more information",
        ],
    }
