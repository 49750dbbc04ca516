"""
File transform pipeline for bumpforge.

Public API
----------
    from bumpforge.core.pipeline import (
        ManifestFile,
        VersionBumpTransform,
        bump_transform,
        SubprocessCommandRunner,
        NullCommandRunner,
    )
"""

from bumpforge.core.pipeline.version_bump import (
    DEFAULT,
    MAJOR,
    MINOR,
    PATCH,
    VersionBumpTransform,
    bump_transform,
    coerce_options,
)
from bumpforge.core.pipeline.command_runner import (
    CommandRunner,
    NullCommandRunner,
    SubprocessCommandRunner,
)
from bumpforge.core.pipeline.file_unit import ManifestFile, is_binary_content
from bumpforge.core.pipeline.interfaces import Emit, FileTransform

__all__ = [
    "DEFAULT",
    "MAJOR",
    "MINOR",
    "PATCH",
    "CommandRunner",
    "Emit",
    "FileTransform",
    "ManifestFile",
    "NullCommandRunner",
    "SubprocessCommandRunner",
    "VersionBumpTransform",
    "bump_transform",
    "coerce_options",
    "is_binary_content",
]
