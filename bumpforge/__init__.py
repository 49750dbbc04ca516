"""bumpforge - version bump step for file-transform pipelines.

Bumps the semantic version of JSON manifests and regenerates their lock
files:

    from bumpforge import bump_transform, MINOR

    transform = bump_transform(MINOR)
"""

from bumpforge.core.config import TransformOptions, process_bump_argument
from bumpforge.core.pipeline import (
    DEFAULT,
    MAJOR,
    MINOR,
    PATCH,
    ManifestFile,
    VersionBumpTransform,
    bump_transform,
)

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "DEFAULT",
    "MAJOR",
    "MINOR",
    "PATCH",
    "ManifestFile",
    "TransformOptions",
    "VersionBumpTransform",
    "bump_transform",
    "process_bump_argument",
]
