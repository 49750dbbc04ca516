"""Manifest parsing and formatting."""

from bumpforge.core.manifest.document import VERSION_KEY, ManifestDocument
from bumpforge.core.manifest.formatting import FormattingProfile

__all__ = ["VERSION_KEY", "ManifestDocument", "FormattingProfile"]
