"""
Formatting detection for manifest text.

The profile records the two textual traits that survive a bump: the
indentation of the first property line and whether the document ends with a
newline after the closing brace.
"""

import re
from dataclasses import dataclass

# Opening brace, one or more newlines, then the indentation of the first key
INDENT_PATTERN = re.compile(r"^{\s*[\r\n]+(\s+)")
FINAL_NEWLINE_PATTERN = re.compile(r"}[\r\n]+\Z")


@dataclass(frozen=True)
class FormattingProfile:
    """Textual shape of the original manifest."""

    indent_width: int = 0
    final_newline: bool = False

    @classmethod
    def detect(cls, text: str) -> "FormattingProfile":
        """Derive the profile from raw manifest text."""
        match = INDENT_PATTERN.match(text)
        indent_width = len(match.group(1)) if match else 0
        final_newline = FINAL_NEWLINE_PATTERN.search(text) is not None
        return cls(indent_width=indent_width, final_newline=final_newline)
