"""
Manifest document model.

A manifest is a JSON object whose keys keep their original order. Only the
``version`` field is interpreted; every other value passes through opaquely
with its parsed JSON type.
"""

import json
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

VERSION_KEY = "version"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


class ManifestDocument(Mapping):
    """Key-ordered view of a parsed manifest.

    Example:
        doc = ManifestDocument.parse('{"name": "app", "version": "1.0.0"}')
        doc.version = "1.0.1"
        doc.to_text(indent=2)
    """

    def __init__(self, data: Dict[str, Any]) -> None:
        self._data = data

    @classmethod
    def parse(cls, text: str) -> "ManifestDocument":
        """
        Parse manifest text.

        Raises:
            ValueError: If the text is not JSON (including the NaN and Infinity
                literals) or not a JSON object.
        """
        data = json.loads(text, parse_constant=_reject_constant)
        if not isinstance(data, dict):
            raise ValueError(
                f"Expected a JSON object at the top level, got {type(data).__name__}"
            )
        return cls(data)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    @property
    def version(self) -> Optional[Any]:
        """Raw value of the version field, None if absent."""
        return self._data.get(VERSION_KEY)

    @version.setter
    def version(self, value: str) -> None:
        # Assigning to an existing key keeps its position
        self._data[VERSION_KEY] = value

    def to_text(self, indent: int, final_newline: bool = False) -> str:
        """
        Serialize the document.

        Args:
            indent: Number of spaces per nesting level.
            final_newline: Append a single newline after the closing brace.

        Returns:
            Manifest text.
        """
        content = json.dumps(
            self._data,
            indent=indent,
            ensure_ascii=False,
            separators=(",", ": "),
        )
        if final_newline:
            content += "\n"
        return content
