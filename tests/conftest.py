"""
Shared pytest fixtures for bumpforge tests.

Fixture Organization
--------------------
- **temp_dir**: Temporary directory for file operations
- **null_runner**: Command runner that records instead of running
- **manifest_file**: Factory writing a manifest to disk and loading it
- **sample_manifest_text**: A realistic package.json body
"""

import tempfile
from pathlib import Path
from typing import Callable, Generator, Union

import pytest

from bumpforge.core.pipeline import ManifestFile, NullCommandRunner

SAMPLE_MANIFEST = """{
  "name": "sample-app",
  "version": "1.2.3",
  "description": "Sample application",
  "main": "index.js",
  "scripts": {
    "test": "jest"
  },
  "keywords": [],
  "private": true,
  "dependencies": {
    "left-pad": "^1.3.0"
  }
}
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory (cleaned up after test)
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def null_runner() -> NullCommandRunner:
    """Command runner that records calls and reports success."""
    return NullCommandRunner()


@pytest.fixture
def sample_manifest_text() -> str:
    """Two-space indented manifest with a final newline."""
    return SAMPLE_MANIFEST


@pytest.fixture
def manifest_file(temp_dir: Path) -> Callable[..., ManifestFile]:
    """Factory writing manifest text under temp_dir and loading it.

    Example:
        def test_bump(manifest_file):
            unit = manifest_file('{"version": "1.0.0"}')
    """

    def _make(
        content: Union[str, bytes] = SAMPLE_MANIFEST,
        name: str = "package.json",
    ) -> ManifestFile:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        data = content.encode("utf-8") if isinstance(content, str) else content
        path.write_bytes(data)
        return ManifestFile.from_path(path)

    return _make
