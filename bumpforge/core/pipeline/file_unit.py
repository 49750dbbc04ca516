"""
File unit flowing through the transform pipeline.

A ManifestFile pairs a path with its contents. Contents are one of:

- None: a null unit (directory entry, placeholder), passed through untouched
- bytes / bytearray / memoryview: a fully buffered file
- anything with a ``read`` method: a live stream, which the bump transform
  rejects

Binary detection samples the first bytes of the buffer the same way common
text/binary sniffers do: a NUL byte or more than 10% control bytes that are
not part of a valid UTF-8 sequence marks the buffer as binary.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

BINARY_SAMPLE_SIZE = 512
SUSPICIOUS_RATIO_PERCENT = 10
# Checking the ratio early needs a minimum number of bytes seen
MIN_BYTES_FOR_EARLY_EXIT = 32

UTF8_BOM = b"\xef\xbb\xbf"
TEXT_BOMS = (
    UTF8_BOM,
    b"\x00\x00\xfe\xff",
    b"\xff\xfe\x00\x00",
    b"\xfe\xff",
    b"\xff\xfe",
)

BufferLike = Union[bytes, bytearray, memoryview]


def _utf8_sequence_length(sample: bytes, index: int) -> int:
    """Length of a valid UTF-8 multi-byte sequence starting at index, else 0."""
    lead = sample[index]
    if 0xC2 <= lead <= 0xDF:
        length = 2
    elif 0xE0 <= lead <= 0xEF:
        length = 3
    elif 0xF0 <= lead <= 0xF4:
        length = 4
    else:
        return 0
    tail = sample[index + 1 : index + length]
    if len(tail) < length - 1:
        return 0
    if all(0x80 <= b <= 0xBF for b in tail):
        return length
    return 0


def is_binary_content(data: BufferLike) -> bool:
    """
    Guess whether a buffer holds binary data.

    Args:
        data: Buffer to inspect; only the first 512 bytes are sampled.

    Returns:
        True if the sample looks binary.
    """
    sample = bytes(data[:BINARY_SAMPLE_SIZE])
    total = len(sample)
    if total == 0:
        return False
    if sample.startswith(TEXT_BOMS):
        return False
    if sample.startswith(b"%PDF-"):
        return True

    suspicious = 0
    i = 0
    while i < total:
        byte = sample[i]
        if byte == 0:
            return True
        if (byte < 7 or byte > 14) and (byte < 32 or byte > 127):
            seq_len = _utf8_sequence_length(sample, i)
            if seq_len:
                i += seq_len
                continue
            suspicious += 1
            if (
                i > MIN_BYTES_FOR_EARLY_EXIT
                and suspicious * 100 / total > SUSPICIOUS_RATIO_PERCENT
            ):
                return True
        i += 1

    return suspicious * 100 / total > SUSPICIOUS_RATIO_PERCENT


@dataclass
class ManifestFile:
    """A file unit: a path plus replaceable contents."""

    path: str
    contents: Optional[Any] = None

    def __post_init__(self) -> None:
        self.path = os.fspath(self.path)
        if isinstance(self.contents, str):
            self.contents = self.contents.encode("utf-8")

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "ManifestFile":
        """Build a buffered unit from a file on disk."""
        file_path = Path(path)
        return cls(path=str(file_path.resolve()), contents=file_path.read_bytes())

    def is_null(self) -> bool:
        """True when the unit carries no contents."""
        return self.contents is None

    def is_buffer(self) -> bool:
        """True when contents are fully buffered bytes."""
        return isinstance(self.contents, (bytes, bytearray, memoryview))

    def is_stream(self) -> bool:
        """True when contents are a live readable stream."""
        return not self.is_null() and not self.is_buffer() and hasattr(
            self.contents, "read"
        )

    def is_binary(self) -> bool:
        """True when buffered contents look like binary data."""
        return self.is_buffer() and is_binary_content(self.contents)

    @property
    def basename(self) -> str:
        return os.path.basename(self.path)

    @property
    def dirname(self) -> str:
        """Directory holding the file; "." for a bare file name."""
        return os.path.dirname(self.path) or os.curdir

    def text(self) -> str:
        """Decode buffered contents as UTF-8."""
        return bytes(self.contents).decode("utf-8", errors="replace")

    def write(self) -> None:
        """Write buffered contents back to the unit's path."""
        Path(self.path).write_bytes(bytes(self.contents))
