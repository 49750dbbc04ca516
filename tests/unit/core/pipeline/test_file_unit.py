"""Tests for ManifestFile and binary detection."""

import io
import os

import pytest

from bumpforge.core.pipeline import ManifestFile, is_binary_content

PNG_HEADER = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x10"


class TestIsBinaryContent:
    def test_empty_is_text(self):
        assert is_binary_content(b"") is False

    def test_json_is_text(self, sample_manifest_text):
        assert is_binary_content(sample_manifest_text.encode("utf-8")) is False

    def test_utf8_multibyte_is_text(self):
        assert is_binary_content('{"author": "Zoë 日本語 🚀"}'.encode("utf-8")) is False

    def test_nul_byte_is_binary(self):
        assert is_binary_content(b'{"version": "1.0.0"}\x00') is True

    def test_png_is_binary(self):
        assert is_binary_content(PNG_HEADER) is True

    def test_pdf_is_binary(self):
        assert is_binary_content(b"%PDF-1.7\n%text-like header") is True

    def test_bom_is_text(self):
        assert is_binary_content(b"\xef\xbb\xbf{}") is False

    def test_control_bytes_are_binary(self):
        data = bytes(range(1, 7)) * 20 + b"abc"
        assert is_binary_content(data) is True

    def test_bytearray_accepted(self):
        assert is_binary_content(bytearray(b"{}")) is False


class TestManifestFileKinds:
    def test_null(self):
        unit = ManifestFile("package.json")

        assert unit.is_null() is True
        assert unit.is_stream() is False
        assert unit.is_binary() is False

    def test_buffer(self):
        unit = ManifestFile("package.json", b"{}")

        assert unit.is_null() is False
        assert unit.is_buffer() is True
        assert unit.is_stream() is False

    def test_stream(self):
        unit = ManifestFile("package.json", io.BytesIO(b"{}"))

        assert unit.is_stream() is True
        assert unit.is_buffer() is False
        assert unit.is_binary() is False

    def test_binary(self):
        assert ManifestFile("logo.png", PNG_HEADER).is_binary() is True

    def test_str_contents_encoded(self):
        unit = ManifestFile("package.json", '{"version": "1.0.0"}')

        assert unit.contents == b'{"version": "1.0.0"}'
        assert unit.text() == '{"version": "1.0.0"}'


class TestManifestFilePaths:
    def test_basename_and_dirname(self):
        unit = ManifestFile(os.path.join("srv", "app", "package.json"), b"{}")

        assert unit.basename == "package.json"
        assert unit.dirname == os.path.join("srv", "app")

    def test_bare_name_dirname(self):
        assert ManifestFile("package.json", b"{}").dirname == os.curdir

    def test_pathlike_path(self, temp_dir):
        unit = ManifestFile(temp_dir / "package.json", b"{}")
        assert isinstance(unit.path, str)


class TestManifestFileDisk:
    def test_from_path_and_write(self, temp_dir):
        path = temp_dir / "package.json"
        path.write_bytes(b'{"version": "1.0.0"}')

        unit = ManifestFile.from_path(path)
        assert unit.contents == b'{"version": "1.0.0"}'
        assert os.path.isabs(unit.path)

        unit.contents = b'{"version": "1.0.1"}'
        unit.write()
        assert path.read_bytes() == b'{"version": "1.0.1"}'

    def test_from_missing_path(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            ManifestFile.from_path(temp_dir / "missing.json")
