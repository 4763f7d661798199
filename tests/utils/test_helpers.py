"""
Unit tests for filesystem and identifier helpers.
"""

import os
import re

import pytest

from aiconnectify.connectors.exceptions import AIConnectifyError, ValidationError
from aiconnectify.utils.helpers import (
    build_output_path,
    compact_form,
    generate_random_id,
    merge_config,
    read_upload,
    validate_and_return_path,
    write_binary_file,
)


class TestRandomId:
    """Test cases for generate_random_id."""

    def test_default_length_and_alphabet(self):
        """IDs are 16 alphanumeric characters by default."""
        value = generate_random_id()

        assert len(value) == 16
        assert re.fullmatch(r"[A-Za-z0-9]{16}", value)

    def test_ids_differ(self):
        """Consecutive IDs are not repeated."""
        assert len({generate_random_id() for _ in range(50)}) == 50

    def test_custom_length(self):
        assert len(generate_random_id(8)) == 8


class TestValidateAndReturnPath:
    """Test cases for validate_and_return_path."""

    def test_returns_relative_folder(self, workdir):
        """An existing folder comes back relative to the working directory."""
        assert validate_and_return_path("output", "destination folder") == "output"

    def test_strips_whitespace_and_slashes(self, workdir):
        """Surrounding whitespace, trailing and leading slashes are ignored."""
        (workdir / "output" / "images").mkdir()

        assert (
            validate_and_return_path("  /output/images//  ", "destination folder")
            == os.path.join("output", "images")
        )

    def test_missing_folder(self, workdir):
        """A folder that does not exist is rejected."""
        with pytest.raises(
            ValidationError,
            match="The 'destination folder' path is invalid or does not exist",
        ):
            validate_and_return_path("missing", "destination folder")

    def test_file_is_not_a_folder(self, workdir):
        """A regular file cannot be used as destination."""
        (workdir / "file.txt").write_text("x")

        with pytest.raises(ValidationError):
            validate_and_return_path("file.txt", "destination folder")

    def test_escaping_working_directory(self, workdir):
        """Paths resolving outside the working directory are rejected."""
        with pytest.raises(ValidationError):
            validate_and_return_path("../", "destination folder")

    def test_non_string(self, workdir):
        """Non-string input uses the generic message."""
        with pytest.raises(ValidationError, match="Cannot process the destination folder"):
            validate_and_return_path(None, "destination folder")


class TestFileHelpers:
    """Test cases for upload and output file helpers."""

    def test_build_output_path(self):
        assert build_output_path("output", "abc", "png") == os.path.join(
            ".", "output", "abc.png"
        )

    def test_write_binary_file(self, workdir):
        """Bytes are written verbatim and the path is returned."""
        path = write_binary_file("./output/a.bin", b"\x00\x01")

        assert path == "./output/a.bin"
        assert (workdir / "output" / "a.bin").read_bytes() == b"\x00\x01"

    def test_write_binary_file_failure(self, workdir):
        """OS errors become library errors carrying the provider."""
        with pytest.raises(AIConnectifyError) as exc_info:
            write_binary_file("./missing/a.bin", b"x", provider="Stability")

        assert exc_info.value.provider == "Stability"

    def test_read_upload(self, image_file):
        """Uploads return the file name and bytes for httpx."""
        name, content = read_upload(image_file, "bad")

        assert name == "input.png"
        assert content.startswith(b"\x89PNG")

    def test_read_upload_missing_file(self, workdir):
        with pytest.raises(AIConnectifyError, match="Unable to read file"):
            read_upload("nope.png", "bad", provider="DALLE")

    def test_read_upload_blank_path(self, workdir):
        with pytest.raises(ValidationError, match="Cannot process the image path"):
            read_upload("  ", "Cannot process the image path")


class TestConfigHelpers:
    """Test cases for merge_config and compact_form."""

    def test_merge_config_copies(self):
        """The caller's mapping is never mutated."""
        original = {"temperature": 0.2}
        merged = merge_config(original)
        merged["model"] = "x"

        assert original == {"temperature": 0.2}
        assert merge_config(None) == {}

    def test_merge_config_rejects_non_mapping(self):
        with pytest.raises(ValidationError, match="Cannot process the config object"):
            merge_config(["temperature"])

    def test_compact_form(self):
        """None values are dropped and mappings become JSON text."""
        form = compact_form({"seed": 0, "style": None, "extra": {"a": 1}, "tags": ["x"]})

        assert form == {"seed": 0, "extra": '{"a": 1}', "tags": ["x"]}
