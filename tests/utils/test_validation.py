"""
Unit tests for the input validation helpers.
"""

import math

import pytest

from aiconnectify.connectors.exceptions import AIConnectifyError, ValidationError
from aiconnectify.utils.validation import (
    validate_array_input,
    validate_boolean_input,
    validate_file_token,
    validate_key_string,
    validate_mapping_input,
    validate_number_input,
    validate_string_input,
    validate_text_or_array_input,
)


class TestStringValidation:
    """Test cases for validate_string_input."""

    @pytest.mark.parametrize("value", ["gpt-4o", "  padded  ", "x"])
    def test_accepts_non_blank_strings(self, value):
        """Any string with visible content passes."""
        validate_string_input(value, "bad")

    @pytest.mark.parametrize("value", ["", "   ", "\n\t", None, 42, ["a"]])
    def test_rejects_blank_and_non_strings(self, value):
        """Blank strings and other types raise with the caller's message."""
        with pytest.raises(ValidationError, match="Cannot process the model ID"):
            validate_string_input(value, "Cannot process the model ID")

    def test_validation_error_is_library_error(self):
        """ValidationError is catchable as the single library error type."""
        with pytest.raises(AIConnectifyError) as exc_info:
            validate_string_input("", "nope")

        assert str(exc_info.value) == "nope"
        assert exc_info.value.provider is None


class TestNumberValidation:
    """Test cases for validate_number_input."""

    @pytest.mark.parametrize("value", [0, 1, -3, 1.8, 127])
    def test_accepts_finite_numbers(self, value):
        """Integers and floats pass, zero included."""
        validate_number_input(value, "bad")

    @pytest.mark.parametrize(
        "value", [math.inf, -math.inf, math.nan, "3", None, True, False]
    )
    def test_rejects_non_finite_and_non_numbers(self, value):
        """Infinities, NaN, strings and booleans are rejected."""
        with pytest.raises(ValidationError, match="Cannot process the seed"):
            validate_number_input(value, "Cannot process the seed")


class TestCollectionValidation:
    """Test cases for array, mapping and boolean checks."""

    def test_array_accepts_lists_and_tuples(self):
        """Non-empty lists and tuples pass."""
        validate_array_input([{"role": "user"}], "bad")
        validate_array_input(("a",), "bad")

    @pytest.mark.parametrize("value", [[], (), "abc", {"a": 1}, None])
    def test_array_rejects_empty_and_other_types(self, value):
        """Empty sequences, strings and mappings are not arrays."""
        with pytest.raises(ValidationError):
            validate_array_input(value, "Cannot process the messages array")

    def test_mapping_validation(self):
        """Only dicts are mappings."""
        validate_mapping_input({}, "bad")
        with pytest.raises(ValidationError):
            validate_mapping_input([("a", 1)], "bad")

    def test_boolean_validation(self):
        """Only real booleans pass, not truthy values."""
        validate_boolean_input(False, "bad")
        with pytest.raises(ValidationError):
            validate_boolean_input(1, "bad")

    def test_text_or_array(self):
        """Embedding inputs may be a string or a list of strings."""
        validate_text_or_array_input("hello", "bad")
        validate_text_or_array_input(["a", "b"], "bad")
        with pytest.raises(ValidationError):
            validate_text_or_array_input("  ", "bad")
        with pytest.raises(ValidationError):
            validate_text_or_array_input([], "bad")


class TestKeyStringValidation:
    """Test cases for validate_key_string."""

    @pytest.mark.parametrize(
        "value",
        [
            "sk-proj-abcdefghijklmnop",
            "org-ABCDEFGHIJ123456",
            "a" * 256,
            "key.with+plus=and_underscore",
        ],
    )
    def test_accepts_key_shaped_strings(self, value):
        """16-256 characters from the allowed alphabet pass."""
        validate_key_string(value, "bad")

    @pytest.mark.parametrize(
        "value",
        ["short", "a" * 15, "a" * 257, "has spaces in the key", "semi;colon1234567", None],
    )
    def test_rejects_malformed_keys(self, value):
        """Too short, too long or illegal characters are rejected."""
        with pytest.raises(ValidationError, match="A valid API key must be provided"):
            validate_key_string(value, "A valid API key must be provided")

    @pytest.mark.parametrize(
        "value",
        ["abcdefghijklmnop\n", "sk-test-0123456789abcdef\n", "\nsk-test-0123456789abcdef"],
    )
    def test_rejects_surrounding_newlines(self, value):
        """A newline is never part of a key, even at the very end."""
        with pytest.raises(ValidationError):
            validate_key_string(value, "A valid API key must be provided")


class TestFileTokenValidation:
    """Test cases for validate_file_token."""

    @pytest.mark.parametrize("value", ["a1b2c3d4e5f6" * 5, "gen_123-abc", "x"])
    def test_accepts_opaque_ids(self, value):
        validate_file_token(value, "bad")

    @pytest.mark.parametrize(
        "value",
        ["../../escaped", "..", "nested/id", "nested\\id", "/abs", "id.png", "id\n", "", None],
    )
    def test_rejects_path_like_ids(self, value):
        """Ids used as file names cannot traverse or name another file."""
        with pytest.raises(ValidationError, match="Cannot process the video ID"):
            validate_file_token(value, "Cannot process the video ID")
