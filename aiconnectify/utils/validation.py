"""
Input validation helpers shared by every method module.

Each helper raises ValidationError with the caller-supplied message so the
error reads in the vocabulary of the operation that rejected the input.
"""

import math
import re
from typing import Any

from aiconnectify.connectors.exceptions import ValidationError

KEY_STRING_PATTERN = re.compile(r"[A-Za-z0-9\-_.+=]{16,256}")
FILE_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9_\-]{1,256}")


def validate_string_input(value: Any, message: str) -> None:
    """Require a string with non-whitespace content."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)


def validate_number_input(value: Any, message: str) -> None:
    """Require a finite int or float. Booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(message)
    if not math.isfinite(value):
        raise ValidationError(message)


def validate_array_input(value: Any, message: str) -> None:
    """Require a non-empty list or tuple."""
    if not isinstance(value, (list, tuple)) or len(value) == 0:
        raise ValidationError(message)


def validate_boolean_input(value: Any, message: str) -> None:
    if not isinstance(value, bool):
        raise ValidationError(message)


def validate_mapping_input(value: Any, message: str) -> None:
    if not isinstance(value, dict):
        raise ValidationError(message)


def validate_key_string(value: Any, message: str) -> None:
    """
    Require an API key or vendor identifier.

    Keys are 16-256 characters drawn from letters, digits and ``-_.+=``.
    """
    validate_string_input(value, message)
    if not KEY_STRING_PATTERN.fullmatch(value):
        raise ValidationError(message)


def validate_text_or_array_input(value: Any, message: str) -> None:
    """Require either a non-blank string or a non-empty list (embedding inputs)."""
    if isinstance(value, str):
        validate_string_input(value, message)
    else:
        validate_array_input(value, message)


def validate_file_token(value: Any, message: str) -> None:
    """
    Require a vendor id that is safe to use as a file name.

    Only letters, digits, ``-`` and ``_`` are allowed, so the id can never
    contain a path separator or ``..``.
    """
    validate_string_input(value, message)
    if not FILE_TOKEN_PATTERN.fullmatch(value):
        raise ValidationError(message)
