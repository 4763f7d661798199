"""
Filesystem and identifier helpers used by the media-producing operations.
"""

import json
import os
import secrets
import string
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from aiconnectify.connectors.exceptions import AIConnectifyError, ValidationError
from aiconnectify.utils.logger import get_logger
from aiconnectify.utils.validation import validate_mapping_input, validate_string_input

logger = get_logger(__name__)

_ID_ALPHABET = string.ascii_letters + string.digits


def generate_random_id(length: int = 16) -> str:
    """Return a random alphanumeric identifier used for output file names."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


def validate_and_return_path(directory_path: Any, variable_name: str) -> str:
    """
    Validate a destination folder and return it relative to the working directory.

    Surrounding whitespace and trailing separators are stripped, and a leading
    separator is read as relative to the working directory. The folder must
    exist and must not escape the working directory.

    Args:
        directory_path: Folder supplied by the caller
        variable_name: Parameter name used in the error message

    Returns:
        Normalized relative path ("." for the working directory itself)

    Raises:
        ValidationError: If the path is empty, missing or outside the working directory
    """
    validate_string_input(directory_path, f"Cannot process the {variable_name}")
    message = f"The '{variable_name}' path is invalid or does not exist"

    trimmed = directory_path.strip().rstrip("/\\").lstrip("/\\")
    cwd = Path.cwd().resolve()
    candidate = (cwd / trimmed).resolve()

    try:
        relative = candidate.relative_to(cwd)
    except ValueError:
        raise ValidationError(message)

    if not candidate.is_dir():
        raise ValidationError(message)

    return str(relative)


def build_output_path(folder: str, file_name: str, extension: str) -> str:
    """Build the ``./folder/name.ext`` path a media file is written to."""
    return os.path.join(".", folder, f"{file_name}.{extension}")


def write_binary_file(path: str, content: bytes, provider: Optional[str] = None) -> str:
    """
    Persist binary media returned by a provider.

    Raises:
        AIConnectifyError: If the file cannot be written
    """
    try:
        with open(path, "wb") as handle:
            handle.write(content)
    except OSError as e:
        logger.error(
            "Failed to write media file",
            connector=provider,
            path=path,
            error_type=type(e).__name__,
            error_message=str(e),
        )
        raise AIConnectifyError(
            f"Unable to write file '{path}': {e}", provider=provider
        ) from e

    logger.debug("Media file written", connector=provider, path=path, size=len(content))
    return path


def merge_config(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Normalize an optional config mapping into a fresh dict."""
    if config is None:
        return {}
    validate_mapping_input(config, "Cannot process the config object")
    return dict(config)


def read_upload(file_path: Any, message: str, provider: Optional[str] = None) -> Tuple[str, bytes]:
    """
    Load a local file for a multipart upload.

    Returns:
        ``(file_name, content)`` tuple accepted by httpx ``files=``

    Raises:
        ValidationError: If the path is not a non-empty string
        AIConnectifyError: If the file cannot be read
    """
    validate_string_input(file_path, message)
    path = Path(file_path.strip())
    try:
        content = path.read_bytes()
    except OSError as e:
        raise AIConnectifyError(
            f"Unable to read file '{file_path}': {e}", provider=provider
        ) from e
    return path.name, content


def compact_form(fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Prepare multipart form fields.

    None values are dropped and mappings are sent as JSON text, since
    multipart fields only carry scalars or lists of scalars.
    """
    form: Dict[str, Any] = {}
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, dict):
            value = json.dumps(value)
        form[key] = value
    return form
