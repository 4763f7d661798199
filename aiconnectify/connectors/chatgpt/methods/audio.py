"""
Text-to-speech, transcription and translation.

Speech output is written under the caller's destination folder with a
random file name; the other two operations upload a local audio file.
"""

from typing import Any, Dict, Optional

from aiconnectify.utils.helpers import (
    build_output_path,
    compact_form,
    generate_random_id,
    merge_config,
    read_upload,
    validate_and_return_path,
    write_binary_file,
)
from aiconnectify.utils.validation import validate_string_input

from ...http_client import HttpClient
from ...shaping import unwrap


async def create_speech(
    http: HttpClient,
    input: str,
    destination_folder: str,
    model_id: str = "tts-1",
    voice: str = "alloy",
    response_format: str = "mp3",
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    """
    Generate audio from text and save it locally.

    Returns:
        ``{"audio_path": "./<folder>/<random id>.<format>"}``
    """
    validate_string_input(input, "Cannot process the input text")
    folder = validate_and_return_path(destination_folder, "destination folder")
    validate_string_input(model_id, "Cannot process the model ID")
    validate_string_input(voice, "Cannot process the voice")
    validate_string_input(response_format, "Cannot process the response format")

    body = {
        **merge_config(config),
        "input": input,
        "model": model_id,
        "voice": voice,
        "response_format": response_format,
    }
    audio = await http.post("/audio/speech", body, raw=True)

    output_path = build_output_path(folder, generate_random_id(), response_format)
    write_binary_file(output_path, audio, provider=http.provider)
    return {"audio_path": output_path}


async def _upload_audio(
    http: HttpClient,
    endpoint: str,
    file_path: str,
    model_id: str,
    config: Optional[Dict[str, Any]],
) -> str:
    file_name, content = read_upload(
        file_path, "Cannot process the file path", provider=http.provider
    )
    validate_string_input(model_id, "Cannot process the model ID")

    data = compact_form({**merge_config(config), "model": model_id})
    response = await http.post_form(
        endpoint, data=data, files={"file": (file_name, content)}
    )
    body = http.parse_body(response)
    if isinstance(body, str):
        # response_format="text" or "srt" replies are not JSON
        return body
    return unwrap(body, "text", http.provider)


async def create_transcription(
    http: HttpClient,
    file_path: str,
    model_id: str = "whisper-1",
    config: Optional[Dict[str, Any]] = None,
) -> str:
    """Transcribe an audio file into the input language."""
    return await _upload_audio(http, "/audio/transcriptions", file_path, model_id, config)


async def create_translation(
    http: HttpClient,
    file_path: str,
    model_id: str = "whisper-1",
    config: Optional[Dict[str, Any]] = None,
) -> str:
    """Translate an audio file into English text."""
    return await _upload_audio(http, "/audio/translations", file_path, model_id, config)
