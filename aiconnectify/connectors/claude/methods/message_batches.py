"""
Anthropic Message Batches API.

Every call carries the beta header that enables the batches endpoints.
Batches are assembled by the caller; this module only submits and inspects them.
"""

import json
from typing import Any, Dict, List, Optional

from aiconnectify.core.config import settings
from aiconnectify.utils.helpers import merge_config
from aiconnectify.utils.validation import validate_array_input, validate_string_input

from ...exceptions import MalformedResponseError
from ...http_client import HttpClient

BATCH_ID_MESSAGE = "Cannot process the message batch ID"


def _beta_headers() -> Dict[str, str]:
    return {"anthropic-beta": settings.ANTHROPIC_BETA_MESSAGE_BATCHES}


async def create_message_batch(
    http: HttpClient, requests: List[Dict[str, Any]]
) -> Dict[str, Any]:
    """Submit a batch of Messages requests (each with ``custom_id`` and ``params``)."""
    validate_array_input(requests, "Cannot process the requests array")
    return await http.post(
        "/messages/batches", {"requests": list(requests)}, headers=_beta_headers()
    )


async def get_message_batch(http: HttpClient, batch_id: str) -> Dict[str, Any]:
    validate_string_input(batch_id, BATCH_ID_MESSAGE)
    return await http.get(f"/messages/batches/{batch_id}", headers=_beta_headers())


async def get_message_batch_results(
    http: HttpClient, batch_id: str
) -> List[Dict[str, Any]]:
    """
    Fetch the results of an ended batch.

    The endpoint streams JSON Lines; each non-blank line becomes one result.

    Raises:
        MalformedResponseError: If a line is not valid JSON
    """
    validate_string_input(batch_id, BATCH_ID_MESSAGE)
    response = await http.get_full(
        f"/messages/batches/{batch_id}/results", headers=_beta_headers()
    )

    results = []
    for line in response.text.splitlines():
        if not line.strip():
            continue
        try:
            results.append(json.loads(line))
        except ValueError as e:
            raise MalformedResponseError(
                f"{http.provider.upper()} ERROR => Invalid batch result line",
                provider=http.provider,
            ) from e
    return results


async def get_message_batch_list(
    http: HttpClient, config: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    return await http.get(
        "/messages/batches", params=merge_config(config), headers=_beta_headers()
    )


async def cancel_message_batch(http: HttpClient, batch_id: str) -> Dict[str, Any]:
    validate_string_input(batch_id, BATCH_ID_MESSAGE)
    return await http.post(
        f"/messages/batches/{batch_id}/cancel", headers=_beta_headers()
    )
