"""
Cohere connectors: registered data sources the chat endpoint can search.
"""

from typing import Any, Dict, List, Optional

from aiconnectify.utils.helpers import merge_config
from aiconnectify.utils.validation import validate_string_input

from ...http_client import HttpClient
from ...shaping import unwrap

CONNECTOR_ID_MESSAGE = "Cannot process the connector ID"


async def get_connectors(
    http: HttpClient, config: Optional[Dict[str, Any]] = None
) -> List[Dict[str, Any]]:
    response = await http.get("/v1/connectors", params=merge_config(config))
    return unwrap(response, "connectors", http.provider)


async def get_connector(http: HttpClient, connector_id: str) -> Dict[str, Any]:
    validate_string_input(connector_id, CONNECTOR_ID_MESSAGE)
    response = await http.get(f"/v1/connectors/{connector_id}")
    return unwrap(response, "connector", http.provider)


async def create_connector(
    http: HttpClient,
    name: str,
    url: str,
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    validate_string_input(name, "Cannot process the name")
    validate_string_input(url, "Cannot process the url")

    body = {**merge_config(config), "name": name, "url": url}
    response = await http.post("/v1/connectors", body)
    return unwrap(response, "connector", http.provider)


async def update_connector(
    http: HttpClient, connector_id: str, config: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    validate_string_input(connector_id, CONNECTOR_ID_MESSAGE)
    response = await http.patch(f"/v1/connectors/{connector_id}", merge_config(config))
    return unwrap(response, "connector", http.provider)


async def delete_connector(http: HttpClient, connector_id: str) -> Dict[str, str]:
    validate_string_input(connector_id, CONNECTOR_ID_MESSAGE)
    await http.delete(f"/v1/connectors/{connector_id}")
    return {"connector_id": connector_id, "status": "deleted"}


async def authorize_connector(
    http: HttpClient, connector_id: str, after_token_redirect: Optional[str] = None
) -> Dict[str, Any]:
    """
    Start the OAuth flow for a connector.

    Returns the vendor reply holding the ``redirect_url`` the user must visit.
    """
    validate_string_input(connector_id, CONNECTOR_ID_MESSAGE)
    params = None
    if after_token_redirect is not None:
        validate_string_input(
            after_token_redirect, "Cannot process the after token redirect URL"
        )
        params = {"after_token_redirect": after_token_redirect}

    return await http.post(
        f"/v1/connectors/{connector_id}/oauth/authorize", params=params
    )
