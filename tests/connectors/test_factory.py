"""
Tests for create_ai_instance and the AIConnectify facade.
"""

import pytest

from aiconnectify import AIConnectify, AIConnectifyError, create_ai_instance
from aiconnectify.connectors import ChatGPT, Claude, TensorFlow
from aiconnectify.connectors.exceptions import UnknownConnectorError
from aiconnectify.core.config import settings


class TestCreateAIInstance:
    """Test cases for the connector factory."""

    def test_creates_named_connector(self, api_key):
        connector = create_ai_instance("Claude", api_key)

        assert isinstance(connector, Claude)
        assert connector.client.api_key == api_key

    @pytest.mark.parametrize("ai", [None, ""])
    def test_requires_ai_name(self, ai, api_key):
        with pytest.raises(AIConnectifyError, match="You must specify an AI to use"):
            create_ai_instance(ai, api_key)

    def test_unknown_ai(self, api_key):
        with pytest.raises(UnknownConnectorError, match="AI service Gemini is not registered"):
            create_ai_instance("Gemini", api_key)

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "OPENAI_API_KEY", None)

        with pytest.raises(AIConnectifyError, match="API key is required for ChatGPT") as exc_info:
            create_ai_instance("ChatGPT")

        assert exc_info.value.provider == "ChatGPT"

    def test_api_key_from_settings(self, monkeypatch, api_key):
        """DALLE shares the OpenAI key."""
        monkeypatch.setattr(settings, "OPENAI_API_KEY", api_key)

        connector = create_ai_instance("DALLE")

        assert connector.client.api_key == api_key
        assert connector.http.default_headers["Authorization"] == f"Bearer {api_key}"

    def test_tensorflow_ignores_api_key(self):
        assert isinstance(create_ai_instance("TensorFlow"), TensorFlow)

    def test_client_options_are_forwarded(self, api_key):
        connector = create_ai_instance(
            "ChatGPT", api_key, base_url="https://proxy.example.com/v1/", timeout=5
        )

        assert connector.http.base_url == "https://proxy.example.com/v1"
        assert connector.http.timeout == 5


class TestAIConnectify:
    """Test cases for the AIConnectify entry point."""

    @pytest.mark.asyncio
    async def test_call_dispatches_to_connector(self, api_key, transport_factory):
        transport = transport_factory({"data": [{"id": "gpt-4o"}]})

        async with AIConnectify("ChatGPT", api_key, transport=transport) as ai:
            assert isinstance(ai.connector, ChatGPT)
            models = await ai.call("get_models")

        assert models == [{"id": "gpt-4o"}]
        assert transport.last_request.url.path == "/v1/models"

    @pytest.mark.asyncio
    async def test_call_passes_arguments(self, api_key, transport_factory):
        transport = transport_factory({"id": "msg_1", "content": [], "usage": {}})

        async with AIConnectify("Claude", api_key, transport=transport) as ai:
            result = await ai.call(
                "create_message", [{"role": "user", "content": "Hi"}], max_tokens=64
            )

        assert result == {"id": "msg_1", "content": []}
        assert transport.last_json()["max_tokens"] == 64

    @pytest.mark.asyncio
    async def test_call_sync_method(self, api_key, transport_factory):
        """Plain methods such as header setters are called without awaiting."""
        ai = AIConnectify("Cohere", api_key, transport=transport_factory({}))

        assert await ai.call("set_client_name", "my-app") is None
        assert ai.connector.http.default_headers["X-Client-Name"] == "my-app"
        await ai.aclose()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["does_not_exist", "_build_client", ""])
    async def test_unknown_method(self, method, api_key):
        ai = AIConnectify("Mistral", api_key)

        with pytest.raises(AIConnectifyError, match="is not available for Mistral"):
            await ai.call(method)

    def test_requires_ai_name(self):
        with pytest.raises(AIConnectifyError, match="You must specify an AI to use"):
            AIConnectify(None)
