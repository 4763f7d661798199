"""
Tests for the Cohere connector.
"""

import pytest

from aiconnectify.connectors.cohere import Cohere
from aiconnectify.connectors.exceptions import AIConnectifyError, ValidationError

MESSAGES = [{"role": "user", "content": "Summarize this"}]


@pytest.fixture
def cohere_with(api_key, transport_factory):
    def _make(body=None, **kwargs):
        transport = transport_factory({} if body is None else body, **kwargs)
        return Cohere(api_key, transport=transport), transport

    return _make


class TestCohereClient:
    """Test cases for headers and key checks."""

    @pytest.mark.asyncio
    async def test_headers_and_client_name(self, api_key, cohere_with):
        cohere, transport = cohere_with({"valid": True})

        cohere.set_client_name("my-app")
        result = await cohere.check_api_key()

        assert result == {"valid": True}
        headers = transport.last_request.headers
        assert headers["Authorization"] == f"bearer {api_key}"
        assert headers["X-Client-Name"] == "my-app"
        assert str(transport.last_request.url) == "https://api.cohere.com/v1/check-api-key"

    def test_client_name_required(self, api_key):
        with pytest.raises(ValidationError, match="Cannot process the client name"):
            Cohere(api_key).set_client_name("")

    @pytest.mark.asyncio
    async def test_error_message_field(self, cohere_with):
        """Cohere reports errors in a top-level message field."""
        cohere, _ = cohere_with({"message": "invalid api token"}, status_code=401)

        with pytest.raises(AIConnectifyError, match="COHERE ERROR => 401 - invalid api token"):
            await cohere.check_api_key()


class TestCohereText:
    """Test cases for chat, rerank, classify and tokenization."""

    @pytest.mark.asyncio
    async def test_chat_disables_streaming_and_drops_meta(self, cohere_with):
        cohere, transport = cohere_with({"id": "c1", "message": {}, "meta": {"billed_units": {}}})

        result = await cohere.chat(MESSAGES, config={"temperature": 0.3, "stream": True})

        assert result == {"id": "c1", "message": {}}
        assert transport.last_request.url.path == "/v2/chat"
        assert transport.last_json() == {
            "temperature": 0.3,
            "messages": MESSAGES,
            "stream": False,
            "model": "command-r-plus-08-2024",
        }

    @pytest.mark.asyncio
    async def test_rerank(self, cohere_with):
        cohere, transport = cohere_with({"results": [{"index": 1}], "meta": {}})

        result = await cohere.rerank("capital of the US", ["Carson City", "Washington, D.C."])

        assert result == {"results": [{"index": 1}]}
        assert transport.last_json()["model"] == "rerank-english-v3.0"
        assert transport.last_request.url.path == "/v2/rerank"

    @pytest.mark.asyncio
    async def test_rerank_validation(self, cohere_with):
        cohere, _ = cohere_with()

        with pytest.raises(ValidationError, match="Cannot process the documents array"):
            await cohere.rerank("query", [])

    @pytest.mark.asyncio
    async def test_classify_examples_optional(self, cohere_with):
        """Examples may be omitted for fine-tuned classifiers."""
        cohere, transport = cohere_with({"classifications": [], "meta": {}})

        await cohere.classify(["great product"], model_id="my-ft-classifier")

        assert transport.last_json() == {
            "inputs": ["great product"],
            "examples": [],
            "model": "my-ft-classifier",
        }

    @pytest.mark.asyncio
    async def test_tokenize_and_detokenize(self, cohere_with):
        cohere, transport = cohere_with({"tokens": [1, 2], "meta": {}})

        assert await cohere.tokenize("hello") == {"tokens": [1, 2]}
        assert transport.last_json() == {"text": "hello", "model": "command"}

        await cohere.detokenize([1, 2])
        assert transport.last_request.url.path == "/v1/detokenize"

        with pytest.raises(ValidationError, match="Cannot process the tokens array"):
            await cohere.detokenize([])


class TestCohereEmbeddings:
    """Test cases for embeddings and embed jobs."""

    @pytest.mark.asyncio
    async def test_embed(self, cohere_with):
        cohere, transport = cohere_with({"embeddings": {"float": [[0.1]]}, "meta": {}})

        result = await cohere.embed("search_document", ["float"], config={"texts": ["hi"]})

        assert result == {"embeddings": {"float": [[0.1]]}}
        assert transport.last_json() == {
            "texts": ["hi"],
            "input_type": "search_document",
            "embedding_types": ["float"],
            "model": "embed-english-v2.0",
        }

    @pytest.mark.asyncio
    async def test_embed_jobs(self, cohere_with):
        cohere, transport = cohere_with({"embed_jobs": [{"job_id": "j1"}]})

        assert await cohere.get_embed_jobs() == [{"job_id": "j1"}]

    @pytest.mark.asyncio
    async def test_create_embed_job_returns_id(self, cohere_with):
        cohere, transport = cohere_with({"job_id": "job-1", "meta": {}})

        assert await cohere.create_embed_job("ds-1") == "job-1"
        assert transport.last_json() == {
            "model": "embed-english-light-v3.0",
            "dataset_id": "ds-1",
            "input_type": "classification",
        }

    @pytest.mark.asyncio
    async def test_get_and_cancel_embed_job(self, cohere_with):
        cohere, transport = cohere_with({"job_id": "job-1", "status": "processing", "meta": {}})

        assert await cohere.get_embed_job("job-1") == {"job_id": "job-1", "status": "processing"}
        assert await cohere.cancel_embed_job("job-1") == {
            "embed_job_id": "job-1",
            "status": "canceled",
        }
        assert transport.last_request.url.path == "/v1/embed-jobs/job-1/cancel"


class TestCohereDatasets:
    """Test cases for datasets."""

    @pytest.mark.asyncio
    async def test_create_dataset_uploads_data_part(self, cohere_with, workdir):
        (workdir / "train.jsonl").write_text('{"text": "hi"}\n')
        cohere, transport = cohere_with({"id": "ds-123"})

        result = await cohere.create_dataset("my-set", "train.jsonl")

        assert result == {"dataset_id": "ds-123"}
        body = transport.last_request.content
        assert b'name="data"; filename="train.jsonl"' in body
        assert b"embed-input" in body
        assert transport.last_request.url.path == "/v1/datasets"

    @pytest.mark.asyncio
    async def test_dataset_lookups(self, cohere_with):
        cohere, transport = cohere_with(
            {"datasets": [{"id": "ds-1"}], "dataset": {"id": "ds-1"}, "organization_usage": 5}
        )

        assert await cohere.get_datasets({"limit": 1}) == [{"id": "ds-1"}]
        assert transport.last_request.url.params["limit"] == "1"
        assert await cohere.get_dataset("ds-1") == {"id": "ds-1"}
        assert (await cohere.get_dataset_usage())["organization_usage"] == 5

    @pytest.mark.asyncio
    async def test_delete_dataset(self, cohere_with):
        cohere, transport = cohere_with()

        assert await cohere.delete_dataset("ds-1") == {"dataset_id": "ds-1", "status": "deleted"}
        assert transport.last_request.method == "DELETE"


class TestCohereConnectors:
    """Test cases for Cohere data connectors."""

    @pytest.mark.asyncio
    async def test_crud(self, cohere_with):
        cohere, transport = cohere_with(
            {"connector": {"id": "conn-1"}, "connectors": [{"id": "conn-1"}]}
        )

        assert await cohere.create_connector("wiki", "https://wiki.example.com/search") == {
            "id": "conn-1"
        }
        assert await cohere.get_connectors() == [{"id": "conn-1"}]
        assert await cohere.get_connector("conn-1") == {"id": "conn-1"}

        await cohere.update_connector("conn-1", {"name": "renamed"})
        assert transport.last_request.method == "PATCH"
        assert transport.last_json() == {"name": "renamed"}

        assert await cohere.delete_connector("conn-1") == {
            "connector_id": "conn-1",
            "status": "deleted",
        }

    @pytest.mark.asyncio
    async def test_authorize_connector_redirect(self, cohere_with):
        cohere, transport = cohere_with({"redirect_url": "https://auth"})

        await cohere.authorize_connector("conn-1", "https://app.example.com/done")

        url = transport.last_request.url
        assert url.path == "/v1/connectors/conn-1/oauth/authorize"
        assert url.params["after_token_redirect"] == "https://app.example.com/done"

        await cohere.authorize_connector("conn-1")
        assert "after_token_redirect" not in transport.last_request.url.params


class TestCohereFineTuning:
    """Test cases for fine-tuned models."""

    @pytest.mark.asyncio
    async def test_create_and_update(self, cohere_with):
        settings = {"base_model": {"base_type": "BASE_TYPE_CHAT"}, "dataset_id": "ds-1"}
        cohere, transport = cohere_with({"finetuned_model": {"id": "ft-1"}})

        assert await cohere.create_fine_tuned_model("my-model", settings) == {"id": "ft-1"}
        assert transport.last_json() == {"name": "my-model", "settings": settings}

        await cohere.update_fine_tuned_model("ft-1", "renamed", settings)
        assert transport.last_request.method == "PATCH"
        assert transport.last_request.url.path == "/v1/finetuning/finetuned-models/ft-1"

    @pytest.mark.asyncio
    async def test_settings_must_be_mapping(self, cohere_with):
        cohere, transport = cohere_with()

        with pytest.raises(ValidationError, match="settings"):
            await cohere.create_fine_tuned_model("my-model", None)

    @pytest.mark.asyncio
    async def test_reads_and_delete(self, cohere_with):
        cohere, transport = cohere_with({"finetuned_model": {"id": "ft-1"}, "events": []})

        await cohere.get_fine_tuned_models({"page_size": 2})
        assert transport.last_request.url.params["page_size"] == "2"

        assert await cohere.get_fine_tuned_model("ft-1") == {"id": "ft-1"}

        await cohere.get_fine_tuned_model_chronology("ft-1")
        assert transport.last_request.url.path.endswith("/ft-1/events")

        await cohere.get_fine_tuned_model_metrics("ft-1")
        assert transport.last_request.url.path.endswith("/ft-1/training-step-metrics")

        assert await cohere.delete_fine_tuned_model("ft-1") == {
            "finetuned_model_id": "ft-1",
            "status": "deleted",
        }


class TestCohereModels:
    """Test cases for model listing and lookup."""

    @pytest.mark.asyncio
    async def test_get_models_with_filters(self, cohere_with):
        body = {"models": [{"name": "command-r"}], "next_page_token": "tok"}
        cohere, transport = cohere_with(body)

        result = await cohere.get_models({"endpoint": "chat", "page_size": 1})

        assert result == body
        url = transport.last_request.url
        assert url.path == "/v1/models"
        assert url.params["endpoint"] == "chat"
        assert url.params["page_size"] == "1"

    @pytest.mark.asyncio
    async def test_get_model(self, cohere_with):
        cohere, transport = cohere_with({"name": "command-r", "endpoints": ["chat"]})

        result = await cohere.get_model("command-r")

        assert result == {"name": "command-r", "endpoints": ["chat"]}
        assert transport.last_request.url.path == "/v1/models/command-r"

        with pytest.raises(ValidationError, match="Cannot process the model ID"):
            await cohere.get_model("")
