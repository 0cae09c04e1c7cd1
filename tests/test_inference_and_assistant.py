"""Tests for the inference and assistant sub-clients."""

import httpx
import pytest

from conftest import body_of
from pinecone_rest.assistant import AssistantClient
from pinecone_rest.errors import PineconeApiError, PineconeTransportError, PineconeValidationError
from pinecone_rest.inference import InferenceClient


@pytest.fixture
def inference(controller):
    return InferenceClient(controller)


@pytest.fixture
def assistant(data_client):
    return AssistantClient(data_client, "helper")


# ---------------------------------------------------------------------------
# Inference
# ---------------------------------------------------------------------------


class TestEmbed:
    def test_string_inputs_normalized(self, server, inference):
        server.add("POST", "/embed", json_body={"data": [{"values": [0.1]}, {"values": [0.2]}]})

        result = inference.embed("multilingual-e5-large", ["hello", {"text": "world"}])

        assert len(result["data"]) == 2
        assert body_of(server.last) == {
            "model": "multilingual-e5-large",
            "inputs": [{"text": "hello"}, {"text": "world"}],
        }

    def test_parameters_sent_when_given(self, server, inference):
        server.add("POST", "/embed", json_body={})
        inference.embed("m", ["x"], parameters={"input_type": "passage", "truncate": "END"})
        assert body_of(server.last)["parameters"] == {"input_type": "passage", "truncate": "END"}

    def test_empty_parameters_omitted(self, server, inference):
        server.add("POST", "/embed", json_body={})
        inference.embed("m", ["x"], parameters={})
        assert "parameters" not in body_of(server.last)

    @pytest.mark.parametrize(
        "model, inputs, message",
        [
            ("", ["x"], "Model name is required for embedding."),
            ("m", [], "At least one input is required for embedding."),
        ],
    )
    def test_validation(self, server, inference, model, inputs, message):
        with pytest.raises(PineconeValidationError, match=message):
            inference.embed(model, inputs)
        assert server.requests == []

    def test_transport_failure_prefix(self, server, inference):
        server.add("POST", "/embed", raises=httpx.ConnectError("refused"))
        with pytest.raises(PineconeTransportError, match="^Failed to generate embeddings: refused$"):
            inference.embed("m", ["x"])


class TestRerank:
    def test_minimal_payload(self, server, inference):
        server.add("POST", "/rerank", json_body={"data": [{"index": 1, "score": 0.9}]})

        inference.rerank("bge-reranker-v2-m3", "capital of France", ["Paris", "Berlin"])

        assert body_of(server.last) == {
            "model": "bge-reranker-v2-m3",
            "query": "capital of France",
            "documents": ["Paris", "Berlin"],
            "return_documents": True,
        }

    def test_optional_fields(self, server, inference):
        server.add("POST", "/rerank", json_body={})

        inference.rerank(
            "m",
            "q",
            [{"id": "1", "body": "text"}],
            top_n=3,
            return_documents=False,
            rank_fields=["body"],
            parameters={"truncate": "END"},
        )

        assert body_of(server.last) == {
            "model": "m",
            "query": "q",
            "documents": [{"id": "1", "body": "text"}],
            "return_documents": False,
            "top_n": 3,
            "rank_fields": ["body"],
            "parameters": {"truncate": "END"},
        }

    @pytest.mark.parametrize(
        "model, query, documents, message",
        [
            ("", "q", ["d"], "Model name is required for reranking."),
            ("m", "", ["d"], "Query is required for reranking."),
            ("m", "q", [], "At least one document is required for reranking."),
        ],
    )
    def test_validation(self, server, inference, model, query, documents, message):
        with pytest.raises(PineconeValidationError, match=message):
            inference.rerank(model, query, documents)
        assert server.requests == []


class TestListModels:
    def test_list_models(self, server, inference):
        server.add("GET", "/models", json_body={"models": [{"model": "m"}]})
        assert inference.list_models() == {"models": [{"model": "m"}]}

    def test_list_models_error(self, server, inference):
        server.add("GET", "/models", status=401, json_body={"error": {"message": "bad key"}})
        with pytest.raises(Exception, match="bad key"):
            inference.list_models()


# ---------------------------------------------------------------------------
# Assistant
# ---------------------------------------------------------------------------


class TestChat:
    def test_messages_and_options(self, server, assistant):
        server.add(
            "POST",
            "/assistant/chat/helper/completions",
            json_body={"message": {"role": "assistant", "content": "Hi"}},
        )

        result = assistant.chat([{"role": "user", "content": "Hello"}], {"model": "gpt-4o"})

        assert result["message"]["content"] == "Hi"
        assert body_of(server.last) == {
            "messages": [{"role": "user", "content": "Hello"}],
            "model": "gpt-4o",
        }

    def test_empty_messages_rejected(self, server, assistant):
        with pytest.raises(PineconeValidationError, match="At least one message is required for chat."):
            assistant.chat([])
        assert server.requests == []

    def test_name_is_path_encoded(self, server, data_client):
        server.add("GET", "/assistant/files/my%20assistant", json_body={"files": []})
        AssistantClient(data_client, "my assistant").list_files()
        assert server.calls("GET", "/assistant/files/my%20assistant") == 1


class TestFiles:
    def test_upload_file_multipart(self, server, assistant, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_bytes(b"release notes")
        server.add("POST", "/assistant/files/helper", json_body={"id": "file-1", "status": "Processing"})

        result = assistant.upload_file(str(path))

        assert result["id"] == "file-1"
        content_type = server.last.headers["content-type"]
        assert content_type.startswith("multipart/form-data; boundary=")
        boundary = content_type.split("boundary=", 1)[1]
        assert f"--{boundary}".encode() in server.last.content
        assert b'name="file"; filename="notes.txt"' in server.last.content
        assert b"release notes" in server.last.content

    def test_upload_missing_file(self, server, assistant, tmp_path):
        missing = str(tmp_path / "nope.pdf")
        with pytest.raises(PineconeValidationError, match="File not found: "):
            assistant.upload_file(missing)
        assert server.requests == []

    def test_list_describe_delete(self, server, assistant):
        server.add("GET", "/assistant/files/helper", json_body={"files": [{"id": "file-1"}]})
        server.add("GET", "/assistant/files/helper/file-1", json_body={"id": "file-1"})
        server.add("DELETE", "/assistant/files/helper/file-1", status=200, content=b"")

        assert assistant.list_files() == {"files": [{"id": "file-1"}]}
        assert assistant.describe_file("file-1") == {"id": "file-1"}
        assert assistant.delete_file("file-1") is None

    def test_delete_file_error(self, server, assistant):
        server.add("DELETE", "/assistant/files/helper/file-9", status=404, json_body={"message": "missing"})
        with pytest.raises(PineconeApiError, match="missing"):
            assistant.delete_file("file-9")

    def test_transport_failure_prefix(self, server, assistant):
        server.add("GET", "/assistant/files/helper", raises=httpx.ConnectError("refused"))
        with pytest.raises(PineconeTransportError, match="^Failed to list assistant files: refused$"):
            assistant.list_files()

    @pytest.mark.parametrize(
        "method, call, operation",
        [
            ("GET", "describe_file", "describe assistant file"),
            ("DELETE", "delete_file", "delete assistant file"),
        ],
    )
    def test_transport_failure_names_file(self, server, assistant, method, call, operation):
        server.add(method, "/assistant/files/helper/file-1", raises=httpx.ConnectError("refused"))
        with pytest.raises(PineconeTransportError) as exc_info:
            getattr(assistant, call)("file-1")
        assert str(exc_info.value) == f"Failed to {operation}: file-1. refused"
