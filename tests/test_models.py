"""Tests for the wire models."""

import pytest
from pydantic import ValidationError

from pinecone_rest.errors import PineconeValidationError
from pinecone_rest.models import (
    DeleteRequest,
    IndexDescription,
    QueryMatch,
    QueryRequest,
    SparseValues,
    UpdateRequest,
    UpsertRequest,
    VectorRecord,
    build_payload,
)


class TestRequestPayloads:
    def test_query_defaults(self):
        assert QueryRequest(vector=[0.1, 0.2], top_k=5).to_payload() == {
            "vector": [0.1, 0.2],
            "topK": 5,
            "includeValues": False,
            "includeMetadata": True,
        }

    def test_query_empty_filter_and_vector_omitted(self):
        payload = QueryRequest(id="v1", vector=[], filter={}).to_payload()
        assert "vector" not in payload
        assert "filter" not in payload
        assert payload["id"] == "v1"

    def test_query_sparse_vector_alias(self):
        payload = QueryRequest(
            id="v1", sparse_vector={"indices": [1], "values": [0.5]}
        ).to_payload()
        assert payload["sparseVector"] == {"indices": [1], "values": [0.5]}

    def test_delete_all_drops_ids_and_filter(self):
        payload = DeleteRequest(
            ids=["a"], filter={"genre": "drama"}, namespace="ns", delete_all=True
        ).to_payload()
        assert payload == {"deleteAll": True, "namespace": "ns"}

    def test_delete_ids_and_filter_together(self):
        payload = DeleteRequest(ids=["a"], filter={"genre": "drama"}).to_payload()
        assert payload == {"ids": ["a"], "filter": {"genre": "drama"}}

    def test_update_with_sparse_values(self):
        sparse = {"indices": [0, 5], "values": [0.1, 0.9]}
        payload = UpdateRequest(id="v1", sparse_values=sparse).to_payload()
        assert payload == {"id": "v1", "sparseValues": sparse}

    def test_update_without_optionals(self):
        assert UpdateRequest(id="v1", values=[], set_metadata={}).to_payload() == {"id": "v1"}

    def test_upsert_keeps_extra_vector_keys(self):
        payload = UpsertRequest(
            vectors=[{"id": "a", "values": [1.0], "custom": "x"}]
        ).to_payload()
        assert payload == {"vectors": [{"id": "a", "values": [1.0], "custom": "x"}]}

    def test_upsert_accepts_camel_case_input(self):
        record = VectorRecord.model_validate(
            {"id": "a", "sparseValues": {"indices": [2], "values": [0.3]}}
        )
        assert record.sparse_values == SparseValues(indices=[2], values=[0.3])


class TestValidation:
    def test_sparse_length_mismatch(self):
        with pytest.raises(ValidationError, match="same length"):
            SparseValues(indices=[1, 2], values=[0.5])

    def test_build_payload_wraps_errors(self):
        with pytest.raises(PineconeValidationError, match=r"'top_?[kK]'.*greater than 0"):
            build_payload(QueryRequest, vector=[0.1], top_k=0)

    def test_build_payload_returns_dict(self):
        assert build_payload(UpdateRequest, id="x") == {"id": "x"}


class TestResponseModels:
    def test_index_description_from_api(self):
        index = IndexDescription.from_api(
            {
                "name": "movies",
                "dimension": 1536,
                "metric": "dotproduct",
                "host": "movies-abc.svc.io",
                "deletion_protection": "enabled",
                "status": {"ready": True, "state": "Ready"},
                "spec": {"serverless": {"cloud": "aws", "region": "us-east-1"}},
                "vector_type": "dense",
                "unknown_field": 1,
            }
        )
        assert index.status.ready is True
        assert index.spec.serverless.region == "us-east-1"
        assert index.spec.pod is None
        assert index.deletion_protection == "enabled"

    def test_byoc_schema_alias(self):
        index = IndexDescription.from_api(
            {
                "name": "byoc",
                "host": "h",
                "status": {"ready": False, "state": "Initializing"},
                "spec": {"byoc": {"environment": "aws-us-east-1", "schema": {"fields": {}}}},
            }
        )
        assert index.spec.byoc.index_schema == {"fields": {}}
        assert index.metric == "cosine"

    def test_query_match_list(self):
        matches = QueryMatch.list_from_api(
            [{"id": "v1", "score": 0.95}, {"id": "v2", "score": 0.5, "metadata": {"a": 1}}]
        )
        assert [m.score for m in matches] == [0.95, 0.5]
        assert matches[1].metadata == {"a": 1}
