"""Tests for the vector store uploaders."""

import dataclasses
from unittest.mock import MagicMock, patch

import pytest
import requests

from ragprep.config import BackendKind, PineconeSettings, QdrantSettings
from ragprep.errors import UploadError
from ragprep.service.vectorstores import (
    PineconeUploader,
    QdrantUploader,
    get_vector_store,
    send_json,
)


class TestPineconeUploader:
    """Tests for PineconeUploader."""

    def setup_method(self):
        """Set up an uploader for a test index."""
        self.uploader = PineconeUploader(
            PineconeSettings(api_key="pc-key", environment="us-east1-gcp", index_name="support")
        )

    def test_maps_record(self, create_test_chunk):
        """Test the documented chunk to vector mapping."""
        records = self.uploader.to_records([create_test_chunk()])

        assert records == [
            {
                "id": "chunk_1",
                "values": [0.1, 0.2],
                "metadata": {
                    "content": "hello",
                    "source": "S",
                    "category": "C",
                    "filename": "f.txt",
                    "chunkIndex": 0,
                },
            }
        ]

    def test_upsert_url(self):
        """Test that the host is derived from index and environment."""
        assert (
            self.uploader.upsert_url
            == "https://support-us-east1-gcp.svc.us-east1-gcp.pinecone.io/vectors/upsert"
        )

    @patch("ragprep.service.vectorstores.pinecone.send_json")
    def test_upload_sends_single_upsert(self, mock_send, create_test_chunk):
        """Test that all vectors are sent in one POST with the Api-Key header."""
        mock_send.return_value = {"upsertedCount": 2}
        chunks = [create_test_chunk("chunk_1"), create_test_chunk("chunk_2", chunk_index=1)]

        result = self.uploader.upload(chunks)

        assert result == {"upsertedCount": 2}
        mock_send.assert_called_once()
        method, url, body = mock_send.call_args.args
        assert method == "POST"
        assert url == self.uploader.upsert_url
        assert [vector["id"] for vector in body["vectors"]] == ["chunk_1", "chunk_2"]
        assert mock_send.call_args.kwargs["headers"] == {"Api-Key": "pc-key"}


class TestQdrantUploader:
    """Tests for QdrantUploader."""

    def setup_method(self):
        """Set up an uploader for a local collection."""
        self.settings = QdrantSettings(
            url="http://localhost:6333", api_key="qd-key", collection_name="support"
        )
        self.uploader = QdrantUploader(self.settings)

    def test_maps_points_with_positional_ids(self, create_test_chunk):
        """Test that points are numbered from 1 and keep the chunk id in the payload."""
        chunks = [
            create_test_chunk("chunk_7", text="first"),
            create_test_chunk("chunk_8", text="second", chunk_index=1, embedding=[0.3, 0.4]),
        ]

        points = self.uploader.to_records(chunks)

        assert [point["id"] for point in points] == [1, 2]
        assert points[1] == {
            "id": 2,
            "vector": [0.3, 0.4],
            "payload": {
                "content": "second",
                "source": "S",
                "category": "C",
                "filename": "f.txt",
                "chunkIndex": 1,
                "originalId": "chunk_8",
            },
        }

    @patch("ragprep.service.vectorstores.qdrant.send_json")
    def test_upload_puts_points(self, mock_send, create_test_chunk):
        """Test that points are sent in one PUT with the api-key header."""
        mock_send.return_value = {"status": "ok"}

        self.uploader.upload([create_test_chunk()])

        method, url, body = mock_send.call_args.args
        assert method == "PUT"
        assert url == "http://localhost:6333/collections/support/points"
        assert len(body["points"]) == 1
        assert mock_send.call_args.kwargs["headers"] == {"api-key": "qd-key"}

    @patch("ragprep.service.vectorstores.qdrant.send_json")
    def test_upload_without_api_key(self, mock_send, create_test_chunk):
        """Test that no api-key header is sent when no key is configured."""
        uploader = QdrantUploader(dataclasses.replace(self.settings, api_key=None))

        uploader.upload([create_test_chunk()])

        assert mock_send.call_args.kwargs["headers"] is None


class TestSendJson:
    """Tests for the shared send_json helper."""

    @patch("ragprep.service.vectorstores.base.requests.request")
    def test_returns_parsed_json(self, mock_request):
        """Test that the decoded body is returned."""
        mock_request.return_value.json.return_value = {"ok": True}

        result = send_json("PUT", "http://example.com/points", {"points": []}, headers={"a": "b"})

        assert result == {"ok": True}
        mock_request.assert_called_once_with(
            "PUT", "http://example.com/points", json={"points": []}, headers={"a": "b"}, timeout=None
        )

    @patch("ragprep.service.vectorstores.base.requests.request")
    def test_transport_failure(self, mock_request):
        """Test that network errors become UploadError."""
        mock_request.side_effect = requests.ConnectionError("no route to host")

        with pytest.raises(UploadError, match="no route to host"):
            send_json("POST", "http://example.com", {})

    @patch("ragprep.service.vectorstores.base.requests.request")
    def test_http_error_status(self, mock_request):
        """Test that an HTTP error status becomes UploadError."""
        mock_request.return_value.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized")

        with pytest.raises(UploadError, match="401"):
            send_json("POST", "http://example.com", {})

    @patch("ragprep.service.vectorstores.base.requests.request")
    def test_unparseable_response(self, mock_request):
        """Test that a non-JSON body becomes UploadError."""
        mock_request.return_value.json.side_effect = ValueError("Expecting value")

        with pytest.raises(UploadError, match="non-JSON"):
            send_json("POST", "http://example.com", {})


class TestGetVectorStore:
    """Tests for get_vector_store factory."""

    def test_pinecone(self, config):
        """Test that the pinecone tag yields a PineconeUploader."""
        uploader = get_vector_store(config.vector_store)

        assert isinstance(uploader, PineconeUploader)
        assert uploader.settings is config.vector_store.pinecone

    def test_qdrant(self, config):
        """Test that the qdrant tag yields a QdrantUploader."""
        settings = dataclasses.replace(config.vector_store, backend=BackendKind.QDRANT)

        uploader = get_vector_store(settings)

        assert isinstance(uploader, QdrantUploader)
        assert uploader.settings is config.vector_store.qdrant

    def test_unsupported_backend(self, config):
        """Test that an unknown backend raises ValueError."""
        settings = dataclasses.replace(config.vector_store, backend="faiss")

        with pytest.raises(ValueError, match="Unsupported vector store backend"):
            get_vector_store(settings)
