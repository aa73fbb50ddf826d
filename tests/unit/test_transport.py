"""Unit tests for the HTTP transport."""

import json
import logging

import httpx
import pytest

from elevenlabs_client import (
    APIConnectionError,
    APIError,
    APITimeoutError,
    AuthenticationError,
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    UnprocessableEntityError,
)
from elevenlabs_client.transport import build_form, build_query, file_part, guess_content_type


class TestRequestHeaders:
    """Tests for headers sent with every request."""

    def test_api_key_header(self, client, mock_api):
        """Test the API key is sent in the xi-api-key header."""
        route = mock_api.get("/v1/user").mock(return_value=httpx.Response(200, json={}))

        client.user.get()

        request = route.calls.last.request
        assert request.headers["xi-api-key"] == "test-api-key"
        assert request.headers["accept"] == "application/json"
        assert request.headers["user-agent"].startswith("elevenlabs-client-python")

    def test_get_sends_no_body(self, client, mock_api):
        """Test GET requests carry no body."""
        route = mock_api.get("/v1/models").mock(return_value=httpx.Response(200, json=[]))

        client.models.list()

        assert route.calls.last.request.content == b""

    def test_binary_accepts_anything(self, client, mock_api, audio_bytes):
        """Test binary endpoints ask for any content type."""
        route = mock_api.get("/v1/history/h1/audio").mock(
            return_value=httpx.Response(200, content=audio_bytes)
        )

        client.history.get_audio("h1")

        assert route.calls.last.request.headers["accept"] == "*/*"


class TestResponseParsing:
    """Tests for success payload handling."""

    def test_json_body_is_decoded(self, client, mock_api):
        """Test a JSON body is returned as Python data."""
        mock_api.get("/v1/convai/agents/agent_1").mock(
            return_value=httpx.Response(200, json={"agent_id": "agent_1", "name": "Support"})
        )

        assert client.agents.get("agent_1") == {"agent_id": "agent_1", "name": "Support"}

    def test_no_content_returns_empty_dict(self, client, mock_api):
        """Test a 204 response yields an empty mapping."""
        mock_api.delete("/v1/convai/agents/agent_1").mock(return_value=httpx.Response(204))

        assert client.agents.delete("agent_1") == {}

    def test_non_json_body_returns_text(self, client, mock_api):
        """Test a non-JSON 2xx body is returned as text."""
        mock_api.get("/v1/convai/knowledge-base/doc_1/content").mock(
            return_value=httpx.Response(200, text="<html>doc</html>", headers={"content-type": "text/html"})
        )

        assert client.knowledge_base.get_content("doc_1") == "<html>doc</html>"

    def test_malformed_json_body_returns_text(self, client, mock_api):
        """Test an undecodable JSON body is returned as text instead of raising."""
        mock_api.get("/v1/user").mock(
            return_value=httpx.Response(
                200, content=b"{not json", headers={"content-type": "application/json"}
            )
        )

        assert client.user.get() == "{not json"

    def test_binary_body_is_returned_untouched(self, client, mock_api, audio_bytes):
        """Test binary endpoints return the raw bytes."""
        mock_api.post("/v1/text-to-speech/voice_1").mock(
            return_value=httpx.Response(200, content=audio_bytes, headers={"content-type": "audio/mpeg"})
        )

        assert client.text_to_speech.convert("voice_1", "Hello") == audio_bytes


class TestErrorMapping:
    """Tests for mapping non-2xx statuses to typed errors."""

    @pytest.mark.parametrize(
        "status_code,error_class",
        [
            (400, BadRequestError),
            (401, AuthenticationError),
            (403, ForbiddenError),
            (404, NotFoundError),
            (422, UnprocessableEntityError),
            (429, RateLimitError),
            (409, APIError),
            (500, APIError),
            (503, APIError),
        ],
    )
    def test_status_maps_to_error(self, client, mock_api, status_code, error_class):
        """Test each status raises its error class."""
        mock_api.get("/v1/user").mock(
            return_value=httpx.Response(status_code, json={"detail": "boom"})
        )

        with pytest.raises(error_class) as exc_info:
            client.user.get()

        assert type(exc_info.value) is error_class
        assert exc_info.value.status_code == status_code
        assert exc_info.value.message == "boom"

    def test_not_found_uses_detail_message(self, client, mock_api):
        """Test the nested detail message is surfaced."""
        mock_api.get("/v1/convai/agents/missing").mock(
            return_value=httpx.Response(
                404,
                json={"detail": {"status": "agent_not_found", "message": "Agent not found"}},
            )
        )

        with pytest.raises(NotFoundError) as exc_info:
            client.agents.get("missing")

        assert str(exc_info.value) == "Agent not found"
        assert exc_info.value.body["detail"]["status"] == "agent_not_found"

    def test_validation_error_uses_first_entry(self, client, mock_api):
        """Test the first validation entry becomes the message."""
        mock_api.post("/v1/convai/agents/create").mock(
            return_value=httpx.Response(
                422,
                json={"detail": [{"loc": ["body", "conversation_config"], "msg": "field required"}]},
            )
        )

        with pytest.raises(UnprocessableEntityError) as exc_info:
            client.agents.create(conversation_config={"agent": {}})

        assert exc_info.value.message == "field required"

    def test_message_key_is_used(self, client, mock_api):
        """Test a top-level message key is used when detail is absent."""
        mock_api.get("/v1/user").mock(
            return_value=httpx.Response(400, json={"message": "Bad voice settings"})
        )

        with pytest.raises(BadRequestError, match="Bad voice settings"):
            client.user.get()

    def test_plain_text_error_is_truncated(self, client, mock_api):
        """Test long non-JSON error bodies are cut down."""
        mock_api.get("/v1/user").mock(
            return_value=httpx.Response(502, text="x" * 500, headers={"content-type": "text/plain"})
        )

        with pytest.raises(APIError) as exc_info:
            client.user.get()

        assert exc_info.value.message == "x" * 200 + "..."
        assert exc_info.value.body == "x" * 500

    def test_empty_error_body_uses_default_message(self, client, mock_api):
        """Test an empty body falls back to the class message."""
        mock_api.get("/v1/user").mock(return_value=httpx.Response(503))

        with pytest.raises(APIError) as exc_info:
            client.user.get()

        assert exc_info.value.message == "API request failed with status 503"
        assert exc_info.value.body is None

    def test_empty_not_found_body(self, client, mock_api):
        """Test a bare 404 uses the not found message."""
        mock_api.get("/v1/user").mock(return_value=httpx.Response(404))

        with pytest.raises(NotFoundError, match="Resource not found"):
            client.user.get()

    def test_rate_limit_retry_after(self, client, mock_api):
        """Test Retry-After is exposed on rate limit errors."""
        mock_api.get("/v1/user").mock(
            return_value=httpx.Response(
                429, json={"detail": "Too many requests"}, headers={"Retry-After": "30"}
            )
        )

        with pytest.raises(RateLimitError) as exc_info:
            client.user.get()

        assert exc_info.value.retry_after == 30
        assert "Retry after 30 seconds" in str(exc_info.value)

    def test_subclasses_catchable_as_api_error(self, client, mock_api):
        """Test narrow errors can be caught broadly."""
        mock_api.get("/v1/user").mock(return_value=httpx.Response(401, json={}))

        with pytest.raises(APIError):
            client.user.get()


class TestNetworkFailures:
    """Tests for failures where no response arrives."""

    def test_connect_error(self, client, mock_api):
        """Test connection failures are wrapped."""
        mock_api.get("/v1/user").mock(side_effect=httpx.ConnectError)

        with pytest.raises(APIConnectionError) as exc_info:
            client.user.get()

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout(self, client, mock_api):
        """Test timeouts are wrapped."""
        mock_api.get("/v1/user").mock(side_effect=httpx.ReadTimeout)

        with pytest.raises(APITimeoutError):
            client.user.get()

    def test_timeout_is_a_connection_error(self, client, mock_api):
        """Test timeouts can be caught as connection errors."""
        mock_api.get("/v1/user").mock(side_effect=httpx.ConnectTimeout)

        with pytest.raises(APIConnectionError):
            client.user.get()


class TestStreaming:
    """Tests for streamed responses."""

    def test_stream_is_lazy(self, client, mock_api, audio_bytes):
        """Test nothing is sent until iteration starts."""
        route = mock_api.post("/v1/text-to-speech/voice_1/stream").mock(
            return_value=httpx.Response(200, content=audio_bytes)
        )

        chunks = client.text_to_speech.stream("voice_1", "Hello")
        assert route.call_count == 0

        assert b"".join(chunks) == audio_bytes
        assert route.call_count == 1

    def test_stream_headers(self, client, mock_api, audio_bytes):
        """Test audio streams ask for audio/mpeg."""
        route = mock_api.post("/v1/text-to-speech/voice_1/stream").mock(
            return_value=httpx.Response(200, content=audio_bytes)
        )

        list(client.text_to_speech.stream("voice_1", "Hello"))

        assert route.calls.last.request.headers["accept"] == "audio/mpeg"

    def test_stream_error_raised_before_first_chunk(self, client, mock_api):
        """Test an error status raises instead of yielding."""
        mock_api.post("/v1/text-to-speech/voice_1/stream").mock(
            return_value=httpx.Response(401, json={"detail": {"message": "Invalid API key"}})
        )

        stream = client.text_to_speech.stream("voice_1", "Hello")

        with pytest.raises(AuthenticationError, match="Invalid API key"):
            next(iter(stream))

    def test_stream_connection_error(self, client, mock_api):
        """Test network failures during streaming are wrapped."""
        mock_api.post("/v1/text-to-speech/voice_1/stream").mock(side_effect=httpx.ConnectError)

        with pytest.raises(APIConnectionError):
            list(client.text_to_speech.stream("voice_1", "Hello"))

    def test_json_lines_stream(self, client, mock_api):
        """Test newline-delimited frames are decoded one by one."""
        body = (
            b'{"audio_base64": "YWJj", "alignment": null}\n'
            b"\n"
            b'{"audio_base64": "ZGVm", "alignment": null}\n'
        )
        mock_api.post("/v1/text-to-speech/voice_1/stream/with-timestamps").mock(
            return_value=httpx.Response(200, content=body)
        )

        frames = list(client.text_to_speech.stream_with_timestamps("voice_1", "Hello"))

        assert [frame["audio_base64"] for frame in frames] == ["YWJj", "ZGVm"]

    def test_json_lines_skips_malformed(self, client, mock_api, caplog):
        """Test malformed frames are logged and skipped."""
        body = b'{"audio_base64": "YWJj"}\nnot-json\n{"audio_base64": "ZGVm"}\n'
        mock_api.post("/v1/text-to-speech/voice_1/stream/with-timestamps").mock(
            return_value=httpx.Response(200, content=body)
        )

        with caplog.at_level(logging.WARNING, logger="elevenlabs_client.streaming"):
            frames = list(client.text_to_speech.stream_with_timestamps("voice_1", "Hello"))

        assert len(frames) == 2
        assert "Skipping malformed stream line" in caplog.text


class TestQueryBuilding:
    """Tests for query string encoding."""

    def test_none_values_dropped(self):
        """Test None values are not sent."""
        assert build_query({"a": None, "b": 1}) == {"b": 1}

    def test_all_none_gives_no_query(self):
        """Test an all-None mapping yields no query at all."""
        assert build_query({"a": None}) is None
        assert build_query(None) is None

    def test_booleans_lowercased(self):
        """Test booleans are sent as true/false."""
        assert build_query({"force": True, "owned": False}) == {"force": "true", "owned": "false"}

    def test_lists_become_repeated_keys(self, client, mock_api):
        """Test list values are sent as repeated keys."""
        route = mock_api.get("/v1/convai/knowledge-base").mock(
            return_value=httpx.Response(200, json={"documents": []})
        )

        client.knowledge_base.list(types=["url", "file"])

        assert route.calls.last.request.url.query == b"types=url&types=file"


class TestMultipart:
    """Tests for multipart/form-data bodies."""

    def test_build_form_splits_files(self):
        """Test file parts and plain fields are separated."""
        part = file_part(b"data", "clip.mp3")

        data, files = build_form({"name": "Clip", "file": part, "skip": None, "flag": True})

        assert data == {"name": "Clip", "flag": "true"}
        assert files == [("file", ("clip.mp3", b"data", "audio/mpeg"))]

    def test_build_form_json_encodes_mappings(self):
        """Test nested values are JSON-encoded."""
        data, _ = build_form({"metadata": {"a": 1}, "rules": [{"word": "x"}], "ids": ["a", "b"]})

        assert json.loads(data["metadata"]) == {"a": 1}
        assert json.loads(data["rules"]) == [{"word": "x"}]
        assert data["ids"] == ["a", "b"]

    def test_build_form_list_of_files(self):
        """Test several files share one field name."""
        parts = [file_part(b"1", "a.wav"), file_part(b"2", "b.wav")]

        _, files = build_form({"files": parts})

        assert [name for name, _ in files] == ["files", "files"]

    def test_form_and_query_booleans_agree(self):
        """Test form fields encode booleans the same way as query parameters."""
        data, _ = build_form({"enabled": True, "flags": [False, True]})
        query = build_query({"enabled": True, "flags": [False, True]})

        assert data == query == {"enabled": "true", "flags": ["false", "true"]}

    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("movie.mp4", "video/mp4"),
            ("movie.MOV", "video/quicktime"),
            ("clip.avi", "video/x-msvideo"),
            ("clip.mkv", "video/x-matroska"),
            ("song.mp3", "audio/mpeg"),
            ("take.wav", "audio/wav"),
            ("take.flac", "audio/flac"),
            ("memo.m4a", "audio/mp4"),
            ("noext", "application/octet-stream"),
        ],
    )
    def test_guess_content_type(self, filename, expected):
        """Test content types follow the file extension."""
        assert guess_content_type(filename) == expected

    def test_explicit_content_type_wins(self):
        """Test an explicit content type overrides the guess."""
        assert file_part(b"", "clip.mp3", "audio/ogg").content_type == "audio/ogg"

    def test_multipart_request(self, client, mock_api):
        """Test an upload is sent as multipart/form-data."""
        route = mock_api.post("/v1/convai/knowledge-base/file").mock(
            return_value=httpx.Response(200, json={"id": "doc_1"})
        )

        client.knowledge_base.create_from_file(b"%PDF-1.4", "manual.pdf", name="Manual")

        request = route.calls.last.request
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'name="file"; filename="manual.pdf"' in request.content
        assert b"Content-Type: application/pdf" in request.content
        assert b'name="name"' in request.content
