"""
ElevenLabs Python Client - Transport

This module performs the HTTP exchanges for every endpoint wrapper. Each
operation either returns the success payload of a 2xx response or raises
exactly one typed error from ``elevenlabs_client.exceptions``.
"""

from __future__ import annotations

import json as jsonlib
import logging
import mimetypes
import os
from contextlib import contextmanager
from typing import Any, BinaryIO, Dict, Iterator, List, Mapping, NamedTuple, Optional, Tuple, Union

import httpx

from elevenlabs_client.config import API_KEY_HEADER, ClientConfig, Defaults
from elevenlabs_client.exceptions import (
    APIConnectionError,
    APITimeoutError,
    RateLimitError,
    error_for_status,
)
from elevenlabs_client.streaming import iter_json_lines

logger = logging.getLogger("elevenlabs_client.transport")

JSONResponse = Union[Dict[str, Any], List[Any], str]

MAX_ERROR_TEXT = 200

_MEDIA_TYPES = {
    ".mp4": "video/mp4",
    ".mov": "video/quicktime",
    ".avi": "video/x-msvideo",
    ".mkv": "video/x-matroska",
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".flac": "audio/flac",
    ".m4a": "audio/mp4",
}


class FilePart(NamedTuple):
    """A file field of a multipart/form-data body."""

    file: Union[BinaryIO, bytes]
    filename: str
    content_type: str

    def as_httpx(self) -> Tuple[str, Union[BinaryIO, bytes], str]:
        return (self.filename, self.file, self.content_type)


def guess_content_type(filename: str) -> str:
    """Guess a MIME type from the file extension."""
    ext = os.path.splitext(filename)[1].lower()
    if ext in _MEDIA_TYPES:
        return _MEDIA_TYPES[ext]
    guessed, _ = mimetypes.guess_type(filename)
    return guessed or "application/octet-stream"


def file_part(
    file: Union[BinaryIO, bytes],
    filename: str,
    content_type: Optional[str] = None,
) -> FilePart:
    """
    Describe a file to upload.

    Args:
        file: Open binary file object or raw bytes
        filename: Name sent to the API, including extension
        content_type: MIME type; guessed from ``filename`` when omitted

    Example:
        >>> with open("sample.mp3", "rb") as f:
        ...     client.voices.create(name="Narrator", files=[file_part(f, "sample.mp3")])
    """
    return FilePart(file, filename, content_type or guess_content_type(filename))


def _scalar(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def build_query(params: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Build query parameters.

    ``None`` values are dropped, booleans become ``true``/``false`` and
    sequences become repeated keys (``types=url&types=file``).
    """
    if not params:
        return None
    query: Dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            query[key] = [_scalar(item) for item in value if item is not None]
        else:
            query[key] = _scalar(value)
    return query or None


def _form_value(value: Any) -> Any:
    if isinstance(value, bool):
        return _scalar(value)
    if isinstance(value, dict):
        return jsonlib.dumps(value)
    if isinstance(value, (list, tuple)):
        if any(isinstance(item, (dict, list, tuple)) for item in value):
            return jsonlib.dumps(list(value))
        return [_form_value(item) for item in value]
    if isinstance(value, (str, bytes)):
        return value
    return str(value)


def build_form(
    fields: Mapping[str, Any],
) -> Tuple[Dict[str, Any], List[Tuple[str, Tuple[str, Any, str]]]]:
    """
    Split multipart fields into httpx ``data`` and ``files`` arguments.

    ``FilePart`` values (or lists of them, sent under the same field name)
    go to ``files``. Mappings and lists of mappings are JSON-encoded.
    ``None`` values are dropped.
    """
    data: Dict[str, Any] = {}
    files: List[Tuple[str, Tuple[str, Any, str]]] = []
    for name, value in fields.items():
        if value is None:
            continue
        if isinstance(value, FilePart):
            files.append((name, value.as_httpx()))
        elif (
            isinstance(value, (list, tuple))
            and value
            and all(isinstance(item, FilePart) for item in value)
        ):
            files.extend((name, item.as_httpx()) for item in value)
        else:
            data[name] = _form_value(value)
    return data, files


def extract_error_message(response: httpx.Response) -> Tuple[str, Any]:
    """
    Pull the most useful message out of an error response.

    Returns:
        Tuple of (message, body). The message is empty when the body
        carries nothing usable.
    """
    text = response.text
    if not text or not text.strip():
        return "", None

    try:
        body = response.json()
    except ValueError:
        message = text if len(text) <= MAX_ERROR_TEXT else f"{text[:MAX_ERROR_TEXT]}..."
        return message, text

    message: Any = None
    if isinstance(body, dict):
        for key in ("detail", "message", "error", "errors"):
            if body.get(key):
                message = body[key]
                break
    else:
        message = body

    if isinstance(message, list):
        message = message[0] if message else None
    if isinstance(message, dict):
        message = message.get("message") or message.get("msg") or str(message)

    return (str(message) if message else ""), body


class Transport:
    """
    Authenticated HTTP transport for the ElevenLabs API.

    Wraps a single ``httpx.Client``. The transport keeps no state between
    calls besides the underlying connection pool.

    Args:
        config: Client configuration
        http_client: Pre-built ``httpx.Client`` to use instead of creating one
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._config = config
        self._http = http_client or self._create_http_client()

    def _create_http_client(self) -> httpx.Client:
        """Create and configure the HTTP client."""
        headers = {
            API_KEY_HEADER: self._config.api_key,
            "Accept": "application/json",
            "User-Agent": self._config.user_agent,
        }

        return httpx.Client(
            base_url=self._config.base_url,
            headers=headers,
            timeout=httpx.Timeout(self._config.timeout),
            follow_redirects=True,
        )

    # Core exchange

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[List[Tuple[str, Tuple[str, Any, str]]]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Send one request and return the successful response.

        Raises:
            APIError: Or one of its subclasses for a non-2xx status
            APITimeoutError: If the request timed out
            APIConnectionError: If no response was received
        """
        query = build_query(params)
        logger.debug(f"Making {method} request to {path}")
        if query:
            logger.debug(f"Params: {query}")

        try:
            response = self._http.request(
                method=method,
                url=path,
                params=query,
                json=json,
                data=data or None,
                files=files or None,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            raise APITimeoutError(f"Request timed out: {e}") from e
        except httpx.RequestError as e:
            raise APIConnectionError(f"Request failed: {e}") from e

        logger.debug(f"Response status: {response.status_code}")
        self._raise_for_status(response)
        return response

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Raise the typed error for a non-2xx response."""
        if response.is_success:
            return

        message, body = extract_error_message(response)
        error_class = error_for_status(response.status_code)
        logger.debug(f"{error_class.__name__} ({response.status_code}): {message}")

        if error_class is RateLimitError:
            raise RateLimitError(
                message,
                status_code=response.status_code,
                body=body,
                retry_after=response.headers.get("Retry-After"),
            )
        raise error_class(message, status_code=response.status_code, body=body)

    @staticmethod
    def _parse(response: httpx.Response) -> JSONResponse:
        if response.status_code == 204 or not response.content:
            return {}
        if "json" in response.headers.get("content-type", ""):
            try:
                return response.json()
            except ValueError:
                logger.warning(f"Malformed JSON in {response.status_code} response; returning text")
        return response.text

    # JSON operations

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> JSONResponse:
        return self._parse(self.request("GET", path, params=params))

    def post(
        self,
        path: str,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> JSONResponse:
        return self._parse(self.request("POST", path, params=params, json=json))

    def put(self, path: str, json: Any = None) -> JSONResponse:
        return self._parse(self.request("PUT", path, json=json))

    def patch(
        self,
        path: str,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> JSONResponse:
        return self._parse(self.request("PATCH", path, params=params, json=json))

    def delete(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
    ) -> JSONResponse:
        return self._parse(self.request("DELETE", path, params=params, json=json))

    def post_multipart(
        self,
        path: str,
        fields: Mapping[str, Any],
        params: Optional[Mapping[str, Any]] = None,
    ) -> JSONResponse:
        """POST a multipart/form-data body and return the parsed JSON response."""
        data, files = build_form(fields)
        return self._parse(self.request("POST", path, params=params, data=data, files=files))

    # Binary operations

    def get_binary(self, path: str, params: Optional[Mapping[str, Any]] = None) -> bytes:
        """GET raw bytes (audio, PLS files). No JSON decoding is attempted."""
        return self.request("GET", path, params=params, headers={"Accept": "*/*"}).content

    def post_binary(
        self,
        path: str,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        accept: str = "*/*",
    ) -> bytes:
        return self.request(
            "POST", path, params=params, json=json, headers={"Accept": accept}
        ).content

    def post_multipart_binary(
        self,
        path: str,
        fields: Mapping[str, Any],
        params: Optional[Mapping[str, Any]] = None,
    ) -> bytes:
        data, files = build_form(fields)
        return self.request(
            "POST", path, params=params, data=data, files=files, headers={"Accept": "*/*"}
        ).content

    # Streaming operations

    @contextmanager
    def _open_stream(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> Iterator[httpx.Response]:
        """Open a streamed response, raising the typed error before any chunk is read."""
        query = build_query(params)
        logger.debug(f"Opening {method} stream to {path}")

        try:
            with self._http.stream(method, path, params=query, **kwargs) as response:
                logger.debug(f"Stream status: {response.status_code}")
                if not response.is_success:
                    response.read()
                    self._raise_for_status(response)
                yield response
        except httpx.TimeoutException as e:
            raise APITimeoutError(f"Stream timed out: {e}") from e
        except httpx.RequestError as e:
            raise APIConnectionError(f"Stream failed: {e}") from e

    def _iter_bytes(self, method: str, path: str, **kwargs: Any) -> Iterator[bytes]:
        with self._open_stream(method, path, **kwargs) as response:
            for chunk in response.iter_bytes():
                if chunk:
                    yield chunk

    def post_streaming(
        self,
        path: str,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        accept: str = Defaults.STREAM_ACCEPT,
    ) -> Iterator[bytes]:
        """
        POST and lazily yield response chunks in arrival order.

        The request is sent when iteration starts; the iterator is finite
        and cannot be restarted.
        """
        return self._iter_bytes(
            "POST", path, params=params, json=json, headers={"Accept": accept}
        )

    def get_streaming(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        accept: str = Defaults.STREAM_ACCEPT,
    ) -> Iterator[bytes]:
        return self._iter_bytes("GET", path, params=params, headers={"Accept": accept})

    def post_multipart_streaming(
        self,
        path: str,
        fields: Mapping[str, Any],
        params: Optional[Mapping[str, Any]] = None,
    ) -> Iterator[bytes]:
        data, files = build_form(fields)
        return self._iter_bytes(
            "POST",
            path,
            params=params,
            data=data or None,
            files=files or None,
            headers={"Accept": "*/*"},
        )

    def post_json_lines(
        self,
        path: str,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Iterator[Dict[str, Any]]:
        """POST and lazily yield one decoded object per newline-delimited JSON line."""
        return iter_json_lines(self._iter_lines("POST", path, params=params, json=json))

    def _iter_lines(self, method: str, path: str, **kwargs: Any) -> Iterator[str]:
        with self._open_stream(method, path, **kwargs) as response:
            yield from response.iter_lines()

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._http.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
