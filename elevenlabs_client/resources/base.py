"""
ElevenLabs Python Client - Base Resource

This module contains the base class for all endpoint wrappers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterator, Mapping, Optional
from urllib.parse import quote

from elevenlabs_client.config import Defaults
from elevenlabs_client.exceptions import MissingParameterError

if TYPE_CHECKING:
    from elevenlabs_client.client import ElevenLabsClient
    from elevenlabs_client.transport import Transport


def is_missing(value: Any) -> bool:
    """
    Return True when ``value`` does not count as a supplied argument.

    ``None``, blank strings and empty collections are missing. ``False``
    and ``0`` are present.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def compact(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop ``None`` values from a mapping."""
    return {key: value for key, value in values.items() if value is not None}


class BaseResource:
    """
    Base class for all endpoint wrappers.

    Each wrapper method validates its required arguments locally, builds
    the path, query and body, and hands the request to the client's
    transport. Results are returned exactly as the transport produced them.
    """

    def __init__(self, client: "ElevenLabsClient") -> None:
        """
        Initialize the resource.

        Args:
            client: The ElevenLabsClient instance
        """
        self._client = client

    @property
    def _transport(self) -> "Transport":
        return self._client.transport

    @staticmethod
    def _require(**values: Any) -> None:
        """Raise ``MissingParameterError`` for the first missing argument."""
        for name, value in values.items():
            if is_missing(value):
                raise MissingParameterError(name)

    @staticmethod
    def _path(template: str, **ids: Any) -> str:
        """Interpolate identifiers into an endpoint template, percent-encoding each one."""
        return template.format(**{key: quote(str(value), safe="") for key, value in ids.items()})

    def _get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Make a GET request."""
        return self._transport.get(path, params=params)

    def _post(
        self,
        path: str,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Make a POST request."""
        return self._transport.post(path, json=json, params=params)

    def _put(self, path: str, json: Any = None) -> Any:
        """Make a PUT request."""
        return self._transport.put(path, json=json)

    def _patch(
        self,
        path: str,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Make a PATCH request."""
        return self._transport.patch(path, json=json, params=params)

    def _delete(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        """Make a DELETE request."""
        return self._transport.delete(path, params=params, json=json)

    def _post_multipart(
        self,
        path: str,
        fields: Mapping[str, Any],
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return self._transport.post_multipart(path, fields, params=params)

    def _get_binary(self, path: str, params: Optional[Mapping[str, Any]] = None) -> bytes:
        return self._transport.get_binary(path, params=params)

    def _post_binary(
        self,
        path: str,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        accept: str = "*/*",
    ) -> bytes:
        return self._transport.post_binary(path, json=json, params=params, accept=accept)

    def _post_multipart_binary(
        self,
        path: str,
        fields: Mapping[str, Any],
        params: Optional[Mapping[str, Any]] = None,
    ) -> bytes:
        return self._transport.post_multipart_binary(path, fields, params=params)

    def _post_streaming(
        self,
        path: str,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        accept: str = Defaults.STREAM_ACCEPT,
    ) -> Iterator[bytes]:
        return self._transport.post_streaming(path, json=json, params=params, accept=accept)

    def _get_streaming(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Iterator[bytes]:
        return self._transport.get_streaming(path, params=params)

    def _post_multipart_streaming(
        self,
        path: str,
        fields: Mapping[str, Any],
        params: Optional[Mapping[str, Any]] = None,
    ) -> Iterator[bytes]:
        return self._transport.post_multipart_streaming(path, fields, params=params)

    def _post_json_lines(
        self,
        path: str,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Iterator[Dict[str, Any]]:
        return self._transport.post_json_lines(path, json=json, params=params)
