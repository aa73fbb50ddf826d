"""
ElevenLabs Python Client - Voices Resource

This module provides methods for managing the voices in a user's library.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.exceptions import NotFoundError
from elevenlabs_client.resources.base import BaseResource
from elevenlabs_client.transport import FilePart

logger = logging.getLogger("elevenlabs_client.resources.voices")


class VoicesResource(BaseResource):
    """
    Resource for voices.

    Example:
        >>> voices = client.voices.list()
        >>> for voice in voices["voices"]:
        ...     print(voice["voice_id"], voice["name"])
        >>> # Clone a voice from samples
        >>> with open("sample1.mp3", "rb") as f:
        ...     voice = client.voices.create(
        ...         "My Voice",
        ...         files=[file_part(f, "sample1.mp3")],
        ...         labels={"accent": "british"},
        ...     )
    """

    def list(self) -> Dict[str, Any]:
        return self._get(Endpoints.VOICES)

    def get(self, voice_id: str) -> Dict[str, Any]:
        """
        Get a voice by ID.

        Raises:
            NotFoundError: If the voice doesn't exist
        """
        self._require(voice_id=voice_id)
        return self._get(self._path(Endpoints.VOICE, voice_id=voice_id))

    @staticmethod
    def _voice_fields(
        name: Optional[str],
        description: Optional[str],
        labels: Optional[Dict[str, Any]],
        files: Optional[List[FilePart]],
    ) -> Dict[str, Any]:
        fields: Dict[str, Any] = {"name": name, "description": description}
        for key, value in (labels or {}).items():
            fields[f"labels[{key}]"] = str(value)
        if files:
            fields["files"] = list(files)
        return fields

    def create(
        self,
        name: str,
        files: Optional[List[FilePart]] = None,
        description: Optional[str] = None,
        labels: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Create an instant voice clone.

        Args:
            name: Voice name
            files: Audio samples, built with ``file_part``; all are sent as ``files``
            description: Voice description
            labels: Labels such as accent or age, sent as ``labels[key]`` fields

        Returns:
            Response with ``voice_id``
        """
        self._require(name=name)
        fields = self._voice_fields(name, description or "", labels, files)
        return self._post_multipart(Endpoints.VOICE_ADD, fields)

    def edit(
        self,
        voice_id: str,
        name: Optional[str] = None,
        files: Optional[List[FilePart]] = None,
        description: Optional[str] = None,
        labels: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Edit a voice; samples in ``files`` are added to the existing ones."""
        self._require(voice_id=voice_id)
        fields = self._voice_fields(name, description, labels, files)
        return self._post_multipart(self._path(Endpoints.VOICE_EDIT, voice_id=voice_id), fields)

    def delete(self, voice_id: str) -> Dict[str, Any]:
        self._require(voice_id=voice_id)
        return self._delete(self._path(Endpoints.VOICE, voice_id=voice_id))

    def is_banned(self, voice_id: str) -> bool:
        """
        Whether a voice has been banned by safety controls.

        A voice that no longer exists is reported as not banned. Any other
        API error propagates.
        """
        try:
            voice = self.get(voice_id)
        except NotFoundError:
            logger.debug(f"Voice {voice_id} not found while checking ban status")
            return False
        return voice.get("safety_control") == "BAN"

    def is_active(self, voice_id: str) -> bool:
        """
        Whether a voice is present in the user's voice list.

        Returns False when the list endpoint answers 404. Any other API
        error propagates.
        """
        self._require(voice_id=voice_id)
        try:
            voices = self.list()
        except NotFoundError:
            return False
        return any(voice.get("voice_id") == voice_id for voice in voices.get("voices", []))
