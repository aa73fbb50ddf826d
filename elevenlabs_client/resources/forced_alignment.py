"""
ElevenLabs Python Client - Forced Alignment Resource
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, Optional, Union

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource
from elevenlabs_client.transport import file_part


class ForcedAlignmentResource(BaseResource):
    """Resource for aligning a known transcript with its audio."""

    def create(
        self,
        file: Union[BinaryIO, bytes],
        filename: str,
        text: str,
        enabled_spooled_file: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Align text with audio.

        Args:
            file: The recording
            filename: Name of the recording
            text: Transcript spoken in the recording
            enabled_spooled_file: Stream large uploads to disk server-side

        Returns:
            Response with per-character and per-word timings

        Example:
            >>> with open("speech.mp3", "rb") as f:
            ...     result = client.forced_alignment.create(f, "speech.mp3", "Hello world")
            >>> for word in result["words"]:
            ...     print(word["text"], word["start"], word["end"])
        """
        self._require(file=file, filename=filename, text=text)
        fields = {
            "file": file_part(file, filename),
            "text": text,
            "enabled_spooled_file": enabled_spooled_file,
        }
        return self._post_multipart(Endpoints.FORCED_ALIGNMENT, fields)
