"""
ElevenLabs Python Client - Audio Isolation Resource
"""

from __future__ import annotations

from typing import BinaryIO, Iterator, Optional, Union

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource
from elevenlabs_client.transport import file_part


class AudioIsolationResource(BaseResource):
    """
    Resource for removing background noise from recordings.

    Example:
        >>> with open("noisy.mp3", "rb") as f:
        ...     clean = client.audio_isolation.isolate(f, "noisy.mp3")
    """

    def isolate(
        self,
        file: Union[BinaryIO, bytes],
        filename: str,
        file_format: Optional[str] = None,
    ) -> bytes:
        """
        Isolate the voice in a recording.

        Args:
            file: Audio to clean up
            filename: Name of the audio file
            file_format: ``pcm_s16le_16`` for raw PCM input, else ``other``
        """
        self._require(file=file, filename=filename)
        fields = {"audio": file_part(file, filename), "file_format": file_format}
        return self._post_multipart_binary(Endpoints.AUDIO_ISOLATION, fields)

    def isolate_stream(
        self,
        file: Union[BinaryIO, bytes],
        filename: str,
        file_format: Optional[str] = None,
    ) -> Iterator[bytes]:
        """Isolate the voice in a recording, streaming the result."""
        self._require(file=file, filename=filename)
        fields = {"audio": file_part(file, filename), "file_format": file_format}
        return self._post_multipart_streaming(Endpoints.AUDIO_ISOLATION_STREAM, fields)
