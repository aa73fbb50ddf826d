"""
ElevenLabs Python Client - Speech to Speech Resource

This module provides the voice changer: it re-voices a recording while
keeping its timing and delivery.
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, Iterator, Optional, Union

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource
from elevenlabs_client.transport import file_part


class SpeechToSpeechResource(BaseResource):
    """
    Resource for speech-to-speech conversion.

    Example:
        >>> with open("me.wav", "rb") as f:
        ...     audio = client.speech_to_speech.convert("voice_id", f, "me.wav",
        ...                                             remove_background_noise=True)
    """

    def _fields(
        self,
        voice_id: str,
        file: Union[BinaryIO, bytes],
        filename: str,
        model_id: Optional[str],
        voice_settings: Optional[Dict[str, Any]],
        seed: Optional[int],
        remove_background_noise: Optional[bool],
        file_format: Optional[str],
    ) -> Dict[str, Any]:
        self._require(voice_id=voice_id, file=file, filename=filename)
        return {
            "audio": file_part(file, filename),
            "model_id": model_id,
            "voice_settings": voice_settings,
            "seed": seed,
            "remove_background_noise": remove_background_noise,
            "file_format": file_format,
        }

    def convert(
        self,
        voice_id: str,
        file: Union[BinaryIO, bytes],
        filename: str,
        model_id: Optional[str] = None,
        voice_settings: Optional[Dict[str, Any]] = None,
        seed: Optional[int] = None,
        remove_background_noise: Optional[bool] = None,
        file_format: Optional[str] = None,
        enable_logging: Optional[bool] = None,
        optimize_streaming_latency: Optional[int] = None,
        output_format: Optional[str] = None,
    ) -> bytes:
        """
        Re-voice a recording.

        Args:
            voice_id: Target voice
            file: Source recording
            filename: Name of the source file
            model_id: Model identifier (e.g. ``eleven_multilingual_sts_v2``)
            voice_settings: Voice settings, sent JSON-encoded
            seed: Seed for deterministic sampling
            remove_background_noise: Strip background noise from the source first
            file_format: Input format hint
            enable_logging: Set to False for zero-retention mode
            optimize_streaming_latency: Latency optimization level (0-4)
            output_format: Output audio format

        Returns:
            Audio bytes
        """
        fields = self._fields(
            voice_id, file, filename, model_id, voice_settings, seed,
            remove_background_noise, file_format,
        )
        params = {
            "enable_logging": enable_logging,
            "optimize_streaming_latency": optimize_streaming_latency,
            "output_format": output_format,
        }
        return self._post_multipart_binary(
            self._path(Endpoints.SPEECH_TO_SPEECH, voice_id=voice_id), fields, params=params
        )

    def convert_stream(
        self,
        voice_id: str,
        file: Union[BinaryIO, bytes],
        filename: str,
        model_id: Optional[str] = None,
        voice_settings: Optional[Dict[str, Any]] = None,
        seed: Optional[int] = None,
        remove_background_noise: Optional[bool] = None,
        file_format: Optional[str] = None,
        enable_logging: Optional[bool] = None,
        optimize_streaming_latency: Optional[int] = None,
        output_format: Optional[str] = None,
    ) -> Iterator[bytes]:
        """Re-voice a recording, streaming the audio. Arguments match ``convert``."""
        fields = self._fields(
            voice_id, file, filename, model_id, voice_settings, seed,
            remove_background_noise, file_format,
        )
        params = {
            "enable_logging": enable_logging,
            "optimize_streaming_latency": optimize_streaming_latency,
            "output_format": output_format,
        }
        return self._post_multipart_streaming(
            self._path(Endpoints.SPEECH_TO_SPEECH_STREAM, voice_id=voice_id), fields, params=params
        )
