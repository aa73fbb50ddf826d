"""
ElevenLabs Python Client - Text to Speech Resource

This module provides methods for synthesizing speech from text, either
as a complete audio file or as a stream of chunks.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional

from elevenlabs_client.config import Defaults, Endpoints
from elevenlabs_client.resources.base import BaseResource, compact


class TextToSpeechResource(BaseResource):
    """
    Resource for text-to-speech synthesis.

    Example:
        >>> audio = client.text_to_speech.convert("21m00Tcm4TlvDq8ikWAM", "Hello world")
        >>> with open("hello.mp3", "wb") as f:
        ...     f.write(audio)
        >>> # Stream audio as it is generated
        >>> for chunk in client.text_to_speech.stream("21m00Tcm4TlvDq8ikWAM", "Hello world"):
        ...     player.feed(chunk)
    """

    @staticmethod
    def _query(
        enable_logging: Optional[bool],
        optimize_streaming_latency: Optional[int],
        output_format: Optional[str],
    ) -> Dict[str, Any]:
        return {
            "enable_logging": enable_logging,
            "optimize_streaming_latency": optimize_streaming_latency,
            "output_format": output_format,
        }

    def convert(
        self,
        voice_id: str,
        text: str,
        model_id: Optional[str] = None,
        voice_settings: Optional[Dict[str, Any]] = None,
        enable_logging: Optional[bool] = None,
        optimize_streaming_latency: Optional[int] = None,
        output_format: Optional[str] = None,
        **options: Any,
    ) -> bytes:
        """
        Convert text to speech.

        Args:
            voice_id: Voice to speak with
            text: Text to synthesize
            model_id: Model identifier (e.g. ``eleven_multilingual_v2``)
            voice_settings: Stability, similarity boost, style, speaker boost
            enable_logging: Set to False for zero-retention mode
            optimize_streaming_latency: Latency optimization level (0-4)
            output_format: Codec, sample rate and bitrate (e.g. ``mp3_44100_128``)
            **options: Extra body fields (``seed``, ``language_code``, ...)

        Returns:
            Audio bytes
        """
        self._require(voice_id=voice_id, text=text)
        body = compact({
            "text": text,
            "model_id": model_id,
            "voice_settings": voice_settings,
            **options,
        })
        return self._post_binary(
            self._path(Endpoints.TEXT_TO_SPEECH, voice_id=voice_id),
            json=body,
            params=self._query(enable_logging, optimize_streaming_latency, output_format),
        )

    def convert_with_timestamps(
        self,
        voice_id: str,
        text: str,
        model_id: Optional[str] = None,
        voice_settings: Optional[Dict[str, Any]] = None,
        enable_logging: Optional[bool] = None,
        optimize_streaming_latency: Optional[int] = None,
        output_format: Optional[str] = None,
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Convert text to speech with character-level timing.

        Returns:
            Response with ``audio_base64``, ``alignment`` and ``normalized_alignment``
        """
        self._require(voice_id=voice_id, text=text)
        body = compact({
            "text": text,
            "model_id": model_id,
            "voice_settings": voice_settings,
            **options,
        })
        return self._post(
            self._path(Endpoints.TEXT_TO_SPEECH_WITH_TIMESTAMPS, voice_id=voice_id),
            json=body,
            params=self._query(enable_logging, optimize_streaming_latency, output_format),
        )

    def stream(
        self,
        voice_id: str,
        text: str,
        model_id: str = Defaults.TTS_MODEL_ID,
        voice_settings: Optional[Dict[str, Any]] = None,
        output_format: str = Defaults.OUTPUT_FORMAT,
        enable_logging: Optional[bool] = None,
        optimize_streaming_latency: Optional[int] = None,
        **options: Any,
    ) -> Iterator[bytes]:
        """
        Stream synthesized audio.

        The request is sent when iteration starts. Chunks are yielded in
        arrival order; an API error is raised before the first chunk.

        Example:
            >>> with open("out.mp3", "wb") as f:
            ...     for chunk in client.text_to_speech.stream("voice_id", "Long text..."):
            ...         f.write(chunk)
        """
        self._require(voice_id=voice_id, text=text)
        body = compact({
            "text": text,
            "model_id": model_id,
            "voice_settings": voice_settings,
            **options,
        })
        return self._post_streaming(
            self._path(Endpoints.TEXT_TO_SPEECH_STREAM, voice_id=voice_id),
            json=body,
            params=self._query(enable_logging, optimize_streaming_latency, output_format),
        )

    def stream_with_timestamps(
        self,
        voice_id: str,
        text: str,
        model_id: Optional[str] = None,
        voice_settings: Optional[Dict[str, Any]] = None,
        enable_logging: Optional[bool] = None,
        optimize_streaming_latency: Optional[int] = None,
        output_format: Optional[str] = None,
        **options: Any,
    ) -> Iterator[Dict[str, Any]]:
        """
        Stream synthesized audio with timing information.

        Yields:
            One decoded frame per line, each carrying ``audio_base64`` and
            ``alignment``
        """
        self._require(voice_id=voice_id, text=text)
        body = compact({
            "text": text,
            "model_id": model_id,
            "voice_settings": voice_settings,
            **options,
        })
        return self._post_json_lines(
            self._path(Endpoints.TEXT_TO_SPEECH_STREAM_WITH_TIMESTAMPS, voice_id=voice_id),
            json=body,
            params=self._query(enable_logging, optimize_streaming_latency, output_format),
        )
