"""
ElevenLabs Python Client - Music Resource

This module provides methods for composing music from a prompt or a
composition plan.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional

from elevenlabs_client.config import Defaults, Endpoints
from elevenlabs_client.resources.base import BaseResource, compact


class MusicResource(BaseResource):
    """
    Resource for music generation.

    Either ``prompt`` or ``composition_plan`` describes the track.

    Example:
        >>> plan = client.music.create_plan(prompt="Upbeat synthwave", music_length_ms=30000)
        >>> audio = client.music.compose(composition_plan=plan)
    """

    @staticmethod
    def _body(
        prompt: Optional[str],
        composition_plan: Optional[Dict[str, Any]],
        music_length_ms: Optional[int],
        model_id: str,
    ) -> Dict[str, Any]:
        return compact({
            "prompt": prompt,
            "composition_plan": composition_plan,
            "music_length_ms": music_length_ms,
            "model_id": model_id,
        })

    def compose(
        self,
        prompt: Optional[str] = None,
        composition_plan: Optional[Dict[str, Any]] = None,
        music_length_ms: Optional[int] = None,
        model_id: str = Defaults.MUSIC_MODEL_ID,
        output_format: Optional[str] = None,
    ) -> bytes:
        """
        Compose a track.

        Args:
            prompt: Text description of the music
            composition_plan: Detailed plan, e.g. from ``create_plan``
            music_length_ms: Length of the track
            model_id: Music model
            output_format: Output audio format

        Returns:
            Audio bytes
        """
        return self._post_binary(
            Endpoints.MUSIC,
            json=self._body(prompt, composition_plan, music_length_ms, model_id),
            params={"output_format": output_format},
        )

    def compose_stream(
        self,
        prompt: Optional[str] = None,
        composition_plan: Optional[Dict[str, Any]] = None,
        music_length_ms: Optional[int] = None,
        model_id: str = Defaults.MUSIC_MODEL_ID,
        output_format: Optional[str] = None,
    ) -> Iterator[bytes]:
        """Compose a track, streaming the audio as it is generated."""
        return self._post_streaming(
            Endpoints.MUSIC_STREAM,
            json=self._body(prompt, composition_plan, music_length_ms, model_id),
            params={"output_format": output_format},
        )

    def compose_detailed(
        self,
        prompt: Optional[str] = None,
        composition_plan: Optional[Dict[str, Any]] = None,
        music_length_ms: Optional[int] = None,
        model_id: str = Defaults.MUSIC_MODEL_ID,
        output_format: Optional[str] = None,
    ) -> bytes:
        """
        Compose a track and return its metadata along with the audio.

        Returns:
            The raw ``multipart/mixed`` response body: a JSON part with the
            composition plan and song metadata, followed by the audio part
        """
        return self._post_binary(
            Endpoints.MUSIC_DETAILED,
            json=self._body(prompt, composition_plan, music_length_ms, model_id),
            params={"output_format": output_format},
            accept="multipart/mixed",
        )

    def create_plan(
        self,
        prompt: Optional[str] = None,
        music_length_ms: Optional[int] = None,
        source_composition_plan: Optional[Dict[str, Any]] = None,
        model_id: str = Defaults.MUSIC_MODEL_ID,
    ) -> Dict[str, Any]:
        """Generate a composition plan (sections, styles, lyrics) from a prompt."""
        body = compact({
            "prompt": prompt,
            "music_length_ms": music_length_ms,
            "source_composition_plan": source_composition_plan,
            "model_id": model_id,
        })
        return self._post(Endpoints.MUSIC_PLAN, json=body)
