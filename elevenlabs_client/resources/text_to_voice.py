"""
ElevenLabs Python Client - Text to Voice Resource

This module provides voice design: generating voice previews from a
description and saving one of them as a voice.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, compact


class TextToVoiceResource(BaseResource):
    """
    Resource for voice design.

    Example:
        >>> previews = client.text_to_voice.design("A calm, low-pitched narrator")
        >>> generated_id = previews["previews"][0]["generated_voice_id"]
        >>> voice = client.text_to_voice.create(
        ...     "Narrator", "A calm, low-pitched narrator", generated_id
        ... )
    """

    def design(
        self,
        voice_description: str,
        model_id: Optional[str] = None,
        text: Optional[str] = None,
        auto_generate_text: Optional[bool] = None,
        output_format: Optional[str] = None,
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Generate voice previews from a description.

        Args:
            voice_description: Description of the voice (20 to 1000 characters)
            model_id: Voice design model
            text: Text spoken in the previews
            auto_generate_text: Let the API write the preview text
            output_format: Preview audio format
            **options: Extra body fields (``loudness``, ``seed``, ``guidance_scale``, ...)
        """
        self._require(voice_description=voice_description)
        body = compact({
            "voice_description": voice_description,
            "model_id": model_id,
            "text": text,
            "auto_generate_text": auto_generate_text,
            "output_format": output_format,
            **options,
        })
        return self._post(Endpoints.TEXT_TO_VOICE_DESIGN, json=body)

    def create(
        self,
        voice_name: str,
        voice_description: str,
        generated_voice_id: str,
        labels: Optional[Dict[str, str]] = None,
        played_not_selected_voice_ids: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Save a generated preview as a voice in the library."""
        self._require(
            voice_name=voice_name,
            voice_description=voice_description,
            generated_voice_id=generated_voice_id,
        )
        body = compact({
            "voice_name": voice_name,
            "voice_description": voice_description,
            "generated_voice_id": generated_voice_id,
            "labels": labels,
            "played_not_selected_voice_ids": played_not_selected_voice_ids,
        })
        return self._post(Endpoints.TEXT_TO_VOICE, json=body)

    def stream_preview(self, generated_voice_id: str) -> Iterator[bytes]:
        """Stream the audio of a generated preview."""
        self._require(generated_voice_id=generated_voice_id)
        return self._get_streaming(
            self._path(Endpoints.TEXT_TO_VOICE_PREVIEW_STREAM, generated_voice_id=generated_voice_id)
        )
