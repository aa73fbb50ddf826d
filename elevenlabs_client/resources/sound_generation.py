"""
ElevenLabs Python Client - Sound Generation Resource
"""

from __future__ import annotations

from typing import Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, compact


class SoundGenerationResource(BaseResource):
    """Resource for generating sound effects from a text prompt."""

    def generate(
        self,
        text: str,
        loop: Optional[bool] = None,
        duration_seconds: Optional[float] = None,
        prompt_influence: Optional[float] = None,
        output_format: Optional[str] = None,
    ) -> bytes:
        """
        Generate a sound effect.

        Args:
            text: Description of the sound
            loop: Produce a seamlessly looping sound
            duration_seconds: Length of the sound (0.5 to 30)
            prompt_influence: How closely to follow the prompt (0 to 1)
            output_format: Output audio format

        Returns:
            Audio bytes

        Example:
            >>> audio = client.sound_generation.generate("Rain on a tin roof", duration_seconds=5)
        """
        self._require(text=text)
        body = compact({
            "text": text,
            "loop": loop,
            "duration_seconds": duration_seconds,
            "prompt_influence": prompt_influence,
        })
        return self._post_binary(
            Endpoints.SOUND_GENERATION, json=body, params={"output_format": output_format}
        )
