"""
ElevenLabs Python Client - Samples Resource
"""

from __future__ import annotations

from typing import Any, Dict

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class SamplesResource(BaseResource):
    """Resource for the audio samples of a cloned voice."""

    def delete(self, voice_id: str, sample_id: str) -> Dict[str, Any]:
        self._require(voice_id=voice_id, sample_id=sample_id)
        return self._delete(
            self._path(Endpoints.VOICE_SAMPLE, voice_id=voice_id, sample_id=sample_id)
        )
