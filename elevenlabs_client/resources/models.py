"""
ElevenLabs Python Client - Models Resource
"""

from __future__ import annotations

from typing import Any, Dict, List

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class ModelsResource(BaseResource):
    """Resource for the available synthesis models."""

    def list(self) -> List[Dict[str, Any]]:
        """
        List models.

        Example:
            >>> for model in client.models.list():
            ...     print(model["model_id"], model["can_do_text_to_speech"])
        """
        return self._get(Endpoints.MODELS)
