"""
ElevenLabs Python Client - User Resource
"""

from __future__ import annotations

from typing import Any, Dict

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class UserResource(BaseResource):
    """Resource for the account that owns the API key."""

    def get(self) -> Dict[str, Any]:
        """Get the user's account and subscription details."""
        return self._get(Endpoints.USER)
