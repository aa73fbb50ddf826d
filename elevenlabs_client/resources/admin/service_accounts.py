"""
ElevenLabs Python Client - Service Accounts Resource
"""

from __future__ import annotations

from typing import Any, Dict

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class ServiceAccountsResource(BaseResource):
    """Resource for workspace service accounts."""

    def list(self) -> Dict[str, Any]:
        return self._get(Endpoints.SERVICE_ACCOUNTS)
