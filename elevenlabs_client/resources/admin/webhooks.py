"""
ElevenLabs Python Client - Webhooks Resource
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class WebhooksResource(BaseResource):
    """Resource for workspace webhooks."""

    def list(self, include_usages: Optional[bool] = None) -> Dict[str, Any]:
        """
        List webhooks.

        Args:
            include_usages: Include where each webhook is used (admins only)
        """
        return self._get(Endpoints.WORKSPACE_WEBHOOKS, params={"include_usages": include_usages})
