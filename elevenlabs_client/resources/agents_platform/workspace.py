"""
ElevenLabs Python Client - Agents Workspace Resource

This module provides methods for the conversational AI workspace settings,
secrets and dashboard.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, compact


class WorkspaceResource(BaseResource):
    """
    Resource for conversational AI workspace settings.

    Example:
        >>> settings = client.workspace.get_settings()
        >>> client.workspace.update_settings(can_use_mcp_servers=True)
    """

    def get_settings(self) -> Dict[str, Any]:
        return self._get(Endpoints.CONVAI_SETTINGS)

    def update_settings(self, **fields: Any) -> Dict[str, Any]:
        """Update workspace settings; only the fields passed are sent."""
        return self._patch(Endpoints.CONVAI_SETTINGS, json=compact(fields))

    def get_secrets(self) -> Dict[str, Any]:
        return self._get(Endpoints.SECRETS)

    def create_secret(self, name: str, value: str, type: str = "new") -> Dict[str, Any]:
        """
        Store a secret for use by tools and agents.

        Args:
            name: Secret name
            value: Secret value
            type: Operation type expected by the API

        Returns:
            Response with ``secret_id``
        """
        self._require(name=name, value=value)
        return self._post(Endpoints.SECRETS, json={"type": type, "name": name, "value": value})

    def update_secret(
        self,
        secret_id: str,
        name: str,
        value: str,
        type: str = "update",
    ) -> Dict[str, Any]:
        self._require(secret_id=secret_id, name=name, value=value)
        return self._patch(
            self._path(Endpoints.SECRET, secret_id=secret_id),
            json={"type": type, "name": name, "value": value},
        )

    def delete_secret(self, secret_id: str) -> Dict[str, Any]:
        self._require(secret_id=secret_id)
        return self._delete(self._path(Endpoints.SECRET, secret_id=secret_id))

    def get_dashboard_settings(self) -> Dict[str, Any]:
        return self._get(Endpoints.CONVAI_DASHBOARD_SETTINGS)

    def update_dashboard_settings(
        self,
        charts: Optional[List[Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        """Update the dashboard charts."""
        return self._patch(Endpoints.CONVAI_DASHBOARD_SETTINGS, json=compact({"charts": charts}))
