"""
ElevenLabs Python Client - Workspace Resources Resource

This module provides methods for sharing workspace resources (voices,
dictionaries, agents, ...) with users, groups and API keys.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, compact


class WorkspaceResourcesResource(BaseResource):
    """
    Resource for workspace resource sharing.

    Exactly one principal (``user_email``, ``group_id`` or
    ``workspace_api_key_id``) is normally given when sharing.

    Example:
        >>> client.workspace_resources.share(
        ...     "voice_123", role="viewer", resource_type="voice", group_id="grp_1"
        ... )
    """

    def get(self, resource_id: str, resource_type: str) -> Dict[str, Any]:
        """Get a resource with its sharing metadata."""
        self._require(resource_id=resource_id, resource_type=resource_type)
        return self._get(
            self._path(Endpoints.WORKSPACE_RESOURCE, resource_id=resource_id),
            params={"resource_type": resource_type},
        )

    def share(
        self,
        resource_id: str,
        role: str,
        resource_type: str,
        user_email: Optional[str] = None,
        group_id: Optional[str] = None,
        workspace_api_key_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Grant a role on a resource.

        Args:
            resource_id: The resource
            role: ``admin``, ``editor`` or ``viewer``
            resource_type: Kind of resource (voice, pronunciation_dictionary, ...)
            user_email: Share with a user
            group_id: Share with a group
            workspace_api_key_id: Share with a workspace API key
        """
        self._require(resource_id=resource_id, resource_type=resource_type, role=role)
        body = compact({
            "role": role,
            "resource_type": resource_type,
            "user_email": user_email,
            "group_id": group_id,
            "workspace_api_key_id": workspace_api_key_id,
        })
        return self._post(
            self._path(Endpoints.WORKSPACE_RESOURCE_SHARE, resource_id=resource_id), json=body
        )

    def unshare(
        self,
        resource_id: str,
        resource_type: str,
        user_email: Optional[str] = None,
        group_id: Optional[str] = None,
        workspace_api_key_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Revoke a principal's access to a resource."""
        self._require(resource_id=resource_id, resource_type=resource_type)
        body = compact({
            "resource_type": resource_type,
            "user_email": user_email,
            "group_id": group_id,
            "workspace_api_key_id": workspace_api_key_id,
        })
        return self._post(
            self._path(Endpoints.WORKSPACE_RESOURCE_UNSHARE, resource_id=resource_id), json=body
        )
