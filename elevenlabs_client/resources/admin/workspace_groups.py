"""
ElevenLabs Python Client - Workspace Groups Resource
"""

from __future__ import annotations

from typing import Any, Dict, List

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class WorkspaceGroupsResource(BaseResource):
    """
    Resource for workspace user groups.

    Example:
        >>> groups = client.workspace_groups.search("Engineering")
        >>> client.workspace_groups.add_member(groups[0]["id"], "dev@example.com")
    """

    def search(self, name: str) -> List[Dict[str, Any]]:
        """Find groups by name."""
        self._require(name=name)
        return self._get(Endpoints.WORKSPACE_GROUPS_SEARCH, params={"name": name})

    def add_member(self, group_id: str, email: str) -> Dict[str, Any]:
        self._require(group_id=group_id, email=email)
        return self._post(
            self._path(Endpoints.WORKSPACE_GROUP_MEMBERS, group_id=group_id),
            json={"email": email},
        )

    def remove_member(self, group_id: str, email: str) -> Dict[str, Any]:
        self._require(group_id=group_id, email=email)
        return self._post(
            self._path(Endpoints.WORKSPACE_GROUP_MEMBERS_REMOVE, group_id=group_id),
            json={"email": email},
        )
