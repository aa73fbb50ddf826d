"""
ElevenLabs Python Client - Workspace Members Resource
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, compact


class WorkspaceMembersResource(BaseResource):
    """Resource for workspace members."""

    def update(
        self,
        email: str,
        is_locked: Optional[bool] = None,
        workspace_role: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Lock, unlock or change the role of a member.

        Args:
            email: The member's email
            is_locked: Lock or unlock the account
            workspace_role: ``workspace_admin`` or ``workspace_member``
        """
        self._require(email=email)
        body = compact({"email": email, "is_locked": is_locked, "workspace_role": workspace_role})
        return self._post(Endpoints.WORKSPACE_MEMBERS, json=body)
