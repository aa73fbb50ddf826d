"""
ElevenLabs Python Client - Workspace Invites Resource
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.exceptions import MissingParameterError
from elevenlabs_client.resources.base import BaseResource, compact


class WorkspaceInvitesResource(BaseResource):
    """
    Resource for workspace invitations.

    Example:
        >>> client.workspace_invites.invite("new.hire@example.com", group_ids=["grp_1"])
        >>> client.workspace_invites.delete_invite("new.hire@example.com")
    """

    def invite(
        self,
        email: str,
        group_ids: Optional[List[str]] = None,
        workspace_permission: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Invite a user to the workspace."""
        self._require(email=email)
        body = compact({
            "email": email,
            "group_ids": group_ids,
            "workspace_permission": workspace_permission,
        })
        return self._post(Endpoints.WORKSPACE_INVITES_ADD, json=body)

    def invite_bulk(self, emails: List[str], group_ids: Optional[List[str]] = None) -> Dict[str, Any]:
        """
        Invite several users at once.

        Raises:
            MissingParameterError: If ``emails`` is not a non-empty list
        """
        if not isinstance(emails, list) or not emails:
            raise MissingParameterError("emails", "emails must be a non-empty list")
        body = compact({"emails": emails, "group_ids": group_ids})
        return self._post(Endpoints.WORKSPACE_INVITES_ADD_BULK, json=body)

    def delete_invite(self, email: str) -> Dict[str, Any]:
        """Revoke a pending invitation. The email travels in the DELETE body."""
        self._require(email=email)
        return self._delete(Endpoints.WORKSPACE_INVITES, json={"email": email})
