"""
ElevenLabs Python Client - Widgets Resource
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, Optional, Union

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource
from elevenlabs_client.transport import file_part


class WidgetsResource(BaseResource):
    """
    Resource for the embeddable agent widget.

    Example:
        >>> with open("avatar.png", "rb") as f:
        ...     client.widgets.create_avatar("agent_123", f, "avatar.png")
    """

    def get(self, agent_id: str, conversation_signature: Optional[str] = None) -> Dict[str, Any]:
        """Get the widget configuration of an agent."""
        self._require(agent_id=agent_id)
        return self._get(
            self._path(Endpoints.AGENT_WIDGET, agent_id=agent_id),
            params={"conversation_signature": conversation_signature},
        )

    def create_avatar(
        self,
        agent_id: str,
        avatar_file: Union[BinaryIO, bytes],
        filename: str,
    ) -> Dict[str, Any]:
        """
        Upload the avatar image shown in the widget.

        Returns:
            Response with ``avatar_url``
        """
        self._require(agent_id=agent_id, avatar_file=avatar_file, filename=filename)
        return self._post_multipart(
            self._path(Endpoints.AGENT_AVATAR, agent_id=agent_id),
            {"avatar_file": file_part(avatar_file, filename)},
        )
