"""
ElevenLabs Python Client - Conversations Resource

This module provides methods for reviewing agent conversations.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.exceptions import MissingParameterError
from elevenlabs_client.resources.base import BaseResource

FEEDBACK_VALUES = ("like", "dislike")


class ConversationsResource(BaseResource):
    """
    Resource for agent conversations.

    Example:
        >>> convos = client.conversations.list(agent_id="agent_123", page_size=20)
        >>> for convo in convos["conversations"]:
        ...     print(convo["conversation_id"], convo["status"])
    """

    def list(
        self,
        cursor: Optional[str] = None,
        agent_id: Optional[str] = None,
        call_successful: Optional[str] = None,
        call_start_before_unix: Optional[int] = None,
        call_start_after_unix: Optional[int] = None,
        user_id: Optional[str] = None,
        page_size: Optional[int] = None,
        summary_mode: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        List conversations.

        Args:
            cursor: Pagination cursor
            agent_id: Only conversations of this agent
            call_successful: Filter by evaluation result (success, failure, unknown)
            call_start_before_unix: Only calls started before this timestamp
            call_start_after_unix: Only calls started after this timestamp
            user_id: Only conversations initiated by this user
            page_size: Number of conversations per page
            summary_mode: Whether to include transcript summaries (include, exclude)
        """
        params = {
            "cursor": cursor,
            "agent_id": agent_id,
            "call_successful": call_successful,
            "call_start_before_unix": call_start_before_unix,
            "call_start_after_unix": call_start_after_unix,
            "user_id": user_id,
            "page_size": page_size,
            "summary_mode": summary_mode,
        }
        return self._get(Endpoints.CONVERSATIONS, params=params)

    def get(self, conversation_id: str) -> Dict[str, Any]:
        """Get a conversation with its transcript and analysis."""
        self._require(conversation_id=conversation_id)
        return self._get(self._path(Endpoints.CONVERSATION, conversation_id=conversation_id))

    def delete(self, conversation_id: str) -> Dict[str, Any]:
        self._require(conversation_id=conversation_id)
        return self._delete(self._path(Endpoints.CONVERSATION, conversation_id=conversation_id))

    def get_audio(self, conversation_id: str) -> bytes:
        """Download the conversation recording."""
        self._require(conversation_id=conversation_id)
        return self._get_binary(
            self._path(Endpoints.CONVERSATION_AUDIO, conversation_id=conversation_id)
        )

    def get_signed_url(
        self,
        agent_id: str,
        include_conversation_id: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Get a signed URL to start a conversation with a private agent.

        Returns:
            Response with ``signed_url``
        """
        self._require(agent_id=agent_id)
        params = {"agent_id": agent_id, "include_conversation_id": include_conversation_id}
        return self._get(Endpoints.CONVERSATION_SIGNED_URL, params=params)

    def get_token(
        self,
        agent_id: str,
        participant_name: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Get a WebRTC session token for an agent."""
        self._require(agent_id=agent_id)
        params = {"agent_id": agent_id, "participant_name": participant_name}
        return self._get(Endpoints.CONVERSATION_TOKEN, params=params)

    def send_feedback(self, conversation_id: str, feedback: str) -> Dict[str, Any]:
        """
        Rate a conversation.

        Args:
            conversation_id: The conversation's unique identifier
            feedback: Either ``like`` or ``dislike``

        Raises:
            MissingParameterError: If an argument is missing or ``feedback`` is not a known value
        """
        self._require(conversation_id=conversation_id, feedback=feedback)
        if feedback not in FEEDBACK_VALUES:
            raise MissingParameterError(
                "feedback", f"feedback must be one of: {', '.join(FEEDBACK_VALUES)}"
            )
        path = self._path(Endpoints.CONVERSATION_FEEDBACK, conversation_id=conversation_id)
        return self._post(path, json={"feedback": feedback})
