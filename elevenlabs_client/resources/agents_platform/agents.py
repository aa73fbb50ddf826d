"""
ElevenLabs Python Client - Agents Resource

This module provides methods for managing conversational AI agents.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, compact


class AgentsResource(BaseResource):
    """
    Resource for managing conversational AI agents.

    Example:
        >>> client = ElevenLabsClient(api_key="...")
        >>> # Create an agent
        >>> agent = client.agents.create(
        ...     name="Support Agent",
        ...     conversation_config={"agent": {"first_message": "Hi!"}},
        ... )
        >>> # List agents matching a search term
        >>> agents = client.agents.list(page_size=10, search="support")
    """

    def create(
        self,
        conversation_config: Dict[str, Any],
        name: Optional[str] = None,
        platform_settings: Optional[Dict[str, Any]] = None,
        tags: Optional[List[str]] = None,
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Create a new agent.

        Args:
            conversation_config: Conversation configuration (agent, TTS, ASR, ...)
            name: Display name of the agent
            platform_settings: Platform settings (widget, evaluation, auth, ...)
            tags: Tags used to classify the agent
            **options: Additional body fields

        Returns:
            Response containing the new ``agent_id``

        Raises:
            MissingParameterError: If ``conversation_config`` is missing

        Example:
            >>> agent = client.agents.create(
            ...     name="Test Agent",
            ...     conversation_config={"agent": {"prompt": {"prompt": "Be brief"}}},
            ... )
            >>> print(agent["agent_id"])
        """
        self._require(conversation_config=conversation_config)
        body = compact({
            "conversation_config": conversation_config,
            "name": name,
            "platform_settings": platform_settings,
            "tags": tags,
            **options,
        })
        return self._post(Endpoints.AGENT_CREATE, json=body)

    def get(self, agent_id: str) -> Dict[str, Any]:
        """
        Get an agent by ID.

        Args:
            agent_id: The agent's unique identifier

        Raises:
            NotFoundError: If the agent doesn't exist
        """
        self._require(agent_id=agent_id)
        return self._get(self._path(Endpoints.AGENT, agent_id=agent_id))

    def list(
        self,
        page_size: Optional[int] = None,
        search: Optional[str] = None,
        sort_direction: Optional[str] = None,
        sort_by: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        List agents.

        Args:
            page_size: Number of agents per page (max 100)
            search: Search by agent name
            sort_direction: Sort direction (asc, desc)
            sort_by: Field to sort by (name, created_at)
            cursor: Pagination cursor from a previous response

        Returns:
            Response with ``agents``, ``next_cursor`` and ``has_more``
        """
        params = {
            "page_size": page_size,
            "search": search,
            "sort_direction": sort_direction,
            "sort_by": sort_by,
            "cursor": cursor,
        }
        return self._get(Endpoints.AGENTS, params=params)

    def update(self, agent_id: str, **fields: Any) -> Dict[str, Any]:
        """
        Update an agent.

        Only the fields passed are sent.

        Example:
            >>> client.agents.update("agent_123", name="Renamed", tags=["prod"])
        """
        self._require(agent_id=agent_id)
        return self._patch(self._path(Endpoints.AGENT, agent_id=agent_id), json=compact(fields))

    def delete(self, agent_id: str) -> Dict[str, Any]:
        """Delete an agent."""
        self._require(agent_id=agent_id)
        return self._delete(self._path(Endpoints.AGENT, agent_id=agent_id))

    def duplicate(self, agent_id: str, name: Optional[str] = None) -> Dict[str, Any]:
        """
        Create a copy of an agent.

        Args:
            agent_id: ID of the agent to copy
            name: Name of the copy; the API derives one when omitted
        """
        self._require(agent_id=agent_id)
        path = self._path(Endpoints.AGENT_DUPLICATE, agent_id=agent_id)
        return self._post(path, json=compact({"name": name}))

    def link(self, agent_id: str) -> Dict[str, Any]:
        """Get the shareable link for an agent."""
        self._require(agent_id=agent_id)
        return self._get(self._path(Endpoints.AGENT_LINK, agent_id=agent_id))

    def _simulation_body(
        self,
        agent_id: str,
        simulation_specification: Dict[str, Any],
        extra_evaluation_criteria: Optional[List[Dict[str, Any]]],
        new_turns_limit: Optional[int],
    ) -> Dict[str, Any]:
        self._require(agent_id=agent_id, simulation_specification=simulation_specification)
        return compact({
            "simulation_specification": simulation_specification,
            "extra_evaluation_criteria": extra_evaluation_criteria,
            "new_turns_limit": new_turns_limit,
        })

    def simulate_conversation(
        self,
        agent_id: str,
        simulation_specification: Dict[str, Any],
        extra_evaluation_criteria: Optional[List[Dict[str, Any]]] = None,
        new_turns_limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Run a simulated conversation between the agent and a simulated user.

        Args:
            agent_id: The agent's unique identifier
            simulation_specification: Simulated user configuration
            extra_evaluation_criteria: Additional evaluation criteria
            new_turns_limit: Maximum number of new turns to generate

        Returns:
            Response with ``simulated_conversation`` and ``analysis``
        """
        body = self._simulation_body(
            agent_id, simulation_specification, extra_evaluation_criteria, new_turns_limit
        )
        return self._post(self._path(Endpoints.AGENT_SIMULATE, agent_id=agent_id), json=body)

    def simulate_conversation_stream(
        self,
        agent_id: str,
        simulation_specification: Dict[str, Any],
        extra_evaluation_criteria: Optional[List[Dict[str, Any]]] = None,
        new_turns_limit: Optional[int] = None,
    ) -> Iterator[bytes]:
        """
        Run a simulated conversation and stream the partial results.

        Validation happens immediately; the request is sent when iteration starts.

        Example:
            >>> for chunk in client.agents.simulate_conversation_stream(
            ...     "agent_123", {"simulated_user_config": {"first_message": "Hi"}}
            ... ):
            ...     print(chunk.decode())
        """
        body = self._simulation_body(
            agent_id, simulation_specification, extra_evaluation_criteria, new_turns_limit
        )
        path = self._path(Endpoints.AGENT_SIMULATE_STREAM, agent_id=agent_id)
        return self._post_streaming(path, json=body, accept="application/json")

    def calculate_llm_usage(
        self,
        agent_id: str,
        prompt_length: Optional[int] = None,
        number_of_pages: Optional[int] = None,
        rag_enabled: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Estimate the LLM cost of an agent.

        Returns:
            Response with ``llm_prices`` per model
        """
        self._require(agent_id=agent_id)
        body = compact({
            "prompt_length": prompt_length,
            "number_of_pages": number_of_pages,
            "rag_enabled": rag_enabled,
        })
        return self._post(self._path(Endpoints.AGENT_LLM_USAGE, agent_id=agent_id), json=body)
