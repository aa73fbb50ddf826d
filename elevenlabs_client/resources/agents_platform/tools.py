"""
ElevenLabs Python Client - Tools Resource

This module provides methods for managing tools agents can call.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class ToolsResource(BaseResource):
    """
    Resource for workspace tools.

    Example:
        >>> tool = client.tools.create({
        ...     "type": "webhook",
        ...     "name": "get_weather",
        ...     "description": "Look up the weather",
        ...     "api_schema": {"url": "https://example.com/weather"},
        ... })
    """

    def list(self) -> Dict[str, Any]:
        return self._get(Endpoints.TOOLS)

    def get(self, tool_id: str) -> Dict[str, Any]:
        self._require(tool_id=tool_id)
        return self._get(self._path(Endpoints.TOOL, tool_id=tool_id))

    def create(self, tool_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a tool.

        Args:
            tool_config: Tool definition (type, name, description, schema)
        """
        self._require(tool_config=tool_config)
        return self._post(Endpoints.TOOLS, json={"tool_config": tool_config})

    def update(self, tool_id: str, tool_config: Dict[str, Any]) -> Dict[str, Any]:
        """Replace the configuration of a tool."""
        self._require(tool_id=tool_id, tool_config=tool_config)
        return self._patch(
            self._path(Endpoints.TOOL, tool_id=tool_id), json={"tool_config": tool_config}
        )

    def delete(self, tool_id: str) -> Dict[str, Any]:
        self._require(tool_id=tool_id)
        return self._delete(self._path(Endpoints.TOOL, tool_id=tool_id))

    def get_dependent_agents(
        self,
        tool_id: str,
        cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> Dict[str, Any]:
        """List the agents that use a tool."""
        self._require(tool_id=tool_id)
        path = self._path(Endpoints.TOOL_DEPENDENT_AGENTS, tool_id=tool_id)
        return self._get(path, params={"cursor": cursor, "page_size": page_size})
