"""
ElevenLabs Python Client - MCP Servers Resource

This module provides methods for registering Model Context Protocol
servers and managing per-tool approvals.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.exceptions import MissingParameterError
from elevenlabs_client.resources.base import BaseResource, compact

APPROVAL_POLICIES = (
    "auto_approve_all",
    "require_approval_all",
    "require_approval_per_tool",
)


class MCPServersResource(BaseResource):
    """
    Resource for MCP servers.

    Example:
        >>> server = client.mcp_servers.create({
        ...     "url": "https://mcp.example.com/sse",
        ...     "name": "Example tools",
        ... })
        >>> client.mcp_servers.update_approval_policy(server["id"], "require_approval_per_tool")
    """

    def create(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Register an MCP server.

        Raises:
            MissingParameterError: If ``config`` is missing or empty
        """
        self._require(config=config)
        return self._post(Endpoints.MCP_SERVERS, json={"config": config})

    def list(self) -> Dict[str, Any]:
        return self._get(Endpoints.MCP_SERVERS)

    def get(self, mcp_server_id: str) -> Dict[str, Any]:
        self._require(mcp_server_id=mcp_server_id)
        return self._get(self._path(Endpoints.MCP_SERVER, mcp_server_id=mcp_server_id))

    def update_approval_policy(self, mcp_server_id: str, approval_policy: str) -> Dict[str, Any]:
        """
        Change how tool calls on a server are approved.

        Args:
            mcp_server_id: The server's unique identifier
            approval_policy: One of ``auto_approve_all``, ``require_approval_all``
                or ``require_approval_per_tool``
        """
        self._require(mcp_server_id=mcp_server_id, approval_policy=approval_policy)
        if approval_policy not in APPROVAL_POLICIES:
            raise MissingParameterError(
                "approval_policy",
                f"approval_policy must be one of: {', '.join(APPROVAL_POLICIES)}",
            )
        path = self._path(Endpoints.MCP_SERVER_APPROVAL_POLICY, mcp_server_id=mcp_server_id)
        return self._patch(path, json={"approval_policy": approval_policy})

    def create_tool_approval(
        self,
        mcp_server_id: str,
        tool_name: str,
        tool_description: str,
        input_schema: Optional[Dict[str, Any]] = None,
        approval_policy: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Approve a single tool of a server."""
        self._require(
            mcp_server_id=mcp_server_id,
            tool_name=tool_name,
            tool_description=tool_description,
        )
        body = compact({
            "tool_name": tool_name,
            "tool_description": tool_description,
            "input_schema": input_schema,
            "approval_policy": approval_policy,
        })
        path = self._path(Endpoints.MCP_SERVER_TOOL_APPROVALS, mcp_server_id=mcp_server_id)
        return self._post(path, json=body)

    def delete_tool_approval(self, mcp_server_id: str, tool_name: str) -> Dict[str, Any]:
        self._require(mcp_server_id=mcp_server_id, tool_name=tool_name)
        path = self._path(
            Endpoints.MCP_SERVER_TOOL_APPROVAL,
            mcp_server_id=mcp_server_id,
            tool_name=tool_name,
        )
        return self._delete(path)
