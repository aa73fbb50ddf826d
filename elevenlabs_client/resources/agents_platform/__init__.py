"""
ElevenLabs Python Client - Agents Platform Resources

Endpoint wrappers for the conversational AI platform.
"""

from elevenlabs_client.resources.agents_platform.agents import AgentsResource
from elevenlabs_client.resources.agents_platform.batch_calling import BatchCallingResource
from elevenlabs_client.resources.agents_platform.conversations import ConversationsResource
from elevenlabs_client.resources.agents_platform.knowledge_base import KnowledgeBaseResource
from elevenlabs_client.resources.agents_platform.llm_usage import LLMUsageResource
from elevenlabs_client.resources.agents_platform.mcp_servers import MCPServersResource
from elevenlabs_client.resources.agents_platform.outbound_calling import OutboundCallingResource
from elevenlabs_client.resources.agents_platform.phone_numbers import PhoneNumbersResource
from elevenlabs_client.resources.agents_platform.secrets import SecretsResource
from elevenlabs_client.resources.agents_platform.test_invocations import TestInvocationsResource
from elevenlabs_client.resources.agents_platform.tests import TestsResource
from elevenlabs_client.resources.agents_platform.tools import ToolsResource
from elevenlabs_client.resources.agents_platform.widgets import WidgetsResource
from elevenlabs_client.resources.agents_platform.workspace import WorkspaceResource

__all__ = [
    "AgentsResource",
    "BatchCallingResource",
    "ConversationsResource",
    "KnowledgeBaseResource",
    "LLMUsageResource",
    "MCPServersResource",
    "OutboundCallingResource",
    "PhoneNumbersResource",
    "SecretsResource",
    "TestInvocationsResource",
    "TestsResource",
    "ToolsResource",
    "WidgetsResource",
    "WorkspaceResource",
]
