"""
ElevenLabs Python Client - Main Client

This module provides the main ElevenLabsClient class that serves as
the entry point for all API interactions.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from elevenlabs_client.config import (
    DEFAULT_API_KEY_ENV,
    DEFAULT_BASE_URL_ENV,
    DEFAULT_TIMEOUT,
    ClientConfig,
    resolve_api_key,
    resolve_base_url,
)
from elevenlabs_client.transport import Transport
from elevenlabs_client.resources.agents_platform import (
    AgentsResource,
    BatchCallingResource,
    ConversationsResource,
    KnowledgeBaseResource,
    LLMUsageResource,
    MCPServersResource,
    OutboundCallingResource,
    PhoneNumbersResource,
    SecretsResource,
    TestInvocationsResource,
    TestsResource,
    ToolsResource,
    WidgetsResource,
    WorkspaceResource,
)
from elevenlabs_client.resources.admin import (
    HistoryResource,
    PronunciationDictionariesResource,
    SamplesResource,
    ServiceAccountApiKeysResource,
    ServiceAccountsResource,
    UsageResource,
    UserResource,
    VoiceLibraryResource,
    WebhooksResource,
    WorkspaceGroupsResource,
    WorkspaceInvitesResource,
    WorkspaceMembersResource,
    WorkspaceResourcesResource,
)
from elevenlabs_client.resources.audio_isolation import AudioIsolationResource
from elevenlabs_client.resources.audio_native import AudioNativeResource
from elevenlabs_client.resources.dubbing import DubbingResource
from elevenlabs_client.resources.forced_alignment import ForcedAlignmentResource
from elevenlabs_client.resources.models import ModelsResource
from elevenlabs_client.resources.music import MusicResource
from elevenlabs_client.resources.sound_generation import SoundGenerationResource
from elevenlabs_client.resources.speech_to_speech import SpeechToSpeechResource
from elevenlabs_client.resources.speech_to_text import SpeechToTextResource
from elevenlabs_client.resources.text_to_dialogue import TextToDialogueResource
from elevenlabs_client.resources.text_to_speech import TextToSpeechResource
from elevenlabs_client.resources.text_to_voice import TextToVoiceResource
from elevenlabs_client.resources.voices import VoicesResource

logger = logging.getLogger("elevenlabs_client")


class ElevenLabsClient:
    """
    Main client for interacting with the ElevenLabs API.

    The client holds the configuration, owns the HTTP transport and
    exposes one attribute per endpoint wrapper.

    Args:
        api_key: Your ElevenLabs API key. If not provided, falls back to
            ``Settings`` and then to the environment variable named by
            ``api_key_env``.
        base_url: The base URL for the API. Defaults to https://api.elevenlabs.io
        timeout: Request timeout in seconds. Defaults to 60.
        debug: Enable debug logging. Defaults to False.
        api_key_env: Environment variable holding the API key.
        base_url_env: Environment variable holding the base URL.
        http_client: Pre-configured ``httpx.Client`` to send requests with.

    Raises:
        MissingParameterError: If no API key can be resolved or the
            configuration is invalid

    Example:
        >>> with ElevenLabsClient(api_key="your-api-key") as client:
        ...     voices = client.voices.list()
        ...     audio = client.text_to_speech.convert(voices["voices"][0]["voice_id"], "Hi")

    Attributes:
        agents: Conversational AI agents
        conversations: Agent conversations
        knowledge_base: Knowledge base documents and RAG indexes
        tools: Tools agents can call
        workspace: Conversational AI workspace settings
        secrets: Workspace secrets
        batch_calling: Outbound call batches
        phone_numbers: Agent phone numbers
        outbound_calling: Single outbound calls
        llm_usage: LLM cost estimates
        mcp_servers: MCP servers and tool approvals
        tests: Agent tests
        test_invocations: Agent test runs
        widgets: Embeddable agent widget
        text_to_speech: Speech synthesis
        text_to_dialogue: Multi-speaker dialogue synthesis
        sound_generation: Sound effects
        audio_isolation: Voice isolation
        speech_to_speech: Voice changer
        speech_to_text: Transcription
        text_to_voice: Voice design
        music: Music generation
        forced_alignment: Transcript alignment
        audio_native: Audio Native projects
        dubbing: Dubbing projects
        voices: Voice library
        models: Available models
        history: Generation history
        pronunciation_dictionaries: Pronunciation dictionaries
        samples: Voice samples
        service_accounts: Service accounts
        service_account_api_keys: Service account API keys
        usage: Character usage statistics
        user: Account details
        voice_library: Shared voice library
        webhooks: Workspace webhooks
        workspace_groups: Workspace groups
        workspace_invites: Workspace invitations
        workspace_members: Workspace members
        workspace_resources: Workspace resource sharing
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
        api_key_env: str = DEFAULT_API_KEY_ENV,
        base_url_env: str = DEFAULT_BASE_URL_ENV,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        # Configuration
        self._config = ClientConfig(
            api_key=resolve_api_key(api_key, api_key_env),
            base_url=resolve_base_url(base_url, base_url_env).rstrip("/"),
            timeout=timeout,
            debug=debug,
        )
        self._config.validate()

        # Setup logging
        if debug:
            logging.basicConfig(level=logging.DEBUG)
            logger.setLevel(logging.DEBUG)

        self.transport = Transport(self._config, http_client=http_client)

        # Initialize resources
        self._init_resources()

        logger.debug(f"ElevenLabs client initialized with base URL: {self._config.base_url}")

    def _init_resources(self) -> None:
        """Initialize all endpoint wrappers."""
        # Agents platform
        self.agents = AgentsResource(self)
        self.conversations = ConversationsResource(self)
        self.knowledge_base = KnowledgeBaseResource(self)
        self.tools = ToolsResource(self)
        self.workspace = WorkspaceResource(self)
        self.secrets = SecretsResource(self)
        self.batch_calling = BatchCallingResource(self)
        self.phone_numbers = PhoneNumbersResource(self)
        self.outbound_calling = OutboundCallingResource(self)
        self.llm_usage = LLMUsageResource(self)
        self.mcp_servers = MCPServersResource(self)
        self.tests = TestsResource(self)
        self.test_invocations = TestInvocationsResource(self)
        self.widgets = WidgetsResource(self)

        # Generation and voices
        self.text_to_speech = TextToSpeechResource(self)
        self.text_to_dialogue = TextToDialogueResource(self)
        self.sound_generation = SoundGenerationResource(self)
        self.audio_isolation = AudioIsolationResource(self)
        self.speech_to_speech = SpeechToSpeechResource(self)
        self.speech_to_text = SpeechToTextResource(self)
        self.text_to_voice = TextToVoiceResource(self)
        self.music = MusicResource(self)
        self.forced_alignment = ForcedAlignmentResource(self)
        self.audio_native = AudioNativeResource(self)
        self.dubbing = DubbingResource(self)
        self.voices = VoicesResource(self)
        self.models = ModelsResource(self)

        # Administration
        self.history = HistoryResource(self)
        self.pronunciation_dictionaries = PronunciationDictionariesResource(self)
        self.samples = SamplesResource(self)
        self.service_accounts = ServiceAccountsResource(self)
        self.service_account_api_keys = ServiceAccountApiKeysResource(self)
        self.usage = UsageResource(self)
        self.user = UserResource(self)
        self.voice_library = VoiceLibraryResource(self)
        self.webhooks = WebhooksResource(self)
        self.workspace_groups = WorkspaceGroupsResource(self)
        self.workspace_invites = WorkspaceInvitesResource(self)
        self.workspace_members = WorkspaceMembersResource(self)
        self.workspace_resources = WorkspaceResourcesResource(self)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def api_key(self) -> str:
        return self._config.api_key

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self.transport.close()
        logger.debug("ElevenLabs client closed")

    def __enter__(self) -> "ElevenLabsClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"ElevenLabsClient(base_url='{self._config.base_url}')"
