"""
ElevenLabs Python Client - Configuration

This module contains configuration classes, defaults, and the API path table.
"""

import os
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from elevenlabs_client.exceptions import MissingParameterError


DEFAULT_BASE_URL = "https://api.elevenlabs.io"
DEFAULT_API_KEY_ENV = "ELEVENLABS_API_KEY"
DEFAULT_BASE_URL_ENV = "ELEVENLABS_BASE_URL"
DEFAULT_TIMEOUT = 60.0

API_KEY_HEADER = "xi-api-key"


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration for the ElevenLabs client.

    Instances are frozen: the configuration is fixed for the lifetime
    of the client that owns it.

    Attributes:
        api_key: API key sent in the ``xi-api-key`` header
        base_url: Base URL for the API
        timeout: Request timeout in seconds
        user_agent: Value of the User-Agent header
        debug: Enable debug logging
    """
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = "elevenlabs-client-python"
    debug: bool = False

    def validate(self) -> None:
        """Raise ``MissingParameterError`` when the configuration is unusable."""
        if not self.api_key or not str(self.api_key).strip():
            raise MissingParameterError("api_key")
        if not self.base_url.startswith(("http://", "https://")):
            raise MissingParameterError(
                "base_url", f"Invalid base URL: {self.base_url}"
            )
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            raise MissingParameterError(
                "timeout", "Timeout must be a positive number"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration with the API key redacted."""
        data = asdict(self)
        data["api_key"] = "[REDACTED]" if self.api_key else None
        return data


class Settings:
    """
    Process-wide fallback settings.

    Values configured here are used by clients constructed without an
    explicit ``api_key`` or ``base_url``, before environment variables
    are consulted.

    Example:
        >>> Settings.configure(api_key="xi_...", base_url="https://api.elevenlabs.io")
        >>> client = ElevenLabsClient()
    """

    properties: Dict[str, Any] = {}

    @classmethod
    def configure(cls, **properties: Any) -> None:
        cls.properties = {**cls.properties, **properties}

    @classmethod
    def reset(cls) -> None:
        cls.properties = {}

    @classmethod
    def api_key(cls) -> Optional[str]:
        return cls.properties.get("api_key")

    @classmethod
    def base_url(cls) -> Optional[str]:
        return cls.properties.get("base_url")


def resolve_api_key(
    api_key: Optional[str] = None,
    api_key_env: str = DEFAULT_API_KEY_ENV,
) -> str:
    """
    Resolve the API key from the argument, ``Settings``, or the environment.

    Raises:
        MissingParameterError: If no source yields a non-blank key
    """
    for candidate in (api_key, Settings.api_key(), os.environ.get(api_key_env)):
        if candidate and str(candidate).strip():
            return candidate
    raise MissingParameterError(
        "api_key",
        f"API key is required. Provide it as a parameter, via Settings.configure, "
        f"or set the {api_key_env} environment variable.",
    )


def resolve_base_url(
    base_url: Optional[str] = None,
    base_url_env: str = DEFAULT_BASE_URL_ENV,
) -> str:
    """Resolve the base URL from the argument, ``Settings``, the environment, or the default."""
    return (
        base_url
        or Settings.base_url()
        or os.environ.get(base_url_env)
        or DEFAULT_BASE_URL
    )


# Endpoints
class Endpoints:
    """API endpoint paths."""

    # Agents
    AGENTS = "/v1/convai/agents"
    AGENT_CREATE = "/v1/convai/agents/create"
    AGENT = "/v1/convai/agents/{agent_id}"
    AGENT_DUPLICATE = "/v1/convai/agents/{agent_id}/duplicate"
    AGENT_LINK = "/v1/convai/agents/{agent_id}/link"
    AGENT_SIMULATE = "/v1/convai/agents/{agent_id}/simulate-conversation"
    AGENT_SIMULATE_STREAM = "/v1/convai/agents/{agent_id}/simulate-conversation/stream"
    AGENT_LLM_USAGE = "/v1/convai/agent/{agent_id}/llm-usage/calculate"
    AGENT_KNOWLEDGE_BASE_SIZE = "/v1/convai/agent/{agent_id}/knowledge-base/size"
    AGENT_RUN_TESTS = "/v1/convai/agents/{agent_id}/run-tests"
    AGENT_WIDGET = "/v1/convai/agents/{agent_id}/widget"
    AGENT_AVATAR = "/v1/convai/agents/{agent_id}/avatar"

    # Conversations
    CONVERSATIONS = "/v1/convai/conversations"
    CONVERSATION = "/v1/convai/conversations/{conversation_id}"
    CONVERSATION_AUDIO = "/v1/convai/conversations/{conversation_id}/audio"
    CONVERSATION_FEEDBACK = "/v1/convai/conversations/{conversation_id}/feedback"
    CONVERSATION_SIGNED_URL = "/v1/convai/conversation/get-signed-url"
    CONVERSATION_TOKEN = "/v1/convai/conversation/token"

    # Knowledge Base
    KNOWLEDGE_BASE = "/v1/convai/knowledge-base"
    KNOWLEDGE_BASE_URL = "/v1/convai/knowledge-base/url"
    KNOWLEDGE_BASE_TEXT = "/v1/convai/knowledge-base/text"
    KNOWLEDGE_BASE_FILE = "/v1/convai/knowledge-base/file"
    KNOWLEDGE_BASE_RAG_OVERVIEW = "/v1/convai/knowledge-base/rag-index"
    KNOWLEDGE_BASE_DOCUMENT = "/v1/convai/knowledge-base/{document_id}"
    KNOWLEDGE_BASE_RAG_INDEX = "/v1/convai/knowledge-base/{document_id}/rag-index"
    KNOWLEDGE_BASE_RAG_INDEX_ITEM = "/v1/convai/knowledge-base/{document_id}/rag-index/{rag_index_id}"
    KNOWLEDGE_BASE_DEPENDENT_AGENTS = "/v1/convai/knowledge-base/{document_id}/dependent-agents"
    KNOWLEDGE_BASE_CONTENT = "/v1/convai/knowledge-base/{document_id}/content"
    KNOWLEDGE_BASE_CHUNK = "/v1/convai/knowledge-base/{document_id}/chunk/{chunk_id}"

    # Tools
    TOOLS = "/v1/convai/tools"
    TOOL = "/v1/convai/tools/{tool_id}"
    TOOL_DEPENDENT_AGENTS = "/v1/convai/tools/{tool_id}/dependent-agents"

    # Workspace settings and secrets
    CONVAI_SETTINGS = "/v1/convai/settings"
    CONVAI_DASHBOARD_SETTINGS = "/v1/convai/settings/dashboard"
    SECRETS = "/v1/convai/secrets"
    SECRET = "/v1/convai/secrets/{secret_id}"

    # Batch calling
    BATCH_CALLING_SUBMIT = "/v1/convai/batch-calling/submit"
    BATCH_CALLING_WORKSPACE = "/v1/convai/batch-calling/workspace"
    BATCH_CALL = "/v1/convai/batch-calling/{batch_id}"
    BATCH_CALL_CANCEL = "/v1/convai/batch-calling/{batch_id}/cancel"
    BATCH_CALL_RETRY = "/v1/convai/batch-calling/{batch_id}/retry"

    # Phone numbers and outbound calls
    PHONE_NUMBERS = "/v1/convai/phone-numbers"
    PHONE_NUMBER = "/v1/convai/phone-numbers/{phone_number_id}"
    SIP_TRUNK_OUTBOUND_CALL = "/v1/convai/sip-trunk/outbound-call"
    TWILIO_OUTBOUND_CALL = "/v1/convai/twilio/outbound-call"

    # LLM usage
    LLM_USAGE_CALCULATE = "/v1/convai/llm-usage/calculate"

    # MCP servers
    MCP_SERVERS = "/v1/convai/mcp-servers"
    MCP_SERVER = "/v1/convai/mcp-servers/{mcp_server_id}"
    MCP_SERVER_APPROVAL_POLICY = "/v1/convai/mcp-servers/{mcp_server_id}/approval-policy"
    MCP_SERVER_TOOL_APPROVALS = "/v1/convai/mcp-servers/{mcp_server_id}/tool-approvals"
    MCP_SERVER_TOOL_APPROVAL = "/v1/convai/mcp-servers/{mcp_server_id}/tool-approvals/{tool_name}"

    # Agent testing
    AGENT_TESTS = "/v1/convai/agent-testing"
    AGENT_TEST_CREATE = "/v1/convai/agent-testing/create"
    AGENT_TEST_SUMMARIES = "/v1/convai/agent-testing/summaries"
    AGENT_TEST = "/v1/convai/agent-testing/{test_id}"
    TEST_INVOCATION = "/v1/convai/test-invocations/{test_invocation_id}"
    TEST_INVOCATION_RESUBMIT = "/v1/convai/test-invocations/{test_invocation_id}/resubmit"

    # Text to speech
    TEXT_TO_SPEECH = "/v1/text-to-speech/{voice_id}"
    TEXT_TO_SPEECH_WITH_TIMESTAMPS = "/v1/text-to-speech/{voice_id}/with-timestamps"
    TEXT_TO_SPEECH_STREAM = "/v1/text-to-speech/{voice_id}/stream"
    TEXT_TO_SPEECH_STREAM_WITH_TIMESTAMPS = "/v1/text-to-speech/{voice_id}/stream/with-timestamps"

    # Text to dialogue
    TEXT_TO_DIALOGUE = "/v1/text-to-dialogue"
    TEXT_TO_DIALOGUE_STREAM = "/v1/text-to-dialogue/stream"

    # Audio generation and processing
    SOUND_GENERATION = "/v1/sound-generation"
    AUDIO_ISOLATION = "/v1/audio-isolation"
    AUDIO_ISOLATION_STREAM = "/v1/audio-isolation/stream"
    SPEECH_TO_SPEECH = "/v1/speech-to-speech/{voice_id}"
    SPEECH_TO_SPEECH_STREAM = "/v1/speech-to-speech/{voice_id}/stream"
    SPEECH_TO_TEXT = "/v1/speech-to-text"
    SPEECH_TO_TEXT_TRANSCRIPT = "/v1/speech-to-text/transcripts/{transcription_id}"
    FORCED_ALIGNMENT = "/v1/forced-alignment"

    # Voice design
    TEXT_TO_VOICE = "/v1/text-to-voice"
    TEXT_TO_VOICE_DESIGN = "/v1/text-to-voice/design"
    TEXT_TO_VOICE_PREVIEW_STREAM = "/v1/text-to-voice/{generated_voice_id}/stream"

    # Music
    MUSIC = "/v1/music"
    MUSIC_STREAM = "/v1/music/stream"
    MUSIC_DETAILED = "/v1/music/detailed"
    MUSIC_PLAN = "/v1/music/plan"

    # Audio Native
    AUDIO_NATIVE = "/v1/audio-native"
    AUDIO_NATIVE_CONTENT = "/v1/audio-native/{project_id}/content"
    AUDIO_NATIVE_SETTINGS = "/v1/audio-native/{project_id}/settings"

    # Dubbing
    DUBBING = "/v1/dubbing"
    DUB = "/v1/dubbing/{dubbing_id}"
    DUB_AUDIO = "/v1/dubbing/{dubbing_id}/audio/{language_code}"
    DUB_TRANSCRIPT = "/v1/dubbing/{dubbing_id}/transcript/{language_code}"
    DUB_RESOURCE = "/v1/dubbing/resource/{dubbing_id}"
    DUB_SEGMENT_CREATE = "/v1/dubbing/resource/{dubbing_id}/speaker/{speaker_id}/segment"
    DUB_SEGMENT = "/v1/dubbing/resource/{dubbing_id}/segment/{segment_id}"
    DUB_SEGMENT_LANGUAGE = "/v1/dubbing/resource/{dubbing_id}/segment/{segment_id}/{language}"
    DUB_TRANSCRIBE = "/v1/dubbing/resource/{dubbing_id}/transcribe"
    DUB_TRANSLATE = "/v1/dubbing/resource/{dubbing_id}/translate"
    DUB_DUB = "/v1/dubbing/resource/{dubbing_id}/dub"
    DUB_RENDER = "/v1/dubbing/resource/{dubbing_id}/render/{language}"
    DUB_SPEAKER = "/v1/dubbing/resource/{dubbing_id}/speaker/{speaker_id}"
    DUB_SIMILAR_VOICES = "/v1/dubbing/resource/{dubbing_id}/speaker/{speaker_id}/similar-voices"

    # Voices and models
    VOICES = "/v1/voices"
    VOICE = "/v1/voices/{voice_id}"
    VOICE_ADD = "/v1/voices/add"
    VOICE_EDIT = "/v1/voices/{voice_id}/edit"
    VOICE_SAMPLE = "/v1/voices/{voice_id}/samples/{sample_id}"
    VOICE_ADD_SHARED = "/v1/voices/add/{public_user_id}/{voice_id}"
    SHARED_VOICES = "/v1/shared-voices"
    MODELS = "/v1/models"

    # History
    HISTORY = "/v1/history"
    HISTORY_ITEM = "/v1/history/{history_item_id}"
    HISTORY_ITEM_AUDIO = "/v1/history/{history_item_id}/audio"
    HISTORY_DOWNLOAD = "/v1/history/download"

    # Pronunciation dictionaries
    PRONUNCIATION_DICTIONARIES = "/v1/pronunciation-dictionaries"
    PRONUNCIATION_DICTIONARY_FROM_FILE = "/v1/pronunciation-dictionaries/add-from-file"
    PRONUNCIATION_DICTIONARY_FROM_RULES = "/v1/pronunciation-dictionaries/add-from-rules"
    PRONUNCIATION_DICTIONARY = "/v1/pronunciation-dictionaries/{dictionary_id}"
    PRONUNCIATION_DICTIONARY_DOWNLOAD = "/v1/pronunciation-dictionaries/{dictionary_id}/{version_id}/download"

    # Service accounts
    SERVICE_ACCOUNTS = "/v1/service-accounts"
    SERVICE_ACCOUNT_API_KEYS = "/v1/service-accounts/{service_account_user_id}/api-keys"
    SERVICE_ACCOUNT_API_KEY = "/v1/service-accounts/{service_account_user_id}/api-keys/{api_key_id}"

    # Account
    USAGE_CHARACTER_STATS = "/v1/usage/character-stats"
    USER = "/v1/user"

    # Workspace administration
    WORKSPACE_WEBHOOKS = "/v1/workspace/webhooks"
    WORKSPACE_GROUPS_SEARCH = "/v1/workspace/groups/search"
    WORKSPACE_GROUP_MEMBERS = "/v1/workspace/groups/{group_id}/members"
    WORKSPACE_GROUP_MEMBERS_REMOVE = "/v1/workspace/groups/{group_id}/members/remove"
    WORKSPACE_INVITES = "/v1/workspace/invites"
    WORKSPACE_INVITES_ADD = "/v1/workspace/invites/add"
    WORKSPACE_INVITES_ADD_BULK = "/v1/workspace/invites/add-bulk"
    WORKSPACE_MEMBERS = "/v1/workspace/members"
    WORKSPACE_RESOURCE = "/v1/workspace/resources/{resource_id}"
    WORKSPACE_RESOURCE_SHARE = "/v1/workspace/resources/{resource_id}/share"
    WORKSPACE_RESOURCE_UNSHARE = "/v1/workspace/resources/{resource_id}/unshare"


# Defaults applied by the generation endpoints
class Defaults:
    """Default request values."""

    OUTPUT_FORMAT = "mp3_44100_128"
    TTS_MODEL_ID = "eleven_multilingual_v2"
    MUSIC_MODEL_ID = "music_v1"
    STREAM_ACCEPT = "audio/mpeg"
