"""
ElevenLabs Python Client - Resources

This module exports all endpoint wrapper classes.
"""

from elevenlabs_client.resources.base import BaseResource
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

__all__ = [
    "BaseResource",
    # Agents platform
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
    # Generation and voices
    "AudioIsolationResource",
    "AudioNativeResource",
    "DubbingResource",
    "ForcedAlignmentResource",
    "ModelsResource",
    "MusicResource",
    "SoundGenerationResource",
    "SpeechToSpeechResource",
    "SpeechToTextResource",
    "TextToDialogueResource",
    "TextToSpeechResource",
    "TextToVoiceResource",
    "VoicesResource",
    # Administration
    "HistoryResource",
    "PronunciationDictionariesResource",
    "SamplesResource",
    "ServiceAccountApiKeysResource",
    "ServiceAccountsResource",
    "UsageResource",
    "UserResource",
    "VoiceLibraryResource",
    "WebhooksResource",
    "WorkspaceGroupsResource",
    "WorkspaceInvitesResource",
    "WorkspaceMembersResource",
    "WorkspaceResourcesResource",
]
