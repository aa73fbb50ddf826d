"""
ElevenLabs Python Client - Administration Resources

Endpoint wrappers for account, history and workspace administration.
"""

from elevenlabs_client.resources.admin.history import HistoryResource
from elevenlabs_client.resources.admin.pronunciation_dictionaries import PronunciationDictionariesResource
from elevenlabs_client.resources.admin.samples import SamplesResource
from elevenlabs_client.resources.admin.service_account_api_keys import ServiceAccountApiKeysResource
from elevenlabs_client.resources.admin.service_accounts import ServiceAccountsResource
from elevenlabs_client.resources.admin.usage import UsageResource
from elevenlabs_client.resources.admin.user import UserResource
from elevenlabs_client.resources.admin.voice_library import VoiceLibraryResource
from elevenlabs_client.resources.admin.webhooks import WebhooksResource
from elevenlabs_client.resources.admin.workspace_groups import WorkspaceGroupsResource
from elevenlabs_client.resources.admin.workspace_invites import WorkspaceInvitesResource
from elevenlabs_client.resources.admin.workspace_members import WorkspaceMembersResource
from elevenlabs_client.resources.admin.workspace_resources import WorkspaceResourcesResource

__all__ = [
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
