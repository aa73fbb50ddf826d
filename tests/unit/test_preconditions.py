"""Tests that missing arguments are rejected before any request is sent."""

import pytest

from elevenlabs_client import MissingParameterError

CASES = [
    ("agents.create", lambda c: c.agents.create(conversation_config=None), "conversation_config"),
    ("agents.create empty", lambda c: c.agents.create(conversation_config={}), "conversation_config"),
    ("agents.get", lambda c: c.agents.get(""), "agent_id"),
    ("agents.get blank", lambda c: c.agents.get("   "), "agent_id"),
    ("agents.delete", lambda c: c.agents.delete(None), "agent_id"),
    ("agents.simulate", lambda c: c.agents.simulate_conversation("agent_1", None), "simulation_specification"),
    ("conversations.get", lambda c: c.conversations.get(""), "conversation_id"),
    ("conversations.get_signed_url", lambda c: c.conversations.get_signed_url(None), "agent_id"),
    ("knowledge_base.delete", lambda c: c.knowledge_base.delete(""), "document_id"),
    ("knowledge_base.create_from_url", lambda c: c.knowledge_base.create_from_url(""), "url"),
    ("knowledge_base.create_from_file", lambda c: c.knowledge_base.create_from_file(None, "a.pdf"), "file"),
    ("knowledge_base.compute_rag_index", lambda c: c.knowledge_base.compute_rag_index("doc", ""), "model"),
    ("tools.create", lambda c: c.tools.create({}), "tool_config"),
    ("workspace.create_secret", lambda c: c.workspace.create_secret("NAME", ""), "value"),
    ("batch_calling.get", lambda c: c.batch_calling.get(""), "batch_id"),
    ("phone_numbers.import_number", lambda c: c.phone_numbers.import_number("+1415", ""), "label"),
    ("outbound_calling.twilio_call", lambda c: c.outbound_calling.twilio_call("agent", "phnum", ""), "to_number"),
    ("mcp_servers.create", lambda c: c.mcp_servers.create(None), "config"),
    ("tests.get_summaries", lambda c: c.tests.get_summaries([]), "test_ids"),
    ("test_invocations.get", lambda c: c.test_invocations.get(""), "test_invocation_id"),
    ("widgets.create_avatar", lambda c: c.widgets.create_avatar("agent", b"png", ""), "filename"),
    ("text_to_speech.convert", lambda c: c.text_to_speech.convert("voice", ""), "text"),
    ("text_to_speech.convert voice", lambda c: c.text_to_speech.convert(None, "Hi"), "voice_id"),
    ("text_to_speech.stream", lambda c: c.text_to_speech.stream("", "Hi"), "voice_id"),
    ("text_to_dialogue.convert", lambda c: c.text_to_dialogue.convert([]), "inputs"),
    ("sound_generation.generate", lambda c: c.sound_generation.generate(" "), "text"),
    ("audio_isolation.isolate", lambda c: c.audio_isolation.isolate(None, "a.mp3"), "file"),
    ("speech_to_speech.convert", lambda c: c.speech_to_speech.convert("", b"a", "a.wav"), "voice_id"),
    ("speech_to_text.create", lambda c: c.speech_to_text.create(""), "model_id"),
    ("text_to_voice.design", lambda c: c.text_to_voice.design(""), "voice_description"),
    ("forced_alignment.create", lambda c: c.forced_alignment.create(b"a", "a.mp3", ""), "text"),
    ("audio_native.create", lambda c: c.audio_native.create(""), "name"),
    ("dubbing.get", lambda c: c.dubbing.get(""), "dubbing_id"),
    ("dubbing.get_dubbed_audio", lambda c: c.dubbing.get_dubbed_audio("dub", ""), "language_code"),
    ("voices.get", lambda c: c.voices.get(""), "voice_id"),
    ("voices.create", lambda c: c.voices.create(""), "name"),
    ("voices.is_active", lambda c: c.voices.is_active(""), "voice_id"),
    ("history.get", lambda c: c.history.get(""), "history_item_id"),
    ("history.download", lambda c: c.history.download([]), "history_item_ids"),
    ("pronunciation_dictionaries.get", lambda c: c.pronunciation_dictionaries.get(""), "dictionary_id"),
    ("samples.delete", lambda c: c.samples.delete("voice", ""), "sample_id"),
    ("service_account_api_keys.list", lambda c: c.service_account_api_keys.list(""), "service_account_user_id"),
    ("usage.get_character_stats", lambda c: c.usage.get_character_stats(None, 1), "start_unix"),
    ("voice_library.add_shared_voice", lambda c: c.voice_library.add_shared_voice("pub", "voice", ""), "new_name"),
    ("workspace_groups.search", lambda c: c.workspace_groups.search(""), "name"),
    ("workspace_invites.delete_invite", lambda c: c.workspace_invites.delete_invite(""), "email"),
    ("workspace_members.update", lambda c: c.workspace_members.update(""), "email"),
    ("workspace_resources.share", lambda c: c.workspace_resources.share("res", "", "voice"), "role"),
]


class TestMissingParameters:
    """Tests for local argument validation."""

    @pytest.mark.parametrize("call,parameter", [case[1:] for case in CASES], ids=[case[0] for case in CASES])
    def test_rejected_without_request(self, client, mock_api, call, parameter):
        """Test the call raises and the network is never touched."""
        with pytest.raises(MissingParameterError) as exc_info:
            call(client)

        assert exc_info.value.parameter == parameter
        assert mock_api.calls.call_count == 0

    def test_stream_rejected_before_iteration(self, client, mock_api):
        """Test streaming wrappers validate when called, not when iterated."""
        with pytest.raises(MissingParameterError):
            client.text_to_speech.stream_with_timestamps("voice", "")

        assert mock_api.calls.call_count == 0
