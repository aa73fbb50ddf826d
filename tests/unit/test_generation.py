"""Unit tests for the audio generation and processing wrappers."""

import json

import httpx
import pytest

from elevenlabs_client import MissingParameterError, collect_audio


def body_of(route):
    return json.loads(route.calls.last.request.content)


class TestTextToSpeech:
    """Tests for text to speech."""

    def test_convert(self, client, mock_api, audio_bytes):
        """Test conversion returns audio bytes."""
        route = mock_api.post("/v1/text-to-speech/voice_1").mock(
            return_value=httpx.Response(200, content=audio_bytes, headers={"content-type": "audio/mpeg"})
        )

        audio = client.text_to_speech.convert(
            "voice_1",
            "Hello world",
            model_id="eleven_multilingual_v2",
            output_format="mp3_22050_32",
            enable_logging=False,
        )

        request = route.calls.last.request
        assert audio == audio_bytes
        assert body_of(route) == {"text": "Hello world", "model_id": "eleven_multilingual_v2"}
        assert request.url.params["output_format"] == "mp3_22050_32"
        assert request.url.params["enable_logging"] == "false"

    def test_convert_with_timestamps(self, client, mock_api):
        mock_api.post("/v1/text-to-speech/voice_1/with-timestamps").mock(
            return_value=httpx.Response(200, json={"audio_base64": "YWJj", "alignment": {}})
        )

        result = client.text_to_speech.convert_with_timestamps("voice_1", "Hi")

        assert result["audio_base64"] == "YWJj"

    def test_stream_defaults(self, client, mock_api, audio_bytes):
        """Test streaming applies the default model and output format."""
        route = mock_api.post("/v1/text-to-speech/voice_1/stream").mock(
            return_value=httpx.Response(200, content=audio_bytes)
        )

        audio = collect_audio(client.text_to_speech.stream("voice_1", "Hello"))

        assert audio == audio_bytes
        assert body_of(route)["model_id"] == "eleven_multilingual_v2"
        assert route.calls.last.request.url.params["output_format"] == "mp3_44100_128"

    def test_stream_with_timestamps_collects_audio(self, client, mock_api):
        mock_api.post("/v1/text-to-speech/voice_1/stream/with-timestamps").mock(
            return_value=httpx.Response(
                200, content=b'{"audio_base64": "YWJj"}\n{"audio_base64": "ZGVm"}\n'
            )
        )

        frames = client.text_to_speech.stream_with_timestamps("voice_1", "Hi")

        assert collect_audio(frames) == b"abcdef"


class TestTextToDialogue:
    """Tests for dialogue synthesis."""

    inputs = [
        {"text": "Hi, how are you?", "voice_id": "voice_a"},
        {"text": "Great, thanks!", "voice_id": "voice_b"},
    ]

    def test_convert(self, client, mock_api, audio_bytes):
        route = mock_api.post("/v1/text-to-dialogue").mock(
            return_value=httpx.Response(200, content=audio_bytes)
        )

        assert client.text_to_dialogue.convert(self.inputs) == audio_bytes
        assert body_of(route) == {"inputs": self.inputs}

    def test_stream_default_output_format(self, client, mock_api, audio_bytes):
        route = mock_api.post("/v1/text-to-dialogue/stream").mock(
            return_value=httpx.Response(200, content=audio_bytes)
        )

        list(client.text_to_dialogue.stream(self.inputs))

        assert route.calls.last.request.url.params["output_format"] == "mp3_44100_128"


class TestSoundGeneration:
    """Tests for sound effects."""

    def test_generate(self, client, mock_api, audio_bytes):
        route = mock_api.post("/v1/sound-generation").mock(
            return_value=httpx.Response(200, content=audio_bytes)
        )

        audio = client.sound_generation.generate("Rain on a tin roof", duration_seconds=5.0, loop=False)

        assert audio == audio_bytes
        assert body_of(route) == {"text": "Rain on a tin roof", "loop": False, "duration_seconds": 5.0}


class TestAudioIsolation:
    """Tests for voice isolation."""

    def test_isolate(self, client, mock_api, audio_bytes):
        route = mock_api.post("/v1/audio-isolation").mock(
            return_value=httpx.Response(200, content=audio_bytes)
        )

        assert client.audio_isolation.isolate(b"noisy", "noisy.wav") == audio_bytes

        content = route.calls.last.request.content
        assert b'name="audio"; filename="noisy.wav"' in content
        assert b"Content-Type: audio/wav" in content

    def test_isolate_stream(self, client, mock_api, audio_bytes):
        mock_api.post("/v1/audio-isolation/stream").mock(
            return_value=httpx.Response(200, content=audio_bytes)
        )

        assert b"".join(client.audio_isolation.isolate_stream(b"noisy", "noisy.mp3")) == audio_bytes


class TestSpeechToSpeech:
    """Tests for the voice changer."""

    def test_convert(self, client, mock_api, audio_bytes):
        route = mock_api.post("/v1/speech-to-speech/voice_1").mock(
            return_value=httpx.Response(200, content=audio_bytes)
        )

        client.speech_to_speech.convert(
            "voice_1", b"me", "me.wav", voice_settings={"stability": 0.5}, remove_background_noise=True
        )

        content = route.calls.last.request.content
        assert b'name="audio"; filename="me.wav"' in content
        assert b'{"stability": 0.5}' in content
        assert b"true" in content

    def test_convert_stream(self, client, mock_api, audio_bytes):
        mock_api.post("/v1/speech-to-speech/voice_1/stream").mock(
            return_value=httpx.Response(200, content=audio_bytes)
        )

        assert b"".join(client.speech_to_speech.convert_stream("voice_1", b"me", "me.wav")) == audio_bytes


class TestSpeechToText:
    """Tests for transcription."""

    def test_create_with_file(self, client, mock_api):
        route = mock_api.post("/v1/speech-to-text").mock(
            return_value=httpx.Response(200, json={"text": "Hello", "language_code": "en"})
        )

        result = client.speech_to_text.create("scribe_v1", file=b"audio", filename="meeting.mp3", diarize=True)

        content = route.calls.last.request.content
        assert result["text"] == "Hello"
        assert b'name="file"; filename="meeting.mp3"' in content
        assert b'name="model_id"' in content

    def test_create_with_cloud_url(self, client, mock_api):
        """Test a cloud URL is sent without an upload."""
        route = mock_api.post("/v1/speech-to-text").mock(
            return_value=httpx.Response(200, json={"text": "Hello"})
        )

        client.speech_to_text.create("scribe_v1", cloud_storage_url="https://bucket.example/a.mp3")

        request = route.calls.last.request
        assert b"model_id=scribe_v1" in request.content
        assert b"cloud_storage_url=" in request.content

    def test_create_requires_a_source(self, client, mock_api):
        """Test a file without filename and no URL is rejected locally."""
        with pytest.raises(MissingParameterError) as exc_info:
            client.speech_to_text.create("scribe_v1", file=b"audio")

        assert exc_info.value.parameter == "file"
        assert mock_api.calls.call_count == 0

    def test_get_transcript(self, client, mock_api):
        mock_api.get("/v1/speech-to-text/transcripts/tr_1").mock(
            return_value=httpx.Response(200, json={"text": "Hi"})
        )

        assert client.speech_to_text.get_transcript("tr_1") == {"text": "Hi"}


class TestTextToVoice:
    """Tests for voice design."""

    def test_design(self, client, mock_api):
        route = mock_api.post("/v1/text-to-voice/design").mock(
            return_value=httpx.Response(200, json={"previews": []})
        )

        client.text_to_voice.design("A calm, low-pitched narrator", auto_generate_text=True)

        assert body_of(route) == {
            "voice_description": "A calm, low-pitched narrator",
            "auto_generate_text": True,
        }

    def test_create(self, client, mock_api):
        route = mock_api.post("/v1/text-to-voice").mock(
            return_value=httpx.Response(200, json={"voice_id": "voice_9"})
        )

        client.text_to_voice.create("Narrator", "A calm narrator", "gen_1")

        assert body_of(route)["generated_voice_id"] == "gen_1"

    def test_stream_preview(self, client, mock_api, audio_bytes):
        route = mock_api.get("/v1/text-to-voice/gen_1/stream").mock(
            return_value=httpx.Response(200, content=audio_bytes)
        )

        assert b"".join(client.text_to_voice.stream_preview("gen_1")) == audio_bytes
        assert route.calls.last.request.method == "GET"


class TestMusic:
    """Tests for music generation."""

    def test_compose(self, client, mock_api, audio_bytes):
        route = mock_api.post("/v1/music").mock(return_value=httpx.Response(200, content=audio_bytes))

        assert client.music.compose(prompt="Lo-fi beat", music_length_ms=10000) == audio_bytes
        assert body_of(route) == {"prompt": "Lo-fi beat", "music_length_ms": 10000, "model_id": "music_v1"}

    def test_compose_detailed_accepts_multipart(self, client, mock_api):
        route = mock_api.post("/v1/music/detailed").mock(
            return_value=httpx.Response(200, content=b"--boundary\r\n...")
        )

        client.music.compose_detailed(prompt="Jazz")

        assert route.calls.last.request.headers["accept"] == "multipart/mixed"

    def test_compose_stream(self, client, mock_api, audio_bytes):
        mock_api.post("/v1/music/stream").mock(return_value=httpx.Response(200, content=audio_bytes))

        assert collect_audio(client.music.compose_stream(prompt="Ambient")) == audio_bytes

    def test_create_plan(self, client, mock_api):
        route = mock_api.post("/v1/music/plan").mock(
            return_value=httpx.Response(200, json={"sections": []})
        )

        client.music.create_plan(prompt="Epic trailer")

        assert body_of(route) == {"prompt": "Epic trailer", "model_id": "music_v1"}


class TestForcedAlignment:
    """Tests for transcript alignment."""

    def test_create(self, client, mock_api):
        route = mock_api.post("/v1/forced-alignment").mock(
            return_value=httpx.Response(200, json={"words": [], "characters": []})
        )

        client.forced_alignment.create(b"audio", "speech.mp3", "Hello world")

        content = route.calls.last.request.content
        assert b'name="file"; filename="speech.mp3"' in content
        assert b"Hello world" in content


class TestAudioNative:
    """Tests for Audio Native projects."""

    def test_create_with_file(self, client, mock_api):
        route = mock_api.post("/v1/audio-native").mock(
            return_value=httpx.Response(200, json={"project_id": "proj_1", "html_snippet": "<div/>"})
        )

        client.audio_native.create("My Blog", file=b"<p>Hi</p>", filename="post.html", auto_convert=True)

        content = route.calls.last.request.content
        assert b'filename="post.html"' in content
        assert b"My Blog" in content

    def test_get_settings(self, client, mock_api):
        mock_api.get("/v1/audio-native/proj_1/settings").mock(
            return_value=httpx.Response(200, json={"enabled": True})
        )

        assert client.audio_native.get_settings("proj_1") == {"enabled": True}


class TestDubbing:
    """Tests for dubbing projects."""

    def test_create(self, client, mock_api):
        """Test the upload content type follows the file extension."""
        route = mock_api.post("/v1/dubbing").mock(
            return_value=httpx.Response(200, json={"dubbing_id": "dub_1", "expected_duration_sec": 12})
        )

        result = client.dubbing.create(b"video", "clip.mp4", target_lang="es", source_lang="en")

        content = route.calls.last.request.content
        assert result["dubbing_id"] == "dub_1"
        assert b'name="file"; filename="clip.mp4"' in content
        assert b"Content-Type: video/mp4" in content
        assert b'name="target_lang"' in content
        assert b'name="mode"' in content

    def test_create_requires_target_language(self, client, mock_api):
        with pytest.raises(MissingParameterError) as exc_info:
            client.dubbing.create(b"video", "clip.mp4", target_lang="")

        assert exc_info.value.parameter == "target_lang"
        assert mock_api.calls.call_count == 0

    def test_list(self, client, mock_api):
        route = mock_api.get("/v1/dubbing").mock(return_value=httpx.Response(200, json={"dubs": []}))

        client.dubbing.list()

        assert route.called

    def test_get_dubbed_audio(self, client, mock_api, audio_bytes):
        mock_api.get("/v1/dubbing/dub_1/audio/es").mock(
            return_value=httpx.Response(200, content=audio_bytes, headers={"content-type": "audio/mpeg"})
        )

        assert client.dubbing.get_dubbed_audio("dub_1", "es") == audio_bytes

    def test_get_dubbed_transcript(self, client, mock_api):
        route = mock_api.get("/v1/dubbing/dub_1/transcript/es").mock(
            return_value=httpx.Response(200, text="1\n00:00:00,000 --> 00:00:01,000\nHola\n")
        )

        transcript = client.dubbing.get_dubbed_transcript("dub_1", "es", format_type="srt")

        assert "Hola" in transcript
        assert route.calls.last.request.url.params["format_type"] == "srt"

    def test_render(self, client, mock_api):
        route = mock_api.post("/v1/dubbing/resource/dub_1/render/es").mock(
            return_value=httpx.Response(200, json={"version": 2, "render_id": "r_1"})
        )

        client.dubbing.render("dub_1", "es", "mp4")

        assert body_of(route)["render_type"] == "mp4"

    def test_transcribe_segments(self, client, mock_api):
        route = mock_api.post("/v1/dubbing/resource/dub_1/transcribe").mock(
            return_value=httpx.Response(200, json={"version": 3})
        )

        client.dubbing.transcribe_segments("dub_1", ["seg_1", "seg_2"])

        assert body_of(route) == {"segments": ["seg_1", "seg_2"]}

    def test_delete_segment(self, client, mock_api):
        route = mock_api.delete("/v1/dubbing/resource/dub_1/segment/seg_1").mock(
            return_value=httpx.Response(200, json={"version": 4})
        )

        client.dubbing.delete_segment("dub_1", "seg_1")

        assert route.called

    def test_similar_voices(self, client, mock_api):
        mock_api.get("/v1/dubbing/resource/dub_1/speaker/spk_1/similar-voices").mock(
            return_value=httpx.Response(200, json={"voices": []})
        )

        assert client.dubbing.get_similar_voices("dub_1", "spk_1") == {"voices": []}
