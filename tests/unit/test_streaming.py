"""Unit tests for streaming helpers."""

import base64
import logging

from elevenlabs_client.streaming import collect_audio, iter_json_lines


class TestIterJsonLines:
    """Tests for newline-delimited JSON decoding."""

    def test_decodes_each_line(self):
        frames = list(iter_json_lines(['{"a": 1}', '{"a": 2}']))

        assert frames == [{"a": 1}, {"a": 2}]

    def test_skips_blank_lines(self):
        assert list(iter_json_lines(["", "   ", '{"a": 1}'])) == [{"a": 1}]

    def test_skips_malformed_lines(self, caplog):
        with caplog.at_level(logging.WARNING, logger="elevenlabs_client.streaming"):
            frames = list(iter_json_lines(['{"a": 1}', "{broken", '{"a": 2}']))

        assert frames == [{"a": 1}, {"a": 2}]
        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING

    def test_is_lazy(self):
        """Test lines are consumed only as frames are requested."""
        consumed = []

        def lines():
            for line in ['{"a": 1}', '{"a": 2}']:
                consumed.append(line)
                yield line

        frames = iter_json_lines(lines())
        assert consumed == []

        next(frames)
        assert consumed == ['{"a": 1}']


class TestCollectAudio:
    """Tests for joining streamed audio."""

    def test_joins_bytes(self):
        assert collect_audio([b"ab", b"cd"]) == b"abcd"

    def test_decodes_timestamp_frames(self):
        frames = [
            {"audio_base64": base64.b64encode(b"ab").decode(), "alignment": None},
            {"alignment": {"characters": ["x"]}},
            {"audio_base64": base64.b64encode(b"cd").decode()},
        ]

        assert collect_audio(frames) == b"abcd"

    def test_empty_stream(self):
        assert collect_audio([]) == b""
