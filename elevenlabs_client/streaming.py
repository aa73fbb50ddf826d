"""
ElevenLabs Python Client - Streaming Helpers

Streaming endpoints hand back lazy iterators. Audio endpoints yield raw
byte chunks in arrival order; the ``with-timestamps`` endpoints send one
JSON document per line, decoded here into dictionaries.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Any, Dict, Iterable, Iterator, Union

logger = logging.getLogger("elevenlabs_client.streaming")


def iter_json_lines(lines: Iterable[str]) -> Iterator[Dict[str, Any]]:
    """
    Decode newline-delimited JSON.

    Blank lines are skipped. A line that is not valid JSON is logged and
    skipped so one corrupt frame does not abort the whole stream.

    Args:
        lines: Text lines, without their trailing newline

    Yields:
        One decoded object per line
    """
    for line in lines:
        line = line.strip()
        if not line:
            continue
        try:
            yield json.loads(line)
        except json.JSONDecodeError as e:
            logger.warning(f"Skipping malformed stream line ({e}): {line[:80]!r}")


def collect_audio(chunks: Iterable[Union[bytes, Dict[str, Any]]]) -> bytes:
    """
    Join a stream into a single audio payload.

    Accepts both raw byte chunks and the timestamp frames produced by
    ``iter_json_lines``, whose audio is carried base64-encoded under
    ``audio_base64``.

    Example:
        >>> audio = collect_audio(client.text_to_speech.stream("voice_id", "Hello"))
    """
    buffer = bytearray()
    for chunk in chunks:
        if isinstance(chunk, (bytes, bytearray)):
            buffer.extend(chunk)
        elif chunk.get("audio_base64"):
            buffer.extend(base64.b64decode(chunk["audio_base64"]))
    return bytes(buffer)
