#!/usr/bin/env python3
"""
Transcription Example

Transcribes a local recording with speaker diarization.

Environment:
    ELEVENLABS_API_KEY: API key (required)
    AUDIO_FILE: Path of the recording (required)
    LANGUAGE_CODE: Language of the recording; detected when unset
"""

import logging
import os
import sys
from pathlib import Path

from elevenlabs_client import ElevenLabsClient, ElevenLabsError

logger = logging.getLogger("examples.transcribe")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    audio_file = os.environ.get("AUDIO_FILE")
    if not audio_file:
        logger.error("Set AUDIO_FILE to the recording to transcribe")
        return 2
    path = Path(audio_file)

    try:
        with ElevenLabsClient() as client, open(path, "rb") as f:
            result = client.speech_to_text.create(
                "scribe_v1",
                file=f,
                filename=path.name,
                language_code=os.environ.get("LANGUAGE_CODE"),
                diarize=True,
            )
    except ElevenLabsError as e:
        logger.error(f"Transcription failed: {e}")
        return 1

    speaker = None
    for word in result.get("words", []):
        if word.get("type") != "word":
            continue
        if word.get("speaker_id") != speaker:
            speaker = word.get("speaker_id")
            print(f"\n[{speaker}]", end=" ")
        print(word["text"], end=" ")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
