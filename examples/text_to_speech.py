#!/usr/bin/env python3
"""
Text to Speech Example

Synthesizes a sentence twice: once as a single request and once as a
stream written chunk by chunk.

Environment:
    ELEVENLABS_API_KEY: API key (required)
    ELEVENLABS_VOICE_ID: Voice to speak with
    ELEVENLABS_TEXT: Text to synthesize
    OUTPUT_DIR: Where to write the mp3 files
"""

import logging
import os
import sys
from pathlib import Path

from elevenlabs_client import ElevenLabsClient, ElevenLabsError

logger = logging.getLogger("examples.text_to_speech")

# =============================================================================
# Configuration
# =============================================================================

VOICE_ID = os.environ.get("ELEVENLABS_VOICE_ID", "21m00Tcm4TlvDq8ikWAM")
TEXT = os.environ.get("ELEVENLABS_TEXT", "Hello from the ElevenLabs Python client.")
OUTPUT_DIR = Path(os.environ.get("OUTPUT_DIR", "."))


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    try:
        with ElevenLabsClient() as client:
            audio = client.text_to_speech.convert(VOICE_ID, TEXT)
            (OUTPUT_DIR / "speech.mp3").write_bytes(audio)
            logger.info(f"Wrote {len(audio)} bytes to speech.mp3")

            streamed = 0
            with open(OUTPUT_DIR / "speech_stream.mp3", "wb") as f:
                for chunk in client.text_to_speech.stream(VOICE_ID, TEXT):
                    f.write(chunk)
                    streamed += len(chunk)
            logger.info(f"Streamed {streamed} bytes to speech_stream.mp3")
    except ElevenLabsError as e:
        logger.error(f"Synthesis failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
