"""
ElevenLabs Python Client - Text to Dialogue Resource
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional

from elevenlabs_client.config import Defaults, Endpoints
from elevenlabs_client.resources.base import BaseResource, compact


class TextToDialogueResource(BaseResource):
    """
    Resource for multi-speaker dialogue synthesis.

    Example:
        >>> audio = client.text_to_dialogue.convert([
        ...     {"text": "Hi, how are you?", "voice_id": "voice_a"},
        ...     {"text": "Great, thanks!", "voice_id": "voice_b"},
        ... ])
    """

    def convert(
        self,
        inputs: List[Dict[str, Any]],
        model_id: Optional[str] = None,
        settings: Optional[Dict[str, Any]] = None,
        seed: Optional[int] = None,
        output_format: Optional[str] = None,
        **options: Any,
    ) -> bytes:
        """
        Synthesize a dialogue.

        Args:
            inputs: Lines of the dialogue, each with ``text`` and ``voice_id``
            model_id: Model identifier
            settings: Dialogue generation settings
            seed: Seed for deterministic sampling
            output_format: Output audio format
        """
        self._require(inputs=inputs)
        body = compact({
            "inputs": inputs,
            "model_id": model_id,
            "settings": settings or None,
            "seed": seed,
            **options,
        })
        return self._post_binary(
            Endpoints.TEXT_TO_DIALOGUE, json=body, params={"output_format": output_format}
        )

    def stream(
        self,
        inputs: List[Dict[str, Any]],
        model_id: Optional[str] = None,
        settings: Optional[Dict[str, Any]] = None,
        seed: Optional[int] = None,
        output_format: str = Defaults.OUTPUT_FORMAT,
        **options: Any,
    ) -> Iterator[bytes]:
        """Stream a synthesized dialogue chunk by chunk."""
        self._require(inputs=inputs)
        body = compact({
            "inputs": inputs,
            "model_id": model_id,
            "settings": settings or None,
            "seed": seed,
            **options,
        })
        return self._post_streaming(
            Endpoints.TEXT_TO_DIALOGUE_STREAM, json=body, params={"output_format": output_format}
        )
