"""
ElevenLabs Python Client - LLM Usage Resource
"""

from __future__ import annotations

from typing import Any, Dict

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class LLMUsageResource(BaseResource):
    """Resource for estimating LLM costs independently of an agent."""

    def calculate(self, prompt_length: int, number_of_pages: int, rag_enabled: bool) -> Dict[str, Any]:
        """
        Estimate LLM prices for a prompt size.

        ``0`` and ``False`` are valid values; only ``None`` is rejected.

        Args:
            prompt_length: Prompt length in characters
            number_of_pages: Knowledge base pages attached
            rag_enabled: Whether RAG is enabled

        Example:
            >>> client.llm_usage.calculate(prompt_length=500, number_of_pages=0, rag_enabled=False)
        """
        self._require(
            prompt_length=prompt_length,
            number_of_pages=number_of_pages,
            rag_enabled=rag_enabled,
        )
        body = {
            "prompt_length": prompt_length,
            "number_of_pages": number_of_pages,
            "rag_enabled": rag_enabled,
        }
        return self._post(Endpoints.LLM_USAGE_CALCULATE, json=body)
