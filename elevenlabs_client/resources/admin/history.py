"""
ElevenLabs Python Client - History Resource

This module provides methods for browsing and downloading previously
generated audio.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, compact


class HistoryResource(BaseResource):
    """
    Resource for generation history.

    Example:
        >>> page = client.history.list(page_size=50, source="TTS")
        >>> ids = [item["history_item_id"] for item in page["history"]]
        >>> archive = client.history.download(ids)
    """

    def list(
        self,
        page_size: Optional[int] = None,
        start_after_history_item_id: Optional[str] = None,
        voice_id: Optional[str] = None,
        search: Optional[str] = None,
        source: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        List history items, newest first.

        Args:
            page_size: Number of items per page (max 1000)
            start_after_history_item_id: Cursor; continue after this item
            voice_id: Only items generated with this voice
            search: Search term
            source: ``TTS`` or ``STS``
        """
        params = {
            "page_size": page_size,
            "start_after_history_item_id": start_after_history_item_id,
            "voice_id": voice_id,
            "search": search,
            "source": source,
        }
        return self._get(Endpoints.HISTORY, params=params)

    def get(self, history_item_id: str) -> Dict[str, Any]:
        self._require(history_item_id=history_item_id)
        return self._get(self._path(Endpoints.HISTORY_ITEM, history_item_id=history_item_id))

    def delete(self, history_item_id: str) -> Dict[str, Any]:
        self._require(history_item_id=history_item_id)
        return self._delete(self._path(Endpoints.HISTORY_ITEM, history_item_id=history_item_id))

    def get_audio(self, history_item_id: str) -> bytes:
        self._require(history_item_id=history_item_id)
        return self._get_binary(
            self._path(Endpoints.HISTORY_ITEM_AUDIO, history_item_id=history_item_id)
        )

    def download(self, history_item_ids: List[str], output_format: Optional[str] = None) -> bytes:
        """
        Download history items.

        A single item comes back as audio; several come back as a zip archive.
        """
        self._require(history_item_ids=history_item_ids)
        body = compact({"history_item_ids": history_item_ids, "output_format": output_format})
        return self._post_binary(Endpoints.HISTORY_DOWNLOAD, json=body)
