"""
ElevenLabs Python Client - Voice Library Resource

This module provides methods for browsing voices shared by the community
and adding them to the user's library.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class VoiceLibraryResource(BaseResource):
    """
    Resource for the shared voice library.

    Example:
        >>> shared = client.voice_library.get_shared_voices(gender="female", language="en")
        >>> voice = shared["voices"][0]
        >>> client.voice_library.add_shared_voice(
        ...     voice["public_owner_id"], voice["voice_id"], new_name="Narrator"
        ... )
    """

    def get_shared_voices(
        self,
        page_size: Optional[int] = None,
        category: Optional[str] = None,
        gender: Optional[str] = None,
        age: Optional[str] = None,
        accent: Optional[str] = None,
        language: Optional[str] = None,
        locale: Optional[str] = None,
        search: Optional[str] = None,
        use_cases: Optional[List[str]] = None,
        descriptives: Optional[List[str]] = None,
        featured: Optional[bool] = None,
        min_notice_period_days: Optional[int] = None,
        include_custom_rates: Optional[bool] = None,
        include_live_moderated: Optional[bool] = None,
        reader_app_enabled: Optional[bool] = None,
        owner_id: Optional[str] = None,
        sort: Optional[str] = None,
        page: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Search the shared voice library.

        List filters (``use_cases``, ``descriptives``) are sent as repeated keys.
        """
        params = {
            "page_size": page_size,
            "category": category,
            "gender": gender,
            "age": age,
            "accent": accent,
            "language": language,
            "locale": locale,
            "search": search,
            "use_cases": use_cases,
            "descriptives": descriptives,
            "featured": featured,
            "min_notice_period_days": min_notice_period_days,
            "include_custom_rates": include_custom_rates,
            "include_live_moderated": include_live_moderated,
            "reader_app_enabled": reader_app_enabled,
            "owner_id": owner_id,
            "sort": sort,
            "page": page,
        }
        return self._get(Endpoints.SHARED_VOICES, params=params)

    def add_shared_voice(self, public_user_id: str, voice_id: str, new_name: str) -> Dict[str, Any]:
        """Copy a shared voice into the user's library under ``new_name``."""
        self._require(public_user_id=public_user_id, voice_id=voice_id, new_name=new_name)
        path = self._path(
            Endpoints.VOICE_ADD_SHARED, public_user_id=public_user_id, voice_id=voice_id
        )
        return self._post(path, json={"new_name": new_name})
