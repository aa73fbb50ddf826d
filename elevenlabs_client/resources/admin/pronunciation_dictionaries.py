"""
ElevenLabs Python Client - Pronunciation Dictionaries Resource
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, List, Optional, Union

from elevenlabs_client.config import Endpoints
from elevenlabs_client.exceptions import MissingParameterError
from elevenlabs_client.resources.base import BaseResource, compact
from elevenlabs_client.transport import file_part


class PronunciationDictionariesResource(BaseResource):
    """
    Resource for pronunciation dictionaries.

    Dictionaries are created from a PLS file or from a list of rules, and
    referenced from synthesis requests through
    ``pronunciation_dictionary_locators``.

    Example:
        >>> dictionary = client.pronunciation_dictionaries.add_from_rules(
        ...     "Acronyms",
        ...     rules=[{"type": "alias", "string_to_replace": "TTS", "alias": "text to speech"}],
        ... )
    """

    def add_from_file(
        self,
        name: str,
        file: Optional[Union[BinaryIO, bytes]] = None,
        filename: Optional[str] = None,
        description: Optional[str] = None,
        workspace_access: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create a dictionary from a PLS file.

        Args:
            name: Dictionary name
            file: PLS lexicon; requires ``filename``
            filename: Name of the lexicon file
            description: Dictionary description
            workspace_access: ``admin``, ``editor`` or ``viewer``
        """
        self._require(name=name)
        fields: Dict[str, Any] = {
            "name": name,
            "description": description,
            "workspace_access": workspace_access,
        }
        if file is not None and filename:
            fields["file"] = file_part(file, filename)
        return self._post_multipart(Endpoints.PRONUNCIATION_DICTIONARY_FROM_FILE, fields)

    def add_from_rules(
        self,
        name: str,
        rules: List[Dict[str, Any]],
        description: Optional[str] = None,
        workspace_access: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create a dictionary from alias or phoneme rules.

        Raises:
            MissingParameterError: If ``name`` is missing or ``rules`` is not a non-empty list
        """
        self._require(name=name)
        if not isinstance(rules, list) or not rules:
            raise MissingParameterError("rules", "rules must be a non-empty list")
        body = compact({
            "name": name,
            "rules": rules,
            "description": description,
            "workspace_access": workspace_access,
        })
        return self._post(Endpoints.PRONUNCIATION_DICTIONARY_FROM_RULES, json=body)

    def get(self, dictionary_id: str) -> Dict[str, Any]:
        self._require(dictionary_id=dictionary_id)
        return self._get(
            self._path(Endpoints.PRONUNCIATION_DICTIONARY, dictionary_id=dictionary_id)
        )

    def update(self, dictionary_id: str, **fields: Any) -> Dict[str, Any]:
        """Update a dictionary (e.g. ``name``, ``archived``)."""
        self._require(dictionary_id=dictionary_id)
        return self._patch(
            self._path(Endpoints.PRONUNCIATION_DICTIONARY, dictionary_id=dictionary_id),
            json=compact(fields),
        )

    def download_version(self, dictionary_id: str, version_id: str) -> bytes:
        """Download one version of a dictionary as a PLS file."""
        self._require(dictionary_id=dictionary_id, version_id=version_id)
        path = self._path(
            Endpoints.PRONUNCIATION_DICTIONARY_DOWNLOAD,
            dictionary_id=dictionary_id,
            version_id=version_id,
        )
        return self._get_binary(path)

    def list(
        self,
        cursor: Optional[str] = None,
        page_size: Optional[int] = None,
        sort: Optional[str] = None,
        sort_direction: Optional[str] = None,
    ) -> Dict[str, Any]:
        params = {
            "cursor": cursor,
            "page_size": page_size,
            "sort": sort,
            "sort_direction": sort_direction,
        }
        return self._get(Endpoints.PRONUNCIATION_DICTIONARIES, params=params)
