"""
ElevenLabs Python Client - Audio Native Resource

This module provides methods for Audio Native projects: embeddable
players that narrate an article.
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, Optional, Union

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource
from elevenlabs_client.transport import file_part


class AudioNativeResource(BaseResource):
    """
    Resource for Audio Native projects.

    Example:
        >>> project = client.audio_native.create(
        ...     "My Blog", author="Jane Doe", voice_id="voice_123", auto_convert=True
        ... )
        >>> print(project["html_snippet"])
    """

    def create(
        self,
        name: str,
        file: Optional[Union[BinaryIO, bytes]] = None,
        filename: Optional[str] = None,
        author: Optional[str] = None,
        title: Optional[str] = None,
        voice_id: Optional[str] = None,
        model_id: Optional[str] = None,
        auto_convert: Optional[bool] = None,
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Create a project.

        Args:
            name: Project name
            file: Article content (text or HTML); requires ``filename``
            filename: Name of the content file
            author: Author shown in the player
            title: Title shown in the player
            voice_id: Narration voice
            model_id: Narration model
            auto_convert: Start narration immediately
            **options: Extra form fields (``small``, ``text_color``, ``background_color``, ...)
        """
        self._require(name=name)
        fields: Dict[str, Any] = {
            "name": name,
            "author": author,
            "title": title,
            "voice_id": voice_id,
            "model_id": model_id,
            "auto_convert": auto_convert,
            **options,
        }
        if file is not None and filename:
            fields["file"] = file_part(file, filename)
        return self._post_multipart(Endpoints.AUDIO_NATIVE, fields)

    def update_content(
        self,
        project_id: str,
        file: Optional[Union[BinaryIO, bytes]] = None,
        filename: Optional[str] = None,
        auto_convert: Optional[bool] = None,
        auto_publish: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Replace the content of a project."""
        self._require(project_id=project_id)
        fields: Dict[str, Any] = {"auto_convert": auto_convert, "auto_publish": auto_publish}
        if file is not None and filename:
            fields["file"] = file_part(file, filename)
        return self._post_multipart(
            self._path(Endpoints.AUDIO_NATIVE_CONTENT, project_id=project_id), fields
        )

    def get_settings(self, project_id: str) -> Dict[str, Any]:
        self._require(project_id=project_id)
        return self._get(self._path(Endpoints.AUDIO_NATIVE_SETTINGS, project_id=project_id))
