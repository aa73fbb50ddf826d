"""
ElevenLabs Python Client - Dubbing Resource

This module provides methods for dubbing projects and for editing their
resources (speakers and segments) before rendering.
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, List, Optional, Union

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, compact
from elevenlabs_client.transport import file_part


class DubbingResource(BaseResource):
    """
    Resource for dubbing.

    Example:
        >>> with open("clip.mp4", "rb") as f:
        ...     dub = client.dubbing.create(f, "clip.mp4", target_lang="es", name="Trailer")
        >>> status = client.dubbing.get(dub["dubbing_id"])
        >>> if status["status"] == "dubbed":
        ...     audio = client.dubbing.get_dubbed_audio(dub["dubbing_id"], "es")
    """

    def create(
        self,
        file: Union[BinaryIO, bytes],
        filename: str,
        target_lang: str,
        name: Optional[str] = None,
        source_lang: Optional[str] = None,
        num_speakers: int = 1,
        mode: str = "automatic",
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Start a dubbing project.

        Args:
            file: Audio or video to dub
            filename: Name of the media file; its extension sets the content type
            target_lang: Language to dub into
            name: Project name
            source_lang: Source language; detected when omitted
            num_speakers: Number of speakers (0 to detect)
            mode: Dubbing mode
            **options: Extra form fields (``watermark``, ``highest_resolution``, ...)

        Returns:
            Response with ``dubbing_id`` and ``expected_duration_sec``
        """
        self._require(file=file, filename=filename, target_lang=target_lang)
        fields = {
            "file": file_part(file, filename),
            "mode": mode,
            "name": name,
            "source_lang": source_lang,
            "target_lang": target_lang,
            "num_speakers": num_speakers,
            **options,
        }
        return self._post_multipart(Endpoints.DUBBING, fields)

    def get(self, dubbing_id: str) -> Dict[str, Any]:
        self._require(dubbing_id=dubbing_id)
        return self._get(self._path(Endpoints.DUB, dubbing_id=dubbing_id))

    def list(
        self,
        cursor: Optional[str] = None,
        page_size: Optional[int] = None,
        dubbing_status: Optional[str] = None,
        filter_by_creator: Optional[str] = None,
    ) -> Dict[str, Any]:
        params = {
            "cursor": cursor,
            "page_size": page_size,
            "dubbing_status": dubbing_status,
            "filter_by_creator": filter_by_creator,
        }
        return self._get(Endpoints.DUBBING, params=params)

    def delete(self, dubbing_id: str) -> Dict[str, Any]:
        self._require(dubbing_id=dubbing_id)
        return self._delete(self._path(Endpoints.DUB, dubbing_id=dubbing_id))

    def get_resource(self, dubbing_id: str) -> Dict[str, Any]:
        """Get the editable resource (speakers, segments, renders) of a project."""
        self._require(dubbing_id=dubbing_id)
        return self._get(self._path(Endpoints.DUB_RESOURCE, dubbing_id=dubbing_id))

    def create_segment(
        self,
        dubbing_id: str,
        speaker_id: str,
        start_time: float,
        end_time: float,
        text: Optional[str] = None,
        translations: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Add a segment to a speaker."""
        self._require(
            dubbing_id=dubbing_id,
            speaker_id=speaker_id,
            start_time=start_time,
            end_time=end_time,
        )
        body = compact({
            "start_time": start_time,
            "end_time": end_time,
            "text": text,
            "translations": translations,
        })
        path = self._path(Endpoints.DUB_SEGMENT_CREATE, dubbing_id=dubbing_id, speaker_id=speaker_id)
        return self._post(path, json=body)

    def delete_segment(self, dubbing_id: str, segment_id: str) -> Dict[str, Any]:
        self._require(dubbing_id=dubbing_id, segment_id=segment_id)
        return self._delete(
            self._path(Endpoints.DUB_SEGMENT, dubbing_id=dubbing_id, segment_id=segment_id)
        )

    def update_segment(
        self,
        dubbing_id: str,
        segment_id: str,
        language: str,
        start_time: Optional[float] = None,
        end_time: Optional[float] = None,
        text: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Change the timing or text of a segment in one language."""
        self._require(dubbing_id=dubbing_id, segment_id=segment_id, language=language)
        body = compact({"start_time": start_time, "end_time": end_time, "text": text})
        path = self._path(
            Endpoints.DUB_SEGMENT_LANGUAGE,
            dubbing_id=dubbing_id,
            segment_id=segment_id,
            language=language,
        )
        return self._patch(path, json=body)

    def transcribe_segments(self, dubbing_id: str, segments: List[str]) -> Dict[str, Any]:
        """Regenerate the transcription of segments."""
        self._require(dubbing_id=dubbing_id, segments=segments)
        return self._post(
            self._path(Endpoints.DUB_TRANSCRIBE, dubbing_id=dubbing_id),
            json={"segments": segments},
        )

    def translate_segments(
        self,
        dubbing_id: str,
        segments: List[str],
        languages: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Regenerate translations of segments, optionally only for some languages."""
        self._require(dubbing_id=dubbing_id, segments=segments)
        return self._post(
            self._path(Endpoints.DUB_TRANSLATE, dubbing_id=dubbing_id),
            json=compact({"segments": segments, "languages": languages}),
        )

    def dub_segments(
        self,
        dubbing_id: str,
        segments: List[str],
        languages: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Regenerate the dubbed audio of segments."""
        self._require(dubbing_id=dubbing_id, segments=segments)
        return self._post(
            self._path(Endpoints.DUB_DUB, dubbing_id=dubbing_id),
            json=compact({"segments": segments, "languages": languages}),
        )

    def render(
        self,
        dubbing_id: str,
        language: str,
        render_type: str,
        normalize_volume: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Render the dubbed output for one language.

        Args:
            dubbing_id: The project
            language: Language to render
            render_type: Output kind (mp4, aac, mp3, wav, aaf, tracks_zip, clips_zip)
            normalize_volume: Normalize the output volume
        """
        self._require(dubbing_id=dubbing_id, language=language, render_type=render_type)
        path = self._path(Endpoints.DUB_RENDER, dubbing_id=dubbing_id, language=language)
        return self._post(
            path, json=compact({"render_type": render_type, "normalize_volume": normalize_volume})
        )

    def update_speaker(
        self,
        dubbing_id: str,
        speaker_id: str,
        voice_id: Optional[str] = None,
        languages: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        self._require(dubbing_id=dubbing_id, speaker_id=speaker_id)
        path = self._path(Endpoints.DUB_SPEAKER, dubbing_id=dubbing_id, speaker_id=speaker_id)
        return self._patch(path, json=compact({"voice_id": voice_id, "languages": languages}))

    def get_similar_voices(self, dubbing_id: str, speaker_id: str) -> Dict[str, Any]:
        """Suggest library voices close to a speaker's original voice."""
        self._require(dubbing_id=dubbing_id, speaker_id=speaker_id)
        return self._get(
            self._path(Endpoints.DUB_SIMILAR_VOICES, dubbing_id=dubbing_id, speaker_id=speaker_id)
        )

    def get_dubbed_audio(self, dubbing_id: str, language_code: str) -> bytes:
        """Download the dubbed audio or video for one language."""
        self._require(dubbing_id=dubbing_id, language_code=language_code)
        return self._get_binary(
            self._path(Endpoints.DUB_AUDIO, dubbing_id=dubbing_id, language_code=language_code)
        )

    def get_dubbed_transcript(
        self,
        dubbing_id: str,
        language_code: str,
        format_type: Optional[str] = None,
    ) -> Any:
        """
        Get the transcript of a dubbed language.

        Args:
            format_type: ``srt`` or ``webvtt``; subtitle formats come back as text
        """
        self._require(dubbing_id=dubbing_id, language_code=language_code)
        path = self._path(
            Endpoints.DUB_TRANSCRIPT, dubbing_id=dubbing_id, language_code=language_code
        )
        return self._get(path, params={"format_type": format_type})
