"""
ElevenLabs Python Client - Speech to Text Resource
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, Optional, Union

from elevenlabs_client.config import Endpoints
from elevenlabs_client.exceptions import MissingParameterError
from elevenlabs_client.resources.base import BaseResource, is_missing
from elevenlabs_client.transport import file_part


class SpeechToTextResource(BaseResource):
    """
    Resource for transcription.

    Audio is sent either as an upload or as a cloud storage URL.

    Example:
        >>> with open("meeting.mp3", "rb") as f:
        ...     result = client.speech_to_text.create(
        ...         "scribe_v1", file=f, filename="meeting.mp3", diarize=True
        ...     )
        >>> print(result["text"])
    """

    def create(
        self,
        model_id: str,
        file: Optional[Union[BinaryIO, bytes]] = None,
        filename: Optional[str] = None,
        cloud_storage_url: Optional[str] = None,
        language_code: Optional[str] = None,
        tag_audio_events: Optional[bool] = None,
        num_speakers: Optional[int] = None,
        timestamps_granularity: Optional[str] = None,
        diarize: Optional[bool] = None,
        webhook: Optional[bool] = None,
        webhook_metadata: Optional[Union[str, Dict[str, Any]]] = None,
        enable_logging: Optional[bool] = None,
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Transcribe audio.

        Args:
            model_id: Transcription model (e.g. ``scribe_v1``)
            file: Audio or video to transcribe; requires ``filename``
            filename: Name of the uploaded file
            cloud_storage_url: URL of the media, instead of an upload
            language_code: ISO language code; detected when omitted
            tag_audio_events: Annotate laughter, applause and similar events
            num_speakers: Maximum number of speakers
            timestamps_granularity: ``none``, ``word`` or ``character``
            diarize: Label who is speaking
            webhook: Deliver the result asynchronously to the workspace webhooks
            webhook_metadata: Metadata echoed in the webhook; mappings are JSON-encoded
            enable_logging: Set to False for zero-retention mode
            **options: Extra form fields (``diarization_threshold``, ``temperature``, ...)

        Raises:
            MissingParameterError: If ``model_id`` is missing, or neither an
                upload nor ``cloud_storage_url`` is given
        """
        self._require(model_id=model_id)
        fields: Dict[str, Any] = {"model_id": model_id}
        if file is not None and filename and filename.strip():
            fields["file"] = file_part(file, filename)
        elif not is_missing(cloud_storage_url):
            fields["cloud_storage_url"] = cloud_storage_url
        else:
            raise MissingParameterError(
                "file", "Either file with filename or cloud_storage_url must be provided"
            )

        fields.update({
            "language_code": language_code,
            "tag_audio_events": tag_audio_events,
            "num_speakers": num_speakers,
            "timestamps_granularity": timestamps_granularity,
            "diarize": diarize,
            "webhook": webhook,
            "webhook_metadata": webhook_metadata,
            **options,
        })
        return self._post_multipart(
            Endpoints.SPEECH_TO_TEXT, fields, params={"enable_logging": enable_logging}
        )

    def get_transcript(self, transcription_id: str) -> Dict[str, Any]:
        """Fetch a transcript produced by an asynchronous request."""
        self._require(transcription_id=transcription_id)
        return self._get(
            self._path(Endpoints.SPEECH_TO_TEXT_TRANSCRIPT, transcription_id=transcription_id)
        )
