"""
ElevenLabs Python Client - Batch Calling Resource

This module provides methods for scheduling outbound call batches.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class BatchCallingResource(BaseResource):
    """
    Resource for batch calling jobs.

    Example:
        >>> job = client.batch_calling.submit(
        ...     call_name="Renewal reminders",
        ...     agent_id="agent_123",
        ...     agent_phone_number_id="phnum_123",
        ...     scheduled_time_unix=1735689600,
        ...     recipients=[{"phone_number": "+14155550100"}],
        ... )
    """

    def submit(
        self,
        call_name: str,
        agent_id: str,
        agent_phone_number_id: str,
        scheduled_time_unix: int,
        recipients: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Submit a batch of outbound calls.

        Args:
            call_name: Name of the batch
            agent_id: Agent that places the calls
            agent_phone_number_id: Phone number the calls are placed from
            scheduled_time_unix: When the batch starts
            recipients: Call recipients, each with a ``phone_number``

        Raises:
            MissingParameterError: If any argument is missing
        """
        self._require(
            call_name=call_name,
            agent_id=agent_id,
            agent_phone_number_id=agent_phone_number_id,
            scheduled_time_unix=scheduled_time_unix,
            recipients=recipients,
        )
        body = {
            "call_name": call_name,
            "agent_id": agent_id,
            "agent_phone_number_id": agent_phone_number_id,
            "scheduled_time_unix": scheduled_time_unix,
            "recipients": recipients,
        }
        return self._post(Endpoints.BATCH_CALLING_SUBMIT, json=body)

    def list(self, limit: Optional[int] = None, last_doc: Optional[str] = None) -> Dict[str, Any]:
        """List the batch calls of the workspace."""
        return self._get(Endpoints.BATCH_CALLING_WORKSPACE, params={"limit": limit, "last_doc": last_doc})

    def get(self, batch_id: str) -> Dict[str, Any]:
        self._require(batch_id=batch_id)
        return self._get(self._path(Endpoints.BATCH_CALL, batch_id=batch_id))

    def cancel(self, batch_id: str) -> Dict[str, Any]:
        self._require(batch_id=batch_id)
        return self._post(self._path(Endpoints.BATCH_CALL_CANCEL, batch_id=batch_id), json={})

    def retry(self, batch_id: str) -> Dict[str, Any]:
        """Retry the failed and unanswered calls of a batch."""
        self._require(batch_id=batch_id)
        return self._post(self._path(Endpoints.BATCH_CALL_RETRY, batch_id=batch_id), json={})
