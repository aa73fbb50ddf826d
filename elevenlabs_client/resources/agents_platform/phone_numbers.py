"""
ElevenLabs Python Client - Phone Numbers Resource

This module provides methods for managing phone numbers used by agents.
"""

from __future__ import annotations

from typing import Any, Dict

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, compact


class PhoneNumbersResource(BaseResource):
    """
    Resource for agent phone numbers.

    Numbers are imported from a Twilio account or a SIP trunk and then
    assigned to an agent.

    Example:
        >>> number = client.phone_numbers.import_number(
        ...     phone_number="+14155550100",
        ...     label="Support line",
        ...     provider="twilio",
        ...     sid="AC...",
        ...     token="...",
        ... )
        >>> client.phone_numbers.update(number["phone_number_id"], agent_id="agent_123")
    """

    def import_number(self, phone_number: str, label: str, **provider: Any) -> Dict[str, Any]:
        """
        Import a phone number.

        Args:
            phone_number: Number in E.164 format
            label: Display label
            **provider: Provider settings (``provider``, ``sid``, ``token``,
                ``inbound_trunk_config``, ...)
        """
        self._require(phone_number=phone_number, label=label)
        body = compact({"phone_number": phone_number, "label": label, **provider})
        return self._post(Endpoints.PHONE_NUMBERS, json=body)

    def list(self) -> Any:
        return self._get(Endpoints.PHONE_NUMBERS)

    def get(self, phone_number_id: str) -> Dict[str, Any]:
        self._require(phone_number_id=phone_number_id)
        return self._get(self._path(Endpoints.PHONE_NUMBER, phone_number_id=phone_number_id))

    def update(self, phone_number_id: str, **fields: Any) -> Dict[str, Any]:
        """Update a phone number, e.g. assign it to an agent with ``agent_id``."""
        self._require(phone_number_id=phone_number_id)
        return self._patch(
            self._path(Endpoints.PHONE_NUMBER, phone_number_id=phone_number_id),
            json=compact(fields),
        )

    def delete(self, phone_number_id: str) -> Dict[str, Any]:
        self._require(phone_number_id=phone_number_id)
        return self._delete(self._path(Endpoints.PHONE_NUMBER, phone_number_id=phone_number_id))
