"""
ElevenLabs Python Client - Outbound Calling Resource

This module provides methods for placing single outbound calls.
"""

from __future__ import annotations

from typing import Any, Dict

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, compact


class OutboundCallingResource(BaseResource):
    """
    Resource for outbound calls through Twilio or a SIP trunk.

    Example:
        >>> call = client.outbound_calling.twilio_call(
        ...     agent_id="agent_123",
        ...     agent_phone_number_id="phnum_123",
        ...     to_number="+14155550100",
        ... )
        >>> print(call["callSid"])
    """

    def _call_body(
        self,
        agent_id: str,
        agent_phone_number_id: str,
        to_number: str,
        options: Dict[str, Any],
    ) -> Dict[str, Any]:
        self._require(
            agent_id=agent_id,
            agent_phone_number_id=agent_phone_number_id,
            to_number=to_number,
        )
        return compact({
            "agent_id": agent_id,
            "agent_phone_number_id": agent_phone_number_id,
            "to_number": to_number,
            **options,
        })

    def sip_trunk_call(
        self,
        agent_id: str,
        agent_phone_number_id: str,
        to_number: str,
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Place a call through a SIP trunk.

        Args:
            agent_id: Agent handling the call
            agent_phone_number_id: SIP trunk number the call is placed from
            to_number: Destination number
            **options: Extra body fields (``conversation_initiation_client_data``, ...)
        """
        body = self._call_body(agent_id, agent_phone_number_id, to_number, options)
        return self._post(Endpoints.SIP_TRUNK_OUTBOUND_CALL, json=body)

    def twilio_call(
        self,
        agent_id: str,
        agent_phone_number_id: str,
        to_number: str,
        **options: Any,
    ) -> Dict[str, Any]:
        """Place a call through Twilio. Arguments match ``sip_trunk_call``."""
        body = self._call_body(agent_id, agent_phone_number_id, to_number, options)
        return self._post(Endpoints.TWILIO_OUTBOUND_CALL, json=body)
