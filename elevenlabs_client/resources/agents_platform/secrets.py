"""
ElevenLabs Python Client - Secrets Resource
"""

from __future__ import annotations

from typing import Any, Dict

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class SecretsResource(BaseResource):
    """
    Resource for workspace secrets.

    Example:
        >>> secret = client.secrets.create(name="crm_token", value="s3cr3t")
        >>> client.secrets.delete(secret["secret_id"])
    """

    def list(self) -> Dict[str, Any]:
        return self._get(Endpoints.SECRETS)

    def create(self, name: str, value: str, type: str = "new") -> Dict[str, Any]:
        self._require(name=name, value=value)
        return self._post(Endpoints.SECRETS, json={"type": type, "name": name, "value": value})

    def delete(self, secret_id: str) -> Dict[str, Any]:
        self._require(secret_id=secret_id)
        return self._delete(self._path(Endpoints.SECRET, secret_id=secret_id))
