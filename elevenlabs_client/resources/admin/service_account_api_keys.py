"""
ElevenLabs Python Client - Service Account API Keys Resource
"""

from __future__ import annotations

from typing import Any, Dict, List, Union

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, compact

Permissions = Union[str, List[str]]


class ServiceAccountApiKeysResource(BaseResource):
    """
    Resource for the API keys of a service account.

    Example:
        >>> key = client.service_account_api_keys.create(
        ...     "sa_123", name="CI", permissions=["text_to_speech"]
        ... )
        >>> print(key["xi-api-key"])
    """

    def list(self, service_account_user_id: str) -> Dict[str, Any]:
        self._require(service_account_user_id=service_account_user_id)
        return self._get(
            self._path(
                Endpoints.SERVICE_ACCOUNT_API_KEYS,
                service_account_user_id=service_account_user_id,
            )
        )

    def create(
        self,
        service_account_user_id: str,
        name: str,
        permissions: Permissions,
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Create an API key.

        Args:
            service_account_user_id: The service account
            name: Key name
            permissions: List of permissions, or ``"all"``
            **options: Extra fields (``character_limit``)
        """
        self._require(
            service_account_user_id=service_account_user_id,
            name=name,
            permissions=permissions,
        )
        body = compact({"name": name, "permissions": permissions, **options})
        path = self._path(
            Endpoints.SERVICE_ACCOUNT_API_KEYS, service_account_user_id=service_account_user_id
        )
        return self._post(path, json=body)

    def update(
        self,
        service_account_user_id: str,
        api_key_id: str,
        is_enabled: bool,
        name: str,
        permissions: Permissions,
        **options: Any,
    ) -> Dict[str, Any]:
        self._require(
            service_account_user_id=service_account_user_id,
            api_key_id=api_key_id,
            is_enabled=is_enabled,
            name=name,
            permissions=permissions,
        )
        body = compact({
            "is_enabled": is_enabled,
            "name": name,
            "permissions": permissions,
            **options,
        })
        path = self._path(
            Endpoints.SERVICE_ACCOUNT_API_KEY,
            service_account_user_id=service_account_user_id,
            api_key_id=api_key_id,
        )
        return self._patch(path, json=body)

    def delete(self, service_account_user_id: str, api_key_id: str) -> Dict[str, Any]:
        self._require(service_account_user_id=service_account_user_id, api_key_id=api_key_id)
        path = self._path(
            Endpoints.SERVICE_ACCOUNT_API_KEY,
            service_account_user_id=service_account_user_id,
            api_key_id=api_key_id,
        )
        return self._delete(path)
