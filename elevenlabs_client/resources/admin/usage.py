"""
ElevenLabs Python Client - Usage Resource
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class UsageResource(BaseResource):
    """Resource for character usage statistics."""

    def get_character_stats(
        self,
        start_unix: int,
        end_unix: int,
        include_workspace_metrics: Optional[bool] = None,
        breakdown_type: Optional[str] = None,
        aggregation_interval: Optional[str] = None,
        aggregation_bucket_size: Optional[int] = None,
        metric: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Get usage over a time window.

        Args:
            start_unix: Window start, in milliseconds since the epoch
            end_unix: Window end, in milliseconds since the epoch
            include_workspace_metrics: Include the whole workspace, not only the user
            breakdown_type: How to split the series (voice, user, api_keys, ...)
            aggregation_interval: hour, day, week, month or cumulative
            aggregation_bucket_size: Bucket size in seconds
            metric: Metric to report (credits, minutes_used, request_count, ...)

        Returns:
            Response with ``time`` and ``usage`` series
        """
        self._require(start_unix=start_unix, end_unix=end_unix)
        params = {
            "start_unix": start_unix,
            "end_unix": end_unix,
            "include_workspace_metrics": include_workspace_metrics,
            "breakdown_type": breakdown_type,
            "aggregation_interval": aggregation_interval,
            "aggregation_bucket_size": aggregation_bucket_size,
            "metric": metric,
        }
        return self._get(Endpoints.USAGE_CHARACTER_STATS, params=params)
