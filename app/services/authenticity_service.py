# -*- coding: utf-8 -*-
"""
Sightengine service for estimating whether evidence is AI-generated.

Authenticity is advisory: every failure degrades to a default score and is
only logged, never raised.
"""
from typing import Any

import httpx
import orjson as json
from loguru import logger

from app import config
from app.utils import call_dependency


class AuthenticityService:
    """Service for interacting with the Sightengine check API."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    @property
    def enabled(self) -> bool:
        return bool(config.SIGHTENGINE_API_USER and config.SIGHTENGINE_API_SECRET)

    async def check(self, media_url: str) -> float:
        """
        Get the authenticity score of the media, 1.0 meaning genuine.

        Args:
            media_url: Publicly reachable media location

        Returns:
            A score in [0, 1]
        """
        if not self.enabled:
            logger.warning("Sightengine keys missing, assuming media is authentic")
            return config.AUTHENTICITY_DEFAULT_SCORE

        logger.debug("Calling Sightengine authenticity check")
        result = await call_dependency(
            "Sightengine",
            self._request(media_url),
            timeout=config.SIGHTENGINE_TIMEOUT,
        )
        return result.value_or(config.AUTHENTICITY_DEFAULT_SCORE)

    async def _request(self, media_url: str) -> float:
        response = await self.client.get(
            f"{config.SIGHTENGINE_BASE_URL}/check.json",
            params={
                "url": media_url,
                "models": config.SIGHTENGINE_MODELS,
                "api_user": config.SIGHTENGINE_API_USER,
                "api_secret": config.SIGHTENGINE_API_SECRET,
            },
            timeout=config.SIGHTENGINE_TIMEOUT,
        )
        return self.score_from_response(json.loads(response.content))

    @staticmethod
    def score_from_response(data: Any) -> float:
        """
        Turn a Sightengine answer into an authenticity score.

        A successful answer is inverted (`1 - ai_generated`). A failure reported
        by the service itself gets a conservative 0.95, anything else the default.
        """
        if not isinstance(data, dict):
            logger.warning("Unexpected Sightengine response shape, using default score")
            return config.AUTHENTICITY_DEFAULT_SCORE

        status = data.get("status")
        if status == "success":
            model_scores = data.get("type")
            ai_generated = (
                model_scores.get("ai_generated")
                if isinstance(model_scores, dict)
                else None
            )
            if isinstance(ai_generated, (int, float)) and not isinstance(
                ai_generated, bool
            ):
                return min(1.0, max(0.0, 1.0 - float(ai_generated)))
        elif status == "failure":
            error = data.get("error")
            message = (
                error.get("message") if isinstance(error, dict) else None
            ) or "Unknown error"
            logger.error(f"Sightengine returned error: {message}")
            return config.AUTHENTICITY_SERVICE_FAILURE_SCORE

        logger.warning("Sightengine response has no ai_generated score, using default")
        return config.AUTHENTICITY_DEFAULT_SCORE
