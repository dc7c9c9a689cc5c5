# -*- coding: utf-8 -*-
"""
Roboflow service for reading licence plates.

The text-recognition workflow answers with a deeply nested, schema-less
payload, so the plate is extracted heuristically from it.
"""
from typing import Any, Optional

import httpx
import orjson as json
from loguru import logger

from app import config
from app.utils import (
    DependencyError,
    call_dependency,
    find_regional_plate,
    find_text_field,
    normalize_plate,
)


class PlateReaderService:
    """Service for interacting with the Roboflow ANPR workflow."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    @property
    def enabled(self) -> bool:
        return bool(config.ROBOFLOW_API_KEY)

    async def read(self, media_url: str) -> Optional[str]:
        """
        Read the licence plate visible in the media.

        Args:
            media_url: Publicly reachable media location

        Returns:
            A normalized plate candidate or None
        """
        if not self.enabled:
            logger.debug("Roboflow key missing, skipping plate reading")
            return None

        logger.debug(f"Calling Roboflow workflow with URL: {media_url}")
        result = await call_dependency(
            "Roboflow",
            self._request(media_url),
            timeout=config.ROBOFLOW_TIMEOUT,
        )
        if not result.ok:
            return None

        try:
            plate = self.extract_plate(result.value)
        except Exception as exc:
            logger.error(f"Failed to extract plate from Roboflow response: {exc!r}")
            return None

        if plate:
            logger.info(f"Successfully extracted plate from Roboflow: {plate}")
        return plate

    async def _request(self, media_url: str) -> Any:
        response = await self.client.post(
            config.ROBOFLOW_WORKFLOW_URL,
            content=json.dumps(
                {
                    "api_key": config.ROBOFLOW_API_KEY,
                    "inputs": {"image": {"type": "url", "value": media_url}},
                }
            ),
            headers={"Content-Type": "application/json"},
            timeout=config.ROBOFLOW_TIMEOUT,
        )
        data = json.loads(response.content)
        raw = json.dumps(data, option=json.OPT_INDENT_2).decode("utf-8")
        logger.debug(f"Roboflow raw response: {raw}")
        if response.is_error:
            message = data.get("message") if isinstance(data, dict) else None
            raise DependencyError("Roboflow", message or response.reason_phrase)
        return data

    @staticmethod
    def extract_plate(data: Any) -> Optional[str]:
        """
        Look for a plate anywhere in a workflow response.

        First a regional plate pattern is searched over the whole serialized
        payload; failing that, the first long enough `text` field is cleaned up
        and kept when its length is plausible.
        """
        plate = find_regional_plate(data)
        if plate:
            return plate

        text = find_text_field(data)
        if text is None:
            return None
        candidate = normalize_plate(text)
        if config.PLATE_MIN_LENGTH <= len(candidate) <= config.PLATE_MAX_LENGTH:
            return candidate
        return None
