# -*- coding: utf-8 -*-
"""
Gemini service for classifying traffic violations.

The media is sent inline together with the instruction in `prompts.py`; the
reply must be JSON matching `ExtractedData`. When the model can't be reached or
never produces a valid reply, a zeroed fallback is returned instead.
"""
import base64
from dataclasses import dataclass
from typing import Any, Optional

import httpx
import orjson as json
from loguru import logger
from pydantic import ValidationError

from app import config
from app.pydantic_models import ExtractedData
from app.services.media_service import Media
from app.services.prompts import FALLBACK_COMMENT, PROMPT_VERSION, build_violation_prompt
from app.utils import DependencyError, call_dependency, strip_code_fences


@dataclass(frozen=True)
class ClassificationOutcome:
    extracted_data: ExtractedData
    failed: bool = False


class ViolationClassifierService:
    """Service for interacting with the Gemini generateContent API."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    @property
    def enabled(self) -> bool:
        return bool(config.GEMINI_API_KEY)

    @staticmethod
    def fallback() -> ClassificationOutcome:
        return ClassificationOutcome(
            extracted_data=ExtractedData.empty(comment=FALLBACK_COMMENT),
            failed=True,
        )

    async def classify(
        self, media: Media, user_comment: Optional[str] = None
    ) -> ClassificationOutcome:
        """
        Classify the violations shown in the media.

        Args:
            media: Raw evidence bytes and MIME type
            user_comment: Optional context written by the reporter

        Returns:
            The validated model reply, or the fallback with `failed=True`
        """
        if not self.enabled:
            logger.warning("Gemini key missing, using fallback classification")
            return self.fallback()

        prompt = build_violation_prompt(user_comment)
        max_attempts = max(1, config.GEMINI_MAX_ATTEMPTS)
        for attempt in range(1, max_attempts + 1):
            result = await call_dependency(
                "Gemini",
                self._request(media, prompt),
                timeout=config.GEMINI_TIMEOUT,
            )
            if not result.ok:
                return self.fallback()
            try:
                extracted_data = self.parse_reply(result.value)
            except (json.JSONDecodeError, ValidationError) as exc:
                logger.warning(
                    f"Gemini reply rejected (attempt {attempt}/{max_attempts}, "
                    f"prompt {PROMPT_VERSION}): {exc}"
                )
                continue
            logger.info(f"Gemini detected plate: {extracted_data.license_plate}")
            return ClassificationOutcome(extracted_data=extracted_data)

        logger.error("Gemini never replied with a valid classification")
        return self.fallback()

    async def _request(self, media: Media, prompt: str) -> str:
        response = await self.client.post(
            f"{config.GEMINI_BASE_URL}/models/{config.GEMINI_MODEL}:generateContent",
            headers={
                "Content-Type": "application/json",
                "x-goog-api-key": config.GEMINI_API_KEY,
            },
            content=json.dumps(
                {
                    "contents": [
                        {
                            "parts": [
                                {
                                    "inline_data": {
                                        "mime_type": media.mime_type,
                                        "data": base64.b64encode(media.content).decode(
                                            "ascii"
                                        ),
                                    }
                                },
                                {"text": prompt},
                            ]
                        }
                    ],
                    "generationConfig": {"responseMimeType": "application/json"},
                }
            ),
            timeout=config.GEMINI_TIMEOUT,
        )
        data = json.loads(response.content)
        if response.is_error:
            error = data.get("error") if isinstance(data, dict) else None
            message = error.get("message") if isinstance(error, dict) else None
            raise DependencyError("Gemini", message or response.reason_phrase)
        return self.reply_text(data)

    @staticmethod
    def reply_text(data: Any) -> str:
        """
        Concatenate the text parts of the first candidate.
        """
        try:
            parts = data["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError):
            raise DependencyError("Gemini", "response has no candidates")
        text = "".join(
            part.get("text", "") for part in parts if isinstance(part, dict)
        )
        if not text.strip():
            raise DependencyError("Gemini", "response has no text")
        return text

    @staticmethod
    def parse_reply(text: str) -> ExtractedData:
        """
        Parse a model reply, with or without code fences, into `ExtractedData`.

        Raises:
            orjson.JSONDecodeError: The reply is not JSON
            ValidationError: The reply doesn't match the expected schema
        """
        return ExtractedData.model_validate(json.loads(strip_code_fences(text)))
