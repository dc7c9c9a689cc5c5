# -*- coding: utf-8 -*-
"""
Media service for fetching report evidence.

The media bytes are fetched once per analysis and handed by value to the
classifier. Failing to fetch them is the only error that aborts an analysis.
"""
import asyncio
from dataclasses import dataclass

import httpx
from loguru import logger

from app import config


class MediaFetchError(Exception):
    """The evidence could not be downloaded, so no analysis can proceed."""

    def __init__(self, media_url: str, reason: str):
        self.media_url = media_url
        self.reason = reason
        super().__init__(f"Failed to fetch media from {media_url}: {reason}")


@dataclass(frozen=True)
class Media:
    content: bytes
    mime_type: str


class MediaService:
    """Service for downloading report media."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def fetch(self, media_url: str) -> Media:
        """
        Download the media behind a URL.

        The whole download, body included, is bounded by `MEDIA_FETCH_TIMEOUT`
        and the body is read in chunks so an oversize upload is dropped as soon
        as it passes `MEDIA_MAX_BYTES`.

        Args:
            media_url: Location of the uploaded evidence

        Returns:
            The raw bytes and their MIME type

        Raises:
            MediaFetchError: On transport errors, invalid URLs, timeouts,
                non-2xx answers, empty or oversize bodies
        """
        logger.debug(f"Fetching media from {media_url}")
        try:
            media = await asyncio.wait_for(
                self._download(media_url), timeout=config.MEDIA_FETCH_TIMEOUT
            )
        except asyncio.TimeoutError as exc:
            raise MediaFetchError(
                media_url, f"timed out after {config.MEDIA_FETCH_TIMEOUT}s"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise MediaFetchError(media_url, repr(exc)) from exc

        logger.debug(f"Fetched {len(media.content)} bytes of {media.mime_type}")
        return media

    async def _download(self, media_url: str) -> Media:
        max_bytes = config.MEDIA_MAX_BYTES
        async with self.client.stream(
            "GET",
            media_url,
            timeout=config.MEDIA_FETCH_TIMEOUT,
            follow_redirects=True,
        ) as response:
            if response.status_code >= 400:
                raise MediaFetchError(media_url, f"status {response.status_code}")

            declared = response.headers.get("content-length", "")
            if declared.isdigit() and int(declared) > max_bytes:
                raise MediaFetchError(
                    media_url, f"declared {declared} bytes exceeds {max_bytes}"
                )

            chunks = []
            size = 0
            async for chunk in response.aiter_bytes():
                size += len(chunk)
                if size > max_bytes:
                    raise MediaFetchError(
                        media_url, f"body exceeds {max_bytes} bytes"
                    )
                chunks.append(chunk)

            mime_type = (
                response.headers.get("content-type") or config.MEDIA_DEFAULT_MIME_TYPE
            )

        content = b"".join(chunks)
        if not content:
            raise MediaFetchError(media_url, "empty body")

        mime_type = mime_type.split(";")[0].strip() or config.MEDIA_DEFAULT_MIME_TYPE
        return Media(content=content, mime_type=mime_type)
