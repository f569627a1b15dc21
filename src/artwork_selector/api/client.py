"""
HTTP client for the artworks collection API.

This module provides an async record source that fetches one page of artworks
at a time, with retry logic for rate limiting and transport errors and
response validation through pydantic models.
"""

import asyncio
from typing import Any, Dict, List, Optional

import httpx
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from ..config import get_settings
from ..core.errors import FetchFailure
from ..models import Artwork, RecordPage

ARTWORK_FIELDS = (
    "id",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
)


class PaginationInfo(BaseModel):
    """Pagination block of an artworks listing response."""
    total: int = 0
    limit: Optional[int] = None
    current_page: Optional[int] = None


class ArtworkListResponse(BaseModel):
    """Response model for the artworks listing endpoint."""
    data: List[Artwork] = Field(default_factory=list)
    pagination: PaginationInfo = Field(default_factory=PaginationInfo)


class ArtworkAPIClient:
    """
    Async record source backed by the artworks HTTP API.

    Use as an async context manager, or call ``close()`` when done, so the
    underlying connection pool is released.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        page_size: Optional[int] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Base URL for the artworks API
            timeout: Request timeout in seconds
            page_size: Number of records requested per page
            max_retries: Retry attempts for 429 responses and transport errors
            retry_delay: Base backoff delay in seconds
            transport: Optional httpx transport, mainly for tests
        """
        settings = get_settings()
        self.base_url = base_url or settings.artworks_api_base_url
        self.timeout = timeout or settings.artworks_api_timeout
        self.page_size = page_size or settings.default_page_size
        self.max_retries = settings.artworks_api_max_retries if max_retries is None else max_retries
        self.retry_delay = settings.artworks_api_retry_delay if retry_delay is None else retry_delay

        # Ensure base URL ends with /
        if not self.base_url.endswith('/'):
            self.base_url += '/'

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            transport=transport,
        )

        logger.info(f"Initialized ArtworkAPIClient with base_url: {self.base_url}")

    async def __aenter__(self) -> "ArtworkAPIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()
        logger.debug("ArtworkAPIClient closed")

    async def _get(self, endpoint: str, params: Dict[str, Any], page_index: int) -> httpx.Response:
        """
        Make a GET request with retry logic.

        Args:
            endpoint: API endpoint path relative to the base URL
            params: Query parameters
            page_index: Page being requested, reported on failure

        Returns:
            httpx.Response: Successful HTTP response

        Raises:
            FetchFailure: If the request fails after all retries
        """
        for attempt in range(self.max_retries + 1):
            try:
                logger.debug(f"GET {endpoint} {params} (attempt {attempt + 1})")
                response = await self.client.get(endpoint, params=params)
            except httpx.HTTPError as e:
                if attempt < self.max_retries:
                    wait_time = self.retry_delay * (2 ** attempt)
                    logger.warning(f"Request failed, retrying in {wait_time}s: {e}")
                    await asyncio.sleep(wait_time)
                    continue
                raise FetchFailure(
                    page_index, f"request failed after {self.max_retries} retries: {e}"
                ) from e

            if response.status_code == 200:
                return response
            if response.status_code == 429 and attempt < self.max_retries:
                wait_time = self.retry_delay * (2 ** attempt)
                logger.warning(f"Rate limited, waiting {wait_time}s before retry")
                await asyncio.sleep(wait_time)
                continue
            raise FetchFailure(
                page_index,
                f"HTTP {response.status_code}: {response.text[:200]}",
                response.status_code,
            )

        raise FetchFailure(page_index, f"request failed after {self.max_retries} retries")

    async def fetch_page(self, page_index: int) -> RecordPage:
        """
        Fetch one page of artworks.

        Args:
            page_index: 1-based page number

        Returns:
            RecordPage: Records in server order plus pagination totals

        Raises:
            FetchFailure: If the request fails or the body cannot be parsed
        """
        params = {
            "page": page_index,
            "limit": self.page_size,
            "fields": ",".join(ARTWORK_FIELDS),
        }
        response = await self._get("artworks", params, page_index)

        try:
            body = ArtworkListResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise FetchFailure(page_index, f"failed to parse artworks response: {e}") from e

        page = RecordPage(
            records=body.data,
            page_index=body.pagination.current_page or page_index,
            page_size=body.pagination.limit or self.page_size,
            total_count=body.pagination.total,
        )
        logger.debug(
            f"Fetched page {page.page_index}/{page.total_pages} "
            f"({len(page.records)} records, {page.total_count} total)"
        )
        return page
