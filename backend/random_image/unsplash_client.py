"""
Unsplash Client

Builds and issues the single upstream request made per /api/random call.
Which endpoint is used depends on the deployment's SelectionStrategy:

- username:      GET /photos/random?username=<u>&orientation=<o>
- collection:    GET /photos/random?collections=<id>&orientation=<o>
- user_listing:  GET /users/<u>/photos?per_page=30, then one entry at random

Usage:
    client = UnsplashClient(config)
    try:
        photo = await client.fetch_photo(orientation)
    finally:
        await client.close()
"""

import json
import random
import logging
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

import httpx

from .config import RandomImageConfig, LISTING_PAGE_SIZE
from .exceptions import EmptyListingError, UpstreamError
from .models import Orientation, SelectionStrategy, UpstreamPhoto

logger = logging.getLogger(__name__)


class UnsplashClient:
    """
    Thin async wrapper around the Unsplash API for one request.

    No retries are performed; every failure is terminal for the request.
    """

    def __init__(
        self,
        config: RandomImageConfig,
        http_client: Optional[httpx.AsyncClient] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.rng = rng or random.Random()

        self.http_client = http_client or httpx.AsyncClient(
            base_url=config.api_url,
            timeout=config.timeout_seconds,
            follow_redirects=True,
            headers={
                "Authorization": f"Client-ID {config.require_access_key()}",
                "Accept-Version": "v1",
            },
        )

    async def close(self):
        """Close HTTP client."""
        await self.http_client.aclose()

    def build_request(self, orientation: Optional[Orientation] = None) -> Tuple[str, Dict[str, Any]]:
        """
        Return (path, query params) for the configured strategy.

        Orientation only applies to the /photos/random strategies.
        """
        strategy = self.config.strategy

        if strategy is SelectionStrategy.USER_LISTING:
            path = f"/users/{quote(self.config.username, safe='')}/photos"
            return path, {"per_page": LISTING_PAGE_SIZE}

        if strategy is SelectionStrategy.COLLECTION:
            params: Dict[str, Any] = {"collections": self.config.collection_id}
        else:
            params = {"username": self.config.username}

        if orientation is not None:
            params["orientation"] = orientation.value

        return "/photos/random", params

    async def fetch_photo(self, orientation: Optional[Orientation] = None) -> UpstreamPhoto:
        """
        Fetch one photo according to the configured strategy.

        Raises:
            UpstreamError: on a non-2xx answer or an unexpected body shape.
            EmptyListingError: when the listing strategy gets no photos.
        """
        path, params = self.build_request(orientation)

        logger.info(f"[Unsplash] GET {path} ({self.config.strategy.value})")
        response = await self.http_client.get(path, params=params)

        if not response.is_success:
            detail = _parse_body(response.text)
            logger.error(f"[Unsplash] API error {response.status_code}: {detail}")
            raise UpstreamError(
                "Unsplash API error",
                upstream_status=response.status_code,
                detail=detail,
            )

        # Invalid JSON on a 2xx answer is an unexpected failure
        data = json.loads(response.text)

        if self.config.strategy is SelectionStrategy.USER_LISTING:
            data = self._pick_from_listing(data)

        if not isinstance(data, dict):
            logger.error(f"[Unsplash] Unexpected photo body: {type(data).__name__}")
            raise UpstreamError(
                "Unexpected response from Unsplash",
                upstream_status=response.status_code,
            )

        return UpstreamPhoto.model_validate(data)

    def _pick_from_listing(self, data: Any) -> Any:
        """Pick one entry uniformly at random by index."""
        if not isinstance(data, list):
            logger.error(f"[Unsplash] Listing is not an array: {type(data).__name__}")
            raise UpstreamError("Unexpected response from Unsplash")

        if not data:
            raise EmptyListingError(self.config.username)

        index = self.rng.randrange(len(data))
        logger.debug(f"[Unsplash] Picked photo {index + 1}/{len(data)} from listing")
        return data[index]


def _parse_body(text: str) -> Any:
    """Parse an error body as JSON when possible, otherwise keep the raw text."""
    try:
        return json.loads(text)
    except ValueError:
        return text
