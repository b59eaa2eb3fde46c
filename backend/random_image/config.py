"""
Random Image Configuration

Deployment settings for the random image endpoint, read from environment
variables on every request. A missing access key is reported per request,
never at import time, so the app always starts.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError
from .models import SelectionStrategy


# ============================================
# Defaults
# ============================================

DEFAULT_API_URL = "https://api.unsplash.com"
DEFAULT_USERNAME = "tabliss-official"
DEFAULT_WIDTH = 1920
MAX_WIDTH = 8192                 # largest output dimension imgix renders
DEFAULT_TIMEOUT_SECONDS = 30.0
LISTING_PAGE_SIZE = 30

CDN_CACHE_CONTROL = "s-maxage=3600, stale-while-revalidate=86400"


@dataclass
class RandomImageConfig:
    """Settings for one deployment of the random image endpoint."""
    access_key: Optional[str] = None
    strategy: SelectionStrategy = SelectionStrategy.USERNAME
    username: str = DEFAULT_USERNAME
    collection_id: str = ""
    api_url: str = DEFAULT_API_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    default_width: int = DEFAULT_WIDTH
    allowed_origin: str = "*"        # tighten to the site origin in production

    @classmethod
    def from_env(cls) -> "RandomImageConfig":
        """
        Build config from environment variables.

        Raises:
            ConfigurationError: if a variable is set to an invalid value.
        """
        raw_strategy = os.getenv("UNSPLASH_STRATEGY", SelectionStrategy.USERNAME.value)
        try:
            strategy = SelectionStrategy(raw_strategy.strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"Invalid UNSPLASH_STRATEGY: {raw_strategy!r} "
                f"(expected one of: {', '.join(s.value for s in SelectionStrategy)})"
            )

        try:
            timeout_seconds = float(os.getenv("UNSPLASH_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)))
            default_width = int(os.getenv("RANDOM_IMAGE_DEFAULT_WIDTH", str(DEFAULT_WIDTH)))
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}")

        return cls(
            access_key=os.getenv("UNSPLASH_ACCESS_KEY") or None,
            strategy=strategy,
            username=os.getenv("UNSPLASH_USERNAME", DEFAULT_USERNAME),
            collection_id=os.getenv("UNSPLASH_COLLECTION_ID", ""),
            api_url=os.getenv("UNSPLASH_API_URL", DEFAULT_API_URL).rstrip("/"),
            timeout_seconds=timeout_seconds,
            default_width=default_width,
            allowed_origin=os.getenv("RANDOM_IMAGE_ALLOWED_ORIGIN", "*"),
        )

    def require_access_key(self) -> str:
        """Return the access key or raise ConfigurationError."""
        if not self.access_key:
            raise ConfigurationError("Missing UNSPLASH_ACCESS_KEY environment variable")
        return self.access_key

    def validate_strategy(self) -> None:
        """Check that the selected strategy has the identifier it needs."""
        if self.strategy is SelectionStrategy.COLLECTION and not self.collection_id:
            raise ConfigurationError(
                "UNSPLASH_COLLECTION_ID is required for the collection strategy"
            )
        if self.strategy is not SelectionStrategy.COLLECTION and not self.username:
            raise ConfigurationError(
                f"UNSPLASH_USERNAME is required for the {self.strategy.value} strategy"
            )
