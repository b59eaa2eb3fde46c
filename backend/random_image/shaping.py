"""
Response Shaping

Pure helpers that turn query parameters and an Unsplash photo into the
payload returned by /api/random:
- Width resolution (imgix `w` parameter)
- Usable URL selection (regular > full > raw)
- Sizing parameter append
- Payload normalization
"""

import math
import logging
from typing import Optional

from .config import DEFAULT_WIDTH, MAX_WIDTH
from .exceptions import NoUsableImageError
from .models import Orientation, Photographer, PhotoPayload, UpstreamPhoto

logger = logging.getLogger(__name__)

# Priority order for picking the delivered image
URL_PRIORITY = ("regular", "full", "raw")


def resolve_width(raw: Optional[str], default: int = DEFAULT_WIDTH) -> int:
    """
    Resolve the requested width.

    Missing, empty, non-numeric, non-finite and non-positive values fall back
    to `default`. Valid values are rounded half-up to an integer and capped
    at MAX_WIDTH.
    """
    if raw is None or not str(raw).strip():
        return default

    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default

    if not math.isfinite(value) or value <= 0:
        return default

    if value >= MAX_WIDTH:
        return MAX_WIDTH

    # floor(x + 0.5) rather than round() to avoid banker's rounding
    return int(math.floor(value + 0.5))


def resolve_orientation(raw: Optional[str]) -> Optional[Orientation]:
    """Return the matching Orientation, or None for missing/unknown values."""
    if raw is None or not raw.strip():
        return None
    try:
        return Orientation(raw.strip().lower())
    except ValueError:
        logger.warning(f"[RandomImage] Ignoring unsupported orientation: {raw[:40]!r}")
        return None


def pick_image_url(photo: UpstreamPhoto) -> str:
    """
    Select the first present URL from urls.regular, urls.full, urls.raw.

    Raises:
        NoUsableImageError: if none of them is set.
    """
    for key in URL_PRIORITY:
        url = photo.urls.get(key)
        if url:
            return url
    raise NoUsableImageError()


def append_sizing_params(url: str, width: int) -> str:
    """Append `w=<width>&fit=crop` using `&` or `?` as appropriate."""
    params = f"w={width}&fit=crop"
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{params}"


def build_payload(
    photo: UpstreamPhoto,
    width: int,
    collection_id: Optional[str] = None,
) -> PhotoPayload:
    """Normalize an Unsplash photo into the response payload."""
    image_url = pick_image_url(photo)

    user = photo.user
    links = user.links if user else None

    return PhotoPayload(
        url=append_sizing_params(image_url, width),
        id=photo.id or None,
        raw=photo.urls.get("raw") or None,
        alt_description=photo.alt_description or None,
        photographer=Photographer(
            name=(user.name or user.username) if user else None,
            username=user.username if user else None,
            profile_url=links.html if links else None,
        ),
        collection_id=collection_id,
    )
