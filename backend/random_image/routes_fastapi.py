"""
Random Image API Routes

Provides endpoints for:
- A random Unsplash photo, reshaped into a small JSON payload
- CORS preflight
- Health check
"""

import os
import logging
from typing import Optional
from fastapi import APIRouter, Query, Request
from fastapi.responses import Response, JSONResponse

from .config import RandomImageConfig, CDN_CACHE_CONTROL
from .exceptions import RandomImageError, ConfigurationError, InternalError
from .models import SelectionStrategy
from .shaping import resolve_width, resolve_orientation, build_payload
from .unsplash_client import UnsplashClient

logger = logging.getLogger(__name__)

# ============================================
# Configuration
# ============================================

ALLOWED_METHODS = "GET, OPTIONS"
ALLOWED_HEADERS = "Content-Type"

# Every method except OPTIONS is served as GET
PROXY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]

# ============================================
# Router
# ============================================

router = APIRouter(prefix="/api/random", tags=["Random Image"])


def _cors_headers(origin: str) -> dict:
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
    }


# ============================================
# Endpoints
# ============================================

@router.options("")
async def preflight():
    """CORS preflight. Never touches configuration or Unsplash."""
    origin = os.getenv("RANDOM_IMAGE_ALLOWED_ORIGIN", "*")
    return Response(
        status_code=204,
        headers={
            **_cors_headers(origin),
            "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        },
    )


@router.api_route("", methods=PROXY_METHODS)
async def random_image(
    request: Request,
    orientation: Optional[str] = Query(None, description="landscape, portrait or squarish"),
    w: Optional[str] = Query(None, description="Preferred image width in pixels"),
):
    """
    Return one random Unsplash photo.

    This endpoint:
    1. Checks the deployment configuration (access key, strategy)
    2. Makes one call to Unsplash for the configured strategy
    3. Picks the best image URL and appends imgix sizing params
    4. Returns the normalized payload with CDN cache headers

    Example:
        GET /api/random?orientation=landscape&w=2560
    """
    config = RandomImageConfig.from_env()
    config.require_access_key()
    config.validate_strategy()

    width = resolve_width(w, config.default_width)
    wanted_orientation = resolve_orientation(orientation)

    collection_id = (
        config.collection_id if config.strategy is SelectionStrategy.COLLECTION else None
    )

    client = None
    try:
        client = UnsplashClient(config)
        photo = await client.fetch_photo(wanted_orientation)
        payload = build_payload(photo, width, collection_id=collection_id)
    except RandomImageError:
        raise
    except Exception as e:
        logger.exception(f"[RandomImage] Error in {request.method} {request.url.path}: {e}")
        raise InternalError(e) from e
    finally:
        if client is not None:
            await client.close()

    logger.info(f"[RandomImage] Served photo {payload.id} (w={width})")

    return JSONResponse(
        status_code=200,
        content=payload.to_response(),
        headers={
            **_cors_headers(config.allowed_origin),
            "Cache-Control": CDN_CACHE_CONTROL,
        },
    )


@router.get("/health")
async def health_check():
    """
    Health check endpoint. Does not call Unsplash.

    Runs the same configuration checks as /api/random, so a deployment that
    would answer every request with a 500 reports 503 "misconfigured" here.
    """
    access_key_configured = bool(os.getenv("UNSPLASH_ACCESS_KEY"))
    try:
        config = RandomImageConfig.from_env()
        config.require_access_key()
        config.validate_strategy()
    except ConfigurationError as e:
        logger.warning(f"[RandomImage] Health check failed: {e.message}")
        return JSONResponse(status_code=503, content={
            "status": "misconfigured",
            "service": "random-image",
            "error": e.message,
            "access_key_configured": access_key_configured,
        })

    return JSONResponse(content={
        "status": "healthy",
        "service": "random-image",
        "strategy": config.strategy.value,
        "access_key_configured": access_key_configured,
    })
