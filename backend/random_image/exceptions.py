"""
Random Image Exceptions

Error taxonomy for the random image endpoint and the FastAPI handlers that
turn it into JSON responses. Payloads are client-safe: no secrets, no
tracebacks.
"""

import logging
import os
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RandomImageError(Exception):
    """Base exception for the random image endpoint."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class ConfigurationError(RandomImageError):
    """Raised when the deployment is misconfigured (e.g. missing access key)."""

    status_code = 500


class UpstreamError(RandomImageError):
    """Raised when Unsplash answers with an error or an unusable body."""

    status_code = 502

    def __init__(
        self,
        message: str = "Unsplash API error",
        upstream_status: Optional[int] = None,
        detail: Any = None,
    ):
        self.upstream_status = upstream_status
        self.detail = detail
        super().__init__(message)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message}
        if self.upstream_status is not None:
            payload["status"] = self.upstream_status
        if self.detail is not None:
            payload["detail"] = self.detail
        return payload


class NoUsableImageError(UpstreamError):
    """Raised when a photo carries none of urls.regular/full/raw."""

    def __init__(self):
        super().__init__("No usable image URL from Unsplash")


class EmptyListingError(RandomImageError):
    """Raised when the user listing strategy gets back no photos."""

    status_code = 404

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"No photos found for user {username}")


class InternalError(RandomImageError):
    """Wraps any unexpected failure; the cause is logged, not returned."""

    status_code = 500

    def __init__(self, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__("Internal server error")


# ===========================================
# Exception Handlers
# ===========================================

def _error_headers() -> Dict[str, str]:
    return {"Access-Control-Allow-Origin": os.getenv("RANDOM_IMAGE_ALLOWED_ORIGIN", "*")}


async def random_image_error_handler(request: Request, exc: RandomImageError):
    if exc.status_code >= 500:
        logger.error(f"[RandomImage] {type(exc).__name__}: {exc.message}")
    else:
        logger.warning(f"[RandomImage] {type(exc).__name__}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_payload(),
        headers=_error_headers(),
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"[RandomImage] Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content=InternalError().to_payload(),
        headers=_error_headers(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RandomImageError, random_image_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
