"""
Random Image Module

Serverless endpoint that returns one random Unsplash photo as a small JSON
payload with an imgix-sized image URL.

Features:
- Deployment-time selection strategy (username, collection, user listing)
- Width normalization and imgix sizing params
- CORS preflight and CDN cache headers
- JSON error taxonomy (config 500, upstream 502, empty listing 404)
"""

from .routes_fastapi import router
from .app import app, create_app
from .config import RandomImageConfig
from .unsplash_client import UnsplashClient

__all__ = ["router", "app", "create_app", "RandomImageConfig", "UnsplashClient"]
