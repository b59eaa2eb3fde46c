"""
Random Image test configuration

pytest fixtures shared by the random image tests:
- Environment for a configured deployment
- FastAPI TestClient
- Sample Unsplash photo bodies
"""

import pytest
import sys
from pathlib import Path

from fastapi.testclient import TestClient

# Add backend directory to the Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from random_image.app import create_app


UNSPLASH_API = "https://api.unsplash.com"
TEST_ACCESS_KEY = "test-access-key-123"

ENV_VARS = [
    "UNSPLASH_ACCESS_KEY",
    "UNSPLASH_STRATEGY",
    "UNSPLASH_USERNAME",
    "UNSPLASH_COLLECTION_ID",
    "UNSPLASH_API_URL",
    "UNSPLASH_TIMEOUT_SECONDS",
    "RANDOM_IMAGE_DEFAULT_WIDTH",
    "RANDOM_IMAGE_ALLOWED_ORIGIN",
]


# ============================================
# Environment Fixtures
# ============================================

@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the app reads, so tests start from defaults."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def unsplash_env(clean_env):
    """A deployment with an access key and the default username strategy."""
    clean_env.setenv("UNSPLASH_ACCESS_KEY", TEST_ACCESS_KEY)
    return clean_env


# ============================================
# App Fixtures
# ============================================

@pytest.fixture
def client():
    return TestClient(create_app())


# ============================================
# Helper Functions
# ============================================

def make_photo(**overrides):
    """
    Build an Unsplash photo body.

    Usage:
    ```python
    photo = make_photo(urls={"full": "https://img/full"})
    ```
    """
    photo = {
        "id": "abc",
        "alt_description": "a mountain lake at dawn",
        "urls": {
            "raw": "https://images.unsplash.com/photo-1?ixid=xyz",
            "full": "https://images.unsplash.com/photo-1?ixid=xyz&q=85",
            "regular": "https://images.unsplash.com/photo-1?ixid=xyz&w=1080",
        },
        "user": {
            "name": "Bob Ross",
            "username": "bob",
            "links": {"html": "https://unsplash.com/@bob"},
        },
    }
    photo.update(overrides)
    return photo
