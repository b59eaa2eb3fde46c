"""
Random Image Models

Enums and pydantic models for the Unsplash photo data we read and the
payload we return.
"""

from __future__ import annotations
from typing import Optional, Dict
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================
# Enums
# ============================================

class Orientation(str, Enum):
    """Photo orientations accepted by Unsplash"""
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    SQUARISH = "squarish"


class SelectionStrategy(str, Enum):
    """Which Unsplash endpoint a deployment draws photos from"""
    USERNAME = "username"            # GET /photos/random?username=
    COLLECTION = "collection"        # GET /photos/random?collections=
    USER_LISTING = "user_listing"    # GET /users/{username}/photos, pick one


# ============================================
# Upstream Models
# ============================================

class UpstreamUserLinks(BaseModel):
    model_config = ConfigDict(extra="ignore")

    html: Optional[str] = None


class UpstreamUser(BaseModel):
    """Photographer as returned by Unsplash"""
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    username: Optional[str] = None
    links: Optional[UpstreamUserLinks] = None


class UpstreamPhoto(BaseModel):
    """
    Photo object as returned by Unsplash.

    Only the fields we surface are modeled; everything is optional because
    the payload comes from a third party.
    """
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    urls: Dict[str, Optional[str]] = Field(default_factory=dict)
    alt_description: Optional[str] = None
    user: Optional[UpstreamUser] = None

    @field_validator("urls", mode="before")
    @classmethod
    def _urls_default(cls, value):
        # Unsplash may send null; treat it as no urls at all
        return value or {}


# ============================================
# Response Models
# ============================================

class Photographer(BaseModel):
    name: Optional[str] = None
    username: Optional[str] = None
    profile_url: Optional[str] = None


class PhotoPayload(BaseModel):
    """Response body for GET /api/random"""
    url: str
    id: Optional[str] = None
    raw: Optional[str] = None
    alt_description: Optional[str] = None
    photographer: Photographer
    source: str = "unsplash"
    collection_id: Optional[str] = None

    def to_response(self) -> dict:
        """Serialize, leaving out collection_id when it does not apply."""
        data = self.model_dump()
        if self.collection_id is None:
            data.pop("collection_id")
        return data
