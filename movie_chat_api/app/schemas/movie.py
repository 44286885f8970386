"""
Pydantic schemas for catalog entries.

Movies are provisioned out-of-band (see ``seed_movies.py``) and are
read-only as far as the API is concerned.  Apart from ``id`` the
fields are descriptive metadata passed through to clients as stored,
except for image paths which are expanded to absolute URLs when the
catalog is listed.
"""

from typing import Optional

from pydantic import BaseModel


class MovieRead(BaseModel):
    """Schema for reading a catalog entry."""

    id: int
    adult: bool = False
    backdrop_path: Optional[str] = None
    genre_ids: str = "[]"
    origin_country: str = "[]"
    original_language: Optional[str] = None
    original_name: Optional[str] = None
    original_title: Optional[str] = None
    overview: Optional[str] = None
    popularity: float = 0.0
    poster_path: Optional[str] = None
    first_air_date: Optional[str] = None
    release_date: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    video: bool = False
    vote_average: float = 0.0
    vote_count: int = 0
