"""
Top-level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import chat, info, movies

router = APIRouter()

router.include_router(movies.router, prefix="/movies", tags=["movies"])
router.include_router(chat.router, prefix="/chat", tags=["chat"])
router.include_router(info.router, tags=["info"])
