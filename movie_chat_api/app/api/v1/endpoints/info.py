"""
Service information endpoints for API v1.
"""

from typing import Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> Dict[str, str]:
    """Liveness probe.  Reports whether the database handle is open."""
    db = request.app.state.db
    return {"status": "ok" if db.is_open else "unavailable"}
