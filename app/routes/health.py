"""
Module routes/health.py
Role:
- Health endpoints (service OK + mock database readable).

Integrations:
- settings: service name.
- PlayerStore: `/health/storage` loads the player file to check it is usable.
"""
from fastapi import APIRouter, Depends

from app.config.settings import settings
from app.services.player_store import PlayerStore, PlayerStoreError, get_player_store

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health():
    """Minimal OK with the configured service name."""
    return {"ok": True, "service": settings.APP_NAME}


@router.get("/storage")
def health_storage(store: PlayerStore = Depends(get_player_store)):
    """
    Checks that the mock database can be read and decoded.
    - Returns the file path and the number of players.
    - Never fails: errors are reported in the body.
    """
    try:
        players = store.snapshot()
        return {"ok": True, "path": str(store.path), "players": len(players)}
    except PlayerStoreError as e:
        return {"ok": False, "path": str(store.path), "error": str(e)}
