"""
Module routes/players.py
Role:
- Player profile, rank and inventory endpoints consumed by the proxy and hubs.

Integrations:
- `PlayerStore` (injected with `Depends(get_player_store)`): all reads/writes of
  the mock database.
- `api_key_required`: every route of this router needs the shared secret.

Status codes:
- 404 unknown player, 409 inventory update on a player without inventory,
  400 invalid payload (see `app.main` for body validation), 500 storage failure.
"""
from fastapi import APIRouter, Depends, HTTPException

from app.deps.auth import api_key_required
from app.models.player import (
    MessageResponse,
    SetArmorContentsPayload,
    SetInvContentsPayload,
    SetRankPayload,
)
from app.services.player_store import (
    CorruptData,
    InvalidPayload,
    NotFound,
    PlayerStore,
    PlayerStoreError,
    PreconditionFailed,
    StorageUnavailable,
    get_player_store,
)

router = APIRouter(prefix="/players", tags=["players"], dependencies=[Depends(api_key_required)])


def _http_error(exc: PlayerStoreError) -> HTTPException:
    """Maps a store error to the HTTP error returned to the caller."""
    if isinstance(exc, NotFound):
        return HTTPException(status_code=404, detail="Player not found")
    if isinstance(exc, PreconditionFailed):
        return HTTPException(status_code=409, detail="Player has no inventory")
    if isinstance(exc, InvalidPayload):
        return HTTPException(status_code=400, detail="Invalid rank")
    if isinstance(exc, StorageUnavailable) and exc.operation == "save":
        return HTTPException(status_code=500, detail="Failed to save player data")
    if isinstance(exc, (StorageUnavailable, CorruptData)):
        return HTTPException(status_code=500, detail="Failed to load player data")
    return HTTPException(status_code=500, detail="Player store error")


@router.get("/{uuid}")
def get_player(uuid: str, store: PlayerStore = Depends(get_player_store)):
    """Returns the player (created with DEFAULT ranks on first lookup)."""
    try:
        player = store.get_or_create(uuid)
    except PlayerStoreError as exc:
        raise _http_error(exc) from exc
    return player.to_storage()


@router.post("/setrank/{uuid}", response_model=MessageResponse)
def set_rank(uuid: str, payload: SetRankPayload, store: PlayerStore = Depends(get_player_store)):
    try:
        store.set_rank(uuid, payload.rank)
    except PlayerStoreError as exc:
        raise _http_error(exc) from exc
    return MessageResponse(message="Player rank updated successfully")


@router.get("/inv/{uuid}")
def get_inv_contents(uuid: str, store: PlayerStore = Depends(get_player_store)):
    """Inventory view: `uuid` plus the non-empty blobs (`invContents`, `armorContents`)."""
    try:
        view = store.get_inventory(uuid)
    except PlayerStoreError as exc:
        raise _http_error(exc) from exc
    return view.to_response()


@router.post("/setinvcontents/{uuid}", response_model=MessageResponse)
def set_inv_contents(
    uuid: str,
    payload: SetInvContentsPayload,
    store: PlayerStore = Depends(get_player_store),
):
    try:
        store.set_inventory_main(uuid, payload.inv_contents)
    except PlayerStoreError as exc:
        raise _http_error(exc) from exc
    return MessageResponse(message="Inventory contents updated successfully")


@router.post("/setarmorcontents/{uuid}", response_model=MessageResponse)
def set_armor_contents(
    uuid: str,
    payload: SetArmorContentsPayload,
    store: PlayerStore = Depends(get_player_store),
):
    try:
        store.set_inventory_armor(uuid, payload.armor_contents)
    except PlayerStoreError as exc:
        raise _http_error(exc) from exc
    return MessageResponse(message="Armor contents updated successfully")
