"""
Service: player_store.py
Role:
- Own the player records of the mock database (`players.json`): load, lookup,
  default creation, field-level updates and persistence.
- Provide a shared `PlayerStore` singleton (`get_player_store()`), injected into
  the routes through `Depends`.

Storage:
- A single JSON array, read in full and rewritten in full on every change
  (see `app.models.player` for the entry shape).
- Writes go through `write_json` (temp file + rename): a failed save never
  leaves a truncated file behind.

Concurrency:
- Each public operation runs its whole load → modify → save cycle under the
  store's RLock, so concurrent requests cannot lose each other's updates.

Errors (all `PlayerStoreError`):
- StorageUnavailable: the file is missing (unless `create_if_missing`), or cannot be read or written.
- CorruptData: the file content is not a valid player array.
- NotFound: unknown identity on a read/update path.
- PreconditionFailed: inventory update on a player without inventory.
- InvalidPayload: rejected input (empty identity, unknown rank in strict mode).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock, RLock
from typing import Callable, List, Optional, Sequence

import orjson
from pydantic import ValidationError

from app.config.settings import settings
from app.models.player import InventoryRecord, InventoryView, PlayerRecord, Rank
from .io_utils import read_json, write_json

logger = logging.getLogger(__name__)


class PlayerStoreError(RuntimeError):
    """Base error of the player store."""


class StorageUnavailable(PlayerStoreError):
    def __init__(self, message: str, *, operation: str) -> None:
        super().__init__(message)
        self.operation = operation


class CorruptData(PlayerStoreError):
    pass


class NotFound(PlayerStoreError):
    def __init__(self, identity: str) -> None:
        super().__init__(f"Player {identity!r} not found")
        self.identity = identity


class PreconditionFailed(PlayerStoreError):
    pass


class InvalidPayload(PlayerStoreError):
    pass


@dataclass
class PlayerStore:
    path: Path
    strict_ranks: bool = False
    create_if_missing: bool = False
    _lock: RLock = field(default_factory=RLock, init=False, repr=False)

    # -----------------------------
    # Load / Save
    # -----------------------------
    def load_all(self) -> List[PlayerRecord]:
        """
        Reads every player record, in file order.
        A missing file is `StorageUnavailable`, unless `create_if_missing` (then: empty store).
        """
        if not self.path.exists():
            if self.create_if_missing:
                return []
            logger.error("Player data file missing", extra={"store_path": str(self.path)})
            raise StorageUnavailable(f"{self.path} does not exist", operation="load")
        try:
            raw = read_json(self.path)
        except orjson.JSONDecodeError as exc:
            logger.error("Undecodable player data", exc_info=True, extra={"store_path": str(self.path)})
            raise CorruptData(f"{self.path} is not valid JSON") from exc
        except OSError as exc:
            logger.error("Cannot read player data", exc_info=True, extra={"store_path": str(self.path)})
            raise StorageUnavailable(f"Cannot read {self.path}", operation="load") from exc

        if raw is None:
            return []
        if not isinstance(raw, list):
            raise CorruptData(f"{self.path} must contain a JSON array, got {type(raw).__name__}")
        try:
            return [PlayerRecord.model_validate(entry) for entry in raw]
        except ValidationError as exc:
            logger.error("Invalid player entry", exc_info=True, extra={"store_path": str(self.path)})
            raise CorruptData(f"{self.path} holds an invalid player entry") from exc

    def save_all(self, records: Sequence[PlayerRecord]) -> None:
        """Rewrites the whole file with `records` (all or nothing)."""
        try:
            write_json(self.path, [record.to_storage() for record in records])
        except (OSError, TypeError) as exc:
            logger.error("Cannot write player data", exc_info=True, extra={"store_path": str(self.path)})
            raise StorageUnavailable(f"Cannot write {self.path}", operation="save") from exc

    def snapshot(self) -> List[PlayerRecord]:
        with self._lock:
            return self.load_all()

    # -----------------------------
    # Lookups
    # -----------------------------
    @staticmethod
    def find_by_identity(records: Sequence[PlayerRecord], identity: str) -> Optional[int]:
        """Index of the first record with this identity, or None."""
        for index, record in enumerate(records):
            if record.identity == identity:
                return index
        return None

    def get_or_create(self, identity: str) -> PlayerRecord:
        """
        Returns the player, creating and persisting a DEFAULT one on first sight.
        Writes at most once per call.
        """
        _require_identity(identity)
        with self._lock:
            players = self.load_all()
            index = self.find_by_identity(players, identity)
            if index is not None:
                return players[index]

            player = PlayerRecord.default(identity)
            players.append(player)
            self.save_all(players)
            logger.info("Default player created", extra={"player_uuid": identity})
            return player

    def get_inventory(self, identity: str) -> InventoryView:
        """Inventory projection. A player without inventory yields empty blobs."""
        with self._lock:
            players = self.load_all()
            index = self.find_by_identity(players, identity)
            if index is None:
                raise NotFound(identity)
            return InventoryView.of(players[index])

    # -----------------------------
    # Updates
    # -----------------------------
    def set_rank(self, identity: str, rank: str) -> PlayerRecord:
        if self.strict_ranks and not Rank.is_known(rank):
            raise InvalidPayload(f"Unknown rank {rank!r}")

        def apply(player: PlayerRecord) -> None:
            player.player_rank = rank

        player = self._update(identity, apply)
        logger.info("Player rank updated", extra={"player_uuid": identity, "rank": rank})
        return player

    def set_inventory_main(self, identity: str, blob: str) -> PlayerRecord:
        def apply(player: PlayerRecord) -> None:
            _owned_inventory(player).main_contents = blob

        player = self._update(identity, apply)
        logger.info("Inventory contents updated", extra={"player_uuid": identity, "size": len(blob)})
        return player

    def set_inventory_armor(self, identity: str, blob: str) -> PlayerRecord:
        def apply(player: PlayerRecord) -> None:
            _owned_inventory(player).armor_contents = blob

        player = self._update(identity, apply)
        logger.info("Armor contents updated", extra={"player_uuid": identity, "size": len(blob)})
        return player

    def _update(self, identity: str, apply: Callable[[PlayerRecord], None]) -> PlayerRecord:
        """Load, change one player in place, save. Nothing is written if `apply` raises."""
        with self._lock:
            players = self.load_all()
            index = self.find_by_identity(players, identity)
            if index is None:
                raise NotFound(identity)
            player = players[index]
            apply(player)
            self.save_all(players)
            return player


def _require_identity(identity: str) -> None:
    if not identity:
        raise InvalidPayload("Player identity must not be empty")


def _owned_inventory(player: PlayerRecord) -> InventoryRecord:
    if player.inventory is None:
        raise PreconditionFailed(f"Player {player.identity!r} has no inventory")
    return player.inventory


# -----------------------------
# Shared instance
# -----------------------------
_instance: Optional[PlayerStore] = None
_instance_lock = Lock()


def get_player_store() -> PlayerStore:
    """Single `PlayerStore` for the whole backend (lazy, built from settings)."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = PlayerStore(
                settings.players_path,
                strict_ranks=settings.STRICT_RANKS,
                create_if_missing=settings.CREATE_IF_MISSING,
            )
        return _instance
