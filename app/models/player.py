"""
Models / player.py
Role:
- Describe a player record as it is stored in the mock database (`players.json`).
- Describe the inventory projection and request payloads of the /players routes.

Storage shape (one entry of the JSON array):
    {"uuid": str, "playerRank": str?, "staffRank": str?,
     "inventory": {"contents": str?, "armorContents": str?}?}

- `inventory` is omitted when the player has none (never written as null).
- Empty inventory blobs are omitted as well.
- Rank keys missing from a stored entry stay missing when it is written back.
"""
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Rank(str, Enum):
    """Known rank tags. Ranks are stored as plain strings."""
    DEFAULT = "DEFAULT"
    VIP = "VIP"
    HELPER = "HELPER"
    MOD = "MOD"
    ADMIN = "ADMIN"

    @classmethod
    def is_known(cls, value: str) -> bool:
        return value in {rank.value for rank in cls}


def _none_to_empty(value: Any) -> Any:
    return "" if value is None else value


class InventoryRecord(BaseModel):
    """Serialized game contents owned by a single player (opaque blobs)."""
    model_config = ConfigDict(populate_by_name=True)

    main_contents: str = Field("", alias="contents")
    armor_contents: str = Field("", alias="armorContents")

    blank_nulls = field_validator("main_contents", "armor_contents", mode="before")(_none_to_empty)

    def to_storage(self) -> Dict[str, str]:
        data: Dict[str, str] = {}
        if self.main_contents:
            data["contents"] = self.main_contents
        if self.armor_contents:
            data["armorContents"] = self.armor_contents
        return data


class PlayerRecord(BaseModel):
    """A player keyed by its game-account identity (`uuid`)."""
    model_config = ConfigDict(populate_by_name=True)

    identity: str = Field(alias="uuid", min_length=1)
    # None when the stored entry has no rank key (kept absent on save)
    player_rank: Optional[str] = Field(None, alias="playerRank")
    staff_rank: Optional[str] = Field(None, alias="staffRank")
    inventory: Optional[InventoryRecord] = None

    @classmethod
    def default(cls, identity: str) -> "PlayerRecord":
        """Record created on the first lookup of an unknown identity."""
        return cls(
            identity=identity,
            player_rank=Rank.DEFAULT.value,
            staff_rank=Rank.DEFAULT.value,
            inventory=InventoryRecord(),
        )

    def to_storage(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"uuid": self.identity}
        if self.player_rank is not None:
            data["playerRank"] = self.player_rank
        if self.staff_rank is not None:
            data["staffRank"] = self.staff_rank
        if self.inventory is not None:
            data["inventory"] = self.inventory.to_storage()
        return data


class InventoryView(BaseModel):
    """Flat projection returned by GET /players/inv/{uuid}."""
    model_config = ConfigDict(populate_by_name=True)

    uuid: str
    inv_contents: str = Field("", alias="invContents")
    armor_contents: str = Field("", alias="armorContents")

    @classmethod
    def of(cls, player: PlayerRecord) -> "InventoryView":
        inv = player.inventory or InventoryRecord()
        return cls(
            uuid=player.identity,
            inv_contents=inv.main_contents,
            armor_contents=inv.armor_contents,
        )

    def to_response(self) -> Dict[str, str]:
        data = {"uuid": self.uuid}
        if self.inv_contents:
            data["invContents"] = self.inv_contents
        if self.armor_contents:
            data["armorContents"] = self.armor_contents
        return data


# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------
class SetRankPayload(BaseModel):
    rank: str = Field(..., description="New player rank (DEFAULT, VIP, HELPER, MOD, ADMIN)")


class StringMapPayload(BaseModel):
    """Body decoded as a flat object of strings: unknown keys are allowed, non-string values are not."""
    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def only_strings(cls, data: Any) -> Any:
        if isinstance(data, dict):
            bad = sorted(key for key, value in data.items() if not isinstance(value, str))
            if bad:
                raise ValueError(f"non-string values for: {', '.join(bad)}")
        return data


class SetInvContentsPayload(StringMapPayload):
    inv_contents: str = Field("", alias="invContents", description="Serialized main inventory")


class SetArmorContentsPayload(StringMapPayload):
    armor_contents: str = Field("", alias="armorContents", description="Serialized armor slots")


class MessageResponse(BaseModel):
    message: str
