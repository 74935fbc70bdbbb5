"""
Entities tracked by the registry.

Every kind shares the same {id, name} shape. Instances are normally created by the
registry only (see gamingroom/services/game_service.py); constructing one directly
performs no validation at all.
"""

from dataclasses import dataclass
from typing import ClassVar

from gamingroom.core.exceptions import GamingRoomError
from gamingroom.core.models import EntityRecord
from gamingroom.core.shared_types import EntityKind


@dataclass(frozen=True)
class Entity:
    id: int
    name: str

    kind: ClassVar[EntityKind]

    def __str__(self) -> str:
        return f"Entity [id={self.id}, name={self.name}]"

    def to_record(self) -> EntityRecord:
        """Convert to the boundary model handed out to other layers."""
        if type(self) is Entity:
            raise GamingRoomError("A plain Entity has no kind; use Game, Team or Player.")
        return EntityRecord(kind=self.kind, id=self.id, name=self.name)


@dataclass(frozen=True)
class Game(Entity):
    kind: ClassVar[EntityKind] = EntityKind.GAME


@dataclass(frozen=True)
class Team(Entity):
    kind: ClassVar[EntityKind] = EntityKind.TEAM


@dataclass(frozen=True)
class Player(Entity):
    kind: ClassVar[EntityKind] = EntityKind.PLAYER
