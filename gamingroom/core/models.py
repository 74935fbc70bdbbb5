"""
Boundary layer data model(s).

Transport-safe snapshots of registry content. Callers that only need to read or display
what is registered get these instead of the live entity instances held by the registry.
"""

from pydantic import BaseModel, Field, computed_field

from gamingroom.core.shared_types import EntityKind


class EntityRecord(BaseModel):
    """Read-only copy of a single entity. Registry-assigned ids start at 1."""

    model_config = {"frozen": True}

    kind: EntityKind
    id: int = Field(ge=0)
    name: str


class RegistrySummary(BaseModel):
    """Everything the registry holds, per collection, in insertion order."""

    games: list[EntityRecord] = []
    teams: list[EntityRecord] = []
    players: list[EntityRecord] = []

    @computed_field
    @property
    def game_count(self) -> int:
        return len(self.games)

    @computed_field
    @property
    def team_count(self) -> int:
        return len(self.teams)

    @computed_field
    @property
    def player_count(self) -> int:
        return len(self.players)
