"""
Registry of games, teams and players.

Each kind lives in its own repository with its own id space, so a team and a player
can share a name (and an id) without colliding.
"""

import logging
from typing import TypeVar

from gamingroom.core.exceptions import InvalidLookupKeyError
from gamingroom.core.models import RegistrySummary
from gamingroom.db.memory_repository import InMemoryEntityRepository
from gamingroom.db.repository import EntityRepository
from gamingroom.domain.entities import Entity, Game, Player, Team

E = TypeVar("E", bound=Entity)

logger = logging.getLogger(__name__)


class GameService:
    """Create-or-get and lookup operations for every entity kind."""

    def __init__(
        self,
        games: EntityRepository[Game] | None = None,
        teams: EntityRepository[Team] | None = None,
        players: EntityRepository[Player] | None = None,
    ) -> None:
        self.games = games if games is not None else InMemoryEntityRepository(Game)
        self.teams = teams if teams is not None else InMemoryEntityRepository(Team)
        self.players = (
            players if players is not None else InMemoryEntityRepository(Player)
        )

    # --- Games ---
    def add_game(self, name: str) -> Game:
        """Return the game with this name, creating it if needed."""
        return self.games.add(name)

    def get_game(self, key: int | str) -> Game | None:
        """Find a game by id (int) or by name (str). None if there is no match."""
        return self._lookup(self.games, key)

    def _get_game_at(self, index: int) -> Game:
        """Game at a position in insertion order. Meant for tests; raises IndexError when out of range."""
        return self.games.get_at(index)

    def get_game_count(self) -> int:
        return self.games.count()

    # --- Teams ---
    def add_team(self, name: str) -> Team:
        """Return the team with this name, creating it if needed."""
        return self.teams.add(name)

    def get_team(self, key: int | str) -> Team | None:
        return self._lookup(self.teams, key)

    def get_team_count(self) -> int:
        return self.teams.count()

    # --- Players ---
    def add_player(self, name: str) -> Player:
        """Return the player with this name, creating it if needed."""
        return self.players.add(name)

    def get_player(self, key: int | str) -> Player | None:
        return self._lookup(self.players, key)

    def get_player_count(self) -> int:
        return self.players.count()

    def summary(self) -> RegistrySummary:
        """Snapshot of all three collections."""
        return RegistrySummary(
            games=[game.to_record() for game in self.games.all()],
            teams=[team.to_record() for team in self.teams.all()],
            players=[player.to_record() for player in self.players.all()],
        )

    # -- Internal helpers --
    def _lookup(self, repo: EntityRepository[E], key: int | str) -> E | None:
        """Dispatch on key type: int means id, str means name."""
        # bool is a subclass of int, but True is not meant as id 1
        if isinstance(key, bool) or not isinstance(key, (int, str)):
            raise InvalidLookupKeyError(
                f"Lookup key must be an id (int) or a name (str), got {type(key).__name__}: {key!r}"
            )
        if isinstance(key, int):
            return repo.get_by_id(key)
        return repo.get_by_name(key)


# --- Shared access point ---
_SERVICE: GameService | None = None


def get_instance() -> GameService:
    """
    The process-wide registry, created on first access.

    Prefer passing a GameService around explicitly; this exists for callers that have no
    composition root to receive one from.
    """
    global _SERVICE
    if _SERVICE is None:
        _SERVICE = GameService()
        logger.info("Created shared GameService instance")
    return _SERVICE


def reset_instance_for_tests() -> None:
    """Drop the shared instance so the next get_instance() starts from an empty registry."""
    global _SERVICE
    _SERVICE = None
