"""Implementation of EntityRepository using a plain list and an id counter"""

import logging
from typing import Generic, TypeVar

from gamingroom.domain.entities import Entity

E = TypeVar("E", bound=Entity)

logger = logging.getLogger(__name__)

FIRST_ID = 1


class InMemoryEntityRepository(Generic[E]):
    """
    Entities of one kind, kept in insertion order.

    Lookups are linear scans; ids are handed out sequentially and never reused
    (there is no way to remove an entity).
    """

    def __init__(self, entity_cls: type[E]) -> None:
        self.entity_cls = entity_cls
        self._entities: list[E] = []
        self._next_id = FIRST_ID

    def add(self, name: str) -> E:
        """Return the entity with this name, creating it (with the next id) if it does not exist yet."""
        existing = self.get_by_name(name)
        if existing is not None:
            logger.debug("Reusing %s", existing)
            return existing

        entity = self.entity_cls(self._next_id, name)
        self._next_id += 1
        self._entities.append(entity)
        logger.debug("Created %s %s", self.entity_cls.kind, entity)
        return entity

    def get_by_id(self, entity_id: int) -> E | None:
        """Get entity by ID, if it exists."""
        return next((e for e in self._entities if e.id == entity_id), None)

    def get_by_name(self, name: str) -> E | None:
        """Get entity by exact name, if it exists."""
        return next((e for e in self._entities if e.name == name), None)

    def get_at(self, index: int) -> E:
        """Get entity by position in insertion order. Raises IndexError outside of [0, count)."""
        # negative indices would silently wrap around on a list
        if not 0 <= index < len(self._entities):
            raise IndexError(
                f"{self.entity_cls.kind} index {index} out of range (count: {len(self._entities)})"
            )
        return self._entities[index]

    def count(self) -> int:
        return len(self._entities)

    def all(self) -> list[E]:
        return list(self._entities)
