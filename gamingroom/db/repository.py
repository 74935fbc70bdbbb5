"""Protocol repository (one per entity kind; only an in-memory implementation exists)"""

from typing import Protocol, TypeVar

from gamingroom.domain.entities import Entity

E_co = TypeVar("E_co", bound=Entity, covariant=True)


class EntityRepository(Protocol[E_co]):
    """Storage of a single entity kind, paired with its own id counter."""

    def add(self, name: str) -> E_co:
        """Return the entity with this name, creating it (with the next id) if it does not exist yet."""
        ...

    def get_by_id(self, entity_id: int) -> E_co | None:
        """Get entity by ID, if it exists."""
        ...

    def get_by_name(self, name: str) -> E_co | None:
        """Get entity by exact name, if it exists."""
        ...

    def get_at(self, index: int) -> E_co:
        """Get entity by position in insertion order. Raises IndexError outside of [0, count)."""
        ...

    def count(self) -> int:
        """Number of stored entities."""
        ...

    def all(self) -> list[E_co]:
        """All stored entities in insertion order."""
        ...
