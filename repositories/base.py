"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Dict, Generic, Hashable, List, Optional, TypeVar
from abc import ABC, abstractmethod

from app.exceptions import ConflictError

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations over an in-memory store.
    All repositories should inherit from this class.
    """

    def __init__(self):
        self._entities: Dict[Hashable, ModelType] = {}

    @abstractmethod
    def key_for(self, entity: ModelType) -> Hashable:
        """Return the identifier an entity is stored under"""

    def get_by_id(self, entity_id: Hashable) -> Optional[ModelType]:
        """
        Get entity by ID.

        Args:
            entity_id: Entity identifier

        Returns:
            Entity or None if not found
        """
        return self._entities.get(entity_id)

    def get_all(self, skip: int = 0, limit: int = 100) -> List[ModelType]:
        """Get all entities with pagination, in insertion order"""
        return list(self._entities.values())[skip : skip + limit]

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        key = self.key_for(entity)
        if key in self._entities:
            raise ConflictError(
                f"{self.__class__.__name__} already holds an entry for {key}"
            )
        self._entities[key] = entity
        return entity

    def update(self, entity: ModelType) -> ModelType:
        """Replace an existing entity, or store it if it is new"""
        self._entities[self.key_for(entity)] = entity
        return entity

    def delete(self, entity_id: Hashable) -> bool:
        """Delete entity by ID"""
        return self._entities.pop(entity_id, None) is not None

    def exists(self, entity_id: Hashable) -> bool:
        """Check if entity exists"""
        return entity_id in self._entities

    def count(self) -> int:
        return len(self._entities)
