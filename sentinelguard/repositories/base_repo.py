from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, TypeVar

T = TypeVar("T")


class BaseRepository(ABC, Generic[T]):
    @abstractmethod
    def read_all(self) -> List[Dict[str, Any]]:
        """Obtiene todas las entidades en orden de inserción."""
        pass

    @abstractmethod
    def append_one(self, entity: T) -> bool:
        """Agrega una entidad al final de la colección."""
        pass
