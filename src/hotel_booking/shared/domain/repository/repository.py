from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository base class

    - abstracts how entities are read from storage
    """

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """Look up an entity by its identifier"""
        raise NotImplementedError
