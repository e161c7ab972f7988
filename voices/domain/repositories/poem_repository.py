"""Poem repository interface"""

from abc import ABC, abstractmethod
from typing import Optional, List

from ..entities.poem import Poem
from ..value_objects.entity_ids import PoemId


class IPoemRepository(ABC):

    @abstractmethod
    async def list_all(self) -> List[Poem]:
        pass

    @abstractmethod
    async def get_by_id(self, poem_id: PoemId) -> Optional[Poem]:
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Poem]:
        pass

    @abstractmethod
    async def add(self, poem: Poem) -> Poem:
        pass
