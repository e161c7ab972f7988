"""Poem repository implementation using SQLAlchemy ORM"""

from typing import Optional, List

from ...domain.entities.poem import Poem
from ...domain.repositories.poem_repository import IPoemRepository
from ...domain.value_objects.entity_ids import PoemId
from ..orm.poem_model import PoemModel
from .base import SqlAlchemyRepository


class PoemRepositoryImpl(SqlAlchemyRepository, IPoemRepository):
    """Repository implementation for the poem catalog"""

    async def list_all(self) -> List[Poem]:
        """Get all poems in catalog order"""
        return await self._run(lambda: [
            self._map_to_entity(model)
            for model in self.session.query(PoemModel).order_by(PoemModel.id).all()
        ])

    async def get_by_id(self, poem_id: PoemId) -> Optional[Poem]:
        """Get poem by ID"""
        def query():
            model = self.session.query(PoemModel).filter(PoemModel.id == poem_id.value).first()
            return self._map_to_entity(model) if model else None
        return await self._run(query)

    async def get_by_slug(self, slug: str) -> Optional[Poem]:
        """Get poem by its URL slug"""
        def query():
            model = self.session.query(PoemModel).filter(PoemModel.slug == slug).first()
            return self._map_to_entity(model) if model else None
        return await self._run(query)

    async def add(self, poem: Poem) -> Poem:
        """Add a new poem"""
        model = PoemModel(
            title=poem.title,
            slug=poem.slug,
            year=poem.year,
            external_link=poem.external_link,
            context=poem.context,
        )
        return await self._run(lambda: self._map_to_entity(self._add_and_flush(model)))

    def _map_to_entity(self, model: PoemModel) -> Poem:
        """Map ORM model to domain entity"""
        return Poem(
            id=PoemId(model.id),
            title=model.title,
            slug=model.slug,
            year=model.year,
            external_link=model.external_link,
            context=model.context,
        )
