"""Public poem catalog routes"""

from typing import Dict, List

from fastapi import APIRouter, Depends

from ...api.dependencies import get_unit_of_work
from ...application.dtos.poem_dtos import PoemDetailResponse, PoemDto
from ...application.use_cases.catalog_queries import CatalogQueries
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("", response_model=List[PoemDto])
async def list_poems(unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    """Get all poems"""
    return await CatalogQueries(unit_of_work).list_poems()


@router.get("/stats", response_model=Dict[str, int])
async def poem_stats(unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    """Approved recording count per poem slug"""
    return await CatalogQueries(unit_of_work).recording_counts()


@router.get("/{slug}", response_model=PoemDetailResponse)
async def get_poem(slug: str, unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    """Get a poem with its approved recordings"""
    return await CatalogQueries(unit_of_work).poem_detail(slug)
