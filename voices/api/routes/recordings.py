"""Public recording routes"""

from typing import List

from fastapi import APIRouter, Depends

from ...api.dependencies import get_unit_of_work
from ...application.dtos.poem_dtos import RecordingDto
from ...application.use_cases.catalog_queries import CatalogQueries
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("", response_model=List[RecordingDto])
async def list_recordings(unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    """Get all approved recordings, newest first"""
    return await CatalogQueries(unit_of_work).list_recordings()
