"""Favorite toggles for recordings, poems and the poet"""

from typing import List

from fastapi import APIRouter, Depends, status

from ...api.dependencies import get_current_user, get_unit_of_work
from ...application.dtos.favorite_dtos import FavoriteDto, FavoriteStatusResponse, MessageResponse
from ...application.use_cases.manage_favorites import FavoritesUseCase
from ...domain.entities.user import User
from ...domain.enums import FavoriteKind
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


# Recordings

@router.get("/recordings", response_model=List[FavoriteDto])
async def list_favorite_recordings(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await FavoritesUseCase(unit_of_work, FavoriteKind.RECORDING).list(current_user.id)


@router.get("/recordings/{recording_id}", response_model=FavoriteStatusResponse)
async def is_favorite_recording(
    recording_id: int,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    favorited = await FavoritesUseCase(unit_of_work, FavoriteKind.RECORDING).exists(current_user.id, recording_id)
    return FavoriteStatusResponse(favorited=favorited)


@router.post("/recordings/{recording_id}", response_model=FavoriteDto, status_code=status.HTTP_201_CREATED)
async def add_favorite_recording(
    recording_id: int,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await FavoritesUseCase(unit_of_work, FavoriteKind.RECORDING).add(current_user.id, recording_id)


@router.delete("/recordings/{recording_id}", response_model=MessageResponse)
async def remove_favorite_recording(
    recording_id: int,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await FavoritesUseCase(unit_of_work, FavoriteKind.RECORDING).remove(current_user.id, recording_id)
    return MessageResponse(message="Removed from favorites")


# Poems

@router.get("/poems", response_model=List[FavoriteDto])
async def list_favorite_poems(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await FavoritesUseCase(unit_of_work, FavoriteKind.POEM).list(current_user.id)


@router.get("/poems/{poem_id}", response_model=FavoriteStatusResponse)
async def is_favorite_poem(
    poem_id: int,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    favorited = await FavoritesUseCase(unit_of_work, FavoriteKind.POEM).exists(current_user.id, poem_id)
    return FavoriteStatusResponse(favorited=favorited)


@router.post("/poems/{poem_id}", response_model=FavoriteDto, status_code=status.HTTP_201_CREATED)
async def add_favorite_poem(
    poem_id: int,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await FavoritesUseCase(unit_of_work, FavoriteKind.POEM).add(current_user.id, poem_id)


@router.delete("/poems/{poem_id}", response_model=MessageResponse)
async def remove_favorite_poem(
    poem_id: int,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await FavoritesUseCase(unit_of_work, FavoriteKind.POEM).remove(current_user.id, poem_id)
    return MessageResponse(message="Removed from favorites")


# Poet

@router.get("/poet", response_model=FavoriteStatusResponse)
async def is_favorite_poet(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    favorited = await FavoritesUseCase(unit_of_work, FavoriteKind.POET).exists(current_user.id)
    return FavoriteStatusResponse(favorited=favorited)


@router.post("/poet", response_model=FavoriteDto, status_code=status.HTTP_201_CREATED)
async def add_favorite_poet(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await FavoritesUseCase(unit_of_work, FavoriteKind.POET).add(current_user.id)


@router.delete("/poet", response_model=MessageResponse)
async def remove_favorite_poet(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await FavoritesUseCase(unit_of_work, FavoriteKind.POET).remove(current_user.id)
    return MessageResponse(message="Removed from favorites")
