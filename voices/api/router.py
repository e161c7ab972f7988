"""Main API router"""

from fastapi import APIRouter

from .routes import auth, poems, recordings, submissions, admin, moderation_links, favorites

# Main API router
api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(poems.router, prefix="/poems", tags=["poems"])
api_router.include_router(recordings.router, prefix="/recordings", tags=["recordings"])
api_router.include_router(submissions.router, prefix="/submissions", tags=["submissions"])
api_router.include_router(moderation_links.router, prefix="/admin", tags=["moderation"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(favorites.router, prefix="/favorites", tags=["favorites"])
