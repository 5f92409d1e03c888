# ============================================================================
# FILE: streamify/api/v1/router.py
# ============================================================================
from fastapi import APIRouter
from streamify.api.v1.endpoints import admin, library, music, playlist, share, user

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(music.router, prefix="/music", tags=["music"])
api_router.include_router(playlist.router, prefix="/playlist", tags=["playlist"])
api_router.include_router(user.router, prefix="/user", tags=["user"])
api_router.include_router(library.router, prefix="/library", tags=["library"])
api_router.include_router(share.router, prefix="/share", tags=["share"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
