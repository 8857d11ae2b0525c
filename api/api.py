from fastapi import APIRouter
from .tournaments import router as tournaments_router
from .matches import router as matches_router

router = APIRouter()

# Include routers
router.include_router(tournaments_router, prefix="/tournaments", tags=["Tournaments"])
router.include_router(matches_router, prefix="/tournaments", tags=["Matches"])
