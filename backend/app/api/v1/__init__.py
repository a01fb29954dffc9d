"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.profiles import router as profiles_router
from app.api.v1.quiz import router as quiz_router
from app.api.v1.candidates import router as candidates_router
from app.api.v1.swipes import router as swipes_router
from app.api.v1.matches import router as matches_router

router = APIRouter(prefix="/api/v1")

router.include_router(profiles_router)
router.include_router(quiz_router)
router.include_router(candidates_router)
router.include_router(swipes_router)
router.include_router(matches_router)
