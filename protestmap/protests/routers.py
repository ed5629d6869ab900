from fastapi import APIRouter

from .features.create_protest.router import router as create_protest_router
from .features.list_protests.router import router as list_protests_router

router = APIRouter()

router.include_router(list_protests_router)
router.include_router(create_protest_router)
