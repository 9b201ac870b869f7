from fastapi import APIRouter
from json2dart.api.routes_health import router as health_router
from json2dart.api.routes_generate import router as generate_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(generate_router, tags=["generate"])
