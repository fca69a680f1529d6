from fastapi import APIRouter
from smartbin.modules.bins.router import router as bins_router
from smartbin.modules.assets.router import router as assets_router
from smartbin.modules.waste.router import router as waste_router
from smartbin.modules.overview.router import router as overview_router

api_router = APIRouter()
api_router.include_router(bins_router, prefix="/bins", tags=["bins"])
api_router.include_router(assets_router, prefix="/assets", tags=["assets"])
api_router.include_router(waste_router, prefix="/waste", tags=["waste"])
api_router.include_router(overview_router, prefix="/overview", tags=["overview"])

@api_router.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}
