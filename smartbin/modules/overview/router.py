from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from smartbin.core.db import get_session
from smartbin.modules.overview.schemas import OverviewEnvelope
from smartbin.modules.overview.service import OverviewService

router = APIRouter()

@router.get("", response_model=OverviewEnvelope)
async def overview(session: AsyncSession = Depends(get_session)):
    summary = await OverviewService(session).summary()
    return {"success": True, **summary}
