from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from smartbin.core.db import get_session
from smartbin.modules.bins.schemas import BinCreate, BinEnvelope, BinListEnvelope
from smartbin.modules.bins.service import BinService

router = APIRouter()

def svc(session: AsyncSession = Depends(get_session)) -> BinService:
    return BinService(session)

@router.post("", response_model=BinEnvelope, status_code=status.HTTP_201_CREATED)
async def create_bin(payload: BinCreate, service: BinService = Depends(svc)):
    obj = await service.create(payload)
    return {"success": True, "bin": obj}

@router.get("", response_model=BinListEnvelope)
async def list_bins(service: BinService = Depends(svc)):
    return {"success": True, "bins": await service.list()}
