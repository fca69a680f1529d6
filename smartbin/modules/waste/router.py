import uuid
from fastapi import APIRouter, Body, Depends, File, Form, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession
from smartbin.core.config import Settings
from smartbin.core.db import get_session
from smartbin.core.schemas import SuccessOut
from smartbin.modules.waste.schemas import WasteCategoryUpdate, WasteDelete, WasteEnvelope, WasteListEnvelope
from smartbin.modules.waste.service import WasteService
from smartbin.platform.ports.media_host import MediaHostPort
from smartbin.platform.provider_registry import get_media_host, get_settings

router = APIRouter()

def svc(
    session: AsyncSession = Depends(get_session),
    media_host: MediaHostPort = Depends(get_media_host),
    settings: Settings = Depends(get_settings),
) -> WasteService:
    return WasteService(session, media_host, settings)

@router.post("", response_model=WasteEnvelope, status_code=status.HTTP_201_CREATED)
async def upload_waste(
    image: UploadFile | None = File(None),
    type: str | None = Form(None),
    binlocation: str | None = Form(None),
    service: WasteService = Depends(svc),
):
    obj = await service.upload(image, type, binlocation)
    return {"success": True, "waste": obj}

@router.get("", response_model=WasteListEnvelope)
async def list_waste(service: WasteService = Depends(svc)):
    return {"success": True, "waste": await service.list()}

@router.patch("/{waste_id}", response_model=WasteEnvelope)
async def set_waste_category(
    waste_id: uuid.UUID,
    payload: WasteCategoryUpdate,
    service: WasteService = Depends(svc),
):
    obj = await service.set_category(waste_id, payload.category)
    return {"success": True, "waste": obj}

@router.delete("/{waste_id}", response_model=SuccessOut)
async def delete_waste(
    waste_id: uuid.UUID,
    payload: WasteDelete | None = Body(None),
    service: WasteService = Depends(svc),
):
    await service.delete(waste_id, payload.storage_id if payload else None)
    return {"success": True}
