import uuid
from pathlib import Path
from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession
from smartbin.core.config import Settings
from smartbin.core.db import get_session
from smartbin.core.errors import AppError
from smartbin.core.schemas import SuccessOut
from smartbin.modules.assets.links import completion_offset_ms
from smartbin.modules.assets.schemas import AssetUploadEnvelope, AssetListEnvelope
from smartbin.modules.assets.service import AssetService, with_download_url
from smartbin.platform.ports.media_host import MediaHostPort
from smartbin.platform.provider_registry import get_media_host, get_settings

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))

def svc(
    session: AsyncSession = Depends(get_session),
    media_host: MediaHostPort = Depends(get_media_host),
    settings: Settings = Depends(get_settings),
) -> AssetService:
    return AssetService(session, media_host, settings)

@router.post("/upload", response_model=AssetUploadEnvelope)
async def upload_asset(
    video: UploadFile = File(...),
    bin_id: uuid.UUID = Form(..., alias="binId"),
    service: AssetService = Depends(svc),
):
    obj, duplicate = await service.upload(bin_id, video)
    return {"success": True, "asset": with_download_url(obj), "duplicate": duplicate}

@router.get("/by-bin/{bin_id}", response_model=AssetListEnvelope)
async def list_assets(bin_id: uuid.UUID, service: AssetService = Depends(svc)):
    assets = await service.list_for_bin(bin_id)
    return {"success": True, "bin_id": bin_id, "count": len(assets), "assets": assets}

@router.delete("/{asset_id}", response_model=SuccessOut)
async def delete_asset(asset_id: uuid.UUID, service: AssetService = Depends(svc)):
    await service.delete(asset_id)
    return {"success": True}

@router.get("/by-bin/{bin_id}/download-page", response_class=HTMLResponse)
async def download_page(
    request: Request,
    bin_id: uuid.UUID,
    service: AssetService = Depends(svc),
    settings: Settings = Depends(get_settings),
):
    try:
        bin_, assets, plan = await service.download_plan(bin_id)
    except AppError as e:
        return templates.TemplateResponse(
            request, "download_error.html", {"message": e.message}, status_code=e.status_code,
        )
    if not plan:
        return templates.TemplateResponse(request, "download_empty.html", {"bin": bin_})
    return templates.TemplateResponse(
        request,
        "download_page.html",
        {
            "bin": bin_,
            "items": list(zip(plan, assets)),
            "total": len(plan),
            "complete_at_ms": completion_offset_ms(
                plan, settings.DOWNLOAD_STAGGER_MS, settings.DOWNLOAD_SETTLE_MS,
            ),
        },
    )
