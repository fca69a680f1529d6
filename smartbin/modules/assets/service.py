import logging
import uuid
from fastapi import UploadFile
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from smartbin.core.config import Settings
from smartbin.core.errors import NotFound
from smartbin.modules.assets.links import to_download_url, build_staggered_download_sequence, ScheduledDownload
from smartbin.modules.assets.models import Asset
from smartbin.modules.assets.repository import AssetRepository
from smartbin.modules.assets.schemas import AssetOut
from smartbin.modules.bins.models import Bin
from smartbin.modules.bins.service import BinService
from smartbin.modules.media.service import MediaService
from smartbin.platform.ports.media_host import MediaHostPort

logger = logging.getLogger(__name__)

def with_download_url(obj: Asset) -> AssetOut:
    return AssetOut.model_validate(obj).model_copy(update={"download_url": to_download_url(obj.url)})

class AssetService:
    def __init__(self, session: AsyncSession, media_host: MediaHostPort, settings: Settings):
        self.session = session
        self.settings = settings
        self.repo = AssetRepository(session)
        self.bins = BinService(session)
        self.media = MediaService(media_host)

    async def register(self, bin_id: uuid.UUID, storage_url: str, storage_id: str) -> tuple[Asset, bool]:
        """Record a stored blob against a bin. Returns (asset, duplicate)."""
        existing = await self.repo.find(bin_id, storage_id)
        if existing:
            return existing, True
        try:
            obj = await self.repo.create(bin_id=bin_id, url=storage_url, storage_id=storage_id)
            await self.session.commit()
        except IntegrityError:
            # a concurrent upload of the same blob got there first
            await self.session.rollback()
            existing = await self.repo.find(bin_id, storage_id)
            if existing is None:
                raise
            return existing, True
        return obj, False

    async def upload(self, bin_id: uuid.UUID, file: UploadFile) -> tuple[Asset, bool]:
        await self.bins.get(bin_id)
        stored = await self.media.store(
            file, resource_type="video", folder=self.settings.VIDEO_FOLDER,
            max_bytes=self.settings.MAX_VIDEO_BYTES,
        )
        obj, duplicate = await self.register(bin_id, stored.url, stored.storage_id)
        if duplicate:
            logger.info(f"Asset {stored.storage_id} already registered for bin {bin_id}")
        else:
            logger.info(f"Registered asset {obj.id} for bin {bin_id}")
        return obj, duplicate

    async def list_for_bin(self, bin_id: uuid.UUID) -> list[AssetOut]:
        await self.bins.get(bin_id)
        return [with_download_url(a) for a in await self.repo.list_for_bin(bin_id)]

    async def delete(self, asset_id: uuid.UUID) -> None:
        obj = await self.repo.get(asset_id)
        if not obj:
            raise NotFound("Not found")
        # blobs are content addressed; another bin may hold the same video
        if await self.repo.count_other_references(obj.storage_id, asset_id):
            logger.info(f"Keeping {obj.storage_id}, still referenced by other assets")
        else:
            await self.media.destroy(
                obj.storage_id, resource_type="video",
                strict=self.settings.ASSET_REMOTE_DELETE_STRICT,
            )
        await self.repo.delete(asset_id)
        await self.session.commit()
        logger.info(f"Deleted asset {asset_id}")

    async def download_plan(self, bin_id: uuid.UUID) -> tuple[Bin, list[Asset], list[ScheduledDownload]]:
        bin_ = await self.bins.get(bin_id)
        assets = list(await self.repo.list_for_bin(bin_id))
        plan = build_staggered_download_sequence(
            [a.url for a in assets], delay_ms=self.settings.DOWNLOAD_STAGGER_MS,
        )
        return bin_, assets, plan
