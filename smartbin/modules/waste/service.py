import logging
import uuid
from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession
from smartbin.core.config import Settings
from smartbin.core.errors import InvalidCategory, InvalidInput, NotFound
from smartbin.modules.media.service import MediaService
from smartbin.modules.waste.categories import CATEGORY_VALUES, parse_category
from smartbin.modules.waste.models import Waste, TYPE_MAX_LENGTH, BINLOCATION_MAX_LENGTH
from smartbin.modules.waste.repository import WasteRepository
from smartbin.platform.ports.media_host import MediaHostPort

logger = logging.getLogger(__name__)

class WasteService:
    def __init__(self, session: AsyncSession, media_host: MediaHostPort, settings: Settings):
        self.session = session
        self.settings = settings
        self.repo = WasteRepository(session)
        self.media = MediaService(media_host)

    async def upload(self, file: UploadFile | None, type_: str | None, binlocation: str | None) -> Waste:
        if file is None:
            raise InvalidInput("No file provided")
        type_ = (type_ or "").strip()
        binlocation = (binlocation or "").strip()
        if not type_ or not binlocation:
            raise InvalidInput("Missing type or binlocation")
        # checked before the upload so a rejected entry never leaves a blob behind
        if len(type_) > TYPE_MAX_LENGTH:
            raise InvalidInput(f"type must be at most {TYPE_MAX_LENGTH} characters")
        if len(binlocation) > BINLOCATION_MAX_LENGTH:
            raise InvalidInput(f"binlocation must be at most {BINLOCATION_MAX_LENGTH} characters")

        stored = await self.media.store(
            file, resource_type="image", folder=self.settings.WASTE_FOLDER,
            max_bytes=self.settings.MAX_WASTE_IMAGE_BYTES,
        )
        obj = await self.repo.create(
            type=type_,
            normalized_type=type_.lower(),
            binlocation=binlocation,
            image_url=stored.url,
            storage_id=stored.storage_id,
        )
        await self.session.commit()
        logger.info(f"Recorded waste {obj.id} ({obj.normalized_type}) at {obj.binlocation}")
        return obj

    async def list(self):
        return await self.repo.list()

    async def set_category(self, waste_id: uuid.UUID, value) -> Waste:
        category = parse_category(value)
        if category is None:
            raise InvalidCategory(f"Invalid category, expected one of {', '.join(CATEGORY_VALUES)}")
        obj = await self.repo.set_category(waste_id, category.value)
        if not obj:
            raise NotFound("Waste entry not found")
        await self.session.commit()
        return obj

    async def delete(self, waste_id: uuid.UUID, storage_id: str | None = None) -> None:
        obj = await self.repo.get(waste_id)
        if not obj:
            raise NotFound("Waste entry not found")
        if storage_id is not None and storage_id != obj.storage_id:
            raise InvalidInput("storageId does not match this waste entry")
        if await self.repo.count_other_references(obj.storage_id, waste_id):
            logger.info(f"Keeping {obj.storage_id}, still referenced by other waste entries")
        else:
            await self.media.destroy(
                obj.storage_id, resource_type="image",
                strict=self.settings.WASTE_REMOTE_DELETE_STRICT,
            )
        await self.repo.delete(waste_id)
        await self.session.commit()
        logger.info(f"Deleted waste {waste_id}")
