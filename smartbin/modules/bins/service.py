import logging
import uuid
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from smartbin.core.errors import Conflict, NotFound
from smartbin.modules.bins.models import Bin
from smartbin.modules.bins.repository import BinRepository
from smartbin.modules.bins.schemas import BinCreate

logger = logging.getLogger(__name__)

class BinService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = BinRepository(session)

    async def create(self, payload: BinCreate) -> Bin:
        if await self.repo.get_by_name(payload.name):
            raise Conflict(f"Bin '{payload.name}' already exists")
        try:
            obj = await self.repo.create(name=payload.name)
            await self.session.commit()
        except IntegrityError:
            # lost a race against a concurrent create with the same name
            await self.session.rollback()
            raise Conflict(f"Bin '{payload.name}' already exists")
        logger.info(f"Registered bin {obj.id} ({obj.name})")
        return obj

    async def list(self):
        return await self.repo.list()

    async def get(self, bin_id: uuid.UUID) -> Bin:
        obj = await self.repo.get(bin_id)
        if not obj:
            raise NotFound("Bin not found")
        return obj
