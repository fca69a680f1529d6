import uuid
from typing import Sequence
from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from smartbin.modules.assets.models import Asset

class AssetRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, *, bin_id: uuid.UUID, url: str, storage_id: str) -> Asset:
        obj = Asset(bin_id=bin_id, url=url, storage_id=storage_id)
        self.session.add(obj)
        await self.session.flush()
        return obj

    async def get(self, asset_id: uuid.UUID) -> Asset | None:
        return await self.session.get(Asset, asset_id)

    async def find(self, bin_id: uuid.UUID, storage_id: str) -> Asset | None:
        q = select(Asset).where(Asset.bin_id == bin_id, Asset.storage_id == storage_id)
        res = await self.session.execute(q)
        return res.scalar_one_or_none()

    async def list_for_bin(self, bin_id: uuid.UUID) -> Sequence[Asset]:
        q = select(Asset).where(Asset.bin_id == bin_id).order_by(Asset.created_at.asc())
        res = await self.session.execute(q)
        return res.scalars().all()

    async def delete(self, asset_id: uuid.UUID) -> None:
        await self.session.execute(delete(Asset).where(Asset.id == asset_id))
        await self.session.flush()

    async def count_by_bin(self) -> dict[uuid.UUID, int]:
        q = select(Asset.bin_id, func.count(Asset.id)).group_by(Asset.bin_id)
        res = await self.session.execute(q)
        return {bin_id: n for bin_id, n in res.all()}

    async def count_other_references(self, storage_id: str, exclude_id: uuid.UUID) -> int:
        q = select(func.count(Asset.id)).where(Asset.storage_id == storage_id, Asset.id != exclude_id)
        res = await self.session.execute(q)
        return res.scalar_one()
