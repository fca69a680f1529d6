import uuid
from typing import Sequence
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from smartbin.modules.bins.models import Bin

class BinRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, *, name: str) -> Bin:
        obj = Bin(name=name)
        self.session.add(obj)
        await self.session.flush()
        return obj

    async def get(self, bin_id: uuid.UUID) -> Bin | None:
        return await self.session.get(Bin, bin_id)

    async def get_by_name(self, name: str) -> Bin | None:
        res = await self.session.execute(select(Bin).where(Bin.name == name))
        return res.scalar_one_or_none()

    async def list(self) -> Sequence[Bin]:
        q = select(Bin).order_by(Bin.created_at.asc())
        res = await self.session.execute(q)
        return res.scalars().all()
