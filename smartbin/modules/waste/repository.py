import uuid
from typing import Sequence
from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from smartbin.modules.waste.models import Waste

class WasteRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, **data) -> Waste:
        obj = Waste(**data)
        self.session.add(obj)
        await self.session.flush()
        return obj

    async def get(self, waste_id: uuid.UUID) -> Waste | None:
        return await self.session.get(Waste, waste_id)

    async def list(self) -> Sequence[Waste]:
        q = select(Waste).order_by(Waste.disposed_at.desc())
        res = await self.session.execute(q)
        return res.scalars().all()

    async def set_category(self, waste_id: uuid.UUID, category: str) -> Waste | None:
        obj = await self.get(waste_id)
        if not obj:
            return None
        obj.category = category
        await self.session.flush()
        return obj

    async def delete(self, waste_id: uuid.UUID) -> None:
        await self.session.execute(delete(Waste).where(Waste.id == waste_id))
        await self.session.flush()

    async def count_by_category(self) -> dict[str | None, int]:
        q = select(Waste.category, func.count(Waste.id)).group_by(Waste.category)
        res = await self.session.execute(q)
        return {category: n for category, n in res.all()}

    async def count_other_references(self, storage_id: str, exclude_id: uuid.UUID) -> int:
        q = select(func.count(Waste.id)).where(Waste.storage_id == storage_id, Waste.id != exclude_id)
        res = await self.session.execute(q)
        return res.scalar_one()
