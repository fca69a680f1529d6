from sqlalchemy.ext.asyncio import AsyncSession
from smartbin.modules.assets.repository import AssetRepository
from smartbin.modules.bins.repository import BinRepository
from smartbin.modules.waste.categories import CATEGORY_VALUES
from smartbin.modules.waste.repository import WasteRepository

class OverviewService:
    """Dashboard headline numbers: bins, assets per bin, waste per category."""

    def __init__(self, session: AsyncSession):
        self.bins = BinRepository(session)
        self.assets = AssetRepository(session)
        self.waste = WasteRepository(session)

    async def summary(self) -> dict:
        bins = await self.bins.list()
        per_bin = await self.assets.count_by_bin()
        by_category = await self.waste.count_by_category()

        waste_counts = {c: by_category.get(c, 0) for c in CATEGORY_VALUES}
        waste_counts["uncategorized"] = by_category.get(None, 0)
        waste_counts["total"] = sum(by_category.values())
        return {
            "total_bins": len(bins),
            "total_assets": sum(per_bin.values()),
            "bins": [
                {"id": b.id, "name": b.name, "asset_count": per_bin.get(b.id, 0)}
                for b in bins
            ],
            "waste": waste_counts,
        }
