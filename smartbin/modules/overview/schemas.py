import uuid
from smartbin.core.schemas import ApiModel

class BinAssetCount(ApiModel):
    id: uuid.UUID
    name: str
    asset_count: int

class WasteCounts(ApiModel):
    biodegradable: int
    recyclable: int
    miscellaneous: int
    uncategorized: int
    total: int

class OverviewEnvelope(ApiModel):
    success: bool = True
    total_bins: int
    total_assets: int
    bins: list[BinAssetCount]
    waste: WasteCounts
