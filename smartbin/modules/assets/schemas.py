import uuid
from datetime import datetime
from smartbin.core.schemas import ApiModel

class AssetOut(ApiModel):
    id: uuid.UUID
    bin_id: uuid.UUID
    url: str
    storage_id: str
    created_at: datetime
    download_url: str | None = None

class AssetUploadEnvelope(ApiModel):
    success: bool = True
    asset: AssetOut
    duplicate: bool

class AssetListEnvelope(ApiModel):
    success: bool = True
    bin_id: uuid.UUID
    count: int
    assets: list[AssetOut]
