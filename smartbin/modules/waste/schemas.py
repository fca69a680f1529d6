import uuid
from datetime import datetime
from typing import Any
from smartbin.core.schemas import ApiModel

class WasteOut(ApiModel):
    id: uuid.UUID
    type: str
    normalized_type: str
    binlocation: str
    image_url: str
    storage_id: str
    category: str | None
    disposed_at: datetime

class WasteCategoryUpdate(ApiModel):
    # validated in the service so an unknown value surfaces as InvalidCategory
    category: Any = None

class WasteDelete(ApiModel):
    storage_id: str | None = None

class WasteEnvelope(ApiModel):
    success: bool = True
    waste: WasteOut

class WasteListEnvelope(ApiModel):
    success: bool = True
    waste: list[WasteOut]
