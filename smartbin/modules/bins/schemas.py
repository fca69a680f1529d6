import uuid
from datetime import datetime
from pydantic import Field, field_validator
from smartbin.core.schemas import ApiModel

class BinCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=60)

    @field_validator("name", mode="before")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v

class BinOut(ApiModel):
    id: uuid.UUID
    name: str
    created_at: datetime

class BinEnvelope(ApiModel):
    success: bool = True
    bin: BinOut

class BinListEnvelope(ApiModel):
    success: bool = True
    bins: list[BinOut]
