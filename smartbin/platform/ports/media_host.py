from dataclasses import dataclass
from typing import Literal, Protocol, runtime_checkable

ResourceType = Literal["video", "image"]

class MediaHostError(Exception):
    """Raised by adapters when the media host rejects an upload or delete."""

@dataclass(frozen=True)
class StoredMedia:
    url: str
    storage_id: str

@runtime_checkable
class MediaHostPort(Protocol):
    def upload(self, data: bytes, *, resource_type: ResourceType, folder: str, name: str, extension: str = "", content_type: str | None = None) -> StoredMedia: ...

    def destroy(self, storage_id: str, *, resource_type: ResourceType) -> None: ...
