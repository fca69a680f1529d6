import os
from urllib.parse import quote
from smartbin.core.config import Settings
from smartbin.platform.ports.media_host import MediaHostPort, MediaHostError, StoredMedia, ResourceType

class LocalFilesystemMediaHost(MediaHostPort):
    """Dev media host: files land under LOCAL_MEDIA_ROOT and are served from /media."""

    def __init__(self, settings: Settings):
        self.root = os.path.abspath(settings.LOCAL_MEDIA_ROOT)
        self.base_url = settings.LOCAL_MEDIA_BASE_URL.rstrip("/")
        os.makedirs(self.root, exist_ok=True)

    def _path(self, key: str) -> str:
        safe = key.strip("/").replace("..", "")
        return os.path.join(self.root, safe)

    def upload(self, data: bytes, *, resource_type: ResourceType, folder: str, name: str, extension: str = "", content_type: str | None = None) -> StoredMedia:
        key = f"{resource_type}/{folder.strip('/')}/{name}{('.' + extension) if extension else ''}"
        path = self._path(key)
        try:
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise MediaHostError(f"Local write failed: {e}") from e
        return StoredMedia(url=f"{self.base_url}/{quote(key)}", storage_id=key)

    def destroy(self, storage_id: str, *, resource_type: ResourceType) -> None:
        path = self._path(storage_id)
        try:
            if os.path.exists(path):
                os.remove(path)
        except OSError as e:
            raise MediaHostError(f"Local delete failed: {e}") from e
