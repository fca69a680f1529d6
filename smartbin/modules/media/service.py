import hashlib
import logging
from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool
from smartbin.core.errors import InvalidInput, PayloadTooLarge, UpstreamFailure
from smartbin.platform.ports.media_host import MediaHostPort, MediaHostError, StoredMedia, ResourceType

logger = logging.getLogger(__name__)

def _mib(n: int) -> str:
    return f"{n / (1024 * 1024):g}MB"

class MediaService:
    """Pushes uploads to the media host and removes them again.

    Blobs are named after the SHA-256 of their bytes, so uploading the same file
    twice yields the same storage id.
    """

    def __init__(self, media_host: MediaHostPort):
        self.media_host = media_host

    async def read_upload(self, file: UploadFile, *, max_bytes: int) -> bytes:
        if file.size is not None and file.size > max_bytes:
            raise PayloadTooLarge(f"File too large (max {_mib(max_bytes)})")
        # Read file fully (for production consider streaming direct to the host)
        data = await file.read()
        if len(data) > max_bytes:
            raise PayloadTooLarge(f"File too large (max {_mib(max_bytes)})")
        if not data:
            raise InvalidInput("No file provided")
        return data

    async def store(self, file: UploadFile, *, resource_type: ResourceType, folder: str, max_bytes: int) -> StoredMedia:
        data = await self.read_upload(file, max_bytes=max_bytes)
        sha = hashlib.sha256(data).hexdigest()
        ext = ""
        if file.filename and "." in file.filename:
            ext = file.filename.rsplit(".", 1)[1].lower()

        try:
            stored = await run_in_threadpool(
                self.media_host.upload, data,
                resource_type=resource_type, folder=folder, name=sha,
                extension=ext, content_type=file.content_type,
            )
        except MediaHostError as e:
            logger.error(f"Upload Error: {e}")
            raise UpstreamFailure("Upload Failed") from e
        logger.debug(f"Stored {resource_type} {stored.storage_id} ({len(data)} bytes)")
        return stored

    async def destroy(self, storage_id: str, *, resource_type: ResourceType, strict: bool) -> bool:
        """Delete a blob. Returns False on a tolerated failure; raises UpstreamFailure when strict."""
        try:
            await run_in_threadpool(self.media_host.destroy, storage_id, resource_type=resource_type)
        except MediaHostError as e:
            if strict:
                logger.error(f"Media host delete failed for {storage_id}: {e}")
                raise UpstreamFailure("Failed to delete media from host") from e
            logger.warning(f"Media host delete failed for {storage_id}, continuing: {e}")
            return False
        return True
