import io
import logging
import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError
from smartbin.core.config import Settings
from smartbin.platform.ports.media_host import MediaHostPort, MediaHostError, StoredMedia, ResourceType

logger = logging.getLogger(__name__)

class CloudinaryMediaHost(MediaHostPort):
    def __init__(self, settings: Settings):
        cloudinary.config(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET,
            secure=True,
        )

    def upload(self, data: bytes, *, resource_type: ResourceType, folder: str, name: str, extension: str = "", content_type: str | None = None) -> StoredMedia:
        try:
            result = cloudinary.uploader.upload(
                io.BytesIO(data),
                resource_type=resource_type,
                folder=folder,
                public_id=name,
                overwrite=False,
            )
        except CloudinaryError as e:
            raise MediaHostError(f"Cloudinary upload failed: {e}") from e
        return StoredMedia(url=result["secure_url"], storage_id=result["public_id"])

    def destroy(self, storage_id: str, *, resource_type: ResourceType) -> None:
        try:
            result = cloudinary.uploader.destroy(storage_id, resource_type=resource_type, invalidate=True)
        except CloudinaryError as e:
            raise MediaHostError(f"Cloudinary delete failed: {e}") from e
        outcome = result.get("result")
        if outcome == "not found":
            logger.info(f"Cloudinary asset {storage_id} already gone")
        elif outcome != "ok":
            raise MediaHostError(f"Cloudinary delete of {storage_id} returned {outcome!r}")
