from fastapi import Request
from smartbin.core.config import Settings
from smartbin.platform.ports.media_host import MediaHostPort

def build_media_host(settings: Settings) -> MediaHostPort:
    provider = (settings.MEDIA_HOST_PROVIDER or "cloudinary").lower()
    if provider == "s3":
        from smartbin.platform.adapters.storage_s3 import S3MediaHost
        return S3MediaHost(settings)
    if provider == "local":
        from smartbin.platform.adapters.storage_local import LocalFilesystemMediaHost
        return LocalFilesystemMediaHost(settings)
    from smartbin.platform.adapters.media_cloudinary import CloudinaryMediaHost
    return CloudinaryMediaHost(settings)

def get_media_host(request: Request) -> MediaHostPort:
    return request.app.state.media_host

def get_settings(request: Request) -> Settings:
    return request.app.state.settings
