import os
import pytest
from smartbin.core.config import Settings
from smartbin.platform.adapters.storage_local import LocalFilesystemMediaHost
from smartbin.platform.ports.media_host import MediaHostPort
from smartbin.platform.provider_registry import build_media_host
from smartbin.modules.assets.links import to_download_url

@pytest.fixture
def local_host(tmp_path):
    settings = Settings(
        _env_file=None,
        DATABASE_DSN="sqlite+aiosqlite://",
        MEDIA_HOST_PROVIDER="local",
        LOCAL_MEDIA_ROOT=str(tmp_path),
        LOCAL_MEDIA_BASE_URL="http://localhost:8000/media/",
    )
    return build_media_host(settings)

def test_registry_builds_local_host(local_host):
    assert isinstance(local_host, LocalFilesystemMediaHost)
    assert isinstance(local_host, MediaHostPort)

def test_local_upload_and_destroy(local_host, tmp_path):
    stored = local_host.upload(b"data", resource_type="video", folder="gratify-ads", name="abc", extension="mp4")
    assert stored.storage_id == "video/gratify-ads/abc.mp4"
    assert stored.url == "http://localhost:8000/media/video/gratify-ads/abc.mp4"
    path = tmp_path / "video" / "gratify-ads" / "abc.mp4"
    assert path.read_bytes() == b"data"
    # local URLs have no /upload/ marker, so they download as-is
    assert to_download_url(stored.url) == stored.url

    local_host.destroy(stored.storage_id, resource_type="video")
    assert not path.exists()
    # deleting again is a no-op
    local_host.destroy(stored.storage_id, resource_type="video")

def test_local_paths_stay_under_root(local_host, tmp_path):
    stored = local_host.upload(b"x", resource_type="image", folder="../escape", name="n")
    assert os.path.commonpath([str(tmp_path), local_host._path(stored.storage_id)]) == str(tmp_path)

def test_async_driver_required():
    with pytest.raises(ValueError):
        Settings(_env_file=None, DATABASE_DSN="postgresql://localhost/smartbin")
