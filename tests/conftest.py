import pytest
from fastapi.testclient import TestClient
from smartbin.core.config import Settings
from smartbin.main import create_app
from smartbin.platform.ports.media_host import MediaHostError, StoredMedia

class FakeMediaHost:
    """In-memory media host that hands out Cloudinary-shaped URLs."""

    def __init__(self):
        self.blobs: dict[str, bytes] = {}
        self.destroyed: list[str] = []
        self.fail_upload = False
        self.fail_destroy = False

    def upload(self, data, *, resource_type, folder, name, extension="", content_type=None):
        if self.fail_upload:
            raise MediaHostError("upload rejected")
        storage_id = f"{folder}/{name}"
        self.blobs[storage_id] = data
        url = f"https://res.cloudinary.com/demo/{resource_type}/upload/v1700000000/{storage_id}.{extension or 'bin'}"
        return StoredMedia(url=url, storage_id=storage_id)

    def destroy(self, storage_id, *, resource_type):
        if self.fail_destroy:
            raise MediaHostError("delete rejected")
        self.blobs.pop(storage_id, None)
        self.destroyed.append(storage_id)

@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        ENV="local",
        DATABASE_DSN="sqlite+aiosqlite://",
        MEDIA_HOST_PROVIDER="local",
        LOCAL_MEDIA_ROOT=str(tmp_path / "media"),
    )

@pytest.fixture
def media_host():
    return FakeMediaHost()

@pytest.fixture
def client(settings, media_host):
    app = create_app(settings, media_host=media_host)
    with TestClient(app) as c:
        yield c

@pytest.fixture
def make_bin(client):
    def _make(name="BIN-001"):
        res = client.post("/api/bins", json={"name": name})
        assert res.status_code == 201, res.text
        return res.json()["bin"]
    return _make

@pytest.fixture
def upload_video(client):
    def _upload(bin_id, content=b"fake-video-bytes", filename="clip.mp4"):
        return client.post(
            "/api/assets/upload",
            files={"video": (filename, content, "video/mp4")},
            data={"binId": bin_id},
        )
    return _upload

@pytest.fixture
def upload_waste(client):
    def _upload(content=b"fake-image-bytes", type="Plastic", binlocation="Block A", filename="item.jpg"):
        return client.post(
            "/api/waste",
            files={"image": (filename, content, "image/jpeg")},
            data={"type": type, "binlocation": binlocation},
        )
    return _upload
