import uuid
import pytest
from fastapi.testclient import TestClient
from smartbin.main import create_app
from smartbin.modules.waste.categories import parse_category, WasteCategory
from smartbin.modules.waste.models import TYPE_MAX_LENGTH, BINLOCATION_MAX_LENGTH

def test_upload_waste(client, upload_waste, media_host):
    res = upload_waste(type="Plastic", binlocation="Block A")
    assert res.status_code == 201, res.text
    waste = res.json()["waste"]
    assert waste["type"] == "Plastic"
    assert waste["normalizedType"] == "plastic"
    assert waste["binlocation"] == "Block A"
    assert waste["category"] is None
    assert waste["storageId"] in media_host.blobs
    assert waste["imageUrl"].startswith("https://")
    assert "disposedAt" in waste

def test_upload_validation(client, upload_waste, media_host):
    assert client.post("/api/waste", data={"type": "Plastic", "binlocation": "A"}).status_code == 400
    assert upload_waste(type="").status_code == 400
    assert upload_waste(binlocation="  ").status_code == 400
    assert media_host.blobs == {}

def test_oversize_image_is_413(client, upload_waste, media_host):
    res = upload_waste(content=b"x" * (10 * 1024 * 1024 + 1))
    assert res.status_code == 413
    assert res.json()["success"] is False
    assert media_host.blobs == {}
    assert client.get("/api/waste").json()["waste"] == []

def test_list_is_newest_first(client, upload_waste):
    first = upload_waste(content=b"one").json()["waste"]
    second = upload_waste(content=b"two").json()["waste"]
    body = client.get("/api/waste").json()
    assert body["success"] is True
    assert [w["id"] for w in body["waste"]] == [second["id"], first["id"]]

def test_set_and_overwrite_category(client, upload_waste):
    waste = upload_waste().json()["waste"]
    res = client.patch(f"/api/waste/{waste['id']}", json={"category": "recyclable"})
    assert res.status_code == 200
    assert res.json()["waste"]["category"] == "recyclable"

    res = client.patch(f"/api/waste/{waste['id']}", json={"category": "biodegradable"})
    assert res.json()["waste"]["category"] == "biodegradable"

@pytest.mark.parametrize("value", ["plastic", "", None, "Recyclable", 3])
def test_invalid_category_leaves_entry_unchanged(client, upload_waste, value):
    waste = upload_waste().json()["waste"]
    client.patch(f"/api/waste/{waste['id']}", json={"category": "miscellaneous"})

    res = client.patch(f"/api/waste/{waste['id']}", json={"category": value})
    assert res.status_code == 400
    assert res.json()["success"] is False
    stored = client.get("/api/waste").json()["waste"][0]
    assert stored["category"] == "miscellaneous"

def test_category_on_unknown_entry(client):
    res = client.patch(f"/api/waste/{uuid.uuid4()}", json={"category": "recyclable"})
    assert res.status_code == 404

def test_delete_waste(client, upload_waste, media_host):
    waste = upload_waste().json()["waste"]
    res = client.request("DELETE", f"/api/waste/{waste['id']}", json={"storageId": waste["storageId"]})
    assert res.status_code == 200
    assert res.json() == {"success": True}
    assert media_host.destroyed == [waste["storageId"]]
    assert client.get("/api/waste").json()["waste"] == []

def test_delete_without_body_uses_stored_id(client, upload_waste, media_host):
    waste = upload_waste().json()["waste"]
    assert client.delete(f"/api/waste/{waste['id']}").status_code == 200
    assert media_host.destroyed == [waste["storageId"]]

def test_delete_with_mismatched_storage_id(client, upload_waste, media_host):
    waste = upload_waste().json()["waste"]
    res = client.request("DELETE", f"/api/waste/{waste['id']}", json={"storageId": "Waste/other"})
    assert res.status_code == 400
    assert media_host.destroyed == []
    assert len(client.get("/api/waste").json()["waste"]) == 1

def test_delete_fails_when_media_host_fails(client, upload_waste, media_host):
    waste = upload_waste().json()["waste"]
    media_host.fail_destroy = True
    res = client.delete(f"/api/waste/{waste['id']}")
    assert res.status_code == 500
    assert res.json()["success"] is False
    assert len(client.get("/api/waste").json()["waste"]) == 1

def test_delete_unknown_entry(client):
    assert client.delete(f"/api/waste/{uuid.uuid4()}").status_code == 404

def test_parse_category():
    assert parse_category("recyclable") is WasteCategory.RECYCLABLE
    assert parse_category("RECYCLABLE") is None
    assert parse_category(None) is None

def test_delete_keeps_image_shared_with_another_entry(client, upload_waste, media_host):
    first = upload_waste(content=b"photo").json()["waste"]
    second = upload_waste(content=b"photo").json()["waste"]
    assert first["storageId"] == second["storageId"]

    assert client.delete(f"/api/waste/{first['id']}").status_code == 200
    assert media_host.destroyed == []
    assert second["storageId"] in media_host.blobs

    assert client.delete(f"/api/waste/{second['id']}").status_code == 200
    assert media_host.destroyed == [second["storageId"]]

@pytest.mark.parametrize("field,value", [
    ("type", "p" * (TYPE_MAX_LENGTH + 1)),
    ("binlocation", "b" * (BINLOCATION_MAX_LENGTH + 1)),
])
def test_overlong_fields_rejected_before_upload(client, upload_waste, media_host, field, value):
    res = upload_waste(**{field: value})
    assert res.status_code == 400
    assert field in res.json()["error"]
    assert media_host.blobs == {}
    assert client.get("/api/waste").json()["waste"] == []

def test_lenient_remote_delete_removes_entry(settings, media_host):
    lenient = settings.model_copy(update={"WASTE_REMOTE_DELETE_STRICT": False})
    with TestClient(create_app(lenient, media_host=media_host)) as client:
        waste = client.post(
            "/api/waste",
            files={"image": ("item.jpg", b"img", "image/jpeg")},
            data={"type": "Plastic", "binlocation": "Block A"},
        ).json()["waste"]
        media_host.fail_destroy = True

        res = client.delete(f"/api/waste/{waste['id']}")
        assert res.status_code == 200
        assert client.get("/api/waste").json()["waste"] == []
