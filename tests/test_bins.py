def test_create_and_list_bins(client, make_bin):
    created = make_bin("BIN-001")
    assert created["name"] == "BIN-001"
    assert "id" in created and "createdAt" in created

    res = client.get("/api/bins")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert [b["name"] for b in body["bins"]] == ["BIN-001"]

def test_name_is_trimmed(client):
    res = client.post("/api/bins", json={"name": "  BIN-002  "})
    assert res.status_code == 201
    assert res.json()["bin"]["name"] == "BIN-002"

def test_duplicate_name_conflicts(client, make_bin):
    make_bin("BIN-001")
    res = client.post("/api/bins", json={"name": "BIN-001"})
    assert res.status_code == 409
    assert res.json()["success"] is False
    assert len(client.get("/api/bins").json()["bins"]) == 1

def test_name_validation(client):
    assert client.post("/api/bins", json={}).status_code == 400
    assert client.post("/api/bins", json={"name": "   "}).status_code == 400
    res = client.post("/api/bins", json={"name": "x" * 61})
    assert res.status_code == 400
    assert res.json() == {"success": False, "error": res.json()["error"]}

def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}
