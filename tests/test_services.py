def test_home(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.json() == {"message": "Welcome to the Booking API"}


def test_health_sets_request_headers(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}
    assert "X-Request-ID" in res.headers
    assert "X-Process-Time" in res.headers


def test_seeded_services_are_listed_in_position_order(client):
    res = client.get("/api/services")
    assert res.status_code == 200
    services = res.json()
    assert len(services) == 6
    assert [s["position"] for s in services] == [0, 1, 2, 3, 4, 5]
    assert all(s["active"] for s in services)
    assert {"bufferBefore", "bufferAfter", "photo"} <= set(services[0])


def test_create_service_appends_to_end(empty_client):
    first = empty_client.post("/api/services", json={"name": "Cut", "duration": 30, "price": 4000})
    second = empty_client.post(
        "/api/services",
        json={"name": "Colour", "duration": 90, "price": 12000, "bufferAfter": "15"},
    )

    assert first.status_code == 201
    assert first.json()["position"] == 0
    assert second.json()["position"] == 1
    assert second.json()["bufferAfter"] == "15"
    assert second.json()["bufferBefore"] == "0"


def test_create_service_validates_input(empty_client):
    res = empty_client.post("/api/services", json={"name": "Cut", "duration": 0, "price": 4000})
    assert res.status_code == 422
    res = empty_client.post("/api/services", json={"duration": 30, "price": 4000})
    assert res.status_code == 422


def test_get_service_and_missing_service(client):
    assert client.get("/api/services/1").json()["name"] == "Express Facial"
    res = client.get("/api/services/999")
    assert res.status_code == 404
    assert res.json()["detail"] == "Service not found"


def test_patch_merges_fields(client):
    res = client.patch("/api/services/2", json={"price": 30000, "description": None})
    assert res.status_code == 200
    body = res.json()
    assert body["price"] == 30000
    assert body["description"] is None
    assert body["name"] == "Shoulder & Neck Massage"


def test_patch_rejects_null_required_field(client):
    res = client.patch("/api/services/2", json={"name": None})
    assert res.status_code == 422
    assert client.get("/api/services/2").json()["name"] == "Shoulder & Neck Massage"


def test_patch_missing_service(client):
    assert client.patch("/api/services/999", json={"price": 1}).status_code == 404


def test_active_filter(client):
    client.patch("/api/services/3", json={"active": False})

    active = client.get("/api/services", params={"active": "true"}).json()
    assert 3 not in [s["id"] for s in active]
    assert len(active) == 5

    everything = client.get("/api/services", params={"active": "false"}).json()
    assert len(everything) == 6


def test_reorder_services(client):
    res = client.post("/api/services/order", json={"serviceIds": [6, 5, 4, 3, 2, 1]})
    assert res.status_code == 200
    assert [s["id"] for s in res.json()] == [6, 5, 4, 3, 2, 1]

    listed = client.get("/api/services").json()
    assert [s["id"] for s in listed] == [6, 5, 4, 3, 2, 1]
    assert [s["position"] for s in listed] == [0, 1, 2, 3, 4, 5]


def test_update_single_position(client):
    res = client.patch("/api/services/1/position", json={"position": 10})
    assert res.status_code == 200
    assert res.json()["position"] == 10
    assert client.get("/api/services").json()[-1]["id"] == 1

    assert client.patch("/api/services/999/position", json={"position": 1}).status_code == 404


def test_delete_service_does_not_reuse_id(client):
    res = client.delete("/api/services/6")
    assert res.status_code == 200
    assert res.json() == {"success": True}
    assert client.get("/api/services/6").status_code == 404
    assert client.delete("/api/services/6").status_code == 404

    created = client.post("/api/services", json={"name": "New", "duration": 10, "price": 100})
    assert created.json()["id"] == 7
