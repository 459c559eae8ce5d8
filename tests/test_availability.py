WINDOW = {"providerId": 1, "dayOfWeek": 1, "startTime": "09:00", "endTime": "17:00"}


def test_create_and_fetch_availability(empty_client):
    res = empty_client.post("/api/availability", json=WINDOW)
    assert res.status_code == 201
    window = res.json()
    assert window["isAvailable"] is True

    assert empty_client.get(f"/api/availability/{window['id']}").json() == window
    assert empty_client.get("/api/availability/provider/1").json() == [window]
    assert empty_client.get("/api/availability/provider/2").json() == []


def test_invalid_window_is_rejected(empty_client):
    assert empty_client.post("/api/availability", json={**WINDOW, "dayOfWeek": 7}).status_code == 422
    assert empty_client.post("/api/availability", json={**WINDOW, "startTime": "9am"}).status_code == 422


def test_update_availability(empty_client):
    empty_client.post("/api/availability", json=WINDOW)

    res = empty_client.patch("/api/availability/1", json={"isAvailable": False})
    assert res.status_code == 200
    assert res.json()["isAvailable"] is False
    assert res.json()["startTime"] == "09:00"

    assert empty_client.patch("/api/availability/2", json={"isAvailable": False}).status_code == 404
    assert empty_client.get("/api/availability/2").status_code == 404
