from datetime import datetime, timedelta


def parse(timestamp):
    return datetime.fromisoformat(timestamp.replace("Z", "+00:00"))


def booking_body(**overrides):
    body = {
        "serviceId": 4,
        "clientName": "Jane Doe",
        "clientPhone": "0400000000",
        "startTime": "2030-01-01T10:00:00Z",
        "totalPrice": 60000,
    }
    body.update(overrides)
    return body


def test_create_booking_derives_end_time_and_status(client):
    res = client.post("/api/bookings", json=booking_body(status="confirmed", endTime="2030-01-01T23:00:00Z"))

    assert res.status_code == 201
    booking = res.json()
    assert booking["status"] == "pending"
    # service 4 runs for 60 minutes
    assert parse(booking["endTime"]) - parse(booking["startTime"]) == timedelta(minutes=60)
    assert parse(booking["startTime"]) == parse("2030-01-01T10:00:00Z")


def test_booking_extras_are_stored_as_given(client):
    extras = {"addons": [1, 2], "notes": "first visit"}
    res = client.post("/api/bookings", json=booking_body(extras=extras, providerId=3))
    assert res.json()["extras"] == extras
    assert res.json()["providerId"] == 3


def test_booking_for_missing_service_is_rejected(client):
    res = client.post("/api/bookings", json=booking_body(serviceId=999))

    assert res.status_code == 404
    assert res.json()["detail"] == "Service with ID 999 not found"
    assert client.get("/api/bookings").json() == []


def test_booking_requires_client_details(client):
    body = booking_body()
    del body["clientPhone"]
    assert client.post("/api/bookings", json=body).status_code == 422


def test_list_get_and_filter_by_phone(client):
    client.post("/api/bookings", json=booking_body())
    client.post("/api/bookings", json=booking_body(clientName="Sam", clientPhone="0411111111"))

    assert [b["id"] for b in client.get("/api/bookings").json()] == [1, 2]
    assert client.get("/api/bookings/2").json()["clientName"] == "Sam"
    assert client.get("/api/bookings/3").status_code == 404

    by_phone = client.get("/api/bookings/phone/0411111111").json()
    assert [b["clientName"] for b in by_phone] == ["Sam"]


def test_update_status(client):
    client.post("/api/bookings", json=booking_body())

    res = client.patch("/api/bookings/1/status", json={"status": "confirmed"})
    assert res.status_code == 200
    assert res.json()["status"] == "confirmed"

    res = client.patch("/api/bookings/1/status", json={"status": "cancelled"})
    assert res.json()["status"] == "cancelled"


def test_invalid_status_is_rejected(client):
    client.post("/api/bookings", json=booking_body())

    res = client.patch("/api/bookings/1/status", json={"status": "archived"})

    assert res.status_code == 422
    assert client.get("/api/bookings/1").json()["status"] == "pending"


def test_status_of_missing_booking(client):
    assert client.patch("/api/bookings/9/status", json={"status": "confirmed"}).status_code == 404


def test_quote(client):
    client.post("/api/service-addons", json={"name": "Oil", "price": 1500, "duration": 10})

    res = client.post("/api/bookings/quote", json={"serviceId": 1, "addonIds": [1]})

    assert res.status_code == 200
    assert res.json() == {
        "serviceId": 1,
        "addonIds": [1],
        "totalPrice": 21500,
        "totalDuration": 25,
    }


def test_quote_with_unknown_addon(client):
    res = client.post("/api/bookings/quote", json={"serviceId": 1, "addonIds": [5]})
    assert res.status_code == 404
    assert res.json()["detail"] == "ServiceAddon with ID 5 not found"
