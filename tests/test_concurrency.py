import asyncio
import anyio
import httpx
from app.main import create_app

# More parallel requests than anyio's default pool of 40 worker threads
REQUESTS = 60


async def send_all(app, build_request):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        with anyio.fail_after(30):
            return await asyncio.gather(*[build_request(client, i) for i in range(REQUESTS)])


def test_parallel_reads_all_complete(storage):
    app = create_app(storage)

    responses = asyncio.run(send_all(app, lambda client, i: client.get("/api/services")))

    assert [res.status_code for res in responses] == [200] * REQUESTS
    assert all(len(res.json()) == 6 for res in responses)


def test_parallel_creates_get_distinct_ids_and_dense_positions(empty_storage):
    app = create_app(empty_storage)

    def create(client, i):
        return client.post("/api/services", json={"name": f"Service {i}", "duration": 30, "price": 1000})

    responses = asyncio.run(send_all(app, create))

    assert [res.status_code for res in responses] == [201] * REQUESTS
    ids = [res.json()["id"] for res in responses]
    assert len(set(ids)) == REQUESTS
    assert sorted(res.json()["position"] for res in responses) == list(range(REQUESTS))


def test_parallel_status_updates_leave_a_valid_status(storage):
    app = create_app(storage)
    statuses = ["confirmed", "cancelled", "completed", "pending"]

    async def run():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            created = await client.post(
                "/api/bookings",
                json={
                    "serviceId": 1,
                    "clientName": "Jane Doe",
                    "clientPhone": "0400000000",
                    "startTime": "2030-01-01T10:00:00Z",
                    "totalPrice": 20000,
                },
            )
            booking_id = created.json()["id"]
            with anyio.fail_after(30):
                updates = await asyncio.gather(*[
                    client.patch(
                        f"/api/bookings/{booking_id}/status",
                        json={"status": statuses[i % len(statuses)]},
                    )
                    for i in range(REQUESTS)
                ])
            final = await client.get(f"/api/bookings/{booking_id}")
            return updates, final

    updates, final = asyncio.run(run())

    assert [res.status_code for res in updates] == [200] * REQUESTS
    assert final.json()["status"] in statuses
