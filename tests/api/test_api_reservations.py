"""
预订 API 测试
"""
from fastapi.testclient import TestClient


def _reserve(client, guest, room, check_in, check_out, **extra):
    return client.post("/reservations", json={
        "guestId": guest.id,
        "roomId": room.id,
        "checkIn": check_in,
        "checkOut": check_out,
        **extra,
    })


class TestReservationsApi:

    def test_create_reservation(self, client: TestClient, make_room, make_guest):
        room = make_room("101", price="100")
        response = _reserve(client, make_guest(), room, "2024-01-01", "2024-01-04")

        assert response.status_code == 200
        data = response.json()
        assert data["totalAmount"] == 300.0
        assert data["status"] == "confirmed"
        assert data["checkIn"] == "2024-01-01"

    def test_invalid_dates(self, client: TestClient, make_room, make_guest):
        response = _reserve(client, make_guest(), make_room(), "2024-01-04", "2024-01-04")
        assert response.status_code == 400
        assert response.json()["detail"] == "Check-out date must be after check-in date"

    def test_overlap(self, client: TestClient, make_room, make_guest):
        room = make_room()
        guest = make_guest()
        assert _reserve(client, guest, room, "2024-01-01", "2024-01-05").status_code == 200

        response = _reserve(client, guest, room, "2024-01-03", "2024-01-06")
        assert response.status_code == 400
        assert response.json()["detail"] == "Room is not available for selected dates"
        assert _reserve(client, guest, room, "2024-01-05", "2024-01-07").status_code == 200

    def test_unknown_room(self, client: TestClient, make_guest):
        response = client.post("/reservations", json={
            "guestId": make_guest().id, "roomId": "missing",
            "checkIn": "2024-01-01", "checkOut": "2024-01-02",
        })
        assert response.status_code == 404

    def test_list_with_details(self, client: TestClient, make_room, make_guest):
        room = make_room("101")
        _reserve(client, make_guest(), room, "2024-01-09", "2024-01-11", status="checked-in")

        rows = client.get("/reservations").json()
        assert len(rows) == 1
        assert rows[0]["guest_name"] == "John Smith"
        assert rows[0]["room_number"] == "101"

        assert len(client.get("/reservations?status=checked-in").json()) == 1
        assert client.get("/reservations?status=confirmed").json() == []
        assert len(client.get("/reservations?search=john").json()) == 1

    def test_get_detail(self, client: TestClient, make_room, make_guest):
        created = _reserve(client, make_guest(), make_room(), "2024-01-20", "2024-01-22").json()
        response = client.get(f"/reservations/{created['id']}")
        assert response.status_code == 200
        assert response.json()["total_amount"] == 200.0
        assert client.get("/reservations/missing").status_code == 404

    def test_cancel_frees_room(self, client: TestClient, make_room, make_guest):
        room = make_room()
        created = _reserve(client, make_guest(), room, "2024-01-09", "2024-01-12",
                           status="checked-in").json()
        assert client.get(f"/rooms/{room.id}").json()["status"] == "occupied"

        response = client.post(f"/reservations/{created['id']}/cancel")
        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"
        assert client.get(f"/rooms/{room.id}").json()["status"] == "available"

    def test_cancel_missing(self, client: TestClient):
        assert client.post("/reservations/missing/cancel").status_code == 404

    def test_update_status(self, client: TestClient, make_room, make_guest):
        room = make_room()
        created = _reserve(client, make_guest(), room, "2024-01-20", "2024-01-22").json()

        response = client.put(f"/reservations/{created['id']}", json={"status": "checked-in"})
        assert response.status_code == 200
        assert client.get(f"/rooms/{room.id}").json()["status"] == "occupied"
