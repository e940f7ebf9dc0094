"""
客人 API 测试
"""
from fastapi.testclient import TestClient


class TestGuestsApi:

    def test_create_and_list(self, client: TestClient):
        response = client.post("/guests", json={
            "name": "Sarah Johnson", "email": "sarah@email.com", "phone": "+1987654321",
        })
        assert response.status_code == 200
        assert response.json()["history"] == []

        rows = client.get("/guests").json()
        assert rows[0]["name"] == "Sarah Johnson"
        assert rows[0]["total_stays"] == 0

    def test_search(self, client: TestClient, make_guest):
        make_guest()
        make_guest(name="Sarah Johnson", email="sarah@email.com")
        assert [g["name"] for g in client.get("/guests?search=sarah").json()] == ["Sarah Johnson"]

    def test_duplicate_email(self, client: TestClient, make_guest):
        make_guest(email="same@email.com")
        response = client.post("/guests", json={"name": "Other", "email": "same@email.com"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Email already exists"

    def test_update_and_get(self, client: TestClient, make_guest):
        guest = make_guest()
        response = client.put(f"/guests/{guest.id}", json={"address": "9 Elm St"})
        assert response.status_code == 200
        assert client.get(f"/guests/{guest.id}").json()["address"] == "9 Elm St"
        assert client.get("/guests/missing").status_code == 404

    def test_delete(self, client: TestClient, make_guest, make_room, make_reservation):
        free = make_guest(name="Free", email="free@email.com")
        booked = make_guest()
        make_reservation(booked, make_room(), "2024-01-20", "2024-01-22")

        assert client.delete(f"/guests/{free.id}").status_code == 200
        response = client.delete(f"/guests/{booked.id}")
        assert response.status_code == 400
        assert response.json()["detail"] == "Cannot delete guest with existing reservations"
        assert client.delete("/guests/missing").status_code == 404
