"""End-to-end product lifecycle through the HTTP API and the real database wiring."""

from fastapi.testclient import TestClient

from src.product_app.api.http.app import app


def test_create_update_delete_round_trip():
    # No dependency overrides: requests go through the app's own engine.
    with TestClient(app) as client:
        created = client.post("/products", json={"name": "Pen", "price": 1.5})
        assert created.status_code == 201
        assert created.json() == {"id": 1, "name": "Pen", "price": 1.5}

        read = client.get("/products/1")
        assert read.json() == {"id": 1, "name": "Pen", "price": 1.5}

        updated = client.put("/products/1", json={"name": "Pencil", "price": 2.0})
        assert updated.status_code == 200
        assert updated.json() == {"id": 1, "name": "Pencil", "price": 2.0}

        assert client.get("/products").json() == [{"id": 1, "name": "Pencil", "price": 2.0}]

        deleted = client.delete("/products/1")
        assert deleted.status_code == 204

        missing = client.get("/products/1")
        assert missing.status_code == 404
        assert missing.json()["error"] == "not_found"

        # Deleting again is still a success.
        assert client.delete("/products/1").status_code == 204


def test_each_application_start_gets_a_fresh_in_memory_database():
    with TestClient(app) as client:
        client.post("/products", json={"name": "Pen", "price": 1.5})

    with TestClient(app) as client:
        assert client.get("/products").json() == []
