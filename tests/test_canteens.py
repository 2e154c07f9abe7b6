"""HTTP tests for /canteens."""

from unittest.mock import AsyncMock

from sqlalchemy.exc import SQLAlchemyError

import campus_canteen.api.routes.canteens as canteens_module


class TestListCanteens:
    def test_lists_in_id_order(self, client, create_canteen) -> None:
        first = create_canteen(name="Canteen A", ratings=4.5)
        second = create_canteen(name="Canteen B")

        response = client.get("/canteens")

        assert response.status_code == 200
        assert response.json() == [
            {"id": first["id"], "name": "Canteen A", "ratings": 4.5},
            {"id": second["id"], "name": "Canteen B", "ratings": None},
        ]

    def test_store_failure(self, client, monkeypatch) -> None:
        monkeypatch.setattr(canteens_module, "get_canteens", AsyncMock(side_effect=SQLAlchemyError("boom")))

        response = client.get("/canteens")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch canteens"}


class TestCreateCanteen:
    def test_creates_with_ratings(self, client) -> None:
        response = client.post("/canteens", json={"name": "New Canteen", "ratings": 4.0})

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "New Canteen"
        assert body["ratings"] == 4.0
        assert isinstance(body["id"], int)

    def test_trims_name_and_defaults_ratings_to_null(self, client) -> None:
        response = client.post("/canteens", json={"name": "  Canteen Name  "})

        assert response.status_code == 201
        assert response.json()["name"] == "Canteen Name"
        assert response.json()["ratings"] is None

    def test_name_required(self, client) -> None:
        for payload in ({"ratings": 4.0}, {"name": 123}, {"name": "  "}):
            response = client.post("/canteens", json=payload)
            assert response.status_code == 400
            assert response.json() == {"error": "name is required"}

    def test_ratings_must_be_numeric(self, client) -> None:
        response = client.post("/canteens", json={"name": "Canteen", "ratings": "five stars"})

        assert response.status_code == 400
        assert response.json() == {"error": "ratings must be a number"}

    def test_ratings_beyond_float_range_are_rejected(self, client) -> None:
        response = client.post("/canteens", json={"name": "Canteen", "ratings": "1e400"})

        assert response.status_code == 400
        assert response.json() == {"error": "ratings must be a number"}
        assert client.get("/canteens").json() == []

    def test_malformed_json(self, client) -> None:
        response = client.post("/canteens", content=b"{not json", headers={"content-type": "application/json"})

        assert response.status_code == 400
        assert "error" in response.json()

    def test_store_failure(self, client, monkeypatch) -> None:
        monkeypatch.setattr(canteens_module, "create_canteen", AsyncMock(side_effect=SQLAlchemyError("boom")))

        response = client.post("/canteens", json={"name": "Canteen"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create canteen"}


class TestDeleteCanteen:
    def test_deletes_canteen(self, client, create_canteen) -> None:
        canteen = create_canteen()

        response = client.delete(f"/canteens/{canteen['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/canteens").json() == []

    def test_delete_cascades_to_items(self, client, create_canteen, create_item) -> None:
        canteen = create_canteen()
        create_item(canteen["id"])
        survivor = create_canteen(name="Survivor")
        create_item(survivor["id"], name="Still here")

        assert client.delete(f"/canteens/{canteen['id']}").status_code == 204

        assert client.get(f"/canteens/{canteen['id']}/items").status_code == 404
        assert [i["name"] for i in client.get(f"/canteens/{survivor['id']}/items").json()] == ["Still here"]

    def test_missing_canteen(self, client) -> None:
        response = client.delete("/canteens/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Canteen not found"}

    def test_non_integer_id_never_reaches_store(self, client, monkeypatch) -> None:
        store = AsyncMock(return_value=True)
        monkeypatch.setattr(canteens_module, "delete_canteen", store)

        response = client.delete("/canteens/abc")

        assert response.status_code == 400
        assert response.json() == {"error": "id must be an integer"}
        store.assert_not_awaited()

    def test_store_failure_is_not_reported_as_missing(self, client, monkeypatch) -> None:
        monkeypatch.setattr(canteens_module, "delete_canteen", AsyncMock(side_effect=SQLAlchemyError("boom")))

        response = client.delete("/canteens/1")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to delete canteen"}
