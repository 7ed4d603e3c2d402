# =============================================================================
# tests/test_waste_types_api.py - Waste Type Endpoint Tests
# =============================================================================


class TestWasteTypes:
    """Tests for the waste type catalogue."""

    def test_list_sorted_by_name(self, client, fake_db):
        fake_db.store("waste_types", {"name": "Vetro", "color": "#228B22"})
        fake_db.store("waste_types", {"name": "Carta e Cartone", "color": "#0066CC"})

        response = client.get("/api/waste-types")

        assert response.status_code == 200
        assert [wt["name"] for wt in response.json()] == ["Carta e Cartone", "Vetro"]

    def test_get_one(self, client, waste_types):
        response = client.get(f"/api/waste-types/{waste_types[0]['id']}")

        assert response.status_code == 200
        assert response.json()["name"] == "Plastica"

    def test_get_missing(self, client, fake_db):
        response = client.get("/api/waste-types/12")

        assert response.status_code == 404
        assert response.json()["code"] == "WASTE_TYPE_NOT_FOUND"

    def test_admin_creates(self, client, fake_db, headers):
        response = client.post(
            "/api/waste-types",
            json={"name": "Metalli", "color": "#C0C0C0", "examples": "Lattine"},
            headers=headers["admin"],
        )

        assert response.status_code == 201
        assert response.json()["name"] == "Metalli"
        assert len(fake_db.rows("waste_types", name="Metalli")) == 1

    def test_duplicate_name(self, client, headers, waste_types):
        response = client.post("/api/waste-types", json={"name": "Vetro"}, headers=headers["admin"])

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_WASTE_TYPE"

    def test_operator_cannot_create(self, client, headers):
        response = client.post("/api/waste-types", json={"name": "RAEE"}, headers=headers["operator"])

        assert response.status_code == 403
