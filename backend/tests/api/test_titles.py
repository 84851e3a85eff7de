"""
Title API Tests

Tests for /api/titles endpoints.
"""


class TestCreateTitle:
    """Tests for POST /api/titles"""

    def test_create_title_success(self, client, raw_show):
        """Should create a vacant title with a derived tier."""
        payload = {
            "name": "Intercontinental Championship",
            "division": "Intercontinental",
            "gender": "Male",
            "show_id": raw_show.id,
        }
        response = client.post("/api/titles", json=payload)
        assert response.status_code == 201
        data = response.json()
        assert data["prestige_tier"] == 2
        assert data["title_type"] == "Singles"
        assert data["current_holder_id"] is None
        assert data["is_user_created"] is True

    def test_create_title_unknown_show(self, client):
        """Should return 404 for a missing owning show."""
        payload = {"name": "Ghost Belt", "division": "World", "gender": "Male", "show_id": 999}
        response = client.post("/api/titles", json=payload)
        assert response.status_code == 404

    def test_create_title_blank_name(self, client):
        """Should return 422 for a whitespace-only name and store nothing."""
        payload = {"name": "   ", "division": "World", "gender": "Male"}
        response = client.post("/api/titles", json=payload)
        assert response.status_code == 422

        listing = client.get("/api/titles")
        assert listing.status_code == 200
        assert listing.json() == []

    def test_create_title_trims_name(self, client):
        """Should store the name and division without surrounding spaces."""
        payload = {"name": "  Speed Championship ", "division": " Speed ", "gender": "Mixed"}
        data = client.post("/api/titles", json=payload).json()
        assert data["name"] == "Speed Championship"
        assert data["division"] == "Speed"
        assert data["prestige_tier"] == 4

    def test_create_title_bad_gender(self, client):
        """Should return 422 for an unknown gender restriction."""
        payload = {"name": "Odd Belt", "division": "World", "gender": "Other"}
        response = client.post("/api/titles", json=payload)
        assert response.status_code == 422


class TestListTitles:
    """Tests for GET /api/titles"""

    def test_list_titles_empty(self, client):
        """Should return an empty list when no titles exist."""
        response = client.get("/api/titles")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_titles_ordered_with_holders(self, client, world_title, mixed_title, male_wrestler):
        """Should order by tier and include current holders."""
        client.post(f"/api/titles/{world_title.id}/assign", json={"wrestler_id": male_wrestler.id})

        response = client.get("/api/titles")
        assert response.status_code == 200
        data = response.json()
        assert [t["title"]["name"] for t in data] == ["World Championship", "Hardcore Championship"]
        assert data[0]["current_holders"][0]["wrestler_name"] == "Cody Rhodes"
        assert data[0]["days_held"] == 0
        assert data[1]["current_holders"] == []

    def test_list_unassigned_titles(self, client, world_title, womens_title):
        """Should only return titles without an owning show."""
        response = client.get("/api/titles/unassigned")
        assert response.status_code == 200
        assert [t["title"]["id"] for t in response.json()] == [world_title.id]


class TestGetTitle:
    """Tests for GET /api/titles/{id}"""

    def test_get_title_success(self, client, womens_title):
        """Should return the title with an empty holder list when vacant."""
        response = client.get(f"/api/titles/{womens_title.id}")
        assert response.status_code == 200
        data = response.json()
        assert data["title"]["name"] == "Women's World Championship"
        assert data["current_holders"] == []
        assert data["days_held"] is None

    def test_get_title_not_found(self, client):
        """Should return 404 for a missing title."""
        response = client.get("/api/titles/4040")
        assert response.status_code == 404
        assert "not found" in response.json()["detail"]


class TestAssignTitle:
    """Tests for POST /api/titles/{id}/assign"""

    def test_assign_title_success(self, client, world_title, male_wrestler):
        """Should open a reign and report it."""
        payload = {
            "wrestler_id": male_wrestler.id,
            "event_name": "WrestleMania 41",
            "event_location": "Las Vegas",
        }
        response = client.post(f"/api/titles/{world_title.id}/assign", json=payload)
        assert response.status_code == 200
        data = response.json()
        assert data["wrestler_id"] == male_wrestler.id
        assert data["held_until"] is None
        assert data["change_method"] == "Won"
        assert data["event_name"] == "WrestleMania 41"

        holders = client.get(f"/api/titles/{world_title.id}/holders").json()
        assert [h["holder"]["wrestler_id"] for h in holders] == [male_wrestler.id]

    def test_assign_title_succession(self, client, world_title, male_wrestler, second_male_wrestler):
        """Should close the previous reign when a new champion is crowned."""
        client.post(f"/api/titles/{world_title.id}/assign", json={"wrestler_id": male_wrestler.id})
        client.post(
            f"/api/titles/{world_title.id}/assign",
            json={"wrestler_id": second_male_wrestler.id, "change_method": "Awarded"},
        )

        history = client.get(f"/api/titles/{world_title.id}/history").json()
        assert [h["wrestler_id"] for h in history] == [male_wrestler.id, second_male_wrestler.id]
        assert history[0]["held_until"] is not None
        assert history[1]["held_until"] is None
        assert history[1]["change_method"] == "Awarded"

    def test_assign_title_gender_mismatch(self, client, world_title, female_wrestler):
        """Should return 422 and leave the title vacant."""
        response = client.post(
            f"/api/titles/{world_title.id}/assign", json={"wrestler_id": female_wrestler.id}
        )
        assert response.status_code == 422
        assert client.get(f"/api/titles/{world_title.id}/holders").json() == []

    def test_assign_unknown_title(self, client, male_wrestler):
        """Should return 404 for a missing title."""
        response = client.post("/api/titles/999/assign", json={"wrestler_id": male_wrestler.id})
        assert response.status_code == 404
        assert response.json()["detail"] == "Title 999 not found"

    def test_assign_unknown_wrestler(self, client, world_title):
        """Should return 404 for a missing wrestler."""
        response = client.post(f"/api/titles/{world_title.id}/assign", json={"wrestler_id": 999})
        assert response.status_code == 404

    def test_assign_title_non_positive_wrestler_id(self, client, world_title):
        """Should return 422 for a non-positive wrestler id."""
        response = client.post(f"/api/titles/{world_title.id}/assign", json={"wrestler_id": 0})
        assert response.status_code == 422


class TestVacateTitle:
    """Tests for POST /api/titles/{id}/vacate"""

    def test_vacate_without_body(self, client, world_title, male_wrestler):
        """Should close the reign as Vacated when no body is sent."""
        client.post(f"/api/titles/{world_title.id}/assign", json={"wrestler_id": male_wrestler.id})

        response = client.post(f"/api/titles/{world_title.id}/vacate")
        assert response.status_code == 200
        data = response.json()
        assert data["closed_reign"]["wrestler_id"] == male_wrestler.id
        assert data["closed_reign"]["change_method"] == "Vacated"
        assert data["closed_reign"]["held_until"] is not None

        title = client.get(f"/api/titles/{world_title.id}").json()
        assert title["title"]["current_holder_id"] is None
        assert title["current_holders"] == []

    def test_vacate_stripped(self, client, world_title, male_wrestler):
        """Should record Stripped when requested."""
        client.post(f"/api/titles/{world_title.id}/assign", json={"wrestler_id": male_wrestler.id})

        response = client.post(
            f"/api/titles/{world_title.id}/vacate", json={"change_method": "Stripped"}
        )
        assert response.status_code == 200
        assert response.json()["closed_reign"]["change_method"] == "Stripped"

    def test_vacate_keeps_winning_event(self, client, world_title, male_wrestler):
        """Should keep the event where the reign was won in the history."""
        client.post(
            f"/api/titles/{world_title.id}/assign",
            json={"wrestler_id": male_wrestler.id, "event_name": "WrestleMania", "event_location": "Philadelphia"},
        )
        client.post(
            f"/api/titles/{world_title.id}/vacate",
            json={"event_name": "Raw", "event_location": "Boston"},
        )

        history = client.get(f"/api/titles/{world_title.id}/history").json()
        assert len(history) == 1
        assert history[0]["event_name"] == "WrestleMania"
        assert history[0]["event_location"] == "Philadelphia"
        assert history[0]["change_method"] == "Vacated"

    def test_vacate_vacant_title(self, client, world_title):
        """Should be a no-op returning a null reign."""
        response = client.post(f"/api/titles/{world_title.id}/vacate")
        assert response.status_code == 200
        assert response.json() == {"title_id": world_title.id, "closed_reign": None}

    def test_vacate_with_won_is_rejected(self, client, world_title, male_wrestler):
        """Should return 422 when the vacancy method is Won."""
        client.post(f"/api/titles/{world_title.id}/assign", json={"wrestler_id": male_wrestler.id})

        response = client.post(f"/api/titles/{world_title.id}/vacate", json={"change_method": "Won"})
        assert response.status_code == 422
        holders = client.get(f"/api/titles/{world_title.id}/holders").json()
        assert len(holders) == 1

    def test_vacate_unknown_title(self, client):
        """Should return 404 for a missing title."""
        response = client.post("/api/titles/999/vacate")
        assert response.status_code == 404
