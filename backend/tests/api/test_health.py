"""
Health API Tests

Tests for /api/health endpoints, the root endpoints and demo seeding.
"""
from sqlalchemy.exc import OperationalError


def _locked(*args, **kwargs):
    raise OperationalError("SELECT", {}, Exception("database is locked"))


class TestDatabaseHealth:
    """Tests for GET /api/health/db"""

    def test_health_check_success(self, client):
        """Should return healthy status when DB is connected."""
        response = client.get("/api/health/db")
        assert response.status_code == 200
        data = response.json()

        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert data["database"]["connected"] is True
        assert data["database"]["dialect"] == "sqlite"
        assert data["database"]["response_time_ms"] >= 0
        assert data["database"]["tables"]["titles"] == 0

    def test_health_check_counts_open_reigns(self, client, world_title, male_wrestler, second_male_wrestler):
        """Should count every reign but only one open reign per title."""
        for wrestler in (male_wrestler, second_male_wrestler):
            client.post(f"/api/titles/{world_title.id}/assign", json={"wrestler_id": wrestler.id})

        tables = client.get("/api/health/db").json()["database"]["tables"]
        assert tables["title_holders"] == 2
        assert tables["open_reigns"] == 1
        assert tables["wrestlers"] == 2

    def test_health_check_counts_active_roster(self, client, raw_show, smackdown_show, male_wrestler):
        """Should count history rows separately from active roster rows."""
        client.put(f"/api/shows/{raw_show.id}/roster/{male_wrestler.id}")
        client.put(f"/api/shows/{smackdown_show.id}/roster/{male_wrestler.id}")

        tables = client.get("/api/health/db").json()["database"]["tables"]
        assert tables["show_rosters"] == 2
        assert tables["active_roster_entries"] == 1


class TestRootEndpoints:
    """Tests for / and /health"""

    def test_root(self, client):
        """Should describe the API."""
        data = client.get("/").json()
        assert data["name"] == "Wrestling Universe Manager API"
        assert data["docs"] == "/docs"

    def test_liveness(self, client):
        """Should report healthy."""
        assert client.get("/health").json() == {"status": "healthy"}


class TestSeed:
    """Tests for POST /api/seed"""

    def test_seed_then_skip(self, client):
        """Should seed once and skip on the second call."""
        first = client.post("/api/seed")
        assert first.status_code == 200
        assert first.json()["created"] is True
        assert first.json()["titles"] == 15

        second = client.post("/api/seed").json()
        assert second["created"] is False

        titles = client.get("/api/titles").json()
        assert len(titles) == 15
        assert titles[0]["title"]["prestige_tier"] == 1
        assert all(t["current_holders"] == [] for t in titles)

        unassigned = client.get("/api/titles/unassigned").json()
        assert len(unassigned) == 5


class TestStorageFailures:
    """Tests for storage faults reaching the HTTP layer"""

    def test_ledger_read_fault_is_503(self, client, world_title, monkeypatch):
        """Should return 503 when a title read fails in storage."""
        from universe_manager.services.title_ledger import TitleHolderLedger

        monkeypatch.setattr(TitleHolderLedger, "current_holders", _locked)

        response = client.get(f"/api/titles/{world_title.id}/holders")
        assert response.status_code == 503

    def test_service_read_fault_is_503(self, client, monkeypatch):
        """Should return 503 when a listing fails in storage."""
        from universe_manager.services.wrestler_service import WrestlerService

        monkeypatch.setattr(WrestlerService, "list_wrestlers", _locked)

        response = client.get("/api/wrestlers")
        assert response.status_code == 503
        assert response.json()["detail"] == "Storage unavailable"
