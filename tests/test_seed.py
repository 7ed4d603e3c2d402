# =============================================================================
# tests/test_seed.py - Seed Script Tests
# =============================================================================
# Runs the seed against the in-memory database and checks the data set.
# =============================================================================

from lib.security import verify_password
from scripts import seed as seed_script


class TestSeed:
    """Tests for scripts/seed.py."""

    def test_inserts_example_data(self, fake_db, capsys):
        seed_script.seed()

        assert len(fake_db.rows("waste_types")) == 6
        assert len(fake_db.rows("users")) == 2
        assert len(fake_db.rows("operators")) == 1
        assert len(fake_db.rows("collection_points")) == 3
        assert len(fake_db.rows("addresses")) == 3
        assert len(fake_db.rows("schedules")) == 3
        assert len(fake_db.rows("reports")) == 2
        assert "completed successfully" in capsys.readouterr().out

    def test_operator_owns_every_point(self, fake_db):
        seed_script.seed()

        operator = fake_db.rows("users", role="OPERATOR")[0]
        assert {p["operator_id"] for p in fake_db.rows("collection_points")} == {operator["id"]}
        assert fake_db.rows("operators")[0]["user_id"] == operator["id"]

    def test_waste_type_links(self, fake_db):
        seed_script.seed()

        street_bins = fake_db.rows("collection_points", name="Cassonetti Via Milano")[0]
        links = fake_db.rows("collection_point_waste_types", collection_point_id=street_bins["id"])
        assert len(links) == 4
        assert len(fake_db.rows("collection_point_waste_types")) == 6 + 4 + 6

        schedule = fake_db.rows("schedules", collection_point_id=street_bins["id"])[0]
        assert schedule["is_always_open"] is True

    def test_seeded_users_can_log_in(self, fake_db):
        seed_script.seed()

        for user in fake_db.rows("users"):
            assert verify_password(seed_script.SEED_PASSWORD, user["password"])

    def test_report_statuses_and_no_ratings(self, fake_db):
        seed_script.seed()

        statuses = sorted(r["status"] for r in fake_db.rows("reports"))
        assert statuses == ["IN_PROGRESS", "PENDING"]
        assert all(p.get("avg_rating") is None for p in fake_db.rows("collection_points"))

    def test_main_reports_failure(self, fake_db, capsys):
        fake_db.failing_tables.add("waste_types")

        assert seed_script.main() == 1
        assert "Error during seed" in capsys.readouterr().err
