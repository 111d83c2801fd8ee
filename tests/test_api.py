"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

import ppcalc.config
from ppcalc.constants.mode import Mode
from ppcalc.init_api import asgi_app
from ppcalc.usecases import performance

client = TestClient(asgi_app)


class FakeCalculator:
    def calculate(self, statistics, mods, combo):
        return 250.004, {"pp_aim": 120.0, "stars": 6.5}


CIRCLES = [{"kind": "circle"}] * 10


class TestIndex:
    """Tests for GET /."""

    def test_version(self):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": ppcalc.config.VERSION}


class TestSimulateEndpoint:
    """Tests for POST /simulate/{mode}."""

    def test_total_objects(self):
        response = client.post("/simulate/osu", json={"total_objects": 100, "accuracy": 0.95})

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["statistics"] == {"great": 94, "good": 0, "meh": 6, "miss": 0}
        assert data["accuracy"] == 95.0

    def test_hit_objects(self):
        response = client.post(
            "/simulate/taiko",
            json={
                "hit_objects": [{"kind": "hit"}] * 4 + [{"kind": "drum_roll"}],
                "combo_percent": 50,
            },
        )

        data = response.json()
        assert data["statistics"] == {"great": 4, "good": 0, "miss": 0}
        assert data["max_combo"] == 4
        assert data["combo"] == 2
        assert data["combo_percent"] == 50.0

    def test_unknown_ruleset(self):
        response = client.post("/simulate/ctb2", json={"total_objects": 10})

        assert response.status_code == 400
        assert response.json()["status"] == "error"
        assert "ruleset" in response.json()["message"]

    def test_too_many_misses(self):
        response = client.post("/simulate/0", json={"total_objects": 10, "misses": 11})

        assert response.status_code == 400
        assert "misses" in response.json()["message"]

    def test_missing_objects(self):
        response = client.post("/simulate/osu", json={"accuracy": 0.9})

        assert response.status_code == 400

    def test_unknown_mod(self):
        response = client.post(
            "/simulate/osu",
            json={"total_objects": 10, "mods": "HDXX"},
        )

        assert response.status_code == 400
        assert "mods" in response.json()["message"]

    def test_mods_echoed(self):
        response = client.post("/simulate/osu", json={"total_objects": 10, "mods": "+hdnc"})

        assert response.status_code == 200
        assert response.json()["mods"] == "HDNC"

    def test_missing_beatmap(self, tmp_path, monkeypatch):
        monkeypatch.setattr(ppcalc.config, "BEATMAPS_PATH", tmp_path)

        response = client.post(
            "/simulate/osu",
            json={"beatmap_id": 75, "hit_objects": CIRCLES},
        )

        assert response.status_code == 404
        assert response.json()["status"] == "error"

    def test_beatmap_requires_hit_objects(self):
        response = client.post("/simulate/osu", json={"beatmap_id": 75, "total_objects": 10})

        assert response.status_code == 400
        assert "hit_objects" in response.json()["message"]

    def test_performance(self, monkeypatch):
        requested = []

        def from_beatmap_id(beatmap_id, mode):
            requested.append((beatmap_id, mode))
            return FakeCalculator()

        monkeypatch.setattr(performance.RosuCalculator, "from_beatmap_id", from_beatmap_id)

        response = client.post(
            "/simulate/osu",
            json={
                "beatmap_id": 75,
                "hit_objects": CIRCLES,
                "mods": "HD",
                "accuracy": 0.95,
                "combo": 5,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert requested == [(75, Mode.STD)]
        assert data["pp"] == 250.0
        assert data["mods"] == "HD"
        assert data["combo"] == 5
        assert data["max_combo"] == 10
        assert data["combo_percent"] == 50.0
        assert data["attributes"] == {"pp_aim": 120.0, "stars": 6.5}

    def test_combo_above_max(self):
        response = client.post(
            "/simulate/osu",
            json={"hit_objects": CIRCLES, "combo": 11},
        )

        assert response.status_code == 400
        assert "combo" in response.json()["message"]

    def test_strict_infeasible(self):
        response = client.post(
            "/simulate/osu",
            json={"total_objects": 10, "accuracy": 0.05, "strict": True},
        )

        assert response.status_code == 422
        assert response.json()["status"] == "error"


class TestProfileEndpoint:
    """Tests for POST /profile."""

    def test_profile(self):
        response = client.post(
            "/profile",
            json={
                "username": "peppy",
                "live_pp": 140,
                "plays": [
                    {"local_pp": 50, "live_pp": 90},
                    {"local_pp": 100, "live_pp": 60, "beatmap_id": 75, "mods": "HD"},
                ],
            },
        )

        data = response.json()
        assert data["local_pp"] == pytest.approx(140.5)
        assert data["bonus_pp"] == pytest.approx(-7)
        assert [play["position"] for play in data["plays"]] == [1, 2]
        assert data["plays"][0]["beatmap_id"] == 75
        assert data["plays"][1]["weight"] == pytest.approx(0.95)

    def test_inactive_player(self):
        response = client.post(
            "/profile",
            json={
                "username": "inactive",
                "live_pp": 0,
                "plays": [{"local_pp": 100, "live_pp": 90}, {"local_pp": 50, "live_pp": 60}],
            },
        )

        data = response.json()
        assert data["bonus_pp"] == 0
        assert data["live_pp"] == pytest.approx(147.0)
        assert data["local_pp"] == pytest.approx(147.5)

    def test_negative_pp(self):
        response = client.post(
            "/profile",
            json={"username": "a", "live_pp": 10, "plays": [{"local_pp": -1, "live_pp": 1}]},
        )

        assert response.status_code == 422


class TestLeaderboardEndpoint:
    """Tests for POST /leaderboard."""

    PLAYERS = [
        {"username": "a", "live_pp": 100, "plays": [{"local_pp": 300, "live_pp": 100}]},
        {"username": "b", "live_pp": 300, "plays": [{"local_pp": 100, "live_pp": 300}]},
    ]

    def test_json(self):
        response = client.post("/leaderboard", json={"players": self.PLAYERS})

        data = response.json()
        assert [entry["username"] for entry in data] == ["a", "b"]
        assert [entry["rank_delta"] for entry in data] == [1, -1]
        assert data[0]["local_pp"] == pytest.approx(300)

    def test_table(self):
        response = client.post(
            "/leaderboard",
            params={"format": "table"},
            json={"players": self.PLAYERS},
        )

        assert response.status_code == 200
        lines = response.text.splitlines()
        assert lines[1].split()[:2] == ["+1", "a"]
        assert lines[2].split()[:2] == ["-1", "b"]

    def test_duplicate_players(self):
        players = self.PLAYERS + [self.PLAYERS[0]]
        response = client.post("/leaderboard", json={"players": players})

        assert response.status_code == 400
        assert "twice" in response.json()["message"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
