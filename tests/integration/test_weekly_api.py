"""
Integration tests for weekly endpoints
"""

import pytest


class TestWeeklyEndpoints:
    """Test suite for /weekly."""

    @pytest.mark.asyncio
    async def test_latest_week(self, client):
        """Test GET /weekly defaults to the last race"""
        response = await client.get("/weekly")

        assert response.status_code == 200
        data = response.json()
        assert data["race_no"] == 3
        assert data["half"] == "2H"

    @pytest.mark.asyncio
    async def test_week_breakdown(self, client):
        """Test GET /weekly/{race_no}"""
        response = await client.get("/weekly/2")

        assert response.status_code == 200
        data = response.json()
        assert [r["cell"]["team_name"] for r in data["rows"]] == ["Beta", "Alpha", "Gamma"]
        assert data["high_score"]["team_id"] == "T2"
        assert data["low_score"]["team_id"] == "T3"
        assert data["duplicates"] == 1
        assert data["missing"] == 1

        alpha = data["rows"][1]["cell"]
        assert alpha["flags"] == [{"type": "dup", "label": "Duplicate in half"}]
        assert alpha["finish_pos"] is None

    @pytest.mark.asyncio
    async def test_week_not_found(self, client):
        response = await client.get("/weekly/99")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_movers(self, client):
        """Test GET /weekly/{race_no}/movers"""
        response = await client.get("/weekly/3/movers")

        assert response.status_code == 200
        data = response.json()
        assert data["biggest_mover"]["label"] == "Alpha (↑1)"
        assert data["hard_luck"]["label"] == "Beta (↓1)"
        assert len(data["entries"]) == 3
