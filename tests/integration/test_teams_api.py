"""
Integration tests for teams and chart endpoints
"""

import pytest


class TestTeamsEndpoints:
    """Test suite for /teams and /charts."""

    @pytest.mark.asyncio
    async def test_list_teams(self, client):
        response = await client.get("/teams")

        assert response.status_code == 200
        assert [t["label"] for t in response.json()] == ["1. Alpha", "2. Beta", "3. Gamma"]

    @pytest.mark.asyncio
    async def test_team_detail(self, client):
        """Test GET /teams/{team_id}"""
        response = await client.get("/teams/T1")

        assert response.status_code == 200
        data = response.json()
        assert data["team"]["team_name"] == "Alpha"
        assert data["team"]["rank"] == 1
        assert data["link"] == "#team=T1"
        assert [c["race_no"] for c in data["history"]] == [1, 2, 3]
        assert data["chart"]["datasets"][0]["data"] == [5, 5, 11]

    @pytest.mark.asyncio
    async def test_team_not_found(self, client):
        response = await client.get("/teams/nope")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_top5_chart(self, client):
        response = await client.get("/charts/top5")

        assert response.status_code == 200
        data = response.json()
        assert data["labels"] == ["R1", "R2", "R3"]
        assert len(data["datasets"]) == 3
