"""회원/팀 검색 API 테스트.

Member and team search API tests — v1 list, v2/v3 pages, single member,
team statistics, and error responses.
"""

from types import SimpleNamespace

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.usefixtures("sample_data")


class TestHealth:
    async def test_health(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}


class TestMemberSearch:
    """회원 검색 목록."""

    async def test_search_all(self, client: AsyncClient):
        res = await client.get("/api/v1/members")
        assert res.status_code == 200
        assert [m["username"] for m in res.json()] == ["member1", "member2", "member3", "member4"]

    async def test_search_by_condition(self, client: AsyncClient):
        res = await client.get("/api/v1/members", params={"team_name": "teamB", "age_goe": 35})
        assert res.status_code == 200
        data = res.json()
        assert len(data) == 1
        assert data[0]["username"] == "member4"
        assert data[0]["team_name"] == "teamB"
        assert data[0]["age"] == 40

    async def test_search_invalid_age_range(self, client: AsyncClient):
        """나이 하한이 상한보다 크면 400."""
        res = await client.get("/api/v1/members", params={"age_goe": 30, "age_loe": 10})
        assert res.status_code == 400


class TestMemberPage:
    """페이지 조회 — v2(simple), v3(complex)."""

    @pytest.mark.parametrize("version", ["v2", "v3"])
    async def test_page(self, client: AsyncClient, version: str):
        res = await client.get(f"/api/{version}/members", params={"page": 2, "per_page": 3})
        assert res.status_code == 200
        data = res.json()
        assert [m["username"] for m in data["items"]] == ["member4"]
        assert data["total"] == 4
        assert data["page"] == 2
        assert data["per_page"] == 3
        assert data["pages"] == 2

    async def test_page_with_condition(self, client: AsyncClient):
        res = await client.get("/api/v3/members", params={"team_name": "teamA", "per_page": 1})
        assert res.status_code == 200
        data = res.json()
        assert data["total"] == 2
        assert data["pages"] == 2

    async def test_page_invalid_page_number(self, client: AsyncClient):
        res = await client.get("/api/v2/members", params={"page": 0})
        assert res.status_code == 422


class TestMemberDetail:
    """회원 단건 조회."""

    async def test_get_member(self, client: AsyncClient, sample_data: SimpleNamespace):
        member = sample_data.members[0]
        res = await client.get(f"/api/v1/members/{member.id}")
        assert res.status_code == 200
        data = res.json()
        assert data["username"] == "member1"
        assert data["team_name"] == "teamA"
        assert data["team_id"] == sample_data.team_a.id

    async def test_get_nonexistent_member(self, client: AsyncClient):
        res = await client.get("/api/v1/members/999999")
        assert res.status_code == 404
        assert res.json()["detail"] == "Member not found"


class TestTeamStats:
    async def test_team_stats(self, client: AsyncClient):
        res = await client.get("/api/v1/teams/stats")
        assert res.status_code == 200
        data = res.json()
        assert [(t["team_name"], t["member_count"], t["avg_age"]) for t in data] == [
            ("teamA", 2, 15.0),
            ("teamB", 2, 35.0),
        ]
