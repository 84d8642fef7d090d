"""동적 쿼리 테스트 — 조건 누적 방식과 where 파라미터 방식.

Dynamic query tests — Accumulated builder vs. where-parameter predicates.
"""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.models import Member
from querystudy.repositories.member_repository import (
    age_between,
    age_eq,
    combine,
    member_repository,
    username_eq,
)

pytestmark = pytest.mark.usefixtures("sample_data")


class TestBuilder:
    """조건을 리스트에 누적한 뒤 and_()로 결합."""

    async def test_dynamic_query_builder(self, db: AsyncSession):
        result = await member_repository.search_by_builder(db, "member1", None)
        assert len(result) == 1

    async def test_dynamic_query_builder_both(self, db: AsyncSession):
        result = await member_repository.search_by_builder(db, "member1", 20)
        assert result == []

    async def test_dynamic_query_builder_none(self, db: AsyncSession):
        """조건이 모두 없으면 전체 조회."""
        result = await member_repository.search_by_builder(db, None, None)
        assert len(result) == 4


class TestWhereParam:
    """where 파라미터 — None 조건은 무시."""

    async def test_dynamic_query_where_param(self, db: AsyncSession):
        result = await member_repository.search_by_params(db, "member1", 10)
        assert len(result) == 1

    async def test_dynamic_query_where_param_age_only(self, db: AsyncSession):
        result = await member_repository.search_by_params(db, None, 30)
        assert [m.username for m in result] == ["member3"]

    async def test_empty_username_matches_exactly(self, db: AsyncSession):
        """빈 문자열도 조건 — 이름이 ""인 회원만 조회."""
        db.add(Member("", 99))
        await db.flush()

        result = await member_repository.search_by_params(db, "", None)

        assert [(m.username, m.age) for m in result] == [("", 99)]

    async def test_builder_and_where_param_agree(self, db: AsyncSession):
        """두 방식은 같은 결과를 반환."""
        db.add(Member("", 99))
        await db.flush()

        for username, age in [("", None), ("member1", None), (None, 30), (None, None)]:
            by_builder = await member_repository.search_by_builder(db, username, age)
            by_params = await member_repository.search_by_params(db, username, age)
            assert [m.id for m in by_builder] == [m.id for m in by_params]

    async def test_composed_condition(self, db: AsyncSession):
        """조건 헬퍼를 조합해서 재사용 (all_eq)."""
        all_eq = combine(username_eq("member1"), age_eq(10))

        result = (await db.execute(select(Member).where(all_eq))).scalars().all()

        assert [m.username for m in result] == ["member1"]

    async def test_age_between_open_ended(self, db: AsyncSession):
        result = (
            await db.execute(select(Member.username).where(age_between(25, None)).order_by(Member.id))
        ).scalars().all()

        assert result == ["member3", "member4"]


class TestPredicateHelpers:
    """조건 헬퍼 단위 테스트."""

    def test_helpers_return_none_for_none(self):
        assert username_eq(None) is None
        assert age_eq(None) is None
        assert age_between(None, None) is None
        assert combine(None, None) is None

    def test_helpers_return_expression(self):
        assert username_eq("member1") is not None
        assert username_eq("") is not None
        assert age_eq(0) is not None
