"""벌크 연산 테스트 — 수정, 증감, 삭제.

Bulk statement tests. Bulk UPDATE/DELETE go straight to the database, so
objects already in the session keep their old state until it is cleared.
"""

from types import SimpleNamespace

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.models import Member
from querystudy.repositories.member_repository import member_repository


async def _all_members(db: AsyncSession) -> list[Member]:
    return list((await db.execute(select(Member).order_by(Member.id))).scalars().all())


class TestBulkUpdate:
    """벌크 수정."""

    async def test_bulk_update(self, db: AsyncSession, sample_data: SimpleNamespace):
        """28살 미만 회원의 이름을 '비회원'으로 변경."""
        count = await member_repository.bulk_rename_younger_than(db, 28, "비회원")

        assert count == 2

        # 세션에 남아 있는 객체는 이전 값 그대로
        stale = await _all_members(db)
        assert [m.username for m in stale] == ["member1", "member2", "member3", "member4"]

        # 세션 초기화 후 다시 조회하면 DB 값
        db.expunge_all()
        fresh = await _all_members(db)
        assert [m.username for m in fresh] == ["비회원", "비회원", "member3", "member4"]

    async def test_bulk_update_populate_existing(self, db: AsyncSession, sample_data: SimpleNamespace):
        """populate_existing으로 세션 객체를 DB 값으로 덮어씀."""
        await member_repository.bulk_rename_younger_than(db, 28, "비회원")

        result = (
            await db.execute(
                select(Member).order_by(Member.id).execution_options(populate_existing=True)
            )
        ).scalars().all()

        assert sample_data.members[0].username == "비회원"
        assert [m.username for m in result][:2] == ["비회원", "비회원"]

    async def test_bulk_add(self, db: AsyncSession, sample_data: SimpleNamespace):
        count = await member_repository.bulk_age_plus(db, 1)

        assert count == 4
        db.expunge_all()
        assert [m.age for m in await _all_members(db)] == [11, 21, 31, 41]

    async def test_bulk_minus(self, db: AsyncSession, sample_data: SimpleNamespace):
        await member_repository.bulk_age_plus(db, -1)

        db.expunge_all()
        assert [m.age for m in await _all_members(db)] == [9, 19, 29, 39]

    async def test_bulk_multiply(self, db: AsyncSession, sample_data: SimpleNamespace):
        count = await member_repository.bulk_age_multiply(db, 2)

        assert count == 4
        db.expunge_all()
        assert [m.age for m in await _all_members(db)] == [20, 40, 60, 80]


class TestBulkDelete:
    """벌크 삭제."""

    async def test_bulk_delete(self, db: AsyncSession, sample_data: SimpleNamespace):
        """18살 초과 회원 삭제."""
        count = await member_repository.bulk_delete_older_than(db, 18)

        assert count == 3
        db.expunge_all()
        assert [m.username for m in await _all_members(db)] == ["member1"]
