"""회원 검색 라우터.

Member search router. The three list endpoints share one search condition
and differ only in how results are returned:
    - /v1/members: 전체 목록 (full list)
    - /v2/members: 페이지, 카운트 쿼리 항상 실행 (page, always counted)
    - /v3/members: 페이지, 필요할 때만 카운트 (page, counted only when needed)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.database import get_db
from querystudy.schemas.common import Page
from querystudy.schemas.member import MemberSearchCondition, MemberTeamDto
from querystudy.services.member_service import member_service

router: APIRouter = APIRouter()


@router.get("/v1/members", response_model=list[MemberTeamDto])
async def search_members_v1(
    condition: Annotated[MemberSearchCondition, Depends()],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[MemberTeamDto]:
    """검색 조건에 맞는 회원 전체 목록을 조회합니다.

    List all members matching the search condition.
    """
    return await member_service.search_members(db, condition)


@router.get("/v2/members", response_model=Page)
async def search_members_v2(
    condition: Annotated[MemberSearchCondition, Depends()],
    db: Annotated[AsyncSession, Depends(get_db)],
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1, le=100)] = 20,
) -> Page:
    """회원 검색 결과를 페이지로 조회합니다 (카운트 쿼리 항상 실행).

    Page through members; the count query always runs.
    """
    return await member_service.search_members_page(db, condition, page, per_page, strategy="simple")


@router.get("/v3/members", response_model=Page)
async def search_members_v3(
    condition: Annotated[MemberSearchCondition, Depends()],
    db: Annotated[AsyncSession, Depends(get_db)],
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1, le=100)] = 20,
) -> Page:
    """회원 검색 결과를 페이지로 조회합니다 (필요할 때만 카운트).

    Page through members; the count query is skipped when the total is known
    from the page content.
    """
    return await member_service.search_members_page(db, condition, page, per_page, strategy="complex")


@router.get("/v1/members/{member_id}", response_model=MemberTeamDto)
async def get_member(
    member_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberTeamDto:
    """회원 한 명을 팀 정보와 함께 조회합니다.

    Retrieve one member with its team.
    """
    return await member_service.get_member(db, member_id)
