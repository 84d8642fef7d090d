"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
``fetch_results`` runs an offset/limit window plus a count query;
``to_page`` turns a window into a 1-based Page response.
"""

import math
from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from querystudy.schemas.common import Page, QueryResults


async def count_rows(db: AsyncSession, query: Select[Any]) -> int:
    """쿼리 결과의 전체 행 수를 조회합니다.

    Count the rows a query would return by wrapping it in a subquery.
    ORDER BY, OFFSET and LIMIT are stripped first.
    """
    base = query.order_by(None).offset(None).limit(None)
    count_query = select(func.count()).select_from(base.subquery())
    return (await db.execute(count_query)).scalar() or 0


async def fetch_results(
    db: AsyncSession,
    query: Select[Any],
    offset: int = 0,
    limit: int = 20,
) -> QueryResults:
    """오프셋/리밋 구간 결과와 전체 건수를 함께 조회합니다.

    Execute an offset/limit query and return it with the total count.
    Single-entity queries yield entities, multi-column queries yield rows.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 (Base query)
        offset: 건너뛸 행 수 (Rows to skip)
        limit: 최대 행 수 (Maximum rows)

    Returns:
        QueryResults: 결과, 전체 건수, 오프셋, 리밋 (Results, total, offset, limit)
    """
    total: int = await count_rows(db, query)
    result = await db.execute(query.offset(offset).limit(limit))
    if len(query.column_descriptions) == 1:
        results: list[Any] = list(result.scalars().all())
    else:
        results = list(result.all())
    return QueryResults(results=results, total=total, offset=offset, limit=limit)


def to_page(items: list[Any], total: int, page: int, per_page: int) -> Page:
    """항목과 전체 건수로 Page 응답을 구성합니다.

    Build a Page response; ``pages`` is ceil(total / per_page).
    """
    pages: int = math.ceil(total / per_page) if per_page > 0 else 0
    return Page(items=items, total=total, page=page, per_page=per_page, pages=pages)
