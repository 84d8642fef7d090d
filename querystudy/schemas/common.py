"""공통 Pydantic 응답 스키마 정의.

Common Pydantic response schema definitions shared by the repositories
and the API layer.
"""

from typing import Any

from pydantic import BaseModel


class QueryResults(BaseModel):
    """오프셋/리밋 조회 결과와 전체 건수.

    Offset/limit query result together with the total row count.

    Attributes:
        results: 현재 구간 결과 (Rows in the requested window)
        total: 조건에 맞는 전체 건수 (Total matching rows)
        offset: 건너뛴 행 수 (Rows skipped)
        limit: 최대 행 수 (Maximum rows returned)
    """

    results: list[Any]
    total: int
    offset: int
    limit: int


class Page(BaseModel):
    """페이지네이션 결과 모델.

    Pagination result model for typed responses.

    Attributes:
        items: 현재 페이지 항목 목록 (Items for the current page)
        total: 전체 항목 수 (Total count across all pages)
        page: 현재 페이지 번호 (Current page number, 1-based)
        per_page: 페이지당 항목 수 (Items per page)
        pages: 전체 페이지 수 (Total number of pages)
    """

    items: list[Any]
    total: int
    page: int
    per_page: int
    pages: int
