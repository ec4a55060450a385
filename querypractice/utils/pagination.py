"""페이지네이션 유틸리티 모듈.

Offset/limit pagination for SQLAlchemy async queries.
``fetch_results`` returns the page together with the total row count,
so callers get both from one helper.
"""

from typing import Any

from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


class QueryResults(BaseModel):
    """페이지 결과와 전체 개수.

    A page of results plus the metadata needed to render paging controls.

    Attributes:
        results: 현재 페이지 항목 (Rows of the current page)
        total: 전체 항목 수 (Total matching rows, ignoring offset/limit)
        offset: 건너뛴 행 수 (Rows skipped)
        limit: 최대 행 수 (Maximum rows requested)
    """

    results: list[Any]
    total: int
    offset: int
    limit: int

    @property
    def is_empty(self) -> bool:
        return not self.results


async def count_rows(db: AsyncSession, query: Select[Any]) -> int:
    """쿼리 결과의 전체 행 수를 셉니다 (서브쿼리로 감싸서 COUNT).

    Count the rows ``query`` would return by wrapping it in a subquery.
    """
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    return (await db.execute(count_query)).scalar() or 0


async def fetch_results(
    db: AsyncSession,
    query: Select[Any],
    offset: int = 0,
    limit: int = 20,
    scalars: bool = True,
) -> QueryResults:
    """오프셋/리밋을 적용한 페이지와 전체 개수를 조회합니다.

    Execute ``query`` twice: once for the total count and once for the
    requested slice.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: 기본 SELECT 쿼리 (Base query; ordering is kept for the page)
        offset: 건너뛸 행 수 (Rows to skip, 0-based)
        limit: 가져올 최대 행 수 (Maximum rows to return)
        scalars: True이면 첫 번째 컬럼만 반환 (Return first column only, e.g. entities)

    Returns:
        QueryResults: 페이지 항목과 메타데이터 (Page items and metadata)
    """
    total: int = await count_rows(db, query)

    result = await db.execute(query.offset(offset).limit(limit))
    results: list[Any] = list(result.scalars().all()) if scalars else list(result.all())

    return QueryResults(results=results, total=total, offset=offset, limit=limit)
