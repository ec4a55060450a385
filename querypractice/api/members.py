"""회원 라우터 - 회원 검색/상세/생성 엔드포인트.

Member Router - search, detail and creation endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from querypractice.config import settings
from querypractice.database import get_db
from querypractice.schemas.member import (
    MemberCreate,
    MemberPageResponse,
    MemberResponse,
    MemberSearchCondition,
)
from querypractice.services.member_service import member_service

router: APIRouter = APIRouter()


@router.get("", response_model=MemberPageResponse)
async def search_members(
    db: Annotated[AsyncSession, Depends(get_db)],
    username: str | None = None,
    team_name: str | None = None,
    age_goe: Annotated[int | None, Query(ge=0)] = None,
    age_loe: Annotated[int | None, Query(ge=0)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)] = settings.DEFAULT_PAGE_SIZE,
) -> MemberPageResponse:
    """검색 조건으로 회원 목록을 페이지 단위로 조회합니다.

    Search members; omitted filters match everything.
    """
    condition = MemberSearchCondition(
        username=username,
        team_name=team_name,
        age_goe=age_goe,
        age_loe=age_loe,
    )
    return await member_service.search_members(db, condition, offset=offset, limit=limit)


@router.get("/{member_id}", response_model=MemberResponse)
async def get_member(
    member_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberResponse:
    """회원 상세 정보를 팀 이름과 함께 조회합니다."""
    return await member_service.get_member(db, member_id)


@router.post("", response_model=MemberResponse, status_code=201)
async def create_member(
    data: MemberCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberResponse:
    """새 회원을 생성합니다."""
    result: MemberResponse = await member_service.create_member(db, data)
    await db.commit()
    return result
