"""팀 라우터 - 팀 생성 및 팀별 나이 통계.

Team Router - team creation and per-team age statistics.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from querypractice.database import get_db
from querypractice.schemas.team import TeamAgeStats, TeamCreate, TeamResponse
from querypractice.services.team_service import team_service

router: APIRouter = APIRouter()


@router.get("/age-stats", response_model=list[TeamAgeStats])
async def team_age_stats(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[TeamAgeStats]:
    """팀별 평균 나이를 조회합니다."""
    return await team_service.age_stats(db)


@router.post("", response_model=TeamResponse, status_code=201)
async def create_team(
    data: TeamCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TeamResponse:
    """새 팀을 생성합니다. 이름이 중복되면 409."""
    result: TeamResponse = await team_service.create_team(db, data)
    await db.commit()
    return result
