"""팀 서비스 - 팀 생성 및 팀별 통계.

Team Service - Team creation and per-team statistics.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from querypractice.models.team import Team
from querypractice.repositories.member_repository import member_repository
from querypractice.repositories.team_repository import team_repository
from querypractice.schemas.team import TeamAgeStats, TeamCreate, TeamResponse
from querypractice.utils.exceptions import DuplicateError


class TeamService:
    """팀 관련 비즈니스 로직을 처리하는 서비스."""

    async def create_team(self, db: AsyncSession, data: TeamCreate) -> TeamResponse:
        """새 팀을 생성합니다.

        Raises:
            DuplicateError: 같은 이름의 팀이 이미 존재할 때 (Team name already taken)
        """
        if await team_repository.exists(db, {"name": data.name}):
            raise DuplicateError("Team name already exists")

        team: Team = await team_repository.create(db, {"name": data.name})
        return TeamResponse(id=team.id, name=team.name)

    async def age_stats(self, db: AsyncSession) -> list[TeamAgeStats]:
        """팀별 평균 나이 목록."""
        return await member_repository.team_average_ages(db)


# 싱글턴 인스턴스 - Singleton instance
team_service: TeamService = TeamService()
