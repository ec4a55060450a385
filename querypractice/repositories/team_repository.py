"""팀 레포지토리 - 팀 조회 및 생성 쿼리.

Team Repository - Lookup queries for teams.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from querypractice.models.team import Team
from querypractice.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """팀 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the team table.
    """

    def __init__(self) -> None:
        super().__init__(Team)

    async def get_by_name(self, db: AsyncSession, name: str) -> Team | None:
        """이름으로 팀을 조회합니다."""
        return await self.fetch_one(db, Team.name == name)

    async def list_with_members(self, db: AsyncSession) -> list[Team]:
        """팀 목록을 소속 회원과 함께 조회합니다.

        Retrieve teams with ``members`` eagerly loaded by a second SELECT ... IN.
        """
        query: Select = (
            select(Team)
            .options(selectinload(Team.members))
            .order_by(Team.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 - Singleton instance
team_repository: TeamRepository = TeamRepository()
