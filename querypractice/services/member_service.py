"""회원 서비스 - 회원 검색/조회/생성 비즈니스 로직.

Member Service - Business logic for member search, detail and creation.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from querypractice.models.member import Member
from querypractice.models.team import Team
from querypractice.repositories.member_repository import member_repository
from querypractice.repositories.team_repository import team_repository
from querypractice.schemas.member import (
    MemberCreate,
    MemberPageResponse,
    MemberResponse,
    MemberSearchCondition,
)
from querypractice.utils.exceptions import NotFoundError
from querypractice.utils.pagination import QueryResults


class MemberService:
    """회원 관련 비즈니스 로직을 처리하는 서비스.

    Service handling member business logic.
    """

    def _to_response(self, member: Member, team: Team | None) -> MemberResponse:
        """회원 모델을 응답 스키마로 변환합니다.

        Convert a Member (and its already-loaded team) to a MemberResponse.
        """
        return MemberResponse(
            id=member.id,
            username=member.username,
            age=member.age,
            team_id=team.id if team is not None else None,
            team_name=team.name if team is not None else None,
        )

    async def search_members(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        offset: int,
        limit: int,
    ) -> MemberPageResponse:
        """검색 조건과 페이지 범위로 회원을 조회합니다.

        Search members by condition and return one page with the total count.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition; None fields are ignored)
            offset: 건너뛸 행 수 (Rows to skip)
            limit: 최대 행 수 (Page size)

        Returns:
            MemberPageResponse: 페이지 응답 (Page response)
        """
        page: QueryResults = await member_repository.search_condition_page(
            db, condition, offset=offset, limit=limit
        )
        return MemberPageResponse(
            items=page.results,
            total=page.total,
            offset=page.offset,
            limit=page.limit,
        )

    async def get_member(self, db: AsyncSession, member_id: int) -> MemberResponse:
        """회원 상세를 팀과 함께 조회합니다.

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
        """
        member: Member | None = await member_repository.get_detail(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")
        return self._to_response(member, member.team)

    async def create_member(self, db: AsyncSession, data: MemberCreate) -> MemberResponse:
        """새 회원을 생성합니다. 팀이 지정되면 양방향 연관관계를 함께 설정합니다.

        Create a member, attaching it to ``data.team_id`` when given.

        Raises:
            NotFoundError: 팀을 찾을 수 없을 때 (Team not found)
        """
        team: Team | None = None
        if data.team_id is not None:
            team = await team_repository.get_by_id(db, data.team_id)
            if team is None:
                raise NotFoundError("Team not found")

        member: Member = Member(username=data.username, age=data.age, team=team)
        db.add(member)
        await db.flush()
        return self._to_response(member, team)


# 싱글턴 인스턴스 - Singleton instance
member_service: MemberService = MemberService()
