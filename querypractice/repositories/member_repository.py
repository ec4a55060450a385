"""회원 레포지토리 - 회원 조회 쿼리 모음.

Member Repository - Named queries over members and their teams.
Covers basic selection, sorting, paging, aggregation, inner/outer/theta/fetch
joins, subqueries, CASE/constant/concat expressions, DTO projections and
dynamic predicates.

Every method propagates SQLAlchemy exceptions unchanged; single-result
queries raise ``MultipleResultsFound`` when more than one row matches.
"""

from typing import Any

from sqlalchemy import Select, String, case, cast, func, literal, or_, select, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased, contains_eager

from querypractice.models.member import Member
from querypractice.models.team import Team
from querypractice.repositories.base import BaseRepository
from querypractice.schemas.member import (
    AgeStats,
    MemberDto,
    MemberSearchCondition,
    MemberTeamDto,
    UserDto,
)
from querypractice.schemas.team import TeamAgeStats
from querypractice.utils.pagination import QueryResults, fetch_results
from querypractice.utils.predicates import PredicateBuilder, null_safe, where_all
from querypractice.utils.projections import (
    DtoBundle,
    project_bean,
    project_constructor,
    project_fields,
)


# ---------------------------------------------------------------------------
# 동적 조건 - None이면 조건 없음 (Null-safe predicates; None means "no filter")
# ---------------------------------------------------------------------------
def username_eq(username: str | None):
    return null_safe(username, lambda value: Member.username == value)


def age_eq(age: int | None):
    return null_safe(age, lambda value: Member.age == value)


def team_name_eq(team_name: str | None):
    return null_safe(team_name, lambda value: Team.name == value)


def age_goe(age: int | None):
    return null_safe(age, lambda value: Member.age >= value)


def age_loe(age: int | None):
    return null_safe(age, lambda value: Member.age <= value)


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the member table.
    """

    def __init__(self) -> None:
        super().__init__(Member)

    # === 기본 조회 (Basic selection) ===

    async def find_by_username_sql(self, db: AsyncSession, username: str) -> Member:
        """문자열 SQL로 회원을 조회합니다.

        Find a member with a hand-written SQL string and a bound parameter,
        mapped back onto the Member entity.

        Raises:
            NoResultFound: 일치하는 회원이 없을 때 (No member matched)
            MultipleResultsFound: 두 명 이상 일치할 때 (More than one matched)
        """
        statement = text(
            "SELECT id, username, age, team_id FROM member WHERE username = :username"
        ).bindparams(username=username)
        result = await db.execute(select(Member).from_statement(statement))
        return result.scalar_one()

    async def find_by_username(self, db: AsyncSession, username: str) -> Member | None:
        """쿼리 빌더로 이름이 일치하는 회원을 조회합니다."""
        return await self.fetch_one(db, Member.username == username)

    async def search(
        self,
        db: AsyncSession,
        username: str,
        age: int,
        max_age: int,
    ) -> Member | None:
        """이름이 같고 (나이가 같거나 max_age 미만인) 회원을 조회합니다.

        ``username == :username AND (age == :age OR age < :max_age)``
        """
        return await self.fetch_one(
            db,
            Member.username == username,
            or_(Member.age == age, Member.age < max_age),
        )

    async def count_by_age(self, db: AsyncSession, age: int) -> int:
        """해당 나이의 회원 수."""
        query: Select = select(Member).where(Member.age == age)
        results: QueryResults = await fetch_results(db, query)
        return results.total

    # === 정렬/페이징 (Sorting and paging) ===

    async def list_sorted(self, db: AsyncSession) -> list[Member]:
        """나이 내림차순, 이름 오름차순(이름이 없으면 마지막)으로 정렬합니다."""
        query: Select = select(Member).order_by(
            Member.age.desc(),
            Member.username.asc().nulls_last(),
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def list_page(self, db: AsyncSession, offset: int, limit: int) -> list[Member]:
        """나이 내림차순으로 offset/limit 구간만 조회합니다."""
        query: Select = (
            select(Member).order_by(Member.age.desc()).offset(offset).limit(limit)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def fetch_page(self, db: AsyncSession, offset: int, limit: int) -> QueryResults:
        """나이 내림차순 페이지와 전체 개수를 함께 조회합니다."""
        query: Select = select(Member).order_by(Member.age.desc())
        return await fetch_results(db, query, offset=offset, limit=limit)

    # === 집계 (Aggregation) ===

    async def age_stats(self, db: AsyncSession) -> AgeStats:
        """전체 회원의 수, 최대/최소/평균/합계 나이를 계산합니다."""
        query: Select = select(
            func.count(Member.id).label("count"),
            func.max(Member.age).label("max"),
            func.min(Member.age).label("min"),
            func.avg(Member.age).label("avg"),
            func.sum(Member.age).label("sum"),
        )
        row = (await db.execute(query)).one()
        return AgeStats.model_validate(dict(row._mapping))

    async def team_average_ages(self, db: AsyncSession) -> list[TeamAgeStats]:
        """팀별 평균 나이 - 팀 이름으로 그룹핑, 이름순 정렬."""
        query: Select = (
            select(Team.name, func.avg(Member.age).label("avg_age"))
            .select_from(Member)
            .join(Member.team)
            .group_by(Team.name)
            .order_by(Team.name)
        )
        result = await db.execute(query)
        return project_fields(TeamAgeStats, result.all())

    # === 조인 (Joins) ===

    async def find_by_team_name(self, db: AsyncSession, team_name: str) -> list[Member]:
        """연관관계 내부 조인으로 특정 팀의 회원을 조회합니다."""
        query: Select = (
            select(Member)
            .join(Member.team)
            .where(Team.name == team_name)
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_username_matching_team_name(self, db: AsyncSession) -> list[Member]:
        """세타 조인 - 회원 이름과 팀 이름이 같은 회원.

        Theta join: both tables in FROM, joined only by the WHERE clause.
        """
        query: Select = (
            select(Member)
            .select_from(Member, Team)
            .where(Member.username == Team.name)
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def list_with_team_named(
        self,
        db: AsyncSession,
        team_name: str,
    ) -> list[tuple[Member, Team | None]]:
        """모든 회원과, 이름이 team_name인 팀만 외부 조인합니다.

        Left outer join on the association with an extra ON criterion; every
        member is returned, the team only when its name matches.
        """
        query: Select = (
            select(Member, Team)
            .outerjoin(Member.team.and_(Team.name == team_name))
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return [(member, team) for member, team in result.all()]

    async def list_with_team_by_name_match(
        self,
        db: AsyncSession,
    ) -> list[tuple[Member, Team | None]]:
        """연관관계 없는 외부 조인 - 팀 이름이 회원 이름과 같은 팀.

        Left outer join on an unrelated condition (``team.name == member.username``).
        """
        query: Select = (
            select(Member, Team)
            .outerjoin(Team, Team.name == Member.username)
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return [(member, team) for member, team in result.all()]

    async def find_with_team(self, db: AsyncSession, username: str) -> Member | None:
        """페치 조인 - 팀을 같은 쿼리에서 함께 로딩합니다."""
        query: Select = (
            select(Member)
            .join(Member.team)
            .options(contains_eager(Member.team))
            .where(Member.username == username)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_detail(self, db: AsyncSession, member_id: int) -> Member | None:
        """팀(없을 수 있음)을 페치 조인하여 회원 상세를 조회합니다."""
        query: Select = (
            select(Member)
            .outerjoin(Member.team)
            .options(contains_eager(Member.team))
            .where(Member.id == member_id)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    # === 서브쿼리 (Subqueries) ===

    async def find_oldest(self, db: AsyncSession) -> list[Member]:
        """나이가 가장 많은 회원 - WHERE 절 스칼라 서브쿼리."""
        member_sub = aliased(Member, name="member_sub")
        query: Select = (
            select(Member)
            .where(Member.age == select(func.max(member_sub.age)).scalar_subquery())
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_age_at_least_average(self, db: AsyncSession) -> list[Member]:
        """나이가 평균 이상인 회원."""
        member_sub = aliased(Member, name="member_sub")
        query: Select = (
            select(Member)
            .where(Member.age >= select(func.avg(member_sub.age)).scalar_subquery())
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_age_in_older_than(self, db: AsyncSession, age: int) -> list[Member]:
        """나이가 age 초과인 회원 - IN 서브쿼리."""
        member_sub = aliased(Member, name="member_sub")
        query: Select = (
            select(Member)
            .where(Member.age.in_(select(member_sub.age).where(member_sub.age > age)))
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def list_username_with_max_age(self, db: AsyncSession) -> list[tuple[str | None, int]]:
        """SELECT 절 서브쿼리 - 회원 이름과 전체 최대 나이."""
        member_sub = aliased(Member, name="member_sub")
        query: Select = select(
            Member.username,
            select(func.max(member_sub.age)).scalar_subquery().label("max_age"),
        ).order_by(Member.id)
        result = await db.execute(query)
        return [(username, max_age) for username, max_age in result.all()]

    # === 표현식 (CASE / constant / concat) ===

    async def list_age_labels(self, db: AsyncSession) -> list[str]:
        query: Select = select(
            case({10: "10살", 20: "20살"}, value=Member.age, else_="기타")
        ).order_by(Member.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def list_username_with_constant(
        self,
        db: AsyncSession,
        value: str,
    ) -> list[tuple[str | None, str]]:
        query: Select = select(Member.username, literal(value).label("constant")).order_by(Member.id)
        result = await db.execute(query)
        return [(username, constant) for username, constant in result.all()]

    async def list_username_age_strings(self, db: AsyncSession, username: str) -> list[str]:
        """``username_age`` 형태의 문자열 - 숫자는 문자열로 캐스팅."""
        query: Select = select(
            Member.username.concat("_").concat(cast(Member.age, String))
        ).where(Member.username == username)
        result = await db.execute(query)
        return list(result.scalars().all())

    # === DTO 프로젝션 (DTO projections) ===

    async def find_member_dtos_by_sql(self, db: AsyncSession) -> list[MemberDto]:
        """문자열 SQL 결과 컬럼을 MemberDto로 매핑합니다."""
        result = await db.execute(text("SELECT username, age FROM member ORDER BY id"))
        return [MemberDto(**row._mapping) for row in result]

    async def find_member_dtos_by_setter(self, db: AsyncSession) -> list[MemberDto]:
        result = await db.execute(self._member_dto_columns())
        return project_bean(MemberDto, result.all())

    async def find_member_dtos_by_fields(self, db: AsyncSession) -> list[MemberDto]:
        result = await db.execute(self._member_dto_columns())
        return project_fields(MemberDto, result.all())

    async def find_member_dtos_by_constructor(self, db: AsyncSession) -> list[MemberDto]:
        result = await db.execute(self._member_dto_columns())
        return project_constructor(MemberDto, result.all())

    async def find_member_dtos_by_bundle(self, db: AsyncSession) -> list[MemberDto]:
        """Bundle이 행 처리 단계에서 MemberDto를 직접 생성합니다."""
        bundle = DtoBundle("member_dto", Member.username, Member.age, dto=MemberDto)
        result = await db.execute(select(bundle).order_by(Member.id))
        return list(result.scalars().all())

    async def find_user_dtos(self, db: AsyncSession) -> list[UserDto]:
        """이름은 별칭 ``name``, 나이는 전체 최대 나이 서브쿼리 ``age``로 받습니다."""
        member_sub = aliased(Member, name="member_sub")
        query: Select = select(
            Member.username.label("name"),
            select(func.max(member_sub.age)).scalar_subquery().label("age"),
        ).order_by(Member.id)
        result = await db.execute(query)
        return project_fields(UserDto, result.all())

    @staticmethod
    def _member_dto_columns() -> Select:
        return select(Member.username, Member.age).order_by(Member.id)

    # === 동적 쿼리 (Dynamic queries) ===

    async def search_with_builder(
        self,
        db: AsyncSession,
        username: str | None,
        age: int | None,
    ) -> list[Member]:
        """PredicateBuilder로 None이 아닌 조건만 AND로 결합합니다."""
        builder = PredicateBuilder()
        if username is not None:
            builder.and_(Member.username == username)
        if age is not None:
            builder.and_(Member.age == age)

        query: Select = select(Member).where(builder.build()).order_by(Member.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def search_with_where_params(
        self,
        db: AsyncSession,
        username: str | None,
        age: int | None,
    ) -> list[Member]:
        """null-safe 조건 함수를 where 인자로 나열합니다."""
        query: Select = (
            select(Member)
            .where(*where_all(username_eq(username), age_eq(age)))
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def search_condition(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamDto]:
        """검색 조건으로 회원과 팀 정보를 조회합니다."""
        result = await db.execute(self._search_query(condition))
        return project_fields(MemberTeamDto, result.all())

    async def search_condition_page(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        offset: int = 0,
        limit: int = 20,
    ) -> QueryResults:
        """검색 조건 + 페이징. 결과 항목은 MemberTeamDto."""
        page: QueryResults = await fetch_results(
            db, self._search_query(condition), offset=offset, limit=limit, scalars=False
        )
        return page.model_copy(update={"results": project_fields(MemberTeamDto, page.results)})

    @staticmethod
    def _search_query(condition: MemberSearchCondition) -> Select[Any]:
        return (
            select(
                Member.id.label("member_id"),
                Member.username,
                Member.age,
                Team.id.label("team_id"),
                Team.name.label("team_name"),
            )
            .select_from(Member)
            .outerjoin(Member.team)
            .where(
                *where_all(
                    username_eq(condition.username),
                    team_name_eq(condition.team_name),
                    age_goe(condition.age_goe),
                    age_loe(condition.age_loe),
                )
            )
            .order_by(Member.id)
        )


# 싱글턴 인스턴스 - Singleton instance
member_repository: MemberRepository = MemberRepository()
