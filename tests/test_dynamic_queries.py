"""동적 쿼리 테스트 - 조건 빌더, null-safe 조건, 검색 조건 + 페이징.

Dynamic query tests - predicate builder, null-safe predicates, search condition.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from querypractice.models import Member
from querypractice.repositories.member_repository import member_repository
from querypractice.schemas.member import MemberSearchCondition
from querypractice.utils.predicates import PredicateBuilder, null_safe, where_all


class TestPredicateBuilder:
    """조건 빌더 - None이 아닌 파라미터만 AND로 결합."""

    async def test_username_and_age(self, db: AsyncSession, members):
        result = await member_repository.search_with_builder(db, "member1", 10)
        assert len(result) == 1

    async def test_age_only(self, db: AsyncSession, members):
        result = await member_repository.search_with_builder(db, None, 20)
        assert [m.username for m in result] == ["member2"]

    async def test_no_parameters_matches_all(self, db: AsyncSession, members):
        result = await member_repository.search_with_builder(db, None, None)
        assert len(result) == 4

    async def test_mismatch_matches_nothing(self, db: AsyncSession, members):
        result = await member_repository.search_with_builder(db, "member1", 20)
        assert result == []

    def test_builder_ignores_none(self):
        builder = PredicateBuilder().and_(None)
        assert builder.has_value is False

        builder.and_(Member.age == 10)
        assert builder.has_value is True

    async def test_empty_builder_is_true(self, db: AsyncSession, members):
        """빈 빌더는 모든 행과 일치."""
        query = select(Member).where(PredicateBuilder().build())
        result = await db.execute(query)
        assert len(result.scalars().all()) == 4


class TestWhereParams:
    """null-safe 조건 함수 나열."""

    async def test_username_only(self, db: AsyncSession, members):
        result = await member_repository.search_with_where_params(db, "member1", None)
        assert len(result) == 1

    async def test_no_parameters_matches_all(self, db: AsyncSession, members):
        result = await member_repository.search_with_where_params(db, None, None)
        assert len(result) == 4

    def test_null_safe_skips_none(self):
        assert null_safe(None, lambda value: Member.age == value) is None
        assert null_safe(10, lambda value: Member.age == value) is not None

    def test_where_all_drops_none(self):
        clause = Member.age == 10
        result = where_all(None, clause, None)
        assert len(result) == 1
        assert result[0] is clause


class TestSearchCondition:
    """검색 조건 (회원 + 팀)."""

    async def test_empty_condition_matches_all(self, db: AsyncSession, members):
        result = await member_repository.search_condition(db, MemberSearchCondition())

        assert [dto.username for dto in result] == ["member1", "member2", "member3", "member4"]
        assert [dto.team_name for dto in result] == ["teamA", "teamA", "teamB", "teamB"]

    async def test_team_and_age_range(self, db: AsyncSession, members):
        condition = MemberSearchCondition(team_name="teamB", age_goe=35, age_loe=40)

        result = await member_repository.search_condition(db, condition)

        assert len(result) == 1
        assert result[0].username == "member4"
        assert result[0].team_name == "teamB"

    async def test_member_without_team(self, db: AsyncSession, members):
        """팀이 없는 회원도 외부 조인으로 포함."""
        db.add(Member("loner", 50))

        result = await member_repository.search_condition(
            db, MemberSearchCondition(age_goe=50)
        )

        assert len(result) == 1
        assert result[0].username == "loner"
        assert result[0].team_id is None
        assert result[0].team_name is None

    async def test_paged(self, db: AsyncSession, members):
        page = await member_repository.search_condition_page(
            db, MemberSearchCondition(), offset=1, limit=2
        )

        assert page.total == 4
        assert [dto.username for dto in page.results] == ["member2", "member3"]

    async def test_paged_total_respects_condition(self, db: AsyncSession, members):
        page = await member_repository.search_condition_page(
            db, MemberSearchCondition(team_name="teamA"), offset=0, limit=1
        )

        assert page.total == 2
        assert len(page.results) == 1
