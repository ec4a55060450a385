"""서브쿼리 및 표현식 테스트.

Subquery and expression tests - WHERE/SELECT subqueries, CASE, constants, concat.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from querypractice.repositories.member_repository import member_repository


class TestSubquery:
    """서브쿼리."""

    async def test_oldest(self, db: AsyncSession, members):
        """나이가 가장 많은 회원."""
        result = await member_repository.find_oldest(db)
        assert [m.age for m in result] == [40]

    async def test_at_least_average(self, db: AsyncSession, members):
        """나이가 평균 이상인 회원."""
        result = await member_repository.find_age_at_least_average(db)
        assert [m.age for m in result] == [30, 40]

    async def test_in_subquery(self, db: AsyncSession, members):
        """나이가 10 초과인 회원 - IN."""
        result = await member_repository.find_age_in_older_than(db, 10)
        assert [m.age for m in result] == [20, 30, 40]

    async def test_select_clause_subquery(self, db: AsyncSession, members):
        """SELECT 절 서브쿼리 - 모든 행에 최대 나이."""
        result = await member_repository.list_username_with_max_age(db)
        assert result == [
            ("member1", 40),
            ("member2", 40),
            ("member3", 40),
            ("member4", 40),
        ]


class TestExpressions:
    """CASE, 상수, 문자열 연결."""

    async def test_case(self, db: AsyncSession, members):
        result = await member_repository.list_age_labels(db)
        assert result == ["10살", "20살", "기타", "기타"]

    async def test_constant(self, db: AsyncSession, members):
        result = await member_repository.list_username_with_constant(db, "A")
        assert [constant for _, constant in result] == ["A"] * 4
        assert result[0] == ("member1", "A")

    async def test_concat(self, db: AsyncSession, members):
        result = await member_repository.list_username_age_strings(db, "member1")
        assert result == ["member1_10"]
