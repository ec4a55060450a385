"""기본 CRUD 레포지토리 테스트.

Generic repository operation tests on Team and Member.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from querypractice.models import Team
from querypractice.repositories.member_repository import member_repository
from querypractice.repositories.team_repository import team_repository


class TestBaseRepository:
    async def test_create_and_get_by_id(self, db: AsyncSession):
        team = await team_repository.create(db, {"name": "teamC"})

        found = await team_repository.get_by_id(db, team.id)
        assert found is team
        assert await team_repository.get_by_id(db, 9999) is None

    async def test_get_all_skips_none_filters(self, db: AsyncSession, members):
        result = await member_repository.get_all(db, filters={"age": 20, "username": None})
        assert [m.username for m in result] == ["member2"]

    async def test_get_all_ordered(self, db: AsyncSession, teams):
        result = await team_repository.get_all(db, order_by=Team.name.desc())
        assert [t.name for t in result] == ["teamB", "teamA"]

    async def test_count_and_exists(self, db: AsyncSession, members):
        assert await member_repository.count(db) == 4
        assert await team_repository.exists(db, {"name": "teamA"}) is True
        assert await team_repository.exists(db, {"name": "teamZ"}) is False

    async def test_delete(self, db: AsyncSession, members):
        member = await member_repository.find_by_username(db, "member4")

        assert await member_repository.delete(db, member.id) is True
        assert await member_repository.delete(db, member.id) is False
        assert await member_repository.count(db) == 3


class TestTeamRepository:
    async def test_get_by_name(self, db: AsyncSession, teams):
        team = await team_repository.get_by_name(db, "teamB")
        assert team is not None
        assert team.name == "teamB"

    async def test_list_with_members(self, db: AsyncSession, members):
        result = await team_repository.list_with_members(db)

        assert [t.name for t in result] == ["teamA", "teamB"]
        assert sorted(m.username for m in result[0].members) == ["member1", "member2"]
