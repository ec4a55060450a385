"""DTO 프로젝션 테스트.

DTO projection tests - every projection style yields the same MemberDto rows.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from querypractice.repositories.member_repository import member_repository
from querypractice.schemas.member import MemberDto, UserDto

EXPECTED = [("member1", 10), ("member2", 20), ("member3", 30), ("member4", 40)]


def _pairs(dtos: list[MemberDto]) -> list[tuple[str | None, int]]:
    return [(dto.username, dto.age) for dto in dtos]


class TestMemberDtoProjection:
    """MemberDto 프로젝션 방식별 결과."""

    async def test_by_sql_string(self, db: AsyncSession, members):
        result = await member_repository.find_member_dtos_by_sql(db)
        assert all(isinstance(dto, MemberDto) for dto in result)
        assert _pairs(result) == EXPECTED

    async def test_by_setter(self, db: AsyncSession, members):
        """빈 DTO 생성 후 속성 대입."""
        result = await member_repository.find_member_dtos_by_setter(db)
        assert _pairs(result) == EXPECTED

    async def test_by_fields(self, db: AsyncSession, members):
        """컬럼 라벨 이름으로 필드 매핑."""
        result = await member_repository.find_member_dtos_by_fields(db)
        assert _pairs(result) == EXPECTED

    async def test_by_constructor(self, db: AsyncSession, members):
        """위치 인자 생성자."""
        result = await member_repository.find_member_dtos_by_constructor(db)
        assert _pairs(result) == EXPECTED

    async def test_by_bundle(self, db: AsyncSession, members):
        """Bundle 행 처리기가 DTO를 직접 생성."""
        result = await member_repository.find_member_dtos_by_bundle(db)
        assert all(isinstance(dto, MemberDto) for dto in result)
        assert _pairs(result) == EXPECTED


class TestUserDtoProjection:
    """별칭 컬럼과 서브쿼리를 받는 UserDto."""

    async def test_alias_and_subquery(self, db: AsyncSession, members):
        result = await member_repository.find_user_dtos(db)

        assert all(isinstance(dto, UserDto) for dto in result)
        assert [dto.name for dto in result] == ["member1", "member2", "member3", "member4"]
        assert {dto.age for dto in result} == {40}


class TestDtoConstruction:
    """DTO 생성 방식."""

    def test_positional_and_keyword_agree(self):
        assert MemberDto("member1", 10) == MemberDto(username="member1", age=10)

    def test_empty_then_assign(self):
        dto = MemberDto()
        dto.username = "member1"
        dto.age = 10
        assert (dto.username, dto.age) == ("member1", 10)
