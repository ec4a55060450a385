"""회원 관련 Pydantic DTO 및 요청/응답 스키마 정의.

Member-related Pydantic DTOs and request/response schema definitions.
MemberDto and UserDto are projection targets filled straight from query
rows; they carry no identity.
"""

from typing import Any

from pydantic import BaseModel, Field


# === 프로젝션 DTO (Projection DTOs) ===

class MemberDto(BaseModel):
    """회원 프로젝션 DTO.

    Member projection DTO. Supports every projection style:
    empty construction followed by attribute assignment, keyword
    construction from labelled columns, and positional construction.

    Attributes:
        username: 회원 이름 (Username, nullable)
        age: 나이 (Age)
    """

    username: str | None = None
    age: int = 0

    def __init__(self, username: str | None = None, age: int = 0, **data: Any) -> None:
        super().__init__(username=username, age=age, **data)


class UserDto(BaseModel):
    """이름이 다른 프로젝션 대상 - 별칭(alias) 컬럼을 받습니다.

    Projection target whose field names differ from the entity's columns,
    so selected expressions must be labelled ``name`` and ``age``.
    """

    name: str | None = None
    age: int = 0

    def __init__(self, name: str | None = None, age: int = 0, **data: Any) -> None:
        super().__init__(name=name, age=age, **data)


class MemberTeamDto(BaseModel):
    """회원 + 팀 검색 결과 행.

    Member search result row; team columns are null for members without a team.
    """

    member_id: int
    username: str | None = None
    age: int
    team_id: int | None = None
    team_name: str | None = None


class MemberSearchCondition(BaseModel):
    """회원 검색 조건 - 모든 필드는 선택이며 None이면 조건에서 제외.

    Member search condition. Every field is optional; a None field adds no
    predicate, so an empty condition matches every member.

    Attributes:
        username: 회원 이름 일치 (Exact username)
        team_name: 팀 이름 일치 (Exact team name)
        age_goe: 최소 나이, 이상 (Minimum age, inclusive)
        age_loe: 최대 나이, 이하 (Maximum age, inclusive)
    """

    username: str | None = None
    team_name: str | None = None
    age_goe: int | None = None
    age_loe: int | None = None


# === 집계 (Aggregates) ===

class AgeStats(BaseModel):
    """전체 회원 나이 집계 결과.

    Aggregate over every member's age.
    """

    count: int
    max: int | None = None
    min: int | None = None
    avg: float | None = None
    sum: int | None = None


# === 요청/응답 (Request/Response) ===

class MemberCreate(BaseModel):
    """회원 생성 요청 스키마.

    Member creation request schema.

    Attributes:
        username: 회원 이름 (Username, optional)
        age: 나이 (Age, non-negative)
        team_id: 소속 팀 ID (Team id, optional)
    """

    username: str | None = None
    age: int = Field(default=0, ge=0)
    team_id: int | None = None


class MemberResponse(BaseModel):
    """회원 응답 스키마 (팀 이름 포함).

    Member response schema with the team name resolved via fetch join.
    """

    id: int
    username: str | None = None
    age: int
    team_id: int | None = None
    team_name: str | None = None


class MemberPageResponse(BaseModel):
    """회원 검색 페이지 응답.

    Paged member search response.
    """

    items: list[MemberTeamDto]
    total: int
    offset: int
    limit: int
