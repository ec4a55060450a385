"""팀 관련 Pydantic 요청/응답 스키마 정의.

Team Pydantic request/response schema definitions.
"""

from pydantic import BaseModel, Field


class TeamCreate(BaseModel):
    """팀 생성 요청 스키마.

    Team creation request schema.
    """

    name: str = Field(min_length=1, max_length=255)


class TeamResponse(BaseModel):
    """팀 응답 스키마."""

    id: int
    name: str


class TeamAgeStats(BaseModel):
    """팀별 평균 나이.

    Average member age for one team.
    """

    name: str
    avg_age: float
