"""회원 SQLAlchemy ORM 모델 정의.

Member SQLAlchemy ORM model definition.

Tables:
    - member: 회원 (Member; owning side of the team association)
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from querypractice.database import Base


class Member(Base):
    """회원 모델 - 최대 하나의 팀에 소속.

    Member model - Belongs to at most one team.

    Attributes:
        id: 대리 키 (Surrogate key, autoincrement)
        username: 회원 이름 (Username, nullable)
        age: 나이 (Age)
        team_id: 소속 팀 FK (Team foreign key, nullable)

    Relationships:
        team: 소속 팀 (Team; lazy loaded unless fetch-joined)
    """

    __tablename__ = "member"

    # 회원 고유 식별자 - Member surrogate key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 회원 이름 - Username (nullable; null ordering is exercised by sorting queries)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 나이 - Age
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 소속 팀 FK - Owning side of the Member ↔ Team association
    team_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("team.id"), nullable=True)

    # 관계 - Relationships
    team = relationship("Team", back_populates="members")

    def __init__(
        self,
        username: str | None = None,
        age: int = 0,
        team=None,
        **kwargs,
    ) -> None:
        super().__init__(username=username, age=age, **kwargs)
        if team is not None:
            self.change_team(team)

    def change_team(self, team) -> None:
        """소속 팀을 변경합니다.

        Move this member to ``team``. ``back_populates`` mirrors the change
        into ``team.members`` in memory.
        """
        self.team = team

    def __repr__(self) -> str:
        # team은 제외 - 지연 로딩을 유발하지 않도록 (team excluded to avoid a lazy load)
        return f"Member(id={self.id}, username={self.username}, age={self.age})"
