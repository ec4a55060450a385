"""팀 SQLAlchemy ORM 모델 정의.

Team SQLAlchemy ORM model definition.

Tables:
    - team: 팀 (Team; inverse side of the member association)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from querypractice.database import Base


class Team(Base):
    """팀 모델 - 회원들이 소속되는 단위.

    Team model - Group that members belong to.

    Attributes:
        id: 대리 키 (Surrogate key, autoincrement)
        name: 팀 이름 (Team name)

    Relationships:
        members: 소속 회원 목록 (Members of this team; inverse side, mapped by Member.team)
    """

    __tablename__ = "team"

    # 팀 고유 식별자 - Team surrogate key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 팀 이름 - Team display name
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # 관계 - 연관관계의 주인은 Member.team (Owning side is Member.team)
    members = relationship("Member", back_populates="team")

    def __init__(self, name: str, **kwargs) -> None:
        super().__init__(name=name, **kwargs)

    def __repr__(self) -> str:
        return f"Team(id={self.id}, name={self.name})"
