"""Hello 모델 - 영속성 동작 확인용 최소 엔티티.

Minimal entity used to check that a persist/query round-trip works.
"""

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from querypractice.database import Base


class Hello(Base):
    __tablename__ = "hello"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
