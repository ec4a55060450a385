"""SQLAlchemy ORM 모델 패키지 - 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package - Central import point for all domain models.
Importing from this package registers every model with the metadata, which
relationship resolution and ``create_all`` rely on.

Modules:
    team: 팀 (Team)
    member: 회원 (Member)
    hello: 라운드트립 확인용 엔티티 (Round-trip check entity)
"""

from querypractice.models.team import Team
from querypractice.models.member import Member
from querypractice.models.hello import Hello

__all__ = ["Team", "Member", "Hello"]
