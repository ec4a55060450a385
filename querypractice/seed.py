"""초기 데이터 시드 스크립트 - 팀과 회원 생성.

Seed script - Creates the practice teams and members.

Usage:
    python -m querypractice.seed

Creates:
    - 2개 팀: teamA, teamB (2 teams)
    - 4명 회원: member1(10), member2(20) → teamA / member3(30), member4(40) → teamB
"""

import asyncio

from sqlalchemy import select

from querypractice.database import Base, async_session, engine
from querypractice.models import Member, Team

# (이름, 나이, 팀 이름) - (username, age, team name)
SEED_MEMBERS: list[tuple[str, int, str]] = [
    ("member1", 10, "teamA"),
    ("member2", 20, "teamA"),
    ("member3", 30, "teamB"),
    ("member4", 40, "teamB"),
]


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Create tables if needed, then insert teams and members.
    Idempotent: 팀이 하나라도 있으면 건너뜁니다 (Skips if any team exists).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(Team).limit(1))
        if result.scalar_one_or_none():
            print("Already seeded. Skipping.")
            return

        teams: dict[str, Team] = {}
        for username, age, team_name in SEED_MEMBERS:
            if team_name not in teams:
                teams[team_name] = Team(team_name)
                db.add(teams[team_name])
            db.add(Member(username, age, teams[team_name]))

        await db.commit()
        print(f"Seeded: teams={sorted(teams)}, members={len(SEED_MEMBERS)}")


if __name__ == "__main__":
    asyncio.run(seed())
