"""API 라우터 패키지 - 모든 엔드포인트 통합.

API Router package - aggregates every router for inclusion in the app.

Included routers:
    - members: 회원 검색/상세/생성 (Member search, detail, creation)
    - teams: 팀 생성 및 통계 (Team creation and statistics)
"""

from fastapi import APIRouter

from querypractice.api.members import router as members_router
from querypractice.api.teams import router as teams_router

api_router: APIRouter = APIRouter()

api_router.include_router(members_router, prefix="/members", tags=["Members"])
api_router.include_router(teams_router, prefix="/teams", tags=["Teams"])
