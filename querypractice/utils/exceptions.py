"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Services raise these; repositories let SQLAlchemy exceptions propagate.

Usage:
    from querypractice.utils.exceptions import NotFoundError
    raise NotFoundError("Member not found")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 - 요청한 리소스를 찾을 수 없을 때 사용.

    Raised when a requested member or team does not exist.
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 - 중복 리소스 생성 시도 시 사용.

    Raised when creating a team whose name is already taken.
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)

