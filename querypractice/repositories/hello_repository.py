"""Hello 레포지토리 - 저장/조회 라운드트립 확인용."""

from querypractice.models.hello import Hello
from querypractice.repositories.base import BaseRepository


class HelloRepository(BaseRepository[Hello]):
    def __init__(self) -> None:
        super().__init__(Hello)


hello_repository: HelloRepository = HelloRepository()
