"""기본 CRUD 레포지토리 - 모든 레포지토리의 부모 클래스.

Base CRUD Repository - Parent class for all entity repositories.
Provides generic Create, Read, Delete operations and simple dynamic
equality filters.

Usage:
    class TeamRepository(BaseRepository[Team]):
        def __init__(self) -> None:
            super().__init__(Team)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from querypractice.database import Base

# 제네릭 타입 변수 - SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(self, db: AsyncSession, record_id: int) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its surrogate key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드 ID (Primary key of the record)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model).where(self.model.id == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def fetch_one(self, db: AsyncSession, *criteria: Any) -> ModelType | None:
        """조건에 맞는 단일 레코드를 조회합니다.

        Retrieve the single record matching every criterion.

        Returns:
            ModelType | None: 결과가 없으면 None (None when nothing matches)

        Raises:
            MultipleResultsFound: 두 건 이상 일치할 때 (More than one row matched)
        """
        query: Select = select(self.model).where(*criteria)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """조건에 맞는 모든 레코드를 조회합니다.

        Retrieve all records matching the given equality filters.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 필터 딕셔너리 {'컬럼명': 값}, None 값은 무시
                     (Filter dict {'column_name': value}; None values are skipped)
            order_by: 정렬 기준 컬럼 (Column to order by)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of matching records)
        """
        query: Select = select(self.model)

        # 동적 필터 적용 - Dynamic filter application
        if filters:
            for column_name, value in filters.items():
                if hasattr(self.model, column_name) and value is not None:
                    query = query.where(getattr(self.model, column_name) == value)

        if order_by is not None:
            query = query.order_by(order_by)

        result = await db.execute(query)
        return result.scalars().all()

    async def count(self, db: AsyncSession) -> int:
        """전체 레코드 수를 반환합니다."""
        query: Select = select(func.count()).select_from(self.model)
        return (await db.execute(query)).scalar() or 0

    async def create(self, db: AsyncSession, obj_data: dict[str, Any]) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record and flush it so the generated key is available.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리 (Column values for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, record_id: int) -> bool:
        """레코드를 삭제합니다.

        Delete a record by its key.

        Returns:
            bool: 삭제 성공 여부 (Whether a record was deleted)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await db.flush()
        return True

    async def exists(self, db: AsyncSession, filters: dict[str, Any]) -> bool:
        """주어진 조건에 일치하는 레코드가 존재하는지 확인합니다.

        Check if a record matching the given equality filters exists.
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
