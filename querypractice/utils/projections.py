"""쿼리 결과 행을 DTO로 변환하는 프로젝션 유틸리티.

Projection helpers that turn selected rows into DTOs.

Styles:
    - bean: 빈 DTO 생성 후 속성 대입 (empty instance, then attribute assignment)
    - fields: 컬럼 라벨 이름으로 필드 매핑 (fields matched by column label)
    - constructor: 컬럼 순서대로 위치 인자 전달 (positional arguments in select order)
    - DtoBundle: 행 처리 단계에서 바로 DTO 생성 (DTO built by the row processor itself)
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from pydantic import BaseModel
from sqlalchemy import Row
from sqlalchemy.orm import Bundle

D = TypeVar("D")
M = TypeVar("M", bound=BaseModel)


def project_bean(dto_type: Callable[[], D], rows: Iterable[Row[Any]]) -> list[D]:
    """빈 DTO를 만들고 라벨 이름의 속성에 값을 대입합니다."""
    dtos: list[D] = []
    for row in rows:
        dto: D = dto_type()
        for key, value in row._mapping.items():
            setattr(dto, key, value)
        dtos.append(dto)
    return dtos


def project_fields(dto_type: type[M], rows: Iterable[Row[Any]]) -> list[M]:
    """컬럼 라벨을 필드 이름으로 사용해 DTO를 검증·생성합니다.

    Validate each row mapping into ``dto_type``; selected expressions must be
    labelled with the DTO's field names (``Member.username.label("name")``).
    """
    return [dto_type.model_validate(dict(row._mapping)) for row in rows]


def project_constructor(factory: Callable[..., D], rows: Iterable[Row[Any]]) -> list[D]:
    """select 순서대로 위치 인자를 넘겨 DTO를 생성합니다."""
    return [factory(*row) for row in rows]


class DtoBundle(Bundle):
    """DTO를 직접 반환하는 Bundle.

    A Bundle whose row processor builds ``dto`` from the bundled columns,
    so ``select(DtoBundle(...))`` yields DTO instances as scalars.

    Usage:
        bundle = DtoBundle("member_dto", Member.username, Member.age, dto=MemberDto)
        dtos = (await db.execute(select(bundle))).scalars().all()
    """

    def __init__(self, name: str, *exprs: Any, dto: Callable[..., Any], **kw: Any) -> None:
        super().__init__(name, *exprs, **kw)
        self.dto = dto

    def create_row_processor(self, query, procs, labels):
        dto = self.dto

        def proc(row):
            return dto(**dict(zip(labels, (p(row) for p in procs))))

        return proc
