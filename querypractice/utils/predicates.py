"""동적 조건(predicate) 조립 유틸리티.

Helpers for building WHERE clauses from optional parameters.
A parameter that is None contributes no predicate; with no predicates at
all the query matches every row.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy import ColumnElement, and_, inspect, true

V = TypeVar("V")


class PredicateBuilder:
    """AND로 결합되는 조건 빌더.

    Accumulates boolean clauses and combines them with AND.

    Usage:
        builder = PredicateBuilder()
        if username is not None:
            builder.and_(Member.username == username)
        query = select(Member).where(builder.build())
    """

    def __init__(self, initial: ColumnElement[bool] | None = None) -> None:
        self._clauses: list[ColumnElement[bool]] = []
        self.and_(initial)

    def and_(self, clause: ColumnElement[bool] | None) -> "PredicateBuilder":
        """조건을 추가합니다. None은 무시합니다.

        Append ``clause``; None is ignored so callers can chain optional parts.
        """
        if clause is not None:
            self._clauses.append(clause)
        return self

    @property
    def has_value(self) -> bool:
        return bool(self._clauses)

    def build(self) -> ColumnElement[bool]:
        """수집한 조건의 AND를 반환합니다. 비어 있으면 항상 참.

        Return the conjunction of the collected clauses, or ``true()`` when empty.
        """
        if not self._clauses:
            return true()
        return and_(*self._clauses)


def null_safe(
    value: V | None,
    factory: Callable[[V], ColumnElement[bool]],
) -> ColumnElement[bool] | None:
    """값이 있을 때만 조건을 만듭니다.

    Build ``factory(value)`` unless ``value`` is None, in which case return None.
    """
    if value is None:
        return None
    return factory(value)


def where_all(*clauses: ColumnElement[bool] | None) -> list[ColumnElement[bool]]:
    """None 조건을 걸러냅니다 - ``select().where(*where_all(...))`` 형태로 사용.

    Drop None clauses so the rest can be splatted into ``where``.
    """
    return [clause for clause in clauses if clause is not None]


def is_loaded(entity: Any, attribute: str) -> bool:
    """속성이 로딩 없이 이미 채워져 있는지 확인합니다.

    Report whether ``attribute`` is populated on ``entity`` without triggering
    a lazy load.
    """
    return attribute not in inspect(entity).unloaded
