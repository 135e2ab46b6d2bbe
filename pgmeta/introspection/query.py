"""
SELECT statements scoped to a resolved entity.

Statements are built with SQLAlchemy Core over the entity's generated
``Table`` and compiled for PostgreSQL with ``$n`` placeholders, the form
asyncpg expects. Values never enter the SQL text.
"""

from typing import Any, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict
from sqlalchemy import and_, any_, bindparam, cast, select
from sqlalchemy.dialects.postgresql.base import PGDialect
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.types import UserDefinedType

from pgmeta.catalog.orm import get_table
from pgmeta.catalog.resolver import ResolvedColumn, ResolvedEntity

__all__ = (
    "EntityQuery",
    "PgTypeName",
    "build_select",
)

_DIALECT = PGDialect(paramstyle="numeric_dollar")


class PgTypeName(UserDefinedType):
    """A PostgreSQL type referenced by name, rendered verbatim in casts."""

    cache_ok = True

    def __init__(self, name: str):
        self.name = name

    def get_col_spec(self, **kw) -> str:
        return self.name


class EntityQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    entity: str
    sql: str
    params: Tuple[Any, ...] = ()


def _is_list_value(col: ResolvedColumn, value: Any) -> bool:
    # A list compared to an array column is the array value itself.
    if col.type_info.is_array:
        return False
    return isinstance(value, (list, tuple, set, frozenset))


def _condition(column: ColumnElement, col: ResolvedColumn, value: Any, index: int) -> ColumnElement:
    if value is None:
        return column.is_(None)

    info = col.type_info
    if info.casts_filtered_column:
        column = cast(column, PgTypeName(info.filter_type))

    key = f"p{index}"
    if _is_list_value(col, value):
        param_type = PgTypeName(f"{info.filter_type}[]")
        return column == any_(cast(bindparam(key, list(value), type_=param_type), param_type))

    if isinstance(value, tuple):
        value = list(value)
    param_type = PgTypeName(info.filter_type)
    return column == cast(bindparam(key, value, type_=param_type), param_type)


def build_select(entity: ResolvedEntity, filters: Optional[Mapping[str, Any]] = None) -> EntityQuery:
    """
    Build the SELECT for ``entity``.

    ``filters`` maps column names to values. A scalar renders as
    ``col = $n::type``, a list, tuple or set as ``col = ANY($n::type[])`` and
    ``None`` as ``col IS NULL``; conditions are combined with AND. Filtering
    on a column that is not visible raises ``UnknownColumnError``.
    """
    table = get_table(entity)

    targets = []
    for col in entity.columns:
        select_cast = col.type_info.select_cast
        if select_cast is None:
            targets.append(table.c[col.name])
        else:
            targets.append(cast(table.c[col.name], PgTypeName(select_cast)).label(col.name))

    conditions: List[ColumnElement] = []
    for index, (name, value) in enumerate((filters or {}).items(), start=1):
        col = entity.require_column(name)
        conditions.append(_condition(table.c[name], col, value, index))

    stmt = select(*targets).select_from(table)
    if conditions:
        stmt = stmt.where(and_(*conditions))
    if entity.order_by:
        stmt = stmt.order_by(*(table.c[name] for name in entity.order_by))

    compiled = stmt.compile(dialect=_DIALECT)
    params = tuple(compiled.params[key] for key in compiled.positiontup or ())
    return EntityQuery(entity=entity.qualified_name, sql=str(compiled), params=params)
