import keyword
from functools import lru_cache
from typing import Any, Iterable, List, Type

from pydantic import BaseModel, ConfigDict, Field, create_model, model_validator
from pydantic.alias_generators import to_pascal

from pgmeta.catalog.resolver import ResolvedColumn, ResolvedEntity

__all__ = (
    "CatalogRecord",
    "field_name",
    "record_model",
    "to_records",
)


class CatalogRecord(BaseModel):
    """
    Base class of every generated record model.

    Fields follow the resolved column order. Field names equal the catalog
    column names except where a name is reserved in Python or by pydantic;
    those get a trailing underscore and keep the column name as alias.
    Serialization always uses the column names.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        serialize_by_alias=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def from_record(cls, row: Any) -> Any:
        # asyncpg.Record is not a dict but supports the mapping protocol.
        if not isinstance(row, (dict, BaseModel)) and hasattr(row, "keys"):
            return dict(row)
        return row


def field_name(column_name: str) -> str:
    if keyword.iskeyword(column_name) or hasattr(CatalogRecord, column_name) or column_name.startswith("_"):
        return f"{column_name.lstrip('_')}_"
    return column_name


def _field(col: ResolvedColumn) -> tuple:
    kwargs = {"description": col.description}
    if field_name(col.name) != col.name:
        kwargs["alias"] = col.name
    return col.py_type, Field(**kwargs)


@lru_cache(maxsize=None)
def record_model(entity: ResolvedEntity) -> Type[CatalogRecord]:
    """
    Returns the pydantic model for rows of ``entity``.

    Models are cached per resolved entity, so every call for the same
    version returns the same class.
    """
    field_definitions = {field_name(col.name): _field(col) for col in entity.columns}
    return create_model(
        to_pascal(entity.name),
        __base__=CatalogRecord,
        __module__=__name__,
        __doc__=entity.description or f"Row of {entity.qualified_name} (PostgreSQL {entity.version}).",
        **field_definitions,
    )


def to_records(entity: ResolvedEntity, rows: Iterable[Any]) -> List[CatalogRecord]:
    model = record_model(entity)
    return [model.model_validate(row) for row in rows]
