"""
SQLAlchemy ``Table`` mappings generated from a resolved shape.

Code generation tooling uses these to reflect the catalog without touching a
live database. Types without a portable SQLAlchemy equivalent map to
``NullType``.
"""

from functools import lru_cache
from typing import Any, Callable, Dict, Optional

from sqlalchemy import (
    ARRAY,
    BigInteger,
    Boolean,
    Column,
    DateTime,
    Integer,
    LargeBinary,
    MetaData,
    Numeric,
    REAL,
    SmallInteger,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import DOUBLE_PRECISION, INTERVAL, OID
from sqlalchemy.sql.sqltypes import NullType
from sqlalchemy.types import TypeEngine

from pgmeta.catalog.resolver import ResolvedColumn, ResolvedEntity, ResolvedShape, resolve_shape
from pgmeta.logging_config import get_logger

logger = get_logger(__name__)

SA_TYPES: Dict[str, Callable[[], TypeEngine]] = {
    "bool": Boolean,
    "char": String,
    "name": String,
    "text": Text,
    "varchar": String,
    "int2": SmallInteger,
    "int4": Integer,
    "int8": BigInteger,
    "float4": REAL,
    "float8": DOUBLE_PRECISION,
    "numeric": Numeric,
    "oid": OID,
    "bytea": LargeBinary,
    "timestamp": DateTime,
    "timestamptz": lambda: DateTime(timezone=True),
    "interval": INTERVAL,
    "sql_identifier": String,
    "character_data": String,
    "yes_or_no": lambda: String(3),
    "cardinal_number": Integer,
    "time_stamp": lambda: DateTime(timezone=True),
    "text[]": lambda: ARRAY(Text()),
    "name[]": lambda: ARRAY(String()),
    "char[]": lambda: ARRAY(String()),
    "int2[]": lambda: ARRAY(SmallInteger()),
    "int4[]": lambda: ARRAY(Integer()),
    "float4[]": lambda: ARRAY(REAL()),
    "oid[]": lambda: ARRAY(OID()),
    "int2vector": lambda: ARRAY(SmallInteger()),
    "oidvector": lambda: ARRAY(OID()),
}


def get_sa_type(pg_type: str) -> TypeEngine:
    factory = SA_TYPES.get(pg_type)
    if factory is None:
        return NullType()
    return factory()


def _column(col: ResolvedColumn, primary_key: bool) -> Column:
    kwargs: Dict[str, Any] = {"primary_key": primary_key, "comment": col.description}
    if not primary_key:
        kwargs["nullable"] = col.nullable
    return Column(col.name, get_sa_type(col.pg_type), **kwargs)


def entity_table(entity: ResolvedEntity, metadata: MetaData) -> Table:
    """Add a ``Table`` for ``entity`` to ``metadata`` and return it."""
    return Table(
        entity.name,
        metadata,
        *(_column(col, col.name in entity.primary_key) for col in entity.columns),
        schema=entity.schema_name,
        comment=entity.description,
        info={"kind": entity.kind, "version": int(entity.version), "extension": entity.extension},
    )


@lru_cache(maxsize=None)
def get_table(entity: ResolvedEntity) -> Table:
    """Standalone ``Table`` for ``entity``, bound to its own ``MetaData``."""
    return entity_table(entity, MetaData())


def build_metadata(shape: ResolvedShape, metadata: Optional[MetaData] = None) -> MetaData:
    """
    One schema-qualified ``Table`` per resolved entity, columns in declared
    order and the primary key where one is declared.
    """
    metadata = metadata if metadata is not None else MetaData()
    for entity in shape.entities:
        entity_table(entity, metadata)
    logger.debug("Built SQLAlchemy metadata with %d tables for PostgreSQL %s", len(metadata.tables), shape.version)
    return metadata


@lru_cache(maxsize=None)
def _metadata_for(shape: ResolvedShape) -> MetaData:
    return build_metadata(shape)


def get_metadata(version: Any = None) -> MetaData:
    """Shared, memoized metadata for ``version``. Do not mutate the result."""
    return _metadata_for(resolve_shape(version))
