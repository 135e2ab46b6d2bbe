from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import asyncpg
from asyncpg import Connection
from pydantic import ValidationError

from pgmeta.catalog.resolver import ResolvedEntity, ResolvedShape, resolve_shape
from pgmeta.errors import QueryError, UnknownEntityError
from pgmeta.introspection.query import EntityQuery, build_select
from pgmeta.introspection.records import CatalogRecord, to_records
from pgmeta.logging_config import get_logger, log_performance
from pgmeta.version import TargetVersion

logger = get_logger(__name__)

# Failures that are wrapped in QueryError; anything else propagates unchanged.
QUERY_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, ValidationError)

Filters = Mapping[str, Mapping[str, Any]]


async def detect_version(conn: Connection) -> TargetVersion:
    """
    Detect the server's major version from ``server_version_num``.

    Raises ``UnsupportedVersionError`` for servers outside 14 to 18.
    """
    try:
        version_num = await conn.fetchval("SELECT current_setting('server_version_num')::int4")
    except QUERY_ERRORS as e:
        raise QueryError(None, f"could not read server_version_num: {e}") from e
    version = TargetVersion.parse(version_num)
    logger.debug("Detected PostgreSQL %s (server_version_num=%s)", version, version_num)
    return version


# Savepoint taken around each fetch when the caller already holds a
# transaction, including one opened with a plain BEGIN.
_SAVEPOINT = "pgmeta_introspect"


async def _fetch_in_savepoint(conn: Connection, query: EntityQuery) -> list:
    await conn.execute(f"SAVEPOINT {_SAVEPOINT}")
    try:
        rows = await conn.fetch(query.sql, *query.params)
    except Exception:
        await conn.execute(f"ROLLBACK TO SAVEPOINT {_SAVEPOINT}")
        raise
    await conn.execute(f"RELEASE SAVEPOINT {_SAVEPOINT}")
    return rows


async def _fetch(conn: Connection, entity: ResolvedEntity, query: EntityQuery) -> List[CatalogRecord]:
    if conn.is_in_transaction():
        rows = await _fetch_in_savepoint(conn, query)
    else:
        async with conn.transaction(readonly=True):
            rows = await conn.fetch(query.sql, *query.params)
    records = to_records(entity, rows)
    logger.debug("Fetched %d rows from %s", len(records), entity.qualified_name)
    return records


def _filters_for(name: str, entity: ResolvedEntity, filters: Filters) -> Optional[Mapping[str, Any]]:
    keys = [key for key in dict.fromkeys((name, entity.qualified_name)) if key in filters]
    if len(keys) > 1:
        raise UnknownEntityError(name, f"filters given under both {name!r} and {entity.qualified_name!r}")
    return filters[keys[0]] if keys else None


@log_performance(logger, "introspect")
async def introspect(
    conn: Connection,
    shape: Optional[ResolvedShape],
    names: Iterable[str],
    filters: Optional[Filters] = None,
) -> Dict[str, List[CatalogRecord]]:
    """
    Introspect ``names`` over ``conn``.

    Args:
        conn: Open asyncpg connection, owned by the caller
        shape: Resolved shape to query with; detected from the server if None
        names: Qualified or unambiguous short entity names
        filters: Per-entity equality filters, keyed by the requested name or
            the qualified name, mapping column names to values

    Returns:
        Typed records per requested name, in request order

    Raises:
        UnknownEntityError: before any query runs, for names not in the shape
            or filters keyed by an entity that was not requested or keyed
            by both its short and qualified name
        UnknownColumnError: before any query runs, for filters on columns not
            visible in the shape
        QueryError: when a query or row validation fails; ``partial`` holds
            the entities completed so far
    """
    names = list(dict.fromkeys(names))
    filters = filters or {}
    if shape is None:
        shape = resolve_shape(await detect_version(conn))

    entities = shape.require(names)
    requested = set(names) | {e.qualified_name for e in entities}
    for key in filters:
        if key not in requested:
            raise UnknownEntityError(key, "filter given for an entity that was not requested")

    queries = [build_select(entity, _filters_for(name, entity, filters)) for name, entity in zip(names, entities)]

    results: Dict[str, List[CatalogRecord]] = {}
    for name, entity, query in zip(names, entities, queries):
        try:
            results[name] = await _fetch(conn, entity, query)
        except QUERY_ERRORS as e:
            raise QueryError(entity.qualified_name, str(e), sql=query.sql, partial=results) from e
    return results


async def introspect_entity(
    conn: Connection,
    shape: Optional[ResolvedShape],
    entity: Union[str, ResolvedEntity],
    filters: Optional[Mapping[str, Any]] = None,
) -> List[CatalogRecord]:
    """Introspect a single entity; see ``introspect``."""
    name = entity.qualified_name if isinstance(entity, ResolvedEntity) else entity
    if shape is None and isinstance(entity, ResolvedEntity):
        shape = resolve_shape(entity.version)
    results = await introspect(conn, shape, [name], {name: filters} if filters else None)
    return results[name]
