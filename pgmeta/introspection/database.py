"""
Aggregated metadata of the user schemas of one database.

``load_database_metadata`` loads the information_schema views describing
tables, columns, constraints and grants, plus the schemas' namespaces,
relations, indexes, policies, descriptions and routines and the cluster's
roles. ``DatabaseMetadata`` answers the usual lookups over them without
further round trips, and reads its own JSON back into typed records.
"""

from functools import lru_cache
from typing import Any, Iterable, List, Optional, Tuple

from asyncpg import Connection
from pydantic import BaseModel, ConfigDict, SerializeAsAny, model_validator

from pgmeta.catalog.pgtypes import EXCLUDED_TYPES
from pgmeta.catalog.resolver import ResolvedShape, VersionResolver, resolve_shape
from pgmeta.errors import QueryError
from pgmeta.introspection.introspection import QUERY_ERRORS, detect_version, introspect
from pgmeta.introspection.records import CatalogRecord, record_model
from pgmeta.logging_config import get_logger, log_performance
from pgmeta.version import TargetVersion

logger = get_logger(__name__)

# Records keep their generated model when serialized.
Records = Tuple[SerializeAsAny[CatalogRecord], ...]

# Entity behind each record field of DatabaseMetadata.
RECORD_ENTITIES = {
    "namespaces": "pg_catalog.pg_namespace",
    "schemata": "information_schema.schemata",
    "tables": "information_schema.tables",
    "columns": "information_schema.columns",
    "table_constraints": "information_schema.table_constraints",
    "key_column_usage": "information_schema.key_column_usage",
    "referential_constraints": "information_schema.referential_constraints",
    "check_constraints": "information_schema.check_constraints",
    "triggers": "information_schema.triggers",
    "table_grants": "information_schema.role_table_grants",
    "column_grants": "information_schema.role_column_grants",
    "roles": "pg_catalog.pg_roles",
    "relations": "pg_catalog.pg_class",
    "indexes": "pg_catalog.pg_index",
    "policies": "pg_catalog.pg_policy",
    "descriptions": "pg_catalog.pg_description",
    "routines": "pg_catalog.pg_proc",
}

# oid of pg_catalog.pg_class, the classoid of relation comments.
PG_CLASS_OID = 1259


@lru_cache(maxsize=None)
def _shape_for(version: TargetVersion, denylist_types: Tuple[str, ...]) -> ResolvedShape:
    if not denylist_types:
        return resolve_shape(version)
    return VersionResolver(denylist_types).resolve(version)


def _as_tuple(values: Iterable[str]) -> Tuple[str, ...]:
    if isinstance(values, str):
        return (values,)
    return tuple(values)


class ForeignKeyInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    schema_name: str
    table_name: str
    columns: Tuple[str, ...]
    referenced_schema: Optional[str] = None
    referenced_table: Optional[str] = None
    referenced_columns: Tuple[str, ...] = ()
    match_option: Optional[str] = None
    update_rule: Optional[str] = None
    delete_rule: Optional[str] = None


class UniqueConstraintInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    columns: Tuple[str, ...]
    nulls_distinct: Optional[bool] = None


class UniqueIndexInfo(BaseModel):
    """
    A unique index from pg_index. ``columns`` lists the key columns;
    expression keys appear as ``None``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    columns: Tuple[Optional[str], ...]
    is_primary: bool
    is_partial: bool
    nulls_distinct: Optional[bool] = None


class CheckConstraintInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    check_clause: Optional[str] = None


class DatabaseMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: TargetVersion
    catalog: str
    schemas: Tuple[str, ...]
    # Types denylisted beyond the built-in exclusions when the records were loaded.
    denylist_types: Tuple[str, ...] = ()
    namespaces: Records = ()
    schemata: Records = ()
    tables: Records = ()
    columns: Records = ()
    table_constraints: Records = ()
    key_column_usage: Records = ()
    referential_constraints: Records = ()
    check_constraints: Records = ()
    triggers: Records = ()
    table_grants: Records = ()
    column_grants: Records = ()
    roles: Records = ()
    relations: Records = ()
    indexes: Records = ()
    policies: Records = ()
    descriptions: Records = ()
    routines: Records = ()

    @model_validator(mode="before")
    @classmethod
    def _typed_records(cls, data: Any) -> Any:
        """Rebuild serialized rows with the record models of their version."""
        if not isinstance(data, dict) or "version" not in data:
            return data
        data = dict(data)
        shape = None
        for field, entity_name in RECORD_ENTITIES.items():
            rows = data.get(field)
            if not rows or all(isinstance(row, CatalogRecord) for row in rows):
                continue
            if shape is None:
                shape = _shape_for(TargetVersion.parse(data["version"]), tuple(data.get("denylist_types") or ()))
            model = record_model(shape.get_entity(entity_name))
            data[field] = tuple(row if isinstance(row, CatalogRecord) else model.model_validate(row) for row in rows)
        return data

    def get_schemata(self) -> List[CatalogRecord]:
        return list(self.schemata)

    def get_roles(self) -> List[CatalogRecord]:
        return list(self.roles)

    def get_table(self, schema: str, name: str) -> Optional[CatalogRecord]:
        return next(
            (t for t in self.tables if t.table_schema == schema and t.table_name == name),
            None,
        )

    def get_tables(self, schema: Optional[str] = None) -> List[CatalogRecord]:
        return [t for t in self.tables if schema is None or t.table_schema == schema]

    def get_columns(self, schema: str, table: str, denylist_types: Iterable[str] = ()) -> List[CatalogRecord]:
        """
        Columns of ``schema.table`` in ordinal order.

        Columns whose ``udt_name`` or ``data_type`` is in ``denylist_types``
        are left out.
        """
        denylist = set(_as_tuple(denylist_types))
        return sorted(
            (
                c
                for c in self.columns
                if c.table_schema == schema
                and c.table_name == table
                and c.udt_name not in denylist
                and c.data_type not in denylist
            ),
            key=lambda c: c.ordinal_position,
        )

    def get_column(self, schema: str, table: str, name: str) -> Optional[CatalogRecord]:
        return next((c for c in self.get_columns(schema, table) if c.column_name == name), None)

    def _constraints(self, schema: str, table: str, constraint_type: str) -> List[CatalogRecord]:
        return [
            c
            for c in self.table_constraints
            if c.table_schema == schema and c.table_name == table and c.constraint_type == constraint_type
        ]

    def _key_columns(self, constraint_schema: str, constraint_name: str) -> List[CatalogRecord]:
        return sorted(
            (
                k
                for k in self.key_column_usage
                if k.constraint_schema == constraint_schema and k.constraint_name == constraint_name
            ),
            key=lambda k: k.ordinal_position,
        )

    def get_primary_key_columns(self, schema: str, table: str) -> List[str]:
        """Primary key column names of ``schema.table`` in key order."""
        constraint = next(iter(self._constraints(schema, table, "PRIMARY KEY")), None)
        if constraint is None:
            return []
        return [k.column_name for k in self._key_columns(constraint.constraint_schema, constraint.constraint_name)]

    def get_foreign_keys(self, schema: str, table: str) -> List[ForeignKeyInfo]:
        foreign_keys = []
        for constraint in self._constraints(schema, table, "FOREIGN KEY"):
            key_columns = self._key_columns(constraint.constraint_schema, constraint.constraint_name)
            referential = next(
                (
                    r
                    for r in self.referential_constraints
                    if r.constraint_schema == constraint.constraint_schema
                    and r.constraint_name == constraint.constraint_name
                ),
                None,
            )

            referenced_schema = referenced_table = None
            referenced_columns: Tuple[str, ...] = ()
            if referential is not None and referential.unique_constraint_name is not None:
                unique_columns = self._key_columns(
                    referential.unique_constraint_schema, referential.unique_constraint_name
                )
                by_position = {k.ordinal_position: k for k in unique_columns}
                referenced = [by_position.get(k.position_in_unique_constraint) for k in key_columns]
                if unique_columns and all(r is not None for r in referenced):
                    referenced_schema = unique_columns[0].table_schema
                    referenced_table = unique_columns[0].table_name
                    referenced_columns = tuple(r.column_name for r in referenced)

            foreign_keys.append(
                ForeignKeyInfo(
                    name=constraint.constraint_name,
                    schema_name=schema,
                    table_name=table,
                    columns=tuple(k.column_name for k in key_columns),
                    referenced_schema=referenced_schema,
                    referenced_table=referenced_table,
                    referenced_columns=referenced_columns,
                    match_option=referential.match_option if referential else None,
                    update_rule=referential.update_rule if referential else None,
                    delete_rule=referential.delete_rule if referential else None,
                )
            )
        return foreign_keys

    def get_unique_constraints(self, schema: str, table: str) -> List[UniqueConstraintInfo]:
        constraints = []
        for constraint in self._constraints(schema, table, "UNIQUE"):
            nulls_distinct = getattr(constraint, "nulls_distinct", None)
            constraints.append(
                UniqueConstraintInfo(
                    name=constraint.constraint_name,
                    columns=tuple(
                        k.column_name
                        for k in self._key_columns(constraint.constraint_schema, constraint.constraint_name)
                    ),
                    nulls_distinct=None if nulls_distinct is None else nulls_distinct == "YES",
                )
            )
        return constraints

    def get_check_constraints(self, schema: str, table: str) -> List[CheckConstraintInfo]:
        """
        Check constraints of ``schema.table``, including the NOT NULL checks
        PostgreSQL reports through information_schema.
        """
        result = []
        for constraint in self._constraints(schema, table, "CHECK"):
            check = next(
                (
                    c
                    for c in self.check_constraints
                    if c.constraint_schema == constraint.constraint_schema
                    and c.constraint_name == constraint.constraint_name
                ),
                None,
            )
            result.append(
                CheckConstraintInfo(
                    name=constraint.constraint_name,
                    check_clause=check.check_clause if check is not None else None,
                )
            )
        return result

    def get_triggers(self, schema: str, table: str) -> List[CatalogRecord]:
        return [
            t
            for t in self.triggers
            if t.event_object_schema == schema and t.event_object_table == table
        ]

    def get_routines(self, schema: Optional[str] = None) -> List[CatalogRecord]:
        if schema is None:
            return list(self.routines)
        namespace = next((n for n in self.namespaces if n.nspname == schema), None)
        if namespace is None:
            return []
        return [r for r in self.routines if r.pronamespace == namespace.oid]

    def _relation(self, schema: str, name: str) -> Optional[CatalogRecord]:
        namespace = next((n for n in self.namespaces if n.nspname == schema), None)
        if namespace is None:
            return None
        return next(
            (r for r in self.relations if r.relnamespace == namespace.oid and r.relname == name),
            None,
        )

    def get_unique_indexes(self, schema: str, table: str) -> List[UniqueIndexInfo]:
        """Unique indexes of ``schema.table``, primary key index included."""
        relation = self._relation(schema, table)
        if relation is None:
            return []
        names_by_oid = {r.oid: r.relname for r in self.relations}
        columns_by_position = {c.ordinal_position: c.column_name for c in self.get_columns(schema, table)}

        result = []
        for index in self.indexes:
            if index.indrelid != relation.oid or not index.indisunique:
                continue
            nulls_not_distinct = getattr(index, "indnullsnotdistinct", None)
            result.append(
                UniqueIndexInfo(
                    name=names_by_oid.get(index.indexrelid, str(index.indexrelid)),
                    columns=tuple(columns_by_position.get(n) for n in index.indkey[: index.indnkeyatts]),
                    is_primary=index.indisprimary,
                    is_partial=getattr(index, "indpred", None) is not None,
                    nulls_distinct=None if nulls_not_distinct is None else not nulls_not_distinct,
                )
            )
        return sorted(result, key=lambda i: i.name)

    def get_policies(self, schema: str, table: str) -> List[CatalogRecord]:
        relation = self._relation(schema, table)
        if relation is None:
            return []
        return [p for p in self.policies if p.polrelid == relation.oid]

    def has_row_level_security(self, schema: str, table: str) -> bool:
        relation = self._relation(schema, table)
        return relation is not None and relation.relrowsecurity

    def has_forced_row_level_security(self, schema: str, table: str) -> bool:
        """Whether row-level security also applies to the table owner."""
        relation = self._relation(schema, table)
        return relation is not None and relation.relforcerowsecurity

    def _description(self, schema: str, table: str, subid: int) -> Optional[str]:
        relation = self._relation(schema, table)
        if relation is None:
            return None
        return next(
            (
                d.description
                for d in self.descriptions
                if d.objoid == relation.oid and d.classoid == PG_CLASS_OID and d.objsubid == subid
            ),
            None,
        )

    def get_table_description(self, schema: str, table: str) -> Optional[str]:
        return self._description(schema, table, 0)

    def get_column_description(self, schema: str, table: str, column: str) -> Optional[str]:
        col = self.get_column(schema, table, column)
        if col is None:
            return None
        # ordinal_position is the column's attnum.
        return self._description(schema, table, col.ordinal_position)

    def get_table_grants(self, schema: str, table: str) -> List[CatalogRecord]:
        return [g for g in self.table_grants if g.table_schema == schema and g.table_name == table]

    def get_column_grants(self, schema: str, table: str, column: Optional[str] = None) -> List[CatalogRecord]:
        return [
            g
            for g in self.column_grants
            if g.table_schema == schema and g.table_name == table and (column is None or g.column_name == column)
        ]


def _unique_schemas(schemas: Iterable[str]) -> Tuple[str, ...]:
    unique = tuple(dict.fromkeys(_as_tuple(schemas)))
    if not unique:
        raise ValueError("At least one schema is required")
    return unique


@log_performance(logger, "load_database_metadata")
async def load_database_metadata(
    conn: Connection,
    schemas: Iterable[str],
    catalog: Optional[str] = None,
    shape: Optional[ResolvedShape] = None,
) -> DatabaseMetadata:
    """
    Load the metadata of ``schemas`` in ``catalog``.

    Queries run in three rounds: the information_schema views, namespaces
    and roles first, then the relations and routines of the namespaces
    found, then the indexes, policies and comments of those relations.

    Args:
        conn: Open asyncpg connection, owned by the caller
        schemas: Schemas to load; at least one, duplicates are ignored
        catalog: Database name; defaults to ``current_database()``
        shape: Resolved shape; resolved from the server version if None
    """
    schemas = _unique_schemas(schemas)
    if shape is None:
        shape = resolve_shape(await detect_version(conn))
    if catalog is None:
        try:
            catalog = await conn.fetchval("SELECT current_database()")
        except QUERY_ERRORS as e:
            raise QueryError(None, f"could not read current_database(): {e}") from e

    logger.info("Loading metadata of %s (schemas: %s) for PostgreSQL %s", catalog, ", ".join(schemas), shape.version)

    schema_list = list(schemas)
    results = await introspect(
        conn,
        shape,
        [
            "pg_catalog.pg_namespace",
            "information_schema.tables",
            "information_schema.columns",
            "information_schema.table_constraints",
            "information_schema.key_column_usage",
            "information_schema.referential_constraints",
            "information_schema.check_constraints",
            "information_schema.triggers",
            "information_schema.schemata",
            "information_schema.role_table_grants",
            "information_schema.role_column_grants",
            "pg_catalog.pg_roles",
        ],
        {
            "pg_catalog.pg_namespace": {"nspname": schema_list},
            "information_schema.tables": {"table_catalog": catalog, "table_schema": schema_list},
            "information_schema.columns": {"table_catalog": catalog, "table_schema": schema_list},
            "information_schema.table_constraints": {"table_catalog": catalog, "table_schema": schema_list},
            # Referenced unique keys may live outside the requested schemas.
            "information_schema.key_column_usage": {"table_catalog": catalog},
            "information_schema.referential_constraints": {
                "constraint_catalog": catalog,
                "constraint_schema": schema_list,
            },
            "information_schema.check_constraints": {
                "constraint_catalog": catalog,
                "constraint_schema": schema_list,
            },
            "information_schema.triggers": {"trigger_catalog": catalog, "event_object_schema": schema_list},
            "information_schema.schemata": {"catalog_name": catalog, "schema_name": schema_list},
            "information_schema.role_table_grants": {"table_catalog": catalog, "table_schema": schema_list},
            "information_schema.role_column_grants": {"table_catalog": catalog, "table_schema": schema_list},
        },
    )

    namespace_oids = [n.oid for n in results["pg_catalog.pg_namespace"]]
    results.update(
        await introspect(
            conn,
            shape,
            ["pg_catalog.pg_class", "pg_catalog.pg_proc"],
            {
                "pg_catalog.pg_class": {"relnamespace": namespace_oids},
                "pg_catalog.pg_proc": {"pronamespace": namespace_oids},
            },
        )
    )

    relation_oids = [r.oid for r in results["pg_catalog.pg_class"]]
    results.update(
        await introspect(
            conn,
            shape,
            ["pg_catalog.pg_index", "pg_catalog.pg_policy", "pg_catalog.pg_description"],
            {
                "pg_catalog.pg_index": {"indrelid": relation_oids},
                "pg_catalog.pg_policy": {"polrelid": relation_oids},
                "pg_catalog.pg_description": {"objoid": relation_oids, "classoid": PG_CLASS_OID},
            },
        )
    )

    metadata = DatabaseMetadata(
        version=shape.version,
        catalog=catalog,
        schemas=schemas,
        denylist_types=tuple(t for t in shape.denylist_types if t not in EXCLUDED_TYPES),
        **{field: tuple(results[entity_name]) for field, entity_name in RECORD_ENTITIES.items()},
    )
    logger.info(
        "Loaded %d tables, %d columns, %d indexes and %d routines from %s",
        len(metadata.tables),
        len(metadata.columns),
        len(metadata.indexes),
        len(metadata.routines),
        catalog,
    )
    return metadata
