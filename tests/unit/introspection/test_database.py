"""
Unit tests for pgmeta.introspection.database.
"""

import datetime
import decimal
from typing import get_origin

import pytest

from pgmeta.catalog.resolver import VersionResolver
from pgmeta.errors import QueryError
from pgmeta.introspection.database import DatabaseMetadata, load_database_metadata
from pgmeta.version import TargetVersion

DEFAULTS = {
    bool: False,
    int: 0,
    float: 0.0,
    str: "",
    bytes: b"",
    decimal.Decimal: decimal.Decimal(0),
    datetime.datetime: datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc),
    datetime.timedelta: datetime.timedelta(0),
}


def make_row(entity, **values):
    """A complete row for ``entity``: nulls where allowed, zero values elsewhere."""
    row = {}
    for col in entity.columns:
        if col.nullable:
            row[col.name] = None
        elif get_origin(col.type_info.py_type) is list:
            row[col.name] = []
        else:
            row[col.name] = DEFAULTS[col.type_info.py_type]
    row.update(values)
    return row


def _constraint(shape, name, table, constraint_type, **values):
    return make_row(
        shape.get_entity("table_constraints"),
        constraint_catalog="app",
        constraint_schema="pgmeta_test",
        constraint_name=name,
        table_catalog="app",
        table_schema="pgmeta_test",
        table_name=table,
        constraint_type=constraint_type,
        **values,
    )


def _key_column(shape, constraint, table, column, position, unique_position=None):
    return make_row(
        shape.get_entity("key_column_usage"),
        constraint_catalog="app",
        constraint_schema="pgmeta_test",
        constraint_name=constraint,
        table_catalog="app",
        table_schema="pgmeta_test",
        table_name=table,
        column_name=column,
        ordinal_position=position,
        position_in_unique_constraint=unique_position,
    )


def _column(shape, table, name, position, data_type="integer"):
    return make_row(
        shape.get_entity("columns"),
        table_catalog="app",
        table_schema="pgmeta_test",
        table_name=table,
        column_name=name,
        ordinal_position=position,
        data_type=data_type,
    )


def _grant(shape, view, table, grantee, privilege, **values):
    return make_row(
        shape.get_entity(view),
        grantor="postgres",
        grantee=grantee,
        table_catalog="app",
        table_schema="pgmeta_test",
        table_name=table,
        privilege_type=privilege,
        is_grantable="NO",
        **values,
    )


def _relation(shape, oid, name, relkind, **values):
    return make_row(shape.get_entity("pg_class"), oid=oid, relname=name, relnamespace=16384, relkind=relkind, **values)


def _description(shape, objoid, objsubid, text):
    return make_row(
        shape.get_entity("pg_description"), objoid=objoid, classoid=1259, objsubid=objsubid, description=text
    )


def _index(shape, oid, table_oid, indkey, **values):
    return make_row(
        shape.get_entity("pg_index"),
        indexrelid=oid,
        indrelid=table_oid,
        indnatts=len(indkey),
        indnkeyatts=len(indkey),
        indisunique=True,
        indkey=indkey,
        **values,
    )


@pytest.fixture
def library_rows(shape_v16):
    """Canned catalog rows of an authors/books schema on PostgreSQL 16."""
    tables = shape_v16.get_entity("tables")
    return {
        "pg_catalog.pg_namespace": [
            make_row(shape_v16.get_entity("pg_namespace"), oid=16384, nspname="pgmeta_test", nspowner=10)
        ],
        "information_schema.tables": [
            make_row(tables, table_catalog="app", table_schema="pgmeta_test", table_name="authors", table_type="BASE TABLE"),
            make_row(tables, table_catalog="app", table_schema="pgmeta_test", table_name="books", table_type="BASE TABLE"),
        ],
        "information_schema.columns": [
            _column(shape_v16, "authors", "age", 3),
            _column(shape_v16, "authors", "id", 1),
            _column(shape_v16, "authors", "email", 2, "text"),
            _column(shape_v16, "books", "id", 1),
            _column(shape_v16, "books", "title", 2, "text"),
            _column(shape_v16, "books", "author_id", 3),
        ],
        "information_schema.table_constraints": [
            _constraint(shape_v16, "authors_pkey", "authors", "PRIMARY KEY"),
            _constraint(shape_v16, "authors_email_key", "authors", "UNIQUE", nulls_distinct="YES"),
            _constraint(shape_v16, "chk_age_positive", "authors", "CHECK"),
            _constraint(shape_v16, "16385_16386_2_not_null", "authors", "CHECK"),
            _constraint(shape_v16, "books_pkey", "books", "PRIMARY KEY"),
            _constraint(shape_v16, "books_author_id_fkey", "books", "FOREIGN KEY"),
        ],
        "information_schema.key_column_usage": [
            _key_column(shape_v16, "authors_pkey", "authors", "id", 1),
            _key_column(shape_v16, "authors_email_key", "authors", "email", 1),
            _key_column(shape_v16, "books_pkey", "books", "id", 1),
            _key_column(shape_v16, "books_author_id_fkey", "books", "author_id", 1, unique_position=1),
        ],
        "information_schema.referential_constraints": [
            make_row(
                shape_v16.get_entity("referential_constraints"),
                constraint_catalog="app",
                constraint_schema="pgmeta_test",
                constraint_name="books_author_id_fkey",
                unique_constraint_catalog="app",
                unique_constraint_schema="pgmeta_test",
                unique_constraint_name="authors_pkey",
                match_option="NONE",
                update_rule="NO ACTION",
                delete_rule="CASCADE",
            )
        ],
        "information_schema.check_constraints": [
            make_row(
                shape_v16.get_entity("check_constraints"),
                constraint_catalog="app",
                constraint_schema="pgmeta_test",
                constraint_name="chk_age_positive",
                check_clause="((age > 0))",
            ),
            make_row(
                shape_v16.get_entity("check_constraints"),
                constraint_catalog="app",
                constraint_schema="pgmeta_test",
                constraint_name="16385_16386_2_not_null",
                check_clause="email IS NOT NULL",
            ),
        ],
        "information_schema.triggers": [
            make_row(
                shape_v16.get_entity("triggers"),
                trigger_catalog="app",
                trigger_schema="pgmeta_test",
                trigger_name="books_touch",
                event_manipulation="UPDATE",
                event_object_catalog="app",
                event_object_schema="pgmeta_test",
                event_object_table="books",
                action_timing="BEFORE",
            )
        ],
        "pg_catalog.pg_proc": [
            make_row(shape_v16.get_entity("pg_proc"), oid=16400, proname="book_count", pronamespace=16384, prokind="f"),
            make_row(shape_v16.get_entity("pg_proc"), oid=16401, proname="touch", pronamespace=16384, prokind="f"),
        ],
        "information_schema.schemata": [
            make_row(
                shape_v16.get_entity("schemata"), catalog_name="app", schema_name="pgmeta_test", schema_owner="postgres"
            )
        ],
        "information_schema.role_table_grants": [
            _grant(shape_v16, "role_table_grants", "books", "reader", "SELECT"),
            _grant(shape_v16, "role_table_grants", "authors", "reader", "SELECT"),
        ],
        "information_schema.role_column_grants": [
            _grant(shape_v16, "role_column_grants", "authors", "editor", "UPDATE", column_name="email"),
        ],
        "pg_catalog.pg_roles": [
            make_row(shape_v16.get_entity("pg_roles"), oid=10, rolname="postgres", rolsuper=True),
            make_row(shape_v16.get_entity("pg_roles"), oid=16500, rolname="reader", rolcanlogin=True),
        ],
        "pg_catalog.pg_class": [
            _relation(shape_v16, 16385, "authors", "r"),
            _relation(shape_v16, 16388, "authors_pkey", "i"),
            _relation(shape_v16, 16389, "authors_email_key", "i"),
            _relation(shape_v16, 16390, "books", "r", relrowsecurity=True),
            _relation(shape_v16, 16392, "books_pkey", "i"),
            _relation(shape_v16, 16393, "books_lower_title_idx", "i"),
        ],
        "pg_catalog.pg_index": [
            _index(shape_v16, 16388, 16385, [1], indisprimary=True),
            _index(shape_v16, 16389, 16385, [2]),
            _index(shape_v16, 16392, 16390, [1], indisprimary=True),
            _index(shape_v16, 16393, 16390, [0], indexprs="({FUNCEXPR ...})", indpred="({OPEXPR ...})"),
        ],
        "pg_catalog.pg_policy": [
            make_row(
                shape_v16.get_entity("pg_policy"),
                oid=16600,
                polname="books_owner",
                polrelid=16390,
                polcmd="*",
                polpermissive=True,
                polroles=[0],
            )
        ],
        "pg_catalog.pg_description": [
            _description(shape_v16, 16385, 0, "Book authors"),
            _description(shape_v16, 16385, 2, "Contact address"),
        ],
    }


@pytest.fixture
async def metadata(mock_asyncpg_connection, rows_by_table, library_rows, shape_v16) -> DatabaseMetadata:
    mock_asyncpg_connection.fetch.side_effect = rows_by_table(library_rows)
    return await load_database_metadata(mock_asyncpg_connection, ["pgmeta_test"], catalog="app", shape=shape_v16)


class TestLoadDatabaseMetadata:
    """Test loading metadata over a mocked connection."""

    async def test_loads_all_views(self, metadata, mock_asyncpg_connection):
        assert metadata.version is TargetVersion.V16
        assert metadata.catalog == "app"
        assert metadata.schemas == ("pgmeta_test",)
        assert len(metadata.tables) == 2
        assert len(metadata.columns) == 6
        assert len(metadata.routines) == 2
        assert len(metadata.relations) == 6
        assert len(metadata.indexes) == 4
        assert len(metadata.roles) == 2
        assert metadata.denylist_types == ()
        assert mock_asyncpg_connection.fetch.await_count == 17

    async def test_filters_by_catalog_and_schema(self, metadata, mock_asyncpg_connection):
        relations = (
            "information_schema.tables",
            "information_schema.key_column_usage",
            "information_schema.role_column_grants",
            "pg_catalog.pg_roles",
            "pg_catalog.pg_proc",
            "pg_catalog.pg_class",
            "pg_catalog.pg_index",
            "pg_catalog.pg_description",
        )
        params_by_relation = {}
        for call in mock_asyncpg_connection.fetch.await_args_list:
            sql, *params = call.args
            for relation in relations:
                if f"FROM {relation}" in sql:
                    params_by_relation[relation] = params

        relation_oids = [16385, 16388, 16389, 16390, 16392, 16393]
        assert params_by_relation["information_schema.tables"] == ["app", ["pgmeta_test"]]
        assert params_by_relation["information_schema.key_column_usage"] == ["app"]
        assert params_by_relation["information_schema.role_column_grants"] == ["app", ["pgmeta_test"]]
        assert params_by_relation["pg_catalog.pg_roles"] == []
        assert params_by_relation["pg_catalog.pg_proc"] == [[16384]]
        assert params_by_relation["pg_catalog.pg_class"] == [[16384]]
        assert params_by_relation["pg_catalog.pg_index"] == [relation_oids]
        assert params_by_relation["pg_catalog.pg_description"] == [relation_oids, 1259]

    async def test_detects_version_and_catalog(self, mock_asyncpg_connection, rows_by_table, library_rows):
        mock_asyncpg_connection.fetchval.side_effect = [160002, "app"]
        mock_asyncpg_connection.fetch.side_effect = rows_by_table(library_rows)

        metadata = await load_database_metadata(mock_asyncpg_connection, "pgmeta_test")

        assert metadata.version is TargetVersion.V16
        assert metadata.catalog == "app"
        assert mock_asyncpg_connection.fetchval.await_count == 2

    async def test_schemas_required(self, mock_asyncpg_connection, shape_v16):
        with pytest.raises(ValueError, match="At least one schema"):
            await load_database_metadata(mock_asyncpg_connection, [], catalog="app", shape=shape_v16)
        mock_asyncpg_connection.fetch.assert_not_awaited()

    async def test_duplicate_schemas_ignored(self, mock_asyncpg_connection, shape_v16):
        metadata = await load_database_metadata(
            mock_asyncpg_connection, ["a", "b", "a"], catalog="app", shape=shape_v16
        )
        assert metadata.schemas == ("a", "b")

    async def test_query_failure(self, mock_asyncpg_connection, rows_by_table, library_rows, shape_v16):
        library_rows["information_schema.columns"] = OSError("connection reset")
        mock_asyncpg_connection.fetch.side_effect = rows_by_table(library_rows)

        with pytest.raises(QueryError) as exc_info:
            await load_database_metadata(mock_asyncpg_connection, ["pgmeta_test"], catalog="app", shape=shape_v16)
        assert exc_info.value.entity == "information_schema.columns"
        assert set(exc_info.value.partial) == {"pg_catalog.pg_namespace", "information_schema.tables"}


class TestDatabaseMetadataLookups:
    """Test the lookups answered from loaded metadata."""

    async def test_tables(self, metadata):
        assert metadata.get_table("pgmeta_test", "books").table_type == "BASE TABLE"
        assert metadata.get_table("pgmeta_test", "missing") is None
        assert [t.table_name for t in metadata.get_tables("pgmeta_test")] == ["authors", "books"]
        assert metadata.get_tables("other") == []

    async def test_columns_in_ordinal_order(self, metadata):
        assert [c.column_name for c in metadata.get_columns("pgmeta_test", "authors")] == ["id", "email", "age"]
        assert metadata.get_column("pgmeta_test", "authors", "email").data_type == "text"
        assert metadata.get_column("pgmeta_test", "authors", "nope") is None

    async def test_primary_key(self, metadata):
        assert metadata.get_primary_key_columns("pgmeta_test", "authors") == ["id"]
        assert metadata.get_primary_key_columns("pgmeta_test", "missing") == []

    async def test_foreign_keys(self, metadata):
        (fk,) = metadata.get_foreign_keys("pgmeta_test", "books")

        assert fk.name == "books_author_id_fkey"
        assert fk.columns == ("author_id",)
        assert (fk.referenced_schema, fk.referenced_table) == ("pgmeta_test", "authors")
        assert fk.referenced_columns == ("id",)
        assert fk.delete_rule == "CASCADE"
        assert metadata.get_foreign_keys("pgmeta_test", "authors") == []

    async def test_unique_constraints(self, metadata):
        (unique,) = metadata.get_unique_constraints("pgmeta_test", "authors")
        assert unique.name == "authors_email_key"
        assert unique.columns == ("email",)
        assert unique.nulls_distinct is True

    async def test_check_constraints(self, metadata):
        checks = {c.name: c.check_clause for c in metadata.get_check_constraints("pgmeta_test", "authors")}
        assert checks == {
            "chk_age_positive": "((age > 0))",
            "16385_16386_2_not_null": "email IS NOT NULL",
        }

    async def test_triggers(self, metadata):
        assert [t.trigger_name for t in metadata.get_triggers("pgmeta_test", "books")] == ["books_touch"]
        assert metadata.get_triggers("pgmeta_test", "authors") == []

    async def test_routines(self, metadata):
        assert {r.proname for r in metadata.get_routines("pgmeta_test")} == {"book_count", "touch"}
        assert len(metadata.get_routines()) == 2
        assert metadata.get_routines("other") == []

    async def test_serializes_records(self, metadata):
        dumped = metadata.model_dump()
        assert dumped["tables"][0]["table_name"] == "authors"
        assert dumped["routines"][0]["proname"] == "book_count"

    async def test_json_round_trip(self, metadata):
        restored = DatabaseMetadata.model_validate_json(metadata.model_dump_json())

        assert restored == metadata
        assert type(restored.tables[0]) is type(metadata.tables[0])
        assert restored.get_primary_key_columns("pgmeta_test", "authors") == ["id"]
        assert [fk.referenced_table for fk in restored.get_foreign_keys("pgmeta_test", "books")] == ["authors"]
        assert {r.proname for r in restored.get_routines("pgmeta_test")} == {"book_count", "touch"}
        assert restored.has_row_level_security("pgmeta_test", "books")

    async def test_round_trip_keeps_denylisted_shape(self, mock_asyncpg_connection, rows_by_table, library_rows):
        shape = VersionResolver(denylist_types="pg_node_tree").resolve(16)
        mock_asyncpg_connection.fetch.side_effect = rows_by_table(library_rows)
        metadata = await load_database_metadata(mock_asyncpg_connection, ["pgmeta_test"], catalog="app", shape=shape)

        restored = DatabaseMetadata.model_validate(metadata.model_dump())

        assert restored.denylist_types == ("pg_node_tree",)
        assert "indpred" not in type(restored.indexes[0]).model_fields
        assert restored == metadata

    async def test_columns_without_denylisted_types(self, metadata):
        assert [c.column_name for c in metadata.get_columns("pgmeta_test", "authors", ["text"])] == ["id", "age"]
        assert [c.column_name for c in metadata.get_columns("pgmeta_test", "authors", "integer")] == ["email"]

    async def test_unique_indexes(self, metadata):
        email, pkey = metadata.get_unique_indexes("pgmeta_test", "authors")

        assert (email.name, email.columns, email.is_primary) == ("authors_email_key", ("email",), False)
        assert email.nulls_distinct is True
        assert (pkey.name, pkey.columns, pkey.is_primary) == ("authors_pkey", ("id",), True)
        assert metadata.get_unique_indexes("pgmeta_test", "missing") == []

    async def test_expression_index(self, metadata):
        indexes = {i.name: i for i in metadata.get_unique_indexes("pgmeta_test", "books")}
        expression = indexes["books_lower_title_idx"]

        assert expression.columns == (None,)
        assert expression.is_partial is True
        assert indexes["books_pkey"].is_partial is False

    async def test_policies_and_row_level_security(self, metadata):
        assert [p.polname for p in metadata.get_policies("pgmeta_test", "books")] == ["books_owner"]
        assert metadata.get_policies("pgmeta_test", "authors") == []
        assert metadata.has_row_level_security("pgmeta_test", "books")
        assert not metadata.has_forced_row_level_security("pgmeta_test", "books")
        assert not metadata.has_row_level_security("pgmeta_test", "authors")
        assert not metadata.has_row_level_security("other", "books")

    async def test_descriptions(self, metadata):
        assert metadata.get_table_description("pgmeta_test", "authors") == "Book authors"
        assert metadata.get_column_description("pgmeta_test", "authors", "email") == "Contact address"
        assert metadata.get_column_description("pgmeta_test", "authors", "age") is None
        assert metadata.get_table_description("pgmeta_test", "books") is None

    async def test_grants(self, metadata):
        assert [(g.grantee, g.privilege_type) for g in metadata.get_table_grants("pgmeta_test", "books")] == [
            ("reader", "SELECT")
        ]
        (grant,) = metadata.get_column_grants("pgmeta_test", "authors")
        assert (grant.grantee, grant.column_name, grant.privilege_type) == ("editor", "email", "UPDATE")
        assert metadata.get_column_grants("pgmeta_test", "authors", "id") == []

    async def test_roles_and_schemata(self, metadata):
        assert [r.rolname for r in metadata.get_roles()] == ["postgres", "reader"]
        assert [s.schema_name for s in metadata.get_schemata()] == ["pgmeta_test"]
