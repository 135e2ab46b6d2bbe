"""
Descriptors for the ``information_schema`` views.

Every information_schema column is declared over one of the standard domains
(``sql_identifier``, ``character_data``, ``yes_or_no``, ``cardinal_number``,
``time_stamp``).
"""

from pgmeta.catalog.descriptors import column, view

SCHEMATA = view(
    "information_schema.schemata",
    ("catalog_name", "sql_identifier"),
    ("schema_name", "sql_identifier"),
    ("schema_owner", "sql_identifier"),
    ("default_character_set_catalog", "sql_identifier"),
    ("default_character_set_schema", "sql_identifier"),
    ("default_character_set_name", "sql_identifier"),
    ("sql_path", "character_data"),
    order_by=("catalog_name", "schema_name"),
    primary_key=("catalog_name", "schema_name"),
)

TABLES = view(
    "information_schema.tables",
    ("table_catalog", "sql_identifier"),
    ("table_schema", "sql_identifier"),
    ("table_name", "sql_identifier"),
    ("table_type", "character_data"),
    ("self_referencing_column_name", "sql_identifier"),
    ("reference_generation", "character_data"),
    ("user_defined_type_catalog", "sql_identifier"),
    ("user_defined_type_schema", "sql_identifier"),
    ("user_defined_type_name", "sql_identifier"),
    ("is_insertable_into", "yes_or_no"),
    ("is_typed", "yes_or_no"),
    ("commit_action", "character_data"),
    order_by=("table_schema", "table_name"),
    primary_key=("table_catalog", "table_schema", "table_name"),
)

COLUMNS = view(
    "information_schema.columns",
    ("table_catalog", "sql_identifier"),
    ("table_schema", "sql_identifier"),
    ("table_name", "sql_identifier"),
    ("column_name", "sql_identifier"),
    ("ordinal_position", "cardinal_number"),
    ("column_default", "character_data"),
    ("is_nullable", "yes_or_no"),
    ("data_type", "character_data"),
    ("character_maximum_length", "cardinal_number"),
    ("character_octet_length", "cardinal_number"),
    ("numeric_precision", "cardinal_number"),
    ("numeric_precision_radix", "cardinal_number"),
    ("numeric_scale", "cardinal_number"),
    ("datetime_precision", "cardinal_number"),
    ("interval_type", "character_data"),
    ("interval_precision", "cardinal_number"),
    ("character_set_catalog", "sql_identifier"),
    ("character_set_schema", "sql_identifier"),
    ("character_set_name", "sql_identifier"),
    ("collation_catalog", "sql_identifier"),
    ("collation_schema", "sql_identifier"),
    ("collation_name", "sql_identifier"),
    ("domain_catalog", "sql_identifier"),
    ("domain_schema", "sql_identifier"),
    ("domain_name", "sql_identifier"),
    ("udt_catalog", "sql_identifier"),
    ("udt_schema", "sql_identifier"),
    ("udt_name", "sql_identifier"),
    ("scope_catalog", "sql_identifier"),
    ("scope_schema", "sql_identifier"),
    ("scope_name", "sql_identifier"),
    ("maximum_cardinality", "cardinal_number"),
    ("dtd_identifier", "sql_identifier"),
    ("is_self_referencing", "yes_or_no"),
    ("is_identity", "yes_or_no"),
    ("identity_generation", "character_data"),
    ("identity_start", "character_data"),
    ("identity_increment", "character_data"),
    ("identity_maximum", "character_data"),
    ("identity_minimum", "character_data"),
    ("identity_cycle", "yes_or_no"),
    ("is_generated", "character_data"),
    ("generation_expression", "character_data"),
    ("is_updatable", "yes_or_no"),
    order_by=("table_schema", "table_name", "ordinal_position"),
    primary_key=("table_catalog", "table_schema", "table_name", "column_name"),
    description="Columns of the tables and views the current user can access.",
)

VIEWS = view(
    "information_schema.views",
    ("table_catalog", "sql_identifier"),
    ("table_schema", "sql_identifier"),
    ("table_name", "sql_identifier"),
    ("view_definition", "character_data"),
    ("check_option", "character_data"),
    ("is_updatable", "yes_or_no"),
    ("is_insertable_into", "yes_or_no"),
    ("is_trigger_updatable", "yes_or_no"),
    ("is_trigger_deletable", "yes_or_no"),
    ("is_trigger_insertable_into", "yes_or_no"),
    order_by=("table_schema", "table_name"),
    primary_key=("table_catalog", "table_schema", "table_name"),
)

TABLE_CONSTRAINTS = view(
    "information_schema.table_constraints",
    ("constraint_catalog", "sql_identifier"),
    ("constraint_schema", "sql_identifier"),
    ("constraint_name", "sql_identifier"),
    ("table_catalog", "sql_identifier"),
    ("table_schema", "sql_identifier"),
    ("table_name", "sql_identifier"),
    ("constraint_type", "character_data"),
    ("is_deferrable", "yes_or_no"),
    ("initially_deferred", "yes_or_no"),
    ("enforced", "yes_or_no"),
    column("nulls_distinct", "yes_or_no", since=15),
    order_by=("table_schema", "table_name", "constraint_name"),
    primary_key=("constraint_catalog", "constraint_schema", "constraint_name"),
)

KEY_COLUMN_USAGE = view(
    "information_schema.key_column_usage",
    ("constraint_catalog", "sql_identifier"),
    ("constraint_schema", "sql_identifier"),
    ("constraint_name", "sql_identifier"),
    ("table_catalog", "sql_identifier"),
    ("table_schema", "sql_identifier"),
    ("table_name", "sql_identifier"),
    ("column_name", "sql_identifier"),
    ("ordinal_position", "cardinal_number"),
    ("position_in_unique_constraint", "cardinal_number"),
    order_by=("constraint_schema", "constraint_name", "ordinal_position"),
    primary_key=("constraint_catalog", "constraint_schema", "constraint_name", "column_name"),
)

CONSTRAINT_COLUMN_USAGE = view(
    "information_schema.constraint_column_usage",
    ("table_catalog", "sql_identifier"),
    ("table_schema", "sql_identifier"),
    ("table_name", "sql_identifier"),
    ("column_name", "sql_identifier"),
    ("constraint_catalog", "sql_identifier"),
    ("constraint_schema", "sql_identifier"),
    ("constraint_name", "sql_identifier"),
    order_by=("constraint_schema", "constraint_name", "column_name"),
)

REFERENTIAL_CONSTRAINTS = view(
    "information_schema.referential_constraints",
    ("constraint_catalog", "sql_identifier"),
    ("constraint_schema", "sql_identifier"),
    ("constraint_name", "sql_identifier"),
    ("unique_constraint_catalog", "sql_identifier"),
    ("unique_constraint_schema", "sql_identifier"),
    ("unique_constraint_name", "sql_identifier"),
    ("match_option", "character_data"),
    ("update_rule", "character_data"),
    ("delete_rule", "character_data"),
    order_by=("constraint_schema", "constraint_name"),
    primary_key=("constraint_catalog", "constraint_schema", "constraint_name"),
)

CHECK_CONSTRAINTS = view(
    "information_schema.check_constraints",
    ("constraint_catalog", "sql_identifier"),
    ("constraint_schema", "sql_identifier"),
    ("constraint_name", "sql_identifier"),
    ("check_clause", "character_data"),
    order_by=("constraint_schema", "constraint_name"),
    primary_key=("constraint_catalog", "constraint_schema", "constraint_name"),
)

TRIGGERS = view(
    "information_schema.triggers",
    ("trigger_catalog", "sql_identifier"),
    ("trigger_schema", "sql_identifier"),
    ("trigger_name", "sql_identifier"),
    ("event_manipulation", "character_data"),
    ("event_object_catalog", "sql_identifier"),
    ("event_object_schema", "sql_identifier"),
    ("event_object_table", "sql_identifier"),
    ("action_order", "cardinal_number"),
    ("action_condition", "character_data"),
    ("action_statement", "character_data"),
    ("action_orientation", "character_data"),
    ("action_timing", "character_data"),
    ("action_reference_old_table", "sql_identifier"),
    ("action_reference_new_table", "sql_identifier"),
    ("action_reference_old_row", "sql_identifier"),
    ("action_reference_new_row", "sql_identifier"),
    ("created", "time_stamp"),
    order_by=("event_object_schema", "event_object_table", "trigger_name", "action_order"),
)

ROLE_TABLE_GRANTS = view(
    "information_schema.role_table_grants",
    ("grantor", "sql_identifier"),
    ("grantee", "sql_identifier"),
    ("table_catalog", "sql_identifier"),
    ("table_schema", "sql_identifier"),
    ("table_name", "sql_identifier"),
    ("privilege_type", "character_data"),
    ("is_grantable", "yes_or_no"),
    ("with_hierarchy", "yes_or_no"),
    order_by=("table_schema", "table_name", "grantee", "privilege_type"),
)

ROLE_COLUMN_GRANTS = view(
    "information_schema.role_column_grants",
    ("grantor", "sql_identifier"),
    ("grantee", "sql_identifier"),
    ("table_catalog", "sql_identifier"),
    ("table_schema", "sql_identifier"),
    ("table_name", "sql_identifier"),
    ("column_name", "sql_identifier"),
    ("privilege_type", "character_data"),
    ("is_grantable", "yes_or_no"),
    order_by=("table_schema", "table_name", "column_name", "grantee", "privilege_type"),
)

SEQUENCES = view(
    "information_schema.sequences",
    ("sequence_catalog", "sql_identifier"),
    ("sequence_schema", "sql_identifier"),
    ("sequence_name", "sql_identifier"),
    ("data_type", "character_data"),
    ("numeric_precision", "cardinal_number"),
    ("numeric_precision_radix", "cardinal_number"),
    ("numeric_scale", "cardinal_number"),
    ("start_value", "character_data"),
    ("minimum_value", "character_data"),
    ("maximum_value", "character_data"),
    ("increment", "character_data"),
    ("cycle_option", "yes_or_no"),
    order_by=("sequence_schema", "sequence_name"),
    primary_key=("sequence_catalog", "sequence_schema", "sequence_name"),
)

ENTITIES = (
    SCHEMATA,
    TABLES,
    COLUMNS,
    VIEWS,
    TABLE_CONSTRAINTS,
    KEY_COLUMN_USAGE,
    CONSTRAINT_COLUMN_USAGE,
    REFERENTIAL_CONSTRAINTS,
    CHECK_CONSTRAINTS,
    TRIGGERS,
    ROLE_TABLE_GRANTS,
    ROLE_COLUMN_GRANTS,
    SEQUENCES,
)
