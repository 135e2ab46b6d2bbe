"""
Descriptors for the metadata relations installed by the PostGIS extension.

They live in the schema the extension was created in, ``public`` by default.
"""

from pgmeta.catalog.descriptors import column, table, view

SPATIAL_REF_SYS = table(
    "public.spatial_ref_sys",
    ("srid", "int4"),
    column("auth_name", "varchar", nullable=True),
    column("auth_srid", "int4", nullable=True),
    column("srtext", "varchar", nullable=True),
    column("proj4text", "varchar", nullable=True),
    order_by=("srid",),
    primary_key=("srid",),
    extension="postgis",
    description="Spatial reference systems known to PostGIS.",
)

GEOMETRY_COLUMNS = view(
    "public.geometry_columns",
    ("f_table_catalog", "varchar"),
    ("f_table_schema", "name"),
    ("f_table_name", "name"),
    ("f_geometry_column", "name"),
    ("coord_dimension", "int4"),
    ("srid", "int4"),
    ("type", "varchar"),
    order_by=("f_table_schema", "f_table_name", "f_geometry_column"),
    primary_key=("f_table_catalog", "f_table_schema", "f_table_name", "f_geometry_column"),
    extension="postgis",
)

GEOGRAPHY_COLUMNS = view(
    "public.geography_columns",
    ("f_table_catalog", "name"),
    ("f_table_schema", "name"),
    ("f_table_name", "name"),
    ("f_geography_column", "name"),
    ("coord_dimension", "int4"),
    ("srid", "int4"),
    ("type", "text"),
    order_by=("f_table_schema", "f_table_name", "f_geography_column"),
    primary_key=("f_table_catalog", "f_table_schema", "f_table_name", "f_geography_column"),
    extension="postgis",
)

ENTITIES = (
    SPATIAL_REF_SYS,
    GEOMETRY_COLUMNS,
    GEOGRAPHY_COLUMNS,
)
