"""
Typed, version-aware descriptors of the PostgreSQL system catalogs.
"""

from pgmeta.catalog.resolver import ResolvedShape, VersionResolver, resolve_shape
from pgmeta.errors import (
    CatalogDefinitionError,
    DuplicateDenylistedTypeError,
    PgMetaError,
    QueryError,
    UnknownColumnError,
    UnknownEntityError,
    UnsupportedVersionError,
)
from pgmeta.introspection.database import DatabaseMetadata, load_database_metadata
from pgmeta.introspection.introspection import detect_version, introspect, introspect_entity
from pgmeta.logging_config import setup_logging
from pgmeta.version import TargetVersion, VersionRange

__all__ = (
    "CatalogDefinitionError",
    "DatabaseMetadata",
    "DuplicateDenylistedTypeError",
    "PgMetaError",
    "QueryError",
    "ResolvedShape",
    "TargetVersion",
    "UnknownColumnError",
    "UnknownEntityError",
    "UnsupportedVersionError",
    "VersionRange",
    "VersionResolver",
    "detect_version",
    "introspect",
    "introspect_entity",
    "load_database_metadata",
    "resolve_shape",
    "setup_logging",
)
