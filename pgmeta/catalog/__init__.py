from pgmeta.catalog.descriptors import CatalogEntity, ColumnDescriptor
from pgmeta.catalog.registry import CATALOG, VARIANT_EXCEPTIONS, CatalogRegistry, VariantException
from pgmeta.catalog.resolver import (
    ResolvedColumn,
    ResolvedEntity,
    ResolvedShape,
    VersionResolver,
    resolve_shape,
)

__all__ = (
    "CATALOG",
    "VARIANT_EXCEPTIONS",
    "CatalogEntity",
    "CatalogRegistry",
    "ColumnDescriptor",
    "ResolvedColumn",
    "ResolvedEntity",
    "ResolvedShape",
    "VariantException",
    "VersionResolver",
    "resolve_shape",
)
