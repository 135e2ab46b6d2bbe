"""
Registry of every declared catalog entity.

The registry validates the static descriptor data when it is built: a
violation raises ``CatalogDefinitionError`` at import time instead of
producing a malformed shape later.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from pgmeta.catalog import information_schema, pg_catalog, postgis
from pgmeta.catalog.descriptors import CatalogEntity
from pgmeta.catalog.pgtypes import PG_TYPES
from pgmeta.errors import CatalogDefinitionError
from pgmeta.logging_config import get_logger
from pgmeta.version import TargetVersion

logger = get_logger(__name__)


class VariantException(BaseModel):
    """
    A documented shape change across versions.

    Without ``column`` the entity is declared as several variants with
    disjoint ranges. With ``column`` a single column is declared by several
    descriptors (a retype, a nullability change or a removal and re-add).
    """

    model_config = ConfigDict(frozen=True)

    entity: str
    column: Optional[str] = None
    reason: str


VARIANT_EXCEPTIONS: Tuple[VariantException, ...] = (
    VariantException(
        entity="pg_catalog.pg_auth_members",
        reason="16 adds an oid key and the inherit_option/set_option grants",
    ),
    VariantException(
        entity="pg_catalog.pg_statistic_ext_data",
        reason="15 adds stxdinherit to the key",
    ),
    VariantException(
        entity="pg_catalog.pg_attribute",
        column="attndims",
        reason="int4 until 16, int2 from 17",
    ),
    VariantException(
        entity="pg_catalog.pg_attribute",
        column="attinhcount",
        reason="int4 until 15, int2 from 16",
    ),
    VariantException(
        entity="pg_catalog.pg_attribute",
        column="attstattarget",
        reason="int4 until 16, nullable int2 from 17",
    ),
    VariantException(
        entity="pg_catalog.pg_constraint",
        column="coninhcount",
        reason="int4 until 15, int2 from 16",
    ),
    VariantException(
        entity="pg_catalog.pg_database",
        column="datcollate",
        reason="name in 14, text from 15",
    ),
    VariantException(
        entity="pg_catalog.pg_database",
        column="datctype",
        reason="name in 14, text from 15",
    ),
    VariantException(
        entity="pg_catalog.pg_collation",
        column="collcollate",
        reason="name in 14, nullable text from 15",
    ),
    VariantException(
        entity="pg_catalog.pg_collation",
        column="collctype",
        reason="name in 14, nullable text from 15",
    ),
    VariantException(
        entity="pg_catalog.pg_subscription",
        column="substream",
        reason="bool until 15, char from 16 to allow parallel streaming",
    ),
)


class CatalogRegistry:
    """
    Immutable collection of catalog entities keyed by qualified name.

    An entity with several variants is stored once per variant; variants of
    one qualified name never overlap in version range.
    """

    def __init__(
        self,
        entities: Iterable[CatalogEntity],
        exceptions: Iterable[VariantException] = VARIANT_EXCEPTIONS,
    ):
        self._entities: Tuple[CatalogEntity, ...] = tuple(entities)
        self._exceptions: Tuple[VariantException, ...] = tuple(exceptions)

        self._variants: Dict[str, List[CatalogEntity]] = defaultdict(list)
        for entity in self._entities:
            self._variants[entity.qualified_name].append(entity)

        self._validate()
        logger.debug(
            "Catalog registry built with %d entities (%d variants)",
            len(self._variants),
            len(self._entities),
        )

    @property
    def entities(self) -> Tuple[CatalogEntity, ...]:
        return self._entities

    @property
    def exceptions(self) -> Tuple[VariantException, ...]:
        return self._exceptions

    def qualified_names(self) -> Tuple[str, ...]:
        return tuple(self._variants)

    def variants(self, qualified_name: str) -> Tuple[CatalogEntity, ...]:
        return tuple(self._variants.get(qualified_name, ()))

    def __contains__(self, qualified_name: str) -> bool:
        return qualified_name in self._variants

    def __len__(self) -> int:
        return len(self._variants)

    def variant_for(self, qualified_name: str, version: TargetVersion) -> Optional[CatalogEntity]:
        return next((e for e in self._variants.get(qualified_name, ()) if e.exists_in(version)), None)

    def is_exception(self, entity: str, column: Optional[str] = None) -> bool:
        return any(x.entity == entity and x.column == column for x in self._exceptions)

    def _validate(self) -> None:
        for entity in self._entities:
            self._validate_entity(entity)

        for qualified_name, variants in self._variants.items():
            if len(variants) > 1 and not self.is_exception(qualified_name):
                raise CatalogDefinitionError(
                    f"{qualified_name} declares {len(variants)} variants but is not a documented exception"
                )
            for i, first in enumerate(variants):
                for second in variants[i + 1:]:
                    if first.versions.overlaps(second.versions):
                        raise CatalogDefinitionError(
                            f"Variants of {qualified_name} overlap: {first.versions} and {second.versions}"
                        )
                    if first.kind != second.kind:
                        raise CatalogDefinitionError(f"Variants of {qualified_name} disagree on kind")

        for exception in self._exceptions:
            if exception.entity not in self._variants:
                raise CatalogDefinitionError(f"Variant exception refers to unknown entity {exception.entity}")
            if exception.column is not None and not any(
                exception.column in e.column_names() for e in self._variants[exception.entity]
            ):
                raise CatalogDefinitionError(
                    f"Variant exception refers to unknown column {exception.entity}.{exception.column}"
                )

    def _validate_entity(self, entity: CatalogEntity) -> None:
        name = entity.qualified_name
        declared = entity.column_names()

        if not entity.columns:
            raise CatalogDefinitionError(f"{name} declares no columns")

        descriptor_count: Dict[str, int] = defaultdict(int)
        for col in entity.columns:
            descriptor_count[col.name] += 1
            if col.pg_type not in PG_TYPES:
                raise CatalogDefinitionError(f"{name}.{col.name} has unmapped type {col.pg_type!r}")
            if not entity.versions.covers(col.versions):
                raise CatalogDefinitionError(
                    f"{name}.{col.name} range {col.versions} exceeds the entity range {entity.versions}"
                )

        for col_name, count in descriptor_count.items():
            if count > 1 and not self.is_exception(name, col_name):
                raise CatalogDefinitionError(
                    f"{name}.{col_name} has {count} descriptors but is not a documented exception"
                )

        for version in entity.versions.versions():
            active = [c.name for c in entity.columns if c.exists_in(version)]
            duplicates = {n for n in active if active.count(n) > 1}
            if duplicates:
                raise CatalogDefinitionError(
                    f"{name} has overlapping descriptors for {', '.join(sorted(duplicates))} in version {version}"
                )

        for attr in ("order_by", "primary_key"):
            unknown = [c for c in getattr(entity, attr) if c not in declared]
            if unknown:
                raise CatalogDefinitionError(f"{name}.{attr} references undeclared columns: {', '.join(unknown)}")


CATALOG = CatalogRegistry(pg_catalog.ENTITIES + information_schema.ENTITIES + postgis.ENTITIES)
