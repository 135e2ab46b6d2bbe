"""
Version-compatibility resolver.

Turns a ``TargetVersion`` into an immutable ``ResolvedShape``: for every
entity active in that version, the variant that applies and the columns
visible in it, with excluded and denylisted types removed.
"""

from functools import lru_cache
from typing import Any, Iterable, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from pgmeta.catalog.descriptors import CatalogEntity
from pgmeta.catalog.pgtypes import EXCLUDED_TYPES, PgTypeInfo, get_py_type, get_type_info, is_excluded
from pgmeta.catalog.registry import CATALOG, CatalogRegistry
from pgmeta.config import get_denylist_types, get_target_version
from pgmeta.errors import (
    DuplicateDenylistedTypeError,
    UnknownColumnError,
    UnknownEntityError,
    UnsupportedVersionError,
)
from pgmeta.logging_config import get_logger
from pgmeta.version import TargetVersion

logger = get_logger(__name__)


class ResolvedColumn(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    pg_type: str
    nullable: bool
    description: Optional[str] = None

    @property
    def type_info(self) -> PgTypeInfo:
        return get_type_info(self.pg_type)

    @property
    def py_type(self) -> Any:
        return get_py_type(self.pg_type, self.nullable)


class ResolvedEntity(BaseModel):
    """
    An entity as it exists in one PostgreSQL version.

    ``declared_columns`` lists every column name declared for the entity in
    any version, which lets ``project`` tell a column that is merely absent
    in this version from one that never existed.
    """

    model_config = ConfigDict(frozen=True)

    schema_name: str
    name: str
    kind: Literal["table", "view"]
    version: TargetVersion
    columns: Tuple[ResolvedColumn, ...]
    declared_columns: Tuple[str, ...]
    order_by: Tuple[str, ...] = ()
    primary_key: Tuple[str, ...] = ()
    extension: Optional[str] = None
    description: Optional[str] = None

    @property
    def qualified_name(self) -> str:
        return f"{self.schema_name}.{self.name}"

    @property
    def column_names(self) -> Tuple[str, ...]:
        return tuple(c.name for c in self.columns)

    def get_column(self, name: str) -> Optional[ResolvedColumn]:
        return next((c for c in self.columns if c.name == name), None)

    def has_column(self, name: str) -> bool:
        return self.get_column(name) is not None

    def require_column(self, name: str) -> ResolvedColumn:
        col = self.get_column(name)
        if col is not None:
            return col
        if name in self.declared_columns:
            raise UnknownColumnError(self.qualified_name, name, f"not available in PostgreSQL {self.version}")
        raise UnknownColumnError(self.qualified_name, name)

    def project(self, names: Iterable[str]) -> Tuple[ResolvedColumn, ...]:
        """
        Select ``names`` from the visible columns, in the requested order.

        Columns declared for other versions only are left out silently;
        names that were never declared raise ``UnknownColumnError``.
        """
        projected = []
        for name in names:
            col = self.get_column(name)
            if col is None:
                if name not in self.declared_columns:
                    raise UnknownColumnError(self.qualified_name, name)
                continue
            if col not in projected:
                projected.append(col)
        return tuple(projected)

    def __str__(self) -> str:
        return f"{self.qualified_name} @ {self.version}"


class ResolvedShape(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: TargetVersion
    entities: Tuple[ResolvedEntity, ...]
    inactive: Tuple[str, ...] = ()
    denylist_types: Tuple[str, ...] = ()

    def entity_names(self) -> Tuple[str, ...]:
        return tuple(e.qualified_name for e in self.entities)

    def get_entity(self, name: str) -> ResolvedEntity:
        """
        Look up an entity by qualified name or unambiguous short name.

        Raises ``UnknownEntityError`` for unknown and ambiguous names and for
        entities that exist in the catalog but not in this version.
        """
        qualified = self._qualify(name)
        entity = next((e for e in self.entities if e.qualified_name == qualified), None)
        if entity is None:
            raise UnknownEntityError(name, f"not available in PostgreSQL {self.version}")
        return entity

    def require(self, names: Iterable[str]) -> Tuple[ResolvedEntity, ...]:
        return tuple(self.get_entity(n) for n in names)

    def entities_for_extension(self, extension: str) -> Tuple[ResolvedEntity, ...]:
        return tuple(e for e in self.entities if e.extension == extension)

    def __contains__(self, name: str) -> bool:
        try:
            self.get_entity(name)
        except UnknownEntityError:
            return False
        return True

    def _qualify(self, name: str) -> str:
        known = self.entity_names() + self.inactive
        if name in known:
            return name
        if "." in name:
            raise UnknownEntityError(name)
        candidates = [q for q in known if q.split(".", 1)[1] == name]
        if not candidates:
            raise UnknownEntityError(name)
        if len(candidates) > 1:
            raise UnknownEntityError(name, f"ambiguous, candidates: {', '.join(sorted(candidates))}")
        return candidates[0]


class VersionResolver:
    """
    Resolves catalog entities for a target version.

    ``denylist_types`` extends the built-in excluded types; columns of any of
    these types are dropped from every resolved entity.
    """

    def __init__(self, denylist_types: Iterable[str] = (), registry: CatalogRegistry = CATALOG):
        if isinstance(denylist_types, str):
            denylist_types = (denylist_types,)
        denylist = set(EXCLUDED_TYPES)
        extra = []
        for type_name in denylist_types:
            if type_name in denylist:
                raise DuplicateDenylistedTypeError(type_name)
            denylist.add(type_name)
            extra.append(type_name)

        self.registry = registry
        self.denylist = frozenset(denylist)
        self.extra_denylist = tuple(extra)

    @classmethod
    def from_env(cls, registry: CatalogRegistry = CATALOG) -> "VersionResolver":
        return cls(denylist_types=get_denylist_types(), registry=registry)

    def resolve(self, version: Any) -> ResolvedShape:
        version = TargetVersion.parse(version)
        entities = []
        inactive = []
        for qualified_name in self.registry.qualified_names():
            variant = self.registry.variant_for(qualified_name, version)
            if variant is None:
                inactive.append(qualified_name)
                continue
            entities.append(self.resolve_entity(variant, version))

        logger.debug(
            "Resolved %d entities for PostgreSQL %s (%d inactive)",
            len(entities),
            version,
            len(inactive),
        )
        return ResolvedShape(
            version=version,
            entities=tuple(entities),
            inactive=tuple(inactive),
            denylist_types=tuple(sorted(self.denylist)),
        )

    def resolve_entity(self, entity: CatalogEntity, version: TargetVersion) -> ResolvedEntity:
        if not entity.exists_in(version):
            raise UnknownEntityError(entity.qualified_name, f"not available in PostgreSQL {version}")

        columns = tuple(
            ResolvedColumn(
                name=col.name,
                pg_type=col.pg_type,
                nullable=col.nullable,
                description=col.description,
            )
            for col in entity.columns
            if col.exists_in(version) and not is_excluded(col.pg_type, self.denylist)
        )
        visible = {c.name for c in columns}

        # A key missing one of its columns no longer identifies a row.
        primary_key = entity.primary_key if all(c in visible for c in entity.primary_key) else ()

        return ResolvedEntity(
            schema_name=entity.schema_name,
            name=entity.name,
            kind=entity.kind,
            version=version,
            columns=columns,
            declared_columns=entity.column_names(),
            order_by=tuple(c for c in entity.order_by if c in visible),
            primary_key=primary_key,
            extension=entity.extension,
            description=entity.description,
        )


@lru_cache(maxsize=None)
def _resolve_cached(version: TargetVersion) -> ResolvedShape:
    return VersionResolver().resolve(version)


def resolve_shape(version: Any = None) -> ResolvedShape:
    """
    Resolved shape for ``version`` using the built-in type exclusions.

    Shapes are memoized per version. Without an explicit version the value of
    ``PGMETA_TARGET_VERSION`` is used.
    """
    if version is None:
        version = get_target_version()
        if version is None:
            raise UnsupportedVersionError(None, (v.value for v in TargetVersion))
    return _resolve_cached(TargetVersion.parse(version))
