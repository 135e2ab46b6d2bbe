"""
Declarative descriptors for PostgreSQL system tables and views.

A ``CatalogEntity`` describes one table or view and the versions it exists
in. Each ``ColumnDescriptor`` carries its own inclusive version range, so a
column that is added, removed or retyped between releases is declared as one
descriptor per shape, with disjoint ranges.
"""

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from pgmeta.version import TargetVersion, VersionRange

__all__ = (
    "ColumnDescriptor",
    "CatalogEntity",
    "column",
    "table",
    "view",
)


class ColumnDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    pg_type: str
    nullable: bool = False
    versions: VersionRange = Field(default_factory=VersionRange)
    description: Optional[str] = None

    def exists_in(self, version: TargetVersion) -> bool:
        return version in self.versions


class CatalogEntity(BaseModel):
    """
    Descriptor of a single system table or view.

    ``order_by`` is the default row ordering used when the entity is
    introspected; ``primary_key`` lists the columns identifying a row (a
    nominal key for views). ``extension`` names the extension that installs
    the relation, if any.
    """

    model_config = ConfigDict(frozen=True)

    schema_name: str
    name: str
    kind: Literal["table", "view"] = "table"
    columns: Tuple[ColumnDescriptor, ...]
    versions: VersionRange = Field(default_factory=VersionRange)
    order_by: Tuple[str, ...] = ()
    primary_key: Tuple[str, ...] = ()
    extension: Optional[str] = None
    description: Optional[str] = None

    @property
    def qualified_name(self) -> str:
        return f"{self.schema_name}.{self.name}"

    def exists_in(self, version: TargetVersion) -> bool:
        return version in self.versions

    def column_names(self) -> Tuple[str, ...]:
        """All column names declared for any version, in declaration order."""
        seen = []
        for col in self.columns:
            if col.name not in seen:
                seen.append(col.name)
        return tuple(seen)

    def __str__(self) -> str:
        return f"{self.qualified_name} [{self.versions}]"


def column(
    name: str,
    pg_type: str,
    *,
    nullable: bool = False,
    since: int = TargetVersion.V14,
    until: int = TargetVersion.V18,
    description: Optional[str] = None,
) -> ColumnDescriptor:
    return ColumnDescriptor(
        name=name,
        pg_type=pg_type,
        nullable=nullable,
        versions=VersionRange(since=since, until=until),
        description=description,
    )


def _entity(
    kind: str,
    qualified_name: str,
    columns,
    since: int,
    until: int,
    nullable_default: bool,
    **kwargs,
) -> CatalogEntity:
    schema_name, _, name = qualified_name.partition(".")
    versions = VersionRange(since=since, until=until)
    descriptors = []
    for col in columns:
        if isinstance(col, tuple):
            # Shorthand: (name, pg_type) uses the entity's nullability default.
            col = column(col[0], col[1], nullable=nullable_default)
        elif kind == "view" and not col.nullable:
            # Views never carry NOT NULL.
            col = col.model_copy(update={"nullable": True})
        if col.versions.overlaps(versions) and not versions.covers(col.versions):
            # Clip to the entity's lifetime; disjoint ranges are left for the registry to reject.
            col = col.model_copy(
                update={
                    "versions": VersionRange(
                        since=max(col.versions.since, versions.since),
                        until=min(col.versions.until, versions.until),
                    )
                }
            )
        descriptors.append(col)
    return CatalogEntity(
        schema_name=schema_name,
        name=name,
        kind=kind,
        columns=tuple(descriptors),
        versions=versions,
        **kwargs,
    )


def table(
    qualified_name: str,
    *columns,
    since: int = TargetVersion.V14,
    until: int = TargetVersion.V18,
    **kwargs,
) -> CatalogEntity:
    """Declare a catalog table; ``(name, type)`` shorthand columns are NOT NULL."""
    return _entity("table", qualified_name, columns, since, until, False, **kwargs)


def view(
    qualified_name: str,
    *columns,
    since: int = TargetVersion.V14,
    until: int = TargetVersion.V18,
    **kwargs,
) -> CatalogEntity:
    """Declare a view; every column is nullable."""
    return _entity("view", qualified_name, columns, since, until, True, **kwargs)
