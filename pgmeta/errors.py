"""
Error taxonomy for pgmeta.

Every error raised by the library derives from ``PgMetaError``. Errors that
map naturally onto a builtin category also derive from it (``ValueError``,
``LookupError``) so callers can catch them generically.
"""

from typing import Any, Dict, Iterable, List, Optional


class PgMetaError(Exception):
    """Base class for all pgmeta errors."""


class UnsupportedVersionError(PgMetaError, ValueError):
    """Requested PostgreSQL version is outside the supported set."""

    def __init__(self, version: Any, supported: Iterable[int] = ()):
        self.version = version
        self.supported = tuple(supported)
        message = f"Unsupported PostgreSQL version: {version!r}"
        if self.supported:
            message += f" (supported: {', '.join(str(v) for v in self.supported)})"
        super().__init__(message)


class UnknownEntityError(PgMetaError, LookupError):
    """Requested entity is not part of the resolved shape."""

    def __init__(self, name: str, reason: Optional[str] = None):
        self.name = name
        self.reason = reason
        message = f"Unknown catalog entity: {name!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class UnknownColumnError(PgMetaError, LookupError):
    def __init__(self, entity: str, column: str, reason: Optional[str] = None):
        self.entity = entity
        self.column = column
        self.reason = reason
        message = f"Unknown column {column!r} on {entity}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class QueryError(PgMetaError):
    """
    A query against the live database failed.

    The underlying asyncpg (or validation) error is chained as ``__cause__``.
    ``partial`` holds the results of the entities that completed before the
    failing one, keyed the same way as the successful return value.
    """

    def __init__(
        self,
        entity: Optional[str],
        message: str,
        sql: Optional[str] = None,
        partial: Optional[Dict[str, List[Any]]] = None,
    ):
        self.entity = entity
        self.sql = sql
        self.partial = dict(partial or {})
        prefix = f"Introspection of {entity} failed" if entity else "Query failed"
        super().__init__(f"{prefix}: {message}")


class CatalogDefinitionError(PgMetaError, ValueError):
    """Static descriptor data violates a catalog invariant."""


class DuplicateDenylistedTypeError(PgMetaError, ValueError):
    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Duplicate denylisted type: {type_name}")
