"""
Mapping of the PostgreSQL types used by catalog columns onto Python types.

Each entry records the Python type a decoded value has, the SQL cast applied
in the select list when asyncpg cannot decode the type natively, and the type
query parameters are cast to when a column is used in a filter. Without a
parameter type a filter casts to the select cast, or to the type itself.
"""

import datetime
import decimal
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict

__all__ = (
    "EXCLUDED_TYPES",
    "PgTypeInfo",
    "PG_TYPES",
    "get_type_info",
    "get_py_type",
    "is_excluded",
)

# Types with no safe structural mapping (polymorphic or internal statistics
# payloads). Columns of these types never appear in a resolved shape.
EXCLUDED_TYPES = frozenset(
    {
        "anyarray",
        "pg_ndistinct",
        "pg_dependencies",
        "pg_mcv_list",
        "_pg_statistic",
    }
)


class PgTypeInfo(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    py_type: Any
    select_cast: Optional[str] = None
    param_type: Optional[str] = None

    @property
    def is_array(self) -> bool:
        return self.name.endswith("[]") or self.name in ("oidvector", "int2vector")

    @property
    def filter_type(self) -> str:
        """
        Type a filter parameter is cast to.

        Types without a parameter type of their own are compared through
        their select cast, on both sides of the comparison.
        """
        return self.param_type or self.select_cast or self.name

    @property
    def casts_filtered_column(self) -> bool:
        return self.param_type is None and self.select_cast is not None


def _t(name: str, py_type: Any, select_cast: Optional[str] = None, param_type: Optional[str] = None) -> PgTypeInfo:
    return PgTypeInfo(name=name, py_type=py_type, select_cast=select_cast, param_type=param_type)


PG_TYPES = {
    info.name: info
    for info in (
        # Scalars
        _t("bool", bool, param_type="bool"),
        _t("char", str, select_cast="text", param_type="text"),
        _t("name", str, param_type="name"),
        _t("text", str, param_type="text"),
        _t("varchar", str, param_type="text"),
        _t("int2", int, param_type="int2"),
        _t("int4", int, param_type="int4"),
        _t("int8", int, param_type="int8"),
        _t("float4", float, param_type="float4"),
        _t("float8", float, param_type="float8"),
        _t("numeric", decimal.Decimal, param_type="numeric"),
        _t("oid", int, param_type="oid"),
        _t("xid", int),
        _t("regproc", str, select_cast="text"),
        _t("pg_lsn", str, select_cast="text"),
        _t("pg_node_tree", str, select_cast="text"),
        _t("bytea", bytes),
        _t("timestamp", datetime.datetime),
        _t("timestamptz", datetime.datetime),
        _t("interval", datetime.timedelta),
        # information_schema domains
        _t("sql_identifier", str, param_type="name"),
        _t("character_data", str, param_type="text"),
        _t("yes_or_no", str, param_type="text"),
        _t("cardinal_number", int, param_type="int4"),
        _t("time_stamp", datetime.datetime, param_type="timestamptz"),
        # Arrays and vectors
        _t("text[]", List[str]),
        _t("name[]", List[str], select_cast="text[]"),
        _t("char[]", List[str], select_cast="text[]"),
        _t("int2[]", List[int]),
        _t("int4[]", List[int]),
        _t("float4[]", List[float]),
        _t("oid[]", List[int]),
        _t("aclitem[]", List[str], select_cast="text[]"),
        _t("int2vector", List[int], select_cast="int2[]"),
        _t("oidvector", List[int], select_cast="oid[]"),
    )
}

# Excluded types are declared so descriptors using them validate; they are
# removed before any record model or query is built.
for _name in EXCLUDED_TYPES:
    PG_TYPES[_name] = _t(_name, Any)
del _name


def is_excluded(type_name: str, denylist: frozenset = EXCLUDED_TYPES) -> bool:
    return type_name in denylist


def get_type_info(type_name: str) -> PgTypeInfo:
    try:
        return PG_TYPES[type_name]
    except KeyError:
        raise ValueError(f"No Python mapping for PostgreSQL type {type_name!r}") from None


def get_py_type(type_name: str, nullable: bool = False) -> Any:
    """
    Returns the Python annotation for a column of ``type_name``.
    """
    py_type = get_type_info(type_name).py_type
    if nullable:
        return Optional[py_type]
    return py_type
