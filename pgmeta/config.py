"""
Environment-driven configuration for pgmeta.

All settings are optional; explicit arguments always win over the
environment.
"""

import os
from typing import Optional, Tuple

from pgmeta.version import TargetVersion


def get_target_version() -> Optional[TargetVersion]:
    """Default target version from ``PGMETA_TARGET_VERSION``, if set."""
    value = os.getenv("PGMETA_TARGET_VERSION", "").strip()
    if not value:
        return None
    return TargetVersion.parse(value)


def get_denylist_types() -> Tuple[str, ...]:
    """Additional denylisted PostgreSQL types from ``PGMETA_DENYLIST_TYPES``."""
    value = os.getenv("PGMETA_DENYLIST_TYPES", "")
    return tuple(t.strip() for t in value.split(",") if t.strip())
