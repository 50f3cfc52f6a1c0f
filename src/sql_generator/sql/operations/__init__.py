"""Statement builders, one per SQL statement kind."""

from .delete import build_delete
from .insert import build_insert
from .select import build_select
from .update import build_update

__all__ = [
    "build_delete",
    "build_insert",
    "build_select",
    "build_update",
]
