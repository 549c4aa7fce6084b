"""
Entity catalog: the static columns and assignees a board is built from.

Loaded once at startup (usually from YAML) and read-only afterwards.
A lookup for an id the catalog does not know is a programming error and
fails fast with CatalogError.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import yaml

from .schema import Assignee, Column

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "catalog.yaml"


class CatalogError(LookupError):
    """Raised when a catalog is malformed or an id is not in it."""
    pass


class Catalog:
    """Ordered columns plus an id -> Assignee mapping."""

    def __init__(self, columns: Iterable[Column], assignees: Iterable[Assignee]):
        self._columns: List[Column] = list(columns)
        if not self._columns:
            raise CatalogError("Catalog needs at least one column")

        self._columns_by_id: Dict[str, Column] = {}
        for col in self._columns:
            if col.id in self._columns_by_id:
                raise CatalogError(f"Duplicate column id: {col.id}")
            self._columns_by_id[col.id] = col

        self._assignees: Dict[str, Assignee] = {}
        for user in assignees:
            if user.id in self._assignees:
                raise CatalogError(f"Duplicate assignee id: {user.id}")
            self._assignees[user.id] = user

    # ── columns ──────────────────────────────────

    @property
    def columns(self) -> List[Column]:
        return list(self._columns)

    @property
    def column_ids(self) -> List[str]:
        return [c.id for c in self._columns]

    def has_column(self, column_id: Optional[str]) -> bool:
        return column_id in self._columns_by_id

    def column(self, column_id: str) -> Column:
        try:
            return self._columns_by_id[column_id]
        except KeyError:
            raise CatalogError(
                f"Unknown column '{column_id}'. Known: {self.column_ids}"
            ) from None

    # ── assignees ────────────────────────────────

    @property
    def assignees(self) -> Dict[str, Assignee]:
        return dict(self._assignees)

    def has_assignee(self, assignee_id: Optional[str]) -> bool:
        return assignee_id in self._assignees

    def assignee(self, assignee_id: str) -> Assignee:
        try:
            return self._assignees[assignee_id]
        except KeyError:
            raise CatalogError(
                f"Unknown assignee '{assignee_id}'. Known: {list(self._assignees)}"
            ) from None

    def resolve_assignee(self, value: Union[str, Assignee]) -> Assignee:
        """Accept an Assignee or its id; either must be in the catalog."""
        if isinstance(value, Assignee):
            return self.assignee(value.id)
        return self.assignee(value)

    # ── construction ─────────────────────────────

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Catalog":
        try:
            columns = [Column.from_dict(c) for c in data.get("columns") or []]
            assignees = [Assignee.from_dict(a) for a in data.get("assignees") or []]
        except (KeyError, TypeError, AttributeError) as e:
            raise CatalogError(f"Malformed catalog entry: {e}") from e
        return cls(columns, assignees)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "columns": [c.to_dict() for c in self._columns],
            "assignees": [a.to_dict() for a in self._assignees.values()],
        }


def read_catalog_file(path: Union[str, Path, None] = None) -> Dict[str, Any]:
    """Read the raw catalog YAML (columns, assignees, optional seed tasks)."""
    cat_path = Path(path) if path else DEFAULT_CATALOG_PATH
    try:
        with open(cat_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {cat_path}: {e}") from e
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in catalog {cat_path}: {e}") from e
    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog {cat_path} must be a mapping")
    return raw


def load_catalog(path: Union[str, Path, None] = None) -> Catalog:
    """Load a Catalog from YAML (defaults to the packaged catalog)."""
    catalog = Catalog.from_dict(read_catalog_file(path))
    logger.debug(
        f"Catalog loaded: {len(catalog.columns)} columns, "
        f"{len(catalog.assignees)} assignees"
    )
    return catalog
