"""Migration registry and pagination parameters."""

from __future__ import annotations

import os
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

DEFAULT_LIMIT = 50
DEFAULT_MAX_LIMIT = 999
DEFAULT_SORT = "id"
DEFAULT_ORDER = "desc"

_migrates: list[type] = []


class Migration(ABC):
    """A schema change that can be applied and reverted."""

    def __init__(self, db: Any = None) -> None:
        self.db = db

    @abstractmethod
    def apply(self) -> None:
        """Apply the change."""

    @abstractmethod
    def revert(self) -> None:
        """Undo the change."""

    @abstractmethod
    def name(self) -> str:
        """Return the unique name of this migration."""

    def premises(self) -> list[Migration]:
        """Return the migrations that must run before this one."""
        return []


def add_migrate(migration_type: type) -> None:
    """Register a migration class."""
    _migrates.append(migration_type)


def get_all_migrates() -> list[type]:
    """Return the registered migration classes in registration order."""
    return list(_migrates)


def _atoi(text: str) -> tuple[int, bool]:
    """Parse a decimal integer; return the value and whether it parsed cleanly."""
    if not _INT_PATTERN.fullmatch(text):
        return 0, False
    value = int(text)
    if value > _INT_MAX:
        return _INT_MAX, False
    if value < _INT_MIN:
        return _INT_MIN, False
    return value, True


@dataclass
class Pagination:
    """Paging and sorting parameters for a query, plus its totals."""

    limit: int = 0
    page: int = 0
    sort: str = ""
    order: str = ""
    total_rows: int = 0
    total_pages: int = 0

    def offset(self) -> int:
        """Return the number of rows to skip."""
        return (self.effective_page() - 1) * self.effective_limit()

    def effective_limit(self) -> int:
        """Resolve and store the page size.

        ITEMS_PER_PAGE fills in a missing limit; a limit that is still zero or
        above the maximum falls back to the default.
        """
        max_page, ok = _atoi(os.environ.get("ITEMS_MAX_PAGE", ""))
        if ok or max_page == 0:
            max_page = DEFAULT_MAX_LIMIT

        per_page, ok = _atoi(os.environ.get("ITEMS_PER_PAGE", ""))
        if ok and self.limit == 0:
            self.limit = per_page

        if self.limit == 0 or self.limit > max_page:
            self.limit = DEFAULT_LIMIT

        return self.limit

    def effective_page(self) -> int:
        """Resolve and store the page number, starting at 1."""
        if self.page == 0:
            self.page = 1
        return self.page

    def sort_clause(self) -> str:
        """Resolve and return the ORDER BY clause."""
        if not self.sort:
            self.sort = DEFAULT_SORT
        if not self.order:
            self.order = DEFAULT_ORDER
        return f"{self.sort} {self.order}"