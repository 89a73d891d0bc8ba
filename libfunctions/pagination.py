"""Paging a query with a Pagination object."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from sqlalchemy import Select, func, select, text
from sqlalchemy.orm import Session

from libfunctions.models import Pagination


def paginate(model: Any, page: Pagination, session: Session) -> Callable[[Select], Select]:
    """Count the rows of model, fill in page totals and return a paging scope.

    The returned function applies the page's offset, limit and ordering to a
    select statement.
    """
    total_rows = session.execute(select(func.count()).select_from(model)).scalar_one()
    page.total_rows = total_rows
    page.total_pages = math.ceil(total_rows / page.effective_limit())

    def scope(statement: Select) -> Select:
        return (
            statement.offset(page.offset())
            .limit(page.limit)
            .order_by(text(page.sort_clause()))
        )

    return scope