"""
Translate optional report/search parameters into SQLAlchemy boolean clauses.
"""
from typing import List, Optional

from sqlalchemy import String, and_, func, or_
from sqlalchemy.sql.elements import ColumnElement

from inventory_api.db.models import Product
from inventory_api.schemas.product import MAX_BIGINT, MIN_BIGINT, ReportFilters


def _contains_ci(column, value: str) -> ColumnElement:
    # %, _ and the escape char in user input match literally
    return func.lower(column, type_=String).contains(value.lower(), autoescape=True)


def _clamp(value: int) -> int:
    # out-of-range bounds keep their meaning without overflowing the driver
    return max(MIN_BIGINT, min(MAX_BIGINT, value))


def _has_text(value: Optional[str]) -> bool:
    return value is not None and value != ""


def build_report_predicate(filters: ReportFilters) -> Optional[ColumnElement]:
    """AND of one clause per supplied filter, or None when nothing was supplied.

    Bounds are inclusive; a min above its max is not an error and just matches
    nothing. ``category`` is an exact case-insensitive match while ``supplier``
    and ``product_name`` are case-insensitive substring matches.
    """
    clauses: List[ColumnElement] = []

    if _has_text(filters.category):
        clauses.append(func.lower(Product.category, type_=String) == filters.category.lower())
    if filters.min_stock is not None:
        clauses.append(Product.stock >= _clamp(filters.min_stock))
    if filters.max_stock is not None:
        clauses.append(Product.stock <= _clamp(filters.max_stock))
    if filters.min_price is not None:
        clauses.append(Product.price >= filters.min_price)
    if filters.max_price is not None:
        clauses.append(Product.price <= filters.max_price)
    if filters.start_date is not None:
        clauses.append(Product.last_restock_date >= filters.start_date)
    if filters.end_date is not None:
        clauses.append(Product.last_restock_date <= filters.end_date)
    if _has_text(filters.supplier):
        clauses.append(_contains_ci(Product.supplier, filters.supplier))
    if _has_text(filters.product_name):
        clauses.append(_contains_ci(Product.name, filters.product_name))

    if not clauses:
        return None
    return and_(*clauses)


def build_search_predicate(text: Optional[str]) -> Optional[ColumnElement]:
    """Name OR category contains ``text``; None (match all) for empty text."""
    if not _has_text(text):
        return None
    return or_(_contains_ci(Product.name, text), _contains_ci(Product.category, text))
