"""
Read-only query service: free-text search, filtered report, supplier list.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from inventory_api.db import models
from inventory_api.db.store import ProductStore
from inventory_api.schemas.product import ReportFilters
from inventory_api.services.filters import build_report_predicate, build_search_predicate
from inventory_api.utils.alerts import low_stock_products


class ReportService:
    """Service class for product listings and reports."""

    def __init__(self, db: Session):
        self.store = ProductStore(db)

    def search(self, text: Optional[str] = None) -> List[models.Product]:
        """Products whose name or category contains ``text``; all products if empty."""
        return self.store.scan(build_search_predicate(text))

    def report(self, filters: ReportFilters) -> List[models.Product]:
        return self.store.scan(build_report_predicate(filters))

    def list_suppliers(self) -> List[str]:
        return self.store.distinct_suppliers()

    def low_stock(self) -> List[models.Product]:
        """Products currently below their minimum stock threshold."""
        return low_stock_products(self.store.scan())
