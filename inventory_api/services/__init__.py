"""
Service layer package initialization.
"""
from .product_service import ProductService
from .report_service import ReportService

__all__ = ["ProductService", "ReportService"]
