"""
Product store: the only code that reads or writes the ``products`` table.
"""
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from inventory_api.core.logging import get_logger
from inventory_api.db import models
from inventory_api.utils.exceptions import IntegrityFailure, NotFoundError

logger = get_logger(__name__)

MUTABLE_FIELDS = (
    "name",
    "category",
    "price",
    "stock",
    "supplier",
    "min_stock",
    "last_restock_date",
)


class ProductStore:
    """CRUD and filtered scans over products, one row per call."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, product_id: int) -> models.Product:
        """Get product by ID or raise NotFoundError."""
        try:
            product = self.db.get(models.Product, product_id)
        except SQLAlchemyError as exc:
            raise self._integrity_failure("get", exc) from exc
        if not product:
            raise NotFoundError("Product", product_id)
        return product

    def exists(self, product_id: int) -> bool:
        try:
            return self.db.query(models.Product.id).filter(models.Product.id == product_id).first() is not None
        except SQLAlchemyError as exc:
            raise self._integrity_failure("exists", exc) from exc

    def create(self, fields: dict) -> models.Product:
        product = models.Product(**{k: fields.get(k) for k in MUTABLE_FIELDS})
        try:
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
        except SQLAlchemyError as exc:
            raise self._integrity_failure("create", exc) from exc
        return product

    def update(self, product: models.Product, fields: dict) -> models.Product:
        """Overwrite every mutable column of an already loaded row."""
        for key in MUTABLE_FIELDS:
            setattr(product, key, fields.get(key))
        try:
            self.db.commit()
            self.db.refresh(product)
        except SQLAlchemyError as exc:
            raise self._integrity_failure("update", exc) from exc
        return product

    def delete(self, product_id: int) -> None:
        product = self.get(product_id)
        try:
            self.db.delete(product)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._integrity_failure("delete", exc) from exc

    def scan(self, predicate: Optional[ColumnElement] = None) -> List[models.Product]:
        """All products matching ``predicate``; ``None`` matches every row."""
        query = self.db.query(models.Product)
        if predicate is not None:
            query = query.filter(predicate)
        try:
            return query.order_by(models.Product.id).all()
        except SQLAlchemyError as exc:
            raise self._integrity_failure("scan", exc) from exc

    def distinct_suppliers(self) -> List[str]:
        supplier = models.Product.supplier
        query = (
            self.db.query(supplier)
            .filter(supplier.isnot(None), supplier != "")
            .distinct()
            .order_by(supplier)
        )
        try:
            return [row[0] for row in query.all()]
        except SQLAlchemyError as exc:
            raise self._integrity_failure("distinct_suppliers", exc) from exc

    def _integrity_failure(self, operation: str, exc: SQLAlchemyError) -> IntegrityFailure:
        self.db.rollback()
        logger.error("Storage operation failed", operation=operation, error=str(exc), exc_info=True)
        return IntegrityFailure()
