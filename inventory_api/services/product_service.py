"""
Product service layer for business logic separation.
"""
from datetime import date
from typing import Callable

from sqlalchemy.orm import Session

from inventory_api.core.logging import log_business_event
from inventory_api.db import models
from inventory_api.db.store import ProductStore
from inventory_api.schemas.product import ProductCreate, ProductUpdate
from inventory_api.utils.exceptions import NotFoundError


class ProductService:
    """Service class for single-product CRUD and its defaulting rules."""

    def __init__(self, db: Session, today: Callable[[], date] = date.today):
        self.store = ProductStore(db)
        self.today = today

    def create_product(self, product_data: ProductCreate) -> models.Product:
        """Create a product, stamping today's date when no restock date was given."""
        fields = product_data.model_dump()
        if fields.get("last_restock_date") is None:
            fields["last_restock_date"] = self.today()

        product = self.store.create(fields)
        log_business_event("product_created", product_id=product.id, stock=product.stock)
        return product

    def get_product(self, product_id: int) -> models.Product:
        """Get product by ID or raise NotFoundError."""
        return self.store.get(product_id)

    def update_product(self, product_id: int, update_data: ProductUpdate) -> models.Product:
        """Replace every mutable field of a product.

        Restock date rules, in order:
        - an explicit date that differs from the stored one is kept as given;
        - otherwise a stock increase stamps today's date;
        - otherwise the given date (or the stored one when omitted) is kept.
        """
        product = self.get_product(product_id)
        previous_stock = product.stock
        stored_date = product.last_restock_date

        fields = update_data.model_dump()
        requested_date = fields.get("last_restock_date")
        new_stock = fields.get("stock")
        restocked = new_stock is not None and previous_stock is not None and new_stock > previous_stock

        if requested_date is not None and requested_date != stored_date:
            fields["last_restock_date"] = requested_date
        elif restocked:
            fields["last_restock_date"] = self.today()
            log_business_event(
                "restock_detected",
                product_id=product_id,
                previous_stock=previous_stock,
                stock=new_stock,
            )
        else:
            fields["last_restock_date"] = requested_date or stored_date

        product = self.store.update(product, fields)
        log_business_event("product_updated", product_id=product_id, stock=product.stock)
        return product

    def delete_product(self, product_id: int) -> None:
        """Delete product permanently, NotFoundError if it does not exist."""
        if not self.store.exists(product_id):
            raise NotFoundError("Product", product_id)
        self.store.delete(product_id)
        log_business_event("product_deleted", product_id=product_id)
