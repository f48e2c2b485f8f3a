# inventory_api/routers/products.py
from datetime import date
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session

from inventory_api.db import database
from inventory_api.schemas.product import (
    MAX_BIGINT,
    MIN_BIGINT,
    ProductCreate,
    ProductOut,
    ProductUpdate,
    ReportFilters,
)
from inventory_api.services import ProductService, ReportService

router = APIRouter(prefix="/products", tags=["products"])

ProductId = Annotated[int, Path(ge=MIN_BIGINT, le=MAX_BIGINT)]


def get_product_service(db: Session = Depends(database.get_db)) -> ProductService:
    return ProductService(db)


def get_report_service(db: Session = Depends(database.get_db)) -> ReportService:
    return ReportService(db)


@router.get("", response_model=List[ProductOut])
def list_products(
    search: Optional[str] = Query(None, description="Match products whose name or category contains this text"),
    service: ReportService = Depends(get_report_service),
):
    return service.search(search)


@router.get("/suppliers", response_model=List[str])
def list_suppliers(service: ReportService = Depends(get_report_service)):
    """Distinct non-empty supplier names."""
    return service.list_suppliers()


@router.get("/report", response_model=List[ProductOut])
def generate_report(
    category: Optional[str] = Query(None, description="Exact category, case-insensitive"),
    min_stock: Optional[int] = Query(None, alias="minStock"),
    max_stock: Optional[int] = Query(None, alias="maxStock"),
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    start_date: Optional[date] = Query(None, alias="startDate", description="YYYY-MM-DD, inclusive"),
    end_date: Optional[date] = Query(None, alias="endDate", description="YYYY-MM-DD, inclusive"),
    supplier: Optional[str] = Query(None, description="Supplier name fragment, case-insensitive"),
    product_name: Optional[str] = Query(None, alias="productName", description="Name fragment, case-insensitive"),
    service: ReportService = Depends(get_report_service),
):
    """Products matching every supplied filter."""
    filters = ReportFilters(
        category=category,
        min_stock=min_stock,
        max_stock=max_stock,
        min_price=min_price,
        max_price=max_price,
        start_date=start_date,
        end_date=end_date,
        supplier=supplier,
        product_name=product_name,
    )
    return service.report(filters)


@router.get("/low-stock", response_model=List[ProductOut])
def list_low_stock(service: ReportService = Depends(get_report_service)):
    """Products whose stock is below their minimum stock level."""
    return service.low_stock()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: ProductId, service: ProductService = Depends(get_product_service)):
    return service.get_product(product_id)


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductCreate, service: ProductService = Depends(get_product_service)):
    return service.create_product(payload)


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
    product_id: ProductId,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    return service.update_product(product_id, payload)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: ProductId, service: ProductService = Depends(get_product_service)):
    service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
