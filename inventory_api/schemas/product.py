from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from inventory_api.utils.alerts import is_low_stock

# INTEGER columns are 32-bit on PostgreSQL; SQLite rejects ints beyond 64 bits
MAX_STOCK = 2**31 - 1
MAX_BIGINT = 2**63 - 1
MIN_BIGINT = -(2**63)


class ProductBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=200, description="Product name")
    category: str = Field(..., min_length=1, max_length=100, description="Figure, Manga, Poster, Accessory, Other...")
    price: float = Field(..., ge=0, allow_inf_nan=False, description="Sale price, must be non-negative")
    stock: int = Field(..., ge=0, le=MAX_STOCK, description="Units in stock, must be non-negative")
    supplier: Optional[str] = Field(None, max_length=200)
    min_stock: Optional[int] = Field(
        None, ge=0, le=MAX_STOCK, alias="minStock",
        description="Stock level below which the product is flagged as low stock",
    )
    last_restock_date: Optional[date] = Field(None, alias="lastRestockDate")

    @field_validator('name', 'category')
    @classmethod
    def validate_not_blank(cls, v, info):
        if not v or not v.strip():
            raise ValueError(f'Product {info.field_name} cannot be empty or whitespace only')
        return v.strip()

    @field_validator('supplier')
    @classmethod
    def blank_supplier_is_none(cls, v):
        if v is None or not v.strip():
            return None
        return v.strip()


class ProductCreate(ProductBase):
    """Create-time payload; ``lastRestockDate`` defaults to today when omitted."""


class ProductUpdate(ProductBase):
    """Full replacement of every mutable field."""


class ProductOut(ProductBase):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int

    @computed_field(alias="lowStock")
    @property
    def low_stock(self) -> bool:
        return is_low_stock(self)


class ReportFilters(BaseModel):
    """Optional report parameters; each one supplied adds an AND clause."""
    category: Optional[str] = None
    min_stock: Optional[int] = None
    max_stock: Optional[int] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    supplier: Optional[str] = None
    product_name: Optional[str] = None
