from datetime import date

import pytest

from inventory_api.schemas.product import ProductCreate, ProductUpdate
from inventory_api.services import ProductService
from inventory_api.utils.exceptions import NotFoundError

TODAY = date(2024, 5, 1)
LAST_MONTH = date(2024, 4, 1)


@pytest.fixture
def service(db_session):
    return ProductService(db_session, today=lambda: TODAY)


def replacement(product, **overrides):
    data = {
        "name": product.name,
        "category": product.category,
        "price": product.price,
        "stock": product.stock,
        "supplier": product.supplier,
        "min_stock": product.min_stock,
        "last_restock_date": product.last_restock_date,
    }
    data.update(overrides)
    return ProductUpdate(**data)


def test_create_defaults_restock_date_to_today(service):
    product = service.create_product(ProductCreate(name="Figure A", category="Figure", price=10.0, stock=5))
    assert product.id is not None
    assert product.last_restock_date == TODAY


def test_create_keeps_explicit_restock_date(service):
    product = service.create_product(
        ProductCreate(name="Figure A", category="Figure", price=10.0, stock=5, lastRestockDate=LAST_MONTH)
    )
    assert product.last_restock_date == LAST_MONTH


def test_stock_increase_stamps_today(service, make_product):
    product = make_product(stock=5, last_restock_date=LAST_MONTH)
    updated = service.update_product(product.id, replacement(product, stock=6, last_restock_date=None))
    assert updated.last_restock_date == TODAY


def test_stock_increase_with_unchanged_date_stamps_today(service, make_product):
    product = make_product(stock=5, last_restock_date=LAST_MONTH)
    updated = service.update_product(product.id, replacement(product, stock=6))
    assert updated.last_restock_date == TODAY


def test_explicit_different_date_wins_over_stock_increase(service, make_product):
    product = make_product(stock=5, last_restock_date=LAST_MONTH)
    explicit = date(2024, 4, 20)
    updated = service.update_product(product.id, replacement(product, stock=50, last_restock_date=explicit))
    assert updated.last_restock_date == explicit


def test_explicit_date_used_when_stock_drops(service, make_product):
    product = make_product(stock=5, last_restock_date=LAST_MONTH)
    explicit = date(2024, 4, 20)
    updated = service.update_product(product.id, replacement(product, stock=2, last_restock_date=explicit))
    assert updated.last_restock_date == explicit
    assert updated.stock == 2


@pytest.mark.parametrize("new_stock", [5, 1, 0])
def test_no_increase_keeps_stored_date(service, make_product, new_stock):
    product = make_product(stock=5, last_restock_date=LAST_MONTH)
    updated = service.update_product(product.id, replacement(product, stock=new_stock, last_restock_date=None))
    assert updated.last_restock_date == LAST_MONTH


def test_update_replaces_optional_fields(service, make_product):
    product = make_product(supplier="Bandai", min_stock=4)
    updated = service.update_product(product.id, replacement(product, supplier=None, min_stock=None))
    assert updated.supplier is None
    assert updated.min_stock is None


def test_update_missing_product(service):
    with pytest.raises(NotFoundError):
        service.update_product(42, ProductUpdate(name="X", category="Figure", price=1.0, stock=1))


def test_delete_then_get(service, make_product):
    product = make_product()
    service.delete_product(product.id)
    with pytest.raises(NotFoundError):
        service.get_product(product.id)
    with pytest.raises(NotFoundError):
        service.delete_product(product.id)
