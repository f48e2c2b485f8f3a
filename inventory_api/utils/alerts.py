"""
Low-stock alert rule.

Derived on every read and never persisted: a product is low on stock when both
``stock`` and ``min_stock`` are set and ``stock < min_stock``.
"""


def is_low_stock(product) -> bool:
    stock = getattr(product, "stock", None)
    min_stock = getattr(product, "min_stock", None)
    if stock is None or min_stock is None:
        return False
    return stock < min_stock


def low_stock_products(products) -> list:
    """Subset of ``products`` currently below their threshold."""
    return [p for p in products if is_low_stock(p)]
