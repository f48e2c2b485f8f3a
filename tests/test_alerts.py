from types import SimpleNamespace

import pytest

from inventory_api.utils.alerts import is_low_stock, low_stock_products


@pytest.mark.parametrize(
    "stock,min_stock,expected",
    [
        (2, 5, True),
        (5, 5, False),
        (9, 5, False),
        (0, 1, True),
        (0, 0, False),
        (3, None, False),
        (None, 5, False),
        (None, None, False),
    ],
)
def test_is_low_stock(stock, min_stock, expected):
    assert is_low_stock(SimpleNamespace(stock=stock, min_stock=min_stock)) is expected


def test_low_stock_products_filters_list():
    low = SimpleNamespace(stock=1, min_stock=3)
    fine = SimpleNamespace(stock=4, min_stock=3)
    untracked = SimpleNamespace(stock=0, min_stock=None)
    assert low_stock_products([low, fine, untracked]) == [low]
