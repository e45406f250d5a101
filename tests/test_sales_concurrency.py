"""
Ventas concurrentes sobre el mismo producto.

Cada hilo usa su propia sesión, como dos requests atendidos en paralelo. El
stock nunca puede quedar negativo ni venderse dos veces la misma unidad.
"""
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from threading import Barrier

from app.modules.sales.exceptions import InsufficientStock
from app.modules.sales.schemas import SaleItemRequest
from app.modules.sales.service import SalesService

WORKERS = 5


def _sell(session_factory, barrier, product_id, quantity):
    with session_factory() as session:
        barrier.wait()
        try:
            sale = SalesService(session).create_sale(
                [SaleItemRequest(product_id=product_id, quantity=quantity)],
                "cash",
                Decimal("100")
            )
            return sale.id
        except InsufficientStock as e:
            return e


def test_last_unit_is_sold_exactly_once(session_factory, make_product, stock_of, row_counts):
    product = make_product(stock=1)
    barrier = Barrier(WORKERS)

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        results = list(pool.map(
            lambda _: _sell(session_factory, barrier, product.id, 1), range(WORKERS)
        ))

    sold = [result for result in results if isinstance(result, int)]
    rejected = [result for result in results if isinstance(result, InsufficientStock)]

    assert len(sold) == 1
    assert len(rejected) == WORKERS - 1
    assert stock_of(product.id) == 0
    assert row_counts() == (1, 1)


def test_concurrent_sales_never_oversell(session_factory, make_product, stock_of, row_counts):
    product = make_product(stock=7)
    barrier = Barrier(WORKERS)

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        results = list(pool.map(
            lambda _: _sell(session_factory, barrier, product.id, 2), range(WORKERS)
        ))

    sold = [result for result in results if isinstance(result, int)]

    # 7 unidades alcanzan para 3 ventas de 2
    assert len(sold) == 3
    assert stock_of(product.id) == 1
    assert row_counts() == (3, 3)
