# app/modules/sales/service.py
import logging
from collections import defaultdict
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import List, Optional, Sequence, Any
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import Sale
from app.modules.products.repository import ProductRepository
from .repository import SalesRepository
from .exceptions import (
    SaleLedgerError, InvalidSaleRequest, ProductNotFound,
    InsufficientStock, StorageFailure
)

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")

def to_money(value: Any) -> Decimal:
    """Convertir a Decimal redondeado a centavos"""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)

class SalesService:
    """
    Registro de ventas.

    ``create_sale`` es la única operación que necesita atomicidad de varias
    sentencias: lee y bloquea cada producto, valida stock, calcula totales,
    inserta la venta con sus items y descuenta inventario en una sola
    transacción. Cualquier error revierte todo.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = SalesRepository(db)
        self.products = ProductRepository(db)

    # ==================== REGISTRO DE VENTAS ====================

    def create_sale(
        self,
        items: Sequence[Any],
        payment_method: str,
        paid_amount: Any
    ) -> Sale:
        """
        Registrar una venta completa.

        ``items`` son objetos con ``product_id``, ``quantity`` y ``unit_price``
        opcional (precio manual; si es None se usa el precio del catálogo).

        Si el mismo producto aparece en varias líneas, cada línea se valida
        contra el stock menos lo ya pedido por las líneas anteriores.
        """
        payment_method, paid_amount = self._validate_request(items, payment_method, paid_amount)

        try:
            self._begin_transaction()

            # 1-2. Leer con bloqueo, validar stock y calcular totales
            requested = defaultdict(int)
            prepared = []
            total = Decimal("0.00")

            for item in items:
                product = self.products.get_product_for_update(item.product_id)
                if product is None:
                    raise ProductNotFound(item.product_id)

                available = product.stock - requested[product.id]
                if available < item.quantity:
                    raise InsufficientStock(product.id, item.quantity, available)
                requested[product.id] += item.quantity

                unit_price = to_money(
                    product.unit_price if item.unit_price is None else item.unit_price
                )
                line_total = (unit_price * item.quantity).quantize(CENTS, rounding=ROUND_HALF_UP)
                total += line_total

                prepared.append({
                    "product_id": product.id,
                    "product_name": product.name,
                    "quantity": item.quantity,
                    "unit_price": unit_price,
                    "line_total": line_total
                })

            # 3. Un solo timestamp para la venta y todos sus items
            created_at = datetime.now(timezone.utc)

            sale = self.repository.create_sale(
                total_amount=total,
                paid_amount=paid_amount,
                payment_method=payment_method,
                created_at=created_at
            )

            # 4. Items con el nombre del producto copiado
            for line in prepared:
                self.repository.create_sale_item(sale=sale, created_at=created_at, **line)

            # 5. Descontar inventario
            for line in prepared:
                if not self.products.decrement_stock(line["product_id"], line["quantity"], created_at):
                    raise InsufficientStock(line["product_id"], line["quantity"])

            # 6. Confirmar
            sale_id = sale.id
            self.db.commit()

        except SaleLedgerError as e:
            self.db.rollback()
            logger.warning(f"Venta rechazada ({e.code}): {e.message}")
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("❌ Error de almacenamiento registrando venta")
            raise StorageFailure("Error de almacenamiento registrando la venta") from e
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"✅ Venta {sale_id} registrada: {len(prepared)} items, total {total}")
        return sale

    def _validate_request(self, items: Sequence[Any], payment_method: str, paid_amount: Any):
        """
        Validaciones estructurales previas a tocar la base de datos.

        La capa HTTP ya valida con Pydantic, pero el registro de ventas es la
        frontera de consistencia y no confía en quien lo llama.
        """
        if not items:
            raise InvalidSaleRequest("La venta debe tener al menos un item")

        for item in items:
            product_id = getattr(item, "product_id", None)
            quantity = getattr(item, "quantity", None)
            unit_price = getattr(item, "unit_price", None)

            if not isinstance(product_id, int) or isinstance(product_id, bool) or product_id <= 0:
                raise InvalidSaleRequest("product_id inválido")
            if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
                raise InvalidSaleRequest("La cantidad debe ser un entero mayor a 0")
            if unit_price is not None and self._parse_amount(unit_price, "unit_price") < 0:
                raise InvalidSaleRequest("El precio unitario no puede ser negativo")

        if not isinstance(payment_method, str) or not payment_method.strip():
            raise InvalidSaleRequest("El método de pago es obligatorio")

        if paid_amount is None:
            raise InvalidSaleRequest("El monto pagado es obligatorio")
        paid = self._parse_amount(paid_amount, "paid_amount")
        if paid < 0:
            raise InvalidSaleRequest("El monto pagado no puede ser negativo")

        return payment_method.strip(), to_money(paid)

    def _begin_transaction(self):
        """
        Abrir una transacción propia para la venta.

        Se cierra la transacción de lectura que haya dejado abierta la sesión
        (por ejemplo la autenticación) y la nueva se abre con bloqueo de
        escritura en SQLite (BEGIN IMMEDIATE). En otros motores el bloqueo lo
        dan los SELECT ... FOR UPDATE.
        """
        if self.db.in_transaction():
            self.db.commit()
        self.db.connection(execution_options={"sqlite_immediate": True})

    @staticmethod
    def _parse_amount(value: Any, field: str) -> Decimal:
        try:
            amount = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise InvalidSaleRequest(f"{field} debe ser numérico")
        if not amount.is_finite():
            raise InvalidSaleRequest(f"{field} debe ser numérico")
        return amount

    # ==================== CONSULTAS ====================

    def get_sale(self, sale_id: int) -> Optional[Sale]:
        return self.repository.get_sale_by_id(sale_id)

    def list_sales(self, limit: Optional[int] = None, offset: int = 0) -> List[Sale]:
        """Ventas más recientes primero"""
        return self.repository.get_sales(limit=limit, offset=offset)
