# app/modules/sales/exceptions.py
"""
Errores del registro de ventas.

Cada error lleva un ``code`` estable para que la capa HTTP distinga errores
corregibles por el cliente (datos inválidos, producto inexistente, stock
insuficiente) de fallas del sistema (almacenamiento).
"""
from typing import Optional


class SaleLedgerError(Exception):
    code = "sale_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidSaleRequest(SaleLedgerError):
    code = "invalid_request"


class ProductNotFound(SaleLedgerError):
    code = "product_not_found"

    def __init__(self, product_id: int):
        super().__init__(f"Producto {product_id} no encontrado")
        self.product_id = product_id


class InsufficientStock(SaleLedgerError):
    code = "insufficient_stock"

    def __init__(self, product_id: int, requested: int, available: Optional[int] = None):
        message = f"Stock insuficiente para el producto {product_id}: solicitado {requested}"
        if available is not None:
            message += f", disponible {available}"
        super().__init__(message)
        self.product_id = product_id
        self.requested = requested
        self.available = available


class StorageFailure(SaleLedgerError):
    code = "storage_failure"
