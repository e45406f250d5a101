# app/modules/sales/__init__.py
"""
Módulo de Ventas - Registro de ventas del punto de venta

- Registro atómico de ventas: validación de stock, totales, items y descuento
  de inventario en una sola transacción
- Consulta de una venta con sus items
- Listado de ventas, más recientes primero

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio (transacción de la venta)
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
- exceptions.py: Errores del registro de ventas
"""

from .router import router as sales_router
from .service import SalesService
from .repository import SalesRepository

__all__ = [
    "sales_router",
    "SalesService",
    "SalesRepository"
]
