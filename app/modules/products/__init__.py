# app/modules/products/__init__.py
"""
Módulo de Productos - Catálogo e inventario

- Alta, consulta, edición y baja de productos
- Consulta de productos con stock bajo
- Lectura con bloqueo y descuento condicional de stock para el registro de ventas

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as products_router
from .service import ProductService
from .repository import ProductRepository

__all__ = [
    "products_router",
    "ProductService",
    "ProductRepository"
]
