# app/modules/reports/__init__.py
"""
Módulo de Reportes - Consultas sobre ventas confirmadas

- Resumen del período
- Ventas por día
- Productos con mayores ingresos

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Rango de fechas y armado de respuestas
- repository.py: Consultas agregadas
- schemas.py: Modelos Pydantic de respuesta
"""

from .router import router as reports_router
from .service import ReportsService
from .repository import ReportsRepository

__all__ = [
    "reports_router",
    "ReportsService",
    "ReportsRepository"
]
