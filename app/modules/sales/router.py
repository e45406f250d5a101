# app/modules/sales/router.py
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.config.database import get_db
from app.core.auth.dependencies import require_roles
from app.shared.database.models import User
from .service import SalesService
from .schemas import SaleCreateRequest, SaleResponse

router = APIRouter(prefix="/sales", tags=["Sales"])

SALES_ROLES = ["manager", "cashier"]

@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
def create_sale(
    sale_data: SaleCreateRequest,
    current_user: User = Depends(require_roles(SALES_ROLES)),
    db: Session = Depends(get_db)
):
    """
    Registrar venta

    Incluye:
    - Validación de existencia y stock de cada producto
    - Precio manual opcional por línea (si se omite se usa el del catálogo)
    - Descuento automático de inventario
    - Todo o nada: ante cualquier error no queda venta, items ni cambios de stock

    Errores:
    - 400: datos inválidos
    - 404: producto inexistente
    - 409: stock insuficiente
    - 500: error de almacenamiento (se puede reintentar)
    """
    service = SalesService(db)

    return service.create_sale(
        items=sale_data.items,
        payment_method=sale_data.payment_method,
        paid_amount=sale_data.paid_amount
    )

@router.get("", response_model=List[SaleResponse])
def list_sales(
    limit: Optional[int] = Query(None, gt=0, le=500, description="Máximo de ventas a retornar"),
    offset: int = Query(0, ge=0, description="Ventas a omitir"),
    current_user: User = Depends(require_roles(SALES_ROLES)),
    db: Session = Depends(get_db)
):
    """
    Listar ventas, más recientes primero
    """
    service = SalesService(db)
    return service.list_sales(limit=limit, offset=offset)

@router.get("/{sale_id}", response_model=SaleResponse)
def get_sale(
    sale_id: int,
    current_user: User = Depends(require_roles(SALES_ROLES)),
    db: Session = Depends(get_db)
):
    """
    Obtener venta con sus items
    """
    service = SalesService(db)

    sale = service.get_sale(sale_id)
    if not sale:
        raise HTTPException(status_code=404, detail="Venta no encontrada")

    return sale
