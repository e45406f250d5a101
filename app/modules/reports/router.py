# app/modules/reports/router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date

from app.config.database import get_db
from app.core.auth.dependencies import require_roles
from app.shared.database.models import User
from .service import ReportsService
from .schemas import SalesSummary, DailySalesRow, TopProductRow

router = APIRouter(prefix="/reports", tags=["Reports"])

@router.get("/summary", response_model=SalesSummary)
def get_summary(
    date_from: date = Query(..., alias="from", description="Fecha inicial (YYYY-MM-DD)"),
    date_to: date = Query(..., alias="to", description="Fecha final incluida (YYYY-MM-DD)"),
    current_user: User = Depends(require_roles(["manager"])),
    db: Session = Depends(get_db)
):
    """
    Resumen del período: cantidad de ventas, ingresos y unidades vendidas
    """
    service = ReportsService(db)
    return service.get_summary(date_from, date_to)

@router.get("/daily", response_model=List[DailySalesRow])
def get_daily_sales(
    date_from: date = Query(..., alias="from", description="Fecha inicial (YYYY-MM-DD)"),
    date_to: date = Query(..., alias="to", description="Fecha final incluida (YYYY-MM-DD)"),
    current_user: User = Depends(require_roles(["manager"])),
    db: Session = Depends(get_db)
):
    """
    Ventas e ingresos por día
    """
    service = ReportsService(db)
    return service.get_daily_sales(date_from, date_to)

@router.get("/top-products", response_model=List[TopProductRow])
def get_top_products(
    date_from: date = Query(..., alias="from", description="Fecha inicial (YYYY-MM-DD)"),
    date_to: date = Query(..., alias="to", description="Fecha final incluida (YYYY-MM-DD)"),
    limit: Optional[int] = Query(None, gt=0, le=100, description="Cantidad de productos"),
    current_user: User = Depends(require_roles(["manager"])),
    db: Session = Depends(get_db)
):
    """
    Productos con mayores ingresos en el período
    """
    service = ReportsService(db)
    return service.get_top_products(date_from, date_to, limit)
