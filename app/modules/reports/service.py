# app/modules/reports/service.py
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional, Tuple
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.config.settings import settings
from .repository import ReportsRepository
from .schemas import SalesSummary, DailySalesRow, TopProductRow

class ReportsService:
    """
    Reportes de ventas. Las fechas ``from`` y ``to`` son días completos (UTC):
    ``to`` se incluye, por eso el límite exclusivo es el día siguiente.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = ReportsRepository(db)

    def _date_range(self, date_from: date, date_to: date) -> Tuple[datetime, datetime]:
        if date_from > date_to:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Rango de fechas inválido: 'from' debe ser menor o igual a 'to'"
            )

        start = datetime.combine(date_from, time.min, tzinfo=timezone.utc)
        end = datetime.combine(date_to + timedelta(days=1), time.min, tzinfo=timezone.utc)
        return start, end

    def get_summary(self, date_from: date, date_to: date) -> SalesSummary:
        start, end = self._date_range(date_from, date_to)
        return SalesSummary(**self.repository.get_sales_summary(start, end))

    def get_daily_sales(self, date_from: date, date_to: date) -> List[DailySalesRow]:
        start, end = self._date_range(date_from, date_to)
        return [DailySalesRow(**row) for row in self.repository.get_daily_sales(start, end)]

    def get_top_products(
        self,
        date_from: date,
        date_to: date,
        limit: Optional[int] = None
    ) -> List[TopProductRow]:
        start, end = self._date_range(date_from, date_to)
        if limit is None:
            limit = settings.top_products_limit
        return [TopProductRow(**row) for row in self.repository.get_top_products(start, end, limit)]
