# app/modules/reports/repository.py
from datetime import datetime
from decimal import Decimal
from typing import List, Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy import func, desc, asc

from app.shared.database.models import Sale, SaleItem, Product

class ReportsRepository:
    """
    Consultas de solo lectura sobre ventas confirmadas.
    Todos los rangos son semiabiertos: [start, end)
    """

    def __init__(self, db: Session):
        self.db = db

    def _in_range(self, start: datetime, end: datetime):
        return (Sale.created_at >= start, Sale.created_at < end)

    def get_sales_summary(self, start: datetime, end: datetime) -> Dict[str, Any]:
        """Cantidad de ventas, ingresos y unidades vendidas"""
        total_sales, total_revenue = self.db.query(
            func.count(Sale.id),
            func.coalesce(func.sum(Sale.total_amount), 0)
        ).filter(*self._in_range(start, end)).one()

        # Unidades por separado para no multiplicar los ingresos por cada item
        total_items = self.db.query(
            func.coalesce(func.sum(SaleItem.quantity), 0)
        ).select_from(SaleItem)\
         .join(Sale, Sale.id == SaleItem.sale_id)\
         .filter(*self._in_range(start, end)).scalar()

        return {
            "total_sales": int(total_sales or 0),
            "total_revenue": Decimal(str(total_revenue or 0)),
            "total_items": int(total_items or 0)
        }

    def get_daily_sales(self, start: datetime, end: datetime) -> List[Dict[str, Any]]:
        """Ventas e ingresos por día"""
        sale_day = func.date(Sale.created_at)

        rows = self.db.query(
            sale_day.label('day'),
            func.count(Sale.id).label('total_sales'),
            func.coalesce(func.sum(Sale.total_amount), 0).label('total_revenue')
        ).filter(*self._in_range(start, end))\
         .group_by(sale_day)\
         .order_by(sale_day).all()

        return [
            {
                "date": str(row.day),
                "total_sales": int(row.total_sales),
                "total_revenue": Decimal(str(row.total_revenue))
            } for row in rows
        ]

    def get_top_products(self, start: datetime, end: datetime, limit: int) -> List[Dict[str, Any]]:
        """Productos con mayores ingresos; empate resuelto por id de producto"""
        revenue = func.coalesce(func.sum(SaleItem.line_total), 0)

        rows = self.db.query(
            Product.id.label('product_id'),
            Product.name.label('product_name'),
            func.coalesce(func.sum(SaleItem.quantity), 0).label('quantity'),
            revenue.label('revenue')
        ).select_from(SaleItem)\
         .join(Sale, Sale.id == SaleItem.sale_id)\
         .join(Product, Product.id == SaleItem.product_id)\
         .filter(*self._in_range(start, end))\
         .group_by(Product.id, Product.name)\
         .order_by(desc(revenue), asc(Product.id))\
         .limit(limit).all()

        return [
            {
                "product_id": row.product_id,
                "product_name": row.product_name,
                "quantity": int(row.quantity),
                "revenue": Decimal(str(row.revenue))
            } for row in rows
        ]
