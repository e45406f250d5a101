# app/modules/sales/repository.py
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import desc

from app.shared.database.models import Sale, SaleItem

class SalesRepository:
    """
    Repositorio de ventas.

    Las inserciones solo hacen flush: la transacción la confirma o revierte el
    servicio que registra la venta.
    """

    def __init__(self, db: Session):
        self.db = db

    # ==================== VENTAS ====================

    def create_sale(
        self,
        total_amount: Decimal,
        paid_amount: Decimal,
        payment_method: str,
        created_at: datetime
    ) -> Sale:
        """
        Crear nueva venta
        """
        sale = Sale(
            total_amount=total_amount,
            paid_amount=paid_amount,
            payment_method=payment_method,
            created_at=created_at
        )

        self.db.add(sale)
        self.db.flush()

        return sale

    def create_sale_item(
        self,
        sale: Sale,
        product_id: int,
        product_name: str,
        quantity: int,
        unit_price: Decimal,
        line_total: Decimal,
        created_at: datetime
    ) -> SaleItem:
        """
        Crear item de venta
        """
        sale_item = SaleItem(
            sale_id=sale.id,
            product_id=product_id,
            product_name=product_name,
            quantity=quantity,
            unit_price=unit_price,
            line_total=line_total,
            created_at=created_at
        )

        sale.items.append(sale_item)
        self.db.flush()

        return sale_item

    def get_sale_by_id(self, sale_id: int) -> Optional[Sale]:
        """
        Obtener venta por ID con sus items
        """
        return self.db.query(Sale).options(
            selectinload(Sale.items)
        ).filter(Sale.id == sale_id).first()

    def get_sales(self, limit: Optional[int] = None, offset: int = 0) -> List[Sale]:
        """
        Obtener ventas, más recientes primero
        """
        query = self.db.query(Sale).options(
            selectinload(Sale.items)
        ).order_by(desc(Sale.id)).offset(offset)

        if limit is not None:
            query = query.limit(limit)

        return query.all()
