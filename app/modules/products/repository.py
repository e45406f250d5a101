# app/modules/products/repository.py
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import asc, desc
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import Product, SaleItem

class ProductRepository:
    """
    Repositorio del catálogo de productos.

    Los métodos CRUD confirman su propia transacción. ``get_product_for_update``
    y ``decrement_stock`` no confirman: corren dentro de la transacción de quien
    los llama (la venta).
    """

    def __init__(self, db: Session):
        self.db = db

    # ==================== CRUD ====================

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()

    def get_product_by_sku(self, sku: str) -> Optional[Product]:
        return self.db.query(Product).filter(Product.sku == sku).first()

    def get_all_products(self) -> List[Product]:
        """Obtener productos, más recientes primero"""
        return self.db.query(Product).order_by(desc(Product.id)).all()

    def create_product(self, product_data: dict) -> Product:
        """Crear nuevo producto"""
        try:
            product = Product(**product_data)
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
            return product
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def update_product(self, product: Product, update_data: dict) -> Product:
        """Reemplazar los campos editables del producto"""
        try:
            for key, value in update_data.items():
                setattr(product, key, value)
            self.db.commit()
            self.db.refresh(product)
            return product
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def delete_product(self, product: Product):
        try:
            self.db.delete(product)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def is_product_referenced(self, product_id: int) -> bool:
        """Verificar si algún item de venta referencia el producto"""
        return self.db.query(SaleItem.id).filter(
            SaleItem.product_id == product_id
        ).first() is not None

    def get_low_stock_products(self, threshold: int) -> List[Product]:
        """
        Productos con stock <= umbral, ordenados por stock ascendente y luego id
        """
        return self.db.query(Product).filter(
            Product.stock <= threshold
        ).order_by(asc(Product.stock), asc(Product.id)).all()

    # ==================== OPERACIONES DENTRO DE UNA VENTA ====================

    def get_product_for_update(self, product_id: int) -> Optional[Product]:
        """
        Leer producto bloqueando la fila hasta el fin de la transacción.

        ``populate_existing`` refresca el objeto si ya estaba en la sesión, así
        el stock leído es siempre el confirmado en la base de datos.
        """
        return self.db.query(Product).filter(
            Product.id == product_id
        ).with_for_update().populate_existing().first()

    def decrement_stock(self, product_id: int, quantity: int, updated_at: datetime) -> bool:
        """
        Descontar stock solo si alcanza. Retorna False si no se actualizó
        ninguna fila (producto inexistente o stock insuficiente).
        """
        rows_updated = self.db.query(Product).filter(
            Product.id == product_id,
            Product.stock >= quantity
        ).update(
            {
                Product.stock: Product.stock - quantity,
                Product.updated_at: updated_at
            },
            synchronize_session="fetch"
        )
        return rows_updated > 0
