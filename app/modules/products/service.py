# app/modules/products/service.py
import logging
from typing import List, Optional
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.config.settings import settings
from app.shared.database.models import Product
from .repository import ProductRepository
from .schemas import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

class ProductService:
    """
    Servicio del catálogo de productos
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = ProductRepository(db)

    def list_products(self) -> List[Product]:
        return self.repository.get_all_products()

    def get_product(self, product_id: int) -> Product:
        product = self.repository.get_product_by_id(product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Producto no encontrado"
            )
        return product

    def create_product(self, product_data: ProductCreate) -> Product:
        if self._sku_taken(product_data.sku):
            raise self._sku_conflict(product_data.sku)

        try:
            product = self.repository.create_product(product_data.model_dump())
        except IntegrityError:
            raise self._sku_conflict(product_data.sku)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error creando producto {product_data.sku}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error creando producto"
            )

        logger.info(f"Producto {product.id} creado (SKU {product.sku})")
        return product

    def update_product(self, product_id: int, product_data: ProductUpdate) -> Product:
        product = self.get_product(product_id)

        if self._sku_taken(product_data.sku, exclude_id=product_id):
            raise self._sku_conflict(product_data.sku)

        try:
            return self.repository.update_product(product, product_data.model_dump())
        except IntegrityError:
            raise self._sku_conflict(product_data.sku)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error actualizando producto {product_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error actualizando producto"
            )

    def delete_product(self, product_id: int):
        """
        Eliminar producto. No se permite si tiene ventas registradas
        """
        product = self.get_product(product_id)

        if self.repository.is_product_referenced(product_id):
            raise self._in_use_conflict()

        try:
            self.repository.delete_product(product)
        except IntegrityError:
            # Una venta lo referenció entre la verificación y el borrado
            raise self._in_use_conflict()
        except SQLAlchemyError as e:
            logger.error(f"❌ Error eliminando producto {product_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error eliminando producto"
            )

        logger.info(f"Producto {product_id} eliminado")

    def get_low_stock_products(self, threshold: Optional[int] = None) -> List[Product]:
        if threshold is None:
            threshold = settings.low_stock_threshold
        return self.repository.get_low_stock_products(threshold)

    def _sku_taken(self, sku: str, exclude_id: Optional[int] = None) -> bool:
        existing = self.repository.get_product_by_sku(sku)
        return existing is not None and existing.id != exclude_id

    def _sku_conflict(self, sku: str) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Ya existe un producto con SKU '{sku}'"
        )

    def _in_use_conflict(self) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="El producto tiene ventas registradas y no puede eliminarse"
        )
