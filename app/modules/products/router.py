# app/modules/products/router.py
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from app.config.database import get_db
from app.core.auth.dependencies import get_current_user, require_roles
from app.shared.database.models import User
from .service import ProductService
from .schemas import ProductCreate, ProductUpdate, ProductResponse

router = APIRouter(prefix="/products", tags=["Products"])

@router.get("", response_model=List[ProductResponse])
def list_products(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Listar productos del catálogo (más recientes primero)
    """
    service = ProductService(db)
    return service.list_products()

@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    product_data: ProductCreate,
    current_user: User = Depends(require_roles(["manager"])),
    db: Session = Depends(get_db)
):
    """
    Crear producto

    - SKU único en el catálogo
    - Precio y stock no negativos
    """
    service = ProductService(db)
    return service.create_product(product_data)

@router.get("/low-stock", response_model=List[ProductResponse])
def get_low_stock_products(
    threshold: Optional[int] = Query(None, ge=0, description="Stock máximo a incluir"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Productos con stock menor o igual al umbral, ordenados por stock y luego por id
    """
    service = ProductService(db)
    return service.get_low_stock_products(threshold)

@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    service = ProductService(db)
    return service.get_product(product_id)

@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    current_user: User = Depends(require_roles(["manager"])),
    db: Session = Depends(get_db)
):
    """
    Reemplazar nombre, SKU, precio y stock de un producto
    """
    service = ProductService(db)
    return service.update_product(product_id, product_data)

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    current_user: User = Depends(require_roles(["manager"])),
    db: Session = Depends(get_db)
):
    """
    Eliminar producto (rechazado si tiene ventas registradas)
    """
    service = ProductService(db)
    service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
