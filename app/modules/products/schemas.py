from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime
from decimal import Decimal

# ==================== CLASE BASE PARA RESPUESTAS (Pydantic v2) ====================

class ProductBaseModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_encoders={
            Decimal: float,
        }
    )

# ==================== REQUEST SCHEMAS ====================

class ProductWrite(BaseModel):
    """Crear o reemplazar un producto (PUT reemplaza todos los campos)"""
    name: str = Field(..., min_length=1, max_length=255, description="Nombre del producto")
    sku: str = Field(..., min_length=1, max_length=100, description="SKU único")
    unit_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Precio unitario")
    stock: int = Field(0, ge=0, description="Unidades disponibles")

    @field_validator('name', 'sku')
    @classmethod
    def strip_required(cls, v: str):
        v = v.strip()
        if not v:
            raise ValueError('El campo es obligatorio')
        return v

class ProductCreate(ProductWrite):
    pass

class ProductUpdate(ProductWrite):
    pass

# ==================== RESPONSE SCHEMAS ====================

class ProductResponse(ProductBaseModel):
    id: int
    name: str
    sku: str
    unit_price: Decimal
    stock: int
    created_at: datetime
    updated_at: datetime
