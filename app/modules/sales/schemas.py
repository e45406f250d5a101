from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

# ==================== CLASE BASE PARA RESPUESTAS (Pydantic v2) ====================

class SalesBaseModel(BaseModel):
    """
    Clase base para todos los esquemas de respuesta,
    con configuración de Pydantic v2.
    """
    model_config = ConfigDict(
        from_attributes=True,
        json_encoders={
            Decimal: float,
        }
    )

# ==================== REQUEST SCHEMAS ====================

class SaleItemRequest(BaseModel):
    product_id: int = Field(..., gt=0, description="ID del producto")
    quantity: int = Field(..., gt=0, description="Cantidad")
    unit_price: Optional[Decimal] = Field(
        None, ge=0, description="Precio unitario manual; si se omite se usa el del catálogo"
    )

class SaleCreateRequest(BaseModel):
    items: List[SaleItemRequest] = Field(..., min_length=1, description="Items de la venta")
    payment_method: str = Field(..., min_length=1, max_length=50, description="Método de pago")
    paid_amount: Decimal = Field(..., ge=0, description="Monto pagado por el cliente")

    @field_validator('payment_method')
    @classmethod
    def validate_payment_method(cls, v: str):
        v = v.strip()
        if not v:
            raise ValueError('El método de pago es obligatorio')
        return v

# ==================== RESPONSE SCHEMAS ====================

class SaleItemResponse(SalesBaseModel):
    id: int
    sale_id: int
    product_id: int
    product_name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal
    created_at: datetime

class SaleResponse(SalesBaseModel):
    id: int
    total_amount: Decimal
    paid_amount: Decimal
    payment_method: str
    created_at: datetime
    items: List[SaleItemResponse]
