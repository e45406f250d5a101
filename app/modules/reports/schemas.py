from pydantic import BaseModel, ConfigDict
from decimal import Decimal

class ReportsBaseModel(BaseModel):
    model_config = ConfigDict(
        json_encoders={
            Decimal: float,
        }
    )

class SalesSummary(ReportsBaseModel):
    total_sales: int
    total_revenue: Decimal
    total_items: int

class DailySalesRow(ReportsBaseModel):
    date: str
    total_sales: int
    total_revenue: Decimal

class TopProductRow(ReportsBaseModel):
    product_id: int
    product_name: str
    quantity: int
    revenue: Decimal
