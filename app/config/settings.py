from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # App Info
    app_name: str = "POS Backend API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data/pos.db"
    sqlite_busy_timeout: float = Field(
        default=30.0,
        description="Segundos que una transacción SQLite espera el bloqueo de escritura"
    )

    # Security
    secret_key: str = "dev-secret-change-me"  # Cambiar en producción vía SECRET_KEY
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 1440  # 24 horas

    # CORS
    allowed_origins: List[str] = ["http://localhost:3000"]

    # Inventario y reportes
    low_stock_threshold: int = Field(default=5, ge=0, description="Umbral por defecto de stock bajo")
    top_products_limit: int = Field(default=5, gt=0, description="Productos por defecto en el top de ventas")

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        env_file = ".env"
        case_sensitive = False

settings = Settings()
