# app/api/v1/router.py
from fastapi import APIRouter
from app.api.v1.auth import router as auth_router
from app.config.settings import settings

from app.modules.users import users_router
from app.modules.products import products_router
from app.modules.sales import sales_router
from app.modules.reports import reports_router

# Crear router principal de la API v1
api_router = APIRouter(prefix="/api/v1")

# ==================== MÓDULOS ====================

api_router.include_router(auth_router, prefix="/auth", tags=["authentication"])
api_router.include_router(users_router)
api_router.include_router(products_router)
api_router.include_router(sales_router)
api_router.include_router(reports_router)

# ==================== ENDPOINTS RAÍZ ====================

@api_router.get("/")
async def api_root():
    """Root endpoint de la API"""
    return {
        "message": f"{settings.app_name} v1",
        "version": settings.version,
        "status": "active",
        "available_endpoints": {
            "authentication": "/api/v1/auth",
            "users": "/api/v1/users",
            "products": "/api/v1/products",
            "sales": "/api/v1/sales",
            "reports": "/api/v1/reports"
        }
    }

@api_router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version
    }
