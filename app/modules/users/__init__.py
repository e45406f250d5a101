# app/modules/users/__init__.py
"""
Módulo de Usuarios

- Registro de usuarios con rol manager o cashier
- Login con emisión de token JWT
- Consulta del usuario autenticado

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as users_router
from .service import UserService
from .repository import UserRepository

__all__ = [
    "users_router",
    "UserService",
    "UserRepository"
]
