from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from enum import Enum

class UserRole(str, Enum):
    """Roles del punto de venta"""
    MANAGER = "manager"
    CASHIER = "cashier"

class UserCreate(BaseModel):
    """Registrar usuario (manager o cashier)"""
    name: str = Field(..., min_length=1, description="Nombre completo")
    email: str = Field(..., min_length=3, description="Email único del usuario")
    password: str = Field(..., min_length=6, description="Contraseña (mínimo 6 caracteres)")
    role: UserRole = Field(..., description="Rol del usuario")

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v: str):
        v = v.strip().lower()
        if "@" not in v:
            raise ValueError('Email inválido')
        return v

    @field_validator('name')
    @classmethod
    def strip_name(cls, v: str):
        v = v.strip()
        if not v:
            raise ValueError('El nombre es obligatorio')
        return v

class LoginRequest(BaseModel):
    email: str = Field(..., description="Email registrado")
    password: str = Field(..., min_length=1, description="Contraseña")

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v: str):
        return v.strip().lower()

class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str
    created_at: datetime

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
