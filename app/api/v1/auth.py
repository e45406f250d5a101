# app/api/v1/auth.py
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.auth.dependencies import get_optional_user
from app.shared.database.models import User
from app.modules.users.service import UserService
from app.modules.users.schemas import UserCreate, LoginRequest, UserResponse, TokenResponse

router = APIRouter()

@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserCreate,
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    """
    Registrar usuario

    - La primera cuenta puede registrarse sin token
    - Luego se requiere token de un manager
    """
    service = UserService(db)
    return service.register_user(user_data, registered_by=current_user)

@router.post("/login", response_model=TokenResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Login con email y contraseña, retorna token Bearer
    """
    service = UserService(db)
    return service.login(credentials)
