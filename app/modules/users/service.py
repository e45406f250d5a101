# app/modules/users/service.py
import logging
from typing import Optional
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.core.auth.security import hash_password, verify_password, create_access_token
from app.shared.database.models import User
from .repository import UserRepository
from .schemas import UserCreate, LoginRequest, UserResponse, TokenResponse, UserRole

logger = logging.getLogger(__name__)

class UserService:
    """
    Servicio de usuarios: registro y emisión de tokens
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = UserRepository(db)

    def register_user(self, user_data: UserCreate, registered_by: Optional[User]) -> UserResponse:
        """
        Registrar un usuario nuevo.

        Mientras no exista ningún usuario el registro es abierto (creación de la
        primera cuenta); después solo un manager puede registrar usuarios.
        """
        if self.repository.count_users() > 0:
            if registered_by is None:
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Se requiere autenticación para registrar usuarios",
                    headers={"WWW-Authenticate": "Bearer"}
                )
            if registered_by.role != UserRole.MANAGER.value:
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail="Solo un manager puede registrar usuarios"
                )

        if self.repository.get_user_by_email(user_data.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="El email ya está registrado"
            )

        try:
            user = self.repository.create_user(
                name=user_data.name,
                email=user_data.email,
                password_hash=hash_password(user_data.password),
                role=user_data.role.value
            )
        except IntegrityError:
            # Carrera con otro registro del mismo email
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="El email ya está registrado"
            )

        logger.info(f"Usuario {user.id} registrado con rol {user.role}")
        return UserResponse.model_validate(user)

    def login(self, credentials: LoginRequest) -> TokenResponse:
        """Validar credenciales y emitir token de acceso"""
        user = self.repository.get_user_by_email(credentials.email)
        if not user or not verify_password(credentials.password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Email o contraseña inválidos",
                headers={"WWW-Authenticate": "Bearer"}
            )

        return TokenResponse(
            access_token=create_access_token(user.id, user.role),
            user=UserResponse.model_validate(user)
        )
