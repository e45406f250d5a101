from typing import List, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.shared.database.models import User
from .security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)

def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"}
    )

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Obtener el usuario autenticado a partir del header Authorization: Bearer"""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _unauthorized("Falta el header Authorization con token Bearer")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise _unauthorized("Token inválido o expirado")

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise _unauthorized("Token inválido o expirado")

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise _unauthorized("Usuario no encontrado")

    return user

def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """Igual que get_current_user pero sin exigir token; un token inválido sigue siendo 401"""
    if credentials is None:
        return None
    return get_current_user(credentials=credentials, db=db)

def require_roles(allowed_roles: List[str]):
    """
    Dependencia que exige que el usuario autenticado tenga uno de los roles dados
    """
    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Acceso denegado. Roles permitidos: {', '.join(allowed_roles)}"
            )
        return current_user

    return role_checker
