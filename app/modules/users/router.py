# app/modules/users/router.py
from fastapi import APIRouter, Depends

from app.core.auth.dependencies import get_current_user
from app.shared.database.models import User
from .schemas import UserResponse

router = APIRouter(prefix="/users", tags=["Users"])

@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    """
    Obtener el usuario autenticado
    """
    return current_user
