# app/modules/users/repository.py
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.shared.database.models import User

class UserRepository:
    """
    Repositorio de usuarios
    """

    def __init__(self, db: Session):
        self.db = db

    def create_user(self, name: str, email: str, password_hash: str, role: str) -> User:
        """Crear nuevo usuario"""
        try:
            user = User(
                name=name,
                email=email,
                password_hash=password_hash,
                role=role
            )
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def count_users(self) -> int:
        return self.db.query(User).count()
