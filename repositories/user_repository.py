"""
Repositorio para la entidad Usuario.
Gestiona todas las operaciones de base de datos relacionadas con los usuarios.
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from repositories.base_repository import BaseRepository
from repositories.interfaces import IUserRepository
from database.models import UserORM
from core.exceptions import NotFoundException
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[UserORM], IUserRepository):
    """Repositorio SQLAlchemy para la gestión de usuarios."""

    def __init__(self, db: Session):
        """
        Inicializa el repositorio de usuarios.

        Args:
            db: SQLAlchemy session
        """
        super().__init__(db, UserORM, resource_name="Usuario")

    def find_by_email(self, email: str) -> Optional[UserORM]:
        """
        Busca un usuario por email.

        Args:
            email: email a buscar (se compara tal cual, ya normalizado)

        Returns:
            UserORM o None si no se encuentra
        """
        try:
            return self.db.query(UserORM).filter(
                UserORM.email == email
            ).one_or_none()
        except SQLAlchemyError as e:
            raise self._store_error("buscar por email", e) from e

    def get_by_email(self, email: str) -> UserORM:
        """
        Busca un usuario por email o lanza NotFoundException.

        Raises:
            NotFoundException: Si ningún usuario tiene ese email
        """
        user = self.find_by_email(email)
        if user is None:
            raise NotFoundException(resource=self.resource_name, identifier=email)
        return user
