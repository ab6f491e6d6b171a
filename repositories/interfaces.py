"""
Repository Interfaces

Contratos abstractos de acceso a datos. Los servicios dependen de estas
interfaces y no de una tecnología de persistencia concreta, de modo que el
backend (SQLAlchemy, memoria, ...) se puede cambiar sin tocar servicios
ni controladores.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from database.models import UserORM


class IUserRepository(ABC):
    """
    Interfaz de acceso a datos para la entidad Usuario.

    Ninguna implementación valida reglas de negocio; solo se propagan
    NotFoundException, DuplicateException (restricción única del almacén)
    y StoreUnavailableException.
    """

    @abstractmethod
    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[UserORM]:
        """
        Devuelve todos los usuarios persistidos ordenados por id ascendente.

        Args:
            skip: Número de registros a saltar
            limit: Número máximo de registros a devolver; None devuelve todos
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Cuenta los usuarios persistidos."""
        pass

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[UserORM]:
        """Devuelve el usuario con ese id o None."""
        pass

    @abstractmethod
    def get_by_id(self, id: int) -> UserORM:
        """
        Devuelve el usuario con ese id.

        Raises:
            NotFoundException: Si no existe
        """
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[UserORM]:
        """Devuelve el usuario con ese email o None."""
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> UserORM:
        """
        Devuelve el único usuario con ese email.

        Raises:
            NotFoundException: Si no existe
        """
        pass

    @abstractmethod
    def save(self, entity: UserORM) -> UserORM:
        """
        Inserta la entidad si no tiene id; si lo tiene, actualiza el registro.

        Returns:
            La entidad con el id asignado

        Raises:
            NotFoundException: Si se actualiza un id inexistente
            DuplicateException: Si el email ya está registrado
        """
        pass

    @abstractmethod
    def delete(self, id: int) -> None:
        """
        Elimina definitivamente el usuario.

        Raises:
            NotFoundException: Si no existe
        """
        pass
