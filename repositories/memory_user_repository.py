"""
Repositorio de usuarios en memoria.

Implementa el mismo contrato que UserRepository sin base de datos. Guarda
copias de las columnas, nunca las instancias recibidas, así que modificar
una entidad devuelta no altera el almacén hasta llamar a save().
"""

from itertools import count
from typing import Dict, List, Optional, Any

from sqlalchemy import inspect

from repositories.interfaces import IUserRepository
from database.models import UserORM
from core.exceptions import NotFoundException, DuplicateException
from utils.datetime_utils import get_store_now

_COLUMNS = [attr.key for attr in inspect(UserORM).column_attrs]


class InMemoryUserRepository(IUserRepository):
    """Repositorio de usuarios respaldado por un diccionario."""

    resource_name = "Usuario"

    def __init__(self):
        self._rows: Dict[int, Dict[str, Any]] = {}
        self._ids = count(1)

    @staticmethod
    def _to_entity(row: Dict[str, Any]) -> UserORM:
        return UserORM(**row)

    @staticmethod
    def _to_row(entity: UserORM) -> Dict[str, Any]:
        return {key: getattr(entity, key) for key in _COLUMNS}

    def _email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        return any(
            row["email"] == email and row_id != exclude_id
            for row_id, row in self._rows.items()
        )

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[UserORM]:
        ids = sorted(self._rows)[skip:]
        if limit is not None:
            ids = ids[:limit]
        return [self._to_entity(self._rows[i]) for i in ids]

    def count(self) -> int:
        return len(self._rows)

    def find_by_id(self, id: int) -> Optional[UserORM]:
        row = self._rows.get(id)
        return self._to_entity(row) if row is not None else None

    def get_by_id(self, id: int) -> UserORM:
        user = self.find_by_id(id)
        if user is None:
            raise NotFoundException(resource=self.resource_name, identifier=str(id))
        return user

    def find_by_email(self, email: str) -> Optional[UserORM]:
        for row in self._rows.values():
            if row["email"] == email:
                return self._to_entity(row)
        return None

    def get_by_email(self, email: str) -> UserORM:
        user = self.find_by_email(email)
        if user is None:
            raise NotFoundException(resource=self.resource_name, identifier=email)
        return user

    def save(self, entity: UserORM) -> UserORM:
        now = get_store_now()
        if entity.id is None:
            if self._email_taken(entity.email):
                raise DuplicateException(resource=self.resource_name, field="email", value=entity.email)
            entity.id = next(self._ids)
            if entity.created_at is None:
                entity.created_at = now
        else:
            if entity.id not in self._rows:
                raise NotFoundException(resource=self.resource_name, identifier=str(entity.id))
            if self._email_taken(entity.email, exclude_id=entity.id):
                raise DuplicateException(resource=self.resource_name, field="email", value=entity.email)
        entity.updated_at = now
        self._rows[entity.id] = self._to_row(entity)
        return entity

    def delete(self, id: int) -> None:
        if id not in self._rows:
            raise NotFoundException(resource=self.resource_name, identifier=str(id))
        del self._rows[id]
