"""
Repositorio base con operaciones CRUD comunes:
Este repositorio genérico proporciona operaciones de base de datos estándar
que se pueden reutilizar en todos los repositorios de entidades.

Cada escritura (save/delete) es una unidad de trabajo completa: hace commit
antes de devolver el control.
"""

from typing import TypeVar, Generic, List, Optional, Type
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
import logging

from core.exceptions import (
    NotFoundException,
    DuplicateException,
    StoreUnavailableException,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')

# SQLite, PostgreSQL (23505) y MySQL (1062) respectivamente
_UNIQUE_VIOLATION_MARKERS = ("unique constraint", "duplicate key", "duplicate entry")


def is_unique_violation(error: IntegrityError) -> bool:
    """Indica si el IntegrityError proviene de una restricción única."""
    if getattr(error.orig, "pgcode", None) == "23505":
        return True
    message = str(error.orig).lower()
    return any(marker in message for marker in _UNIQUE_VIOLATION_MARKERS)


class BaseRepository(Generic[T]):
    """
    Repositorio genérico proporciona operaciones CRUD estándar

    Esta clase debe ser heredada por repositorios de entidades específicos.
    """

    def __init__(self, db: Session, model_class: Type[T], resource_name: Optional[str] = None):
        """
        Inicializa el repositorio.

        Args:
            db: Sesión SQLAlchemy
            model_class: Clase del modelo ORM para este repositorio
            resource_name: Nombre legible del recurso para mensajes de error
        """
        self.db = db
        self.model_class = model_class
        self.resource_name = resource_name or model_class.__name__

    def _store_error(self, action: str, error: SQLAlchemyError) -> StoreUnavailableException:
        """Registra el error, limpia la sesión y construye la excepción a propagar."""
        logger.error(f"Error al {action} {self.resource_name}: {error}")
        self.db.rollback()
        return StoreUnavailableException(f"Error al {action} {self.resource_name}")

    def find_by_id(self, id: int) -> Optional[T]:
        """
        Obtiene una entidad por su ID.

        Args:
            id: ID de la entidad

        Returns:
            La entidad o None si no existe
        """
        try:
            return self.db.get(self.model_class, id)
        except SQLAlchemyError as e:
            raise self._store_error("obtener", e) from e

    def get_by_id(self, id: int) -> T:
        """
        Obtiene una entidad por su ID o lanza una excepción si no se encuentra.

        Raises:
            NotFoundException: Si la entidad no existe
        """
        entity = self.find_by_id(id)
        if entity is None:
            raise NotFoundException(
                resource=self.resource_name,
                identifier=str(id)
            )
        return entity

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[T]:
        """
        Obtiene las entidades ordenadas por id ascendente.

        Args:
            skip: Número de registros a saltar
            limit: Número máximo de registros a devolver (None = todos)

        Returns:
            Lista de entidades
        """
        try:
            query = self.db.query(self.model_class).order_by(self.model_class.id)
            if skip:
                query = query.offset(skip)
            if limit is not None:
                query = query.limit(limit)
            return query.all()
        except SQLAlchemyError as e:
            raise self._store_error("listar", e) from e

    def count(self, **filters) -> int:
        """
        Cuenta las entidades que coinciden con los filtros.

        Args:
            **filters: Filtros de igualdad como argumentos con nombre

        Returns:
            Cantidad de entidades
        """
        try:
            query = self.db.query(self.model_class)

            for field, value in filters.items():
                if hasattr(self.model_class, field) and value is not None:
                    query = query.filter(getattr(self.model_class, field) == value)

            return query.count()
        except SQLAlchemyError as e:
            raise self._store_error("contar", e) from e

    def save(self, entity: T) -> T:
        """
        Inserta la entidad si no tiene id, o actualiza el registro existente.

        Args:
            entity: La entidad a guardar

        Returns:
            La entidad guardada con el id poblado

        Raises:
            NotFoundException: Si se intenta actualizar un id inexistente
            DuplicateException: Si se viola una restricción única
            StoreUnavailableException: Si falla el acceso a la base de datos
        """
        entity_id = getattr(entity, "id", None)
        if entity_id is not None:
            self.get_by_id(entity_id)

        try:
            if entity_id is None:
                self.db.add(entity)
            else:
                entity = self.db.merge(entity)
            self.db.commit()
            self.db.refresh(entity)
            return entity
        except IntegrityError as e:
            if not is_unique_violation(e):
                raise self._store_error("guardar", e) from e
            logger.warning(f"Restricción única violada al guardar {self.resource_name}: {e.orig}")
            self.db.rollback()
            raise DuplicateException(resource=self.resource_name) from e
        except SQLAlchemyError as e:
            raise self._store_error("guardar", e) from e

    def delete(self, id: int) -> None:
        """
        Elimina definitivamente una entidad.

        Args:
            id: ID de la entidad a eliminar

        Raises:
            NotFoundException: Si la entidad no existe
        """
        entity = self.get_by_id(id)
        try:
            self.db.delete(entity)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._store_error("eliminar", e) from e
