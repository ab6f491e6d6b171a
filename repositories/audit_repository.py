"""
Repositorio para los registros de auditoría.
"""

from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from repositories.base_repository import BaseRepository
from database.models import AuditLogORM
import logging

logger = logging.getLogger(__name__)


class AuditRepository(BaseRepository[AuditLogORM]):
    """Repositorio para la gestión de registros de auditoría."""

    def __init__(self, db: Session):
        super().__init__(db, AuditLogORM, resource_name="Registro de auditoría")

    def find_by_entity(self, entity_type: str, entity_id: str) -> List[AuditLogORM]:
        """
        Busca los registros de auditoría de una entidad, del más antiguo al más reciente.

        Args:
            entity_type: Tipo de entidad (p. ej. "user")
            entity_id: ID de la entidad como cadena

        Returns:
            Lista de registros de auditoría
        """
        try:
            return (
                self.db.query(AuditLogORM)
                .filter(
                    AuditLogORM.entity_type == entity_type,
                    AuditLogORM.entity_id == str(entity_id),
                )
                .order_by(AuditLogORM.id)
                .all()
            )
        except SQLAlchemyError as e:
            raise self._store_error("buscar auditoría de", e) from e
