"""
Modelos comunes de respuesta para la API.

Estos modelos proporcionan respuestas consistentes y estandarizadas
para todos los endpoints de la API
"""
from typing import Optional, List, Any
from pydantic import BaseModel, Field
from datetime import datetime, timezone

from core.pagination import PaginationMeta


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DeleteResponse(BaseModel):
    """Respuesta estándar para operaciones de eliminación."""
    success: bool = Field(True, description="Indica si la eliminación fue exitosa")
    message: str = Field(..., description="Mensaje descriptivo")
    deleted_id: int = Field(..., description="ID del registro eliminado")
    timestamp: datetime = Field(default_factory=_utcnow)


class PaginatedResponse(BaseModel):
    """Respuesta paginada (solo para documentar el esquema en OpenAPI)."""
    success: bool = Field(True, description="Indica si la operación fue exitosa")
    data: List[Any] = Field(..., description="Lista de items de la página actual")
    pagination: PaginationMeta = Field(..., description="Metadata de paginación")
    timestamp: datetime = Field(default_factory=_utcnow)


class HealthCheckResponse(BaseModel):
    """Respuesta del health check."""
    status: str = Field(..., description="Estado general (healthy/unhealthy)")
    service: str = Field(..., description="Nombre del servicio")
    version: str = Field(..., description="Versión de la API")
    database: str = Field(..., description="Estado de la base de datos")
    environment: str = Field(..., description="Entorno (production/development)")
    timestamp: datetime = Field(default_factory=_utcnow)


def create_delete_response(message: str, deleted_id: int) -> dict:
    """Helper para crear respuestas de eliminación."""
    return DeleteResponse(message=message, deleted_id=deleted_id).model_dump()
