"""
Modelos de usuario: DTOs entre capas y modelos de entrada/salida HTTP.

Los DTOs solo comprueban que la estructura esté completa (campos requeridos
presentes y de tipo texto); las reglas de negocio se validan en los servicios.
"""
from pydantic import BaseModel, ConfigDict, Field, StrictStr
from typing import Optional
from datetime import datetime


# ==================== DTOs ====================

class UserDTO(BaseModel):
    """Datos para crear un usuario. La contraseña viaja en texto plano hasta el hash."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: StrictStr
    email: StrictStr
    password: StrictStr


class UserUpdateDTO(BaseModel):
    """Datos para actualizar un usuario. Solo se aplican los campos enviados."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: Optional[StrictStr] = None
    email: Optional[StrictStr] = None
    password: Optional[StrictStr] = None


# ==================== HTTP ====================

class UserCreateRequest(BaseModel):
    name: str = Field(..., description="Nombre completo")
    email: str = Field(..., description="Correo electrónico (único)")
    password: str = Field(..., description="Contraseña en texto plano")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Alice",
                "email": "alice@example.com",
                "password": "secret123",
            }
        }
    )


class UserUpdateRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
