from .users import (
    UserDTO,
    UserUpdateDTO,
    UserCreateRequest,
    UserUpdateRequest,
    UserResponse,
)
from .common import (
    DeleteResponse,
    PaginatedResponse,
    HealthCheckResponse,
    create_delete_response,
)

__all__ = [
    # Usuarios
    "UserDTO", "UserUpdateDTO", "UserCreateRequest", "UserUpdateRequest", "UserResponse",
    # Common responses
    "DeleteResponse", "PaginatedResponse", "HealthCheckResponse", "create_delete_response",
]
