""" Utilidades principales y componentes compartidos para la aplicación.

Este paquete contiene:

- Excepciones personalizadas
- Hash de contraseñas
- Funciones auxiliares de paginación
"""

from .exceptions import (
    AppException,
    BusinessException,
    NotFoundException,
    ValidationException,
    DuplicateException,
    StoreUnavailableException,
)
from .security import (
    hash_password,
    verify_password,
)
from .pagination import (
    PaginationMeta,
    calculate_pagination_meta,
    create_paginated_response,
    calculate_skip,
)

__all__ = [
    # Excepciones
    "AppException",
    "BusinessException",
    "NotFoundException",
    "ValidationException",
    "DuplicateException",
    "StoreUnavailableException",
    # seguridad
    "hash_password",
    "verify_password",
    # paginacion
    "PaginationMeta",
    "calculate_pagination_meta",
    "create_paginated_response",
    "calculate_skip",
]
