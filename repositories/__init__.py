"""
Capa de repositorio para el acceso a datos.
Este paquete contiene clases de repositorio que gestionan todas las operaciones de la base de datos.
Los repositorios proporcionan una abstracción sobre el ORM y no deben contener
lógica de negocio.

"""

from .base_repository import BaseRepository
from .interfaces import IUserRepository
from .user_repository import UserRepository
from .memory_user_repository import InMemoryUserRepository
from .audit_repository import AuditRepository

__all__ = [
    "BaseRepository",
    "IUserRepository",
    "UserRepository",
    "InMemoryUserRepository",
    "AuditRepository",
]
