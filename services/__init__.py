"""
Capa de servicio para la lógica de negocio.
Este paquete contiene clases de servicio que implementan la lógica de negocio
y orquestan las operaciones entre repositorios. Cada servicio expone una
única operación pública, `execute`.
"""

from .base_service import BaseService
from .audit_service import AuditService
from .notification_service import NotificationService, LoggingNotificationService
from .create_user_service import CreateUserService
from .update_user_service import UpdateUserService
from .delete_user_service import DeleteUserService
from .user_query_service import GetUserService, FindUserByEmailService, ListUsersService

__all__ = [
    "BaseService",
    "AuditService",
    "NotificationService",
    "LoggingNotificationService",
    "CreateUserService",
    "UpdateUserService",
    "DeleteUserService",
    "GetUserService",
    "FindUserByEmailService",
    "ListUsersService",
]
