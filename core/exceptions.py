"""
Excepciones personalizadas para la aplicación.

Estas excepciones proporcionan una forma estructurada de manejar errores de lógica de negocio
y mapearlos a códigos de estado HTTP apropiados en la capa de API.
"""

from typing import Optional, Any, List


class AppException(Exception):
    """Excepción base para todos los errores de la aplicación."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class BusinessException(AppException):
    """Excepción para errores de lógica de negocio."""

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=400, details=details)


class NotFoundException(AppException):
    """Excepción cuando un recurso no se encuentra."""

    def __init__(
        self,
        resource: str,
        identifier: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        message = f"{resource} no encontrado"
        if identifier:
            message += f": {identifier}"
        super().__init__(message=message, status_code=404, details=details)


class ValidationException(AppException):
    """Excepción para violaciones de reglas de negocio.

    `errors` lista todas las reglas incumplidas; se expone en details["errors"].
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        errors: Optional[List[str]] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        if field:
            details["field"] = field
        details["errors"] = list(errors) if errors else [message]
        super().__init__(message=message, status_code=422, details=details)

    @property
    def errors(self) -> List[str]:
        return self.details["errors"]


class DuplicateException(AppException):
    """Excepción cuando se intenta crear un recurso duplicado."""

    def __init__(
        self,
        resource: str,
        field: Optional[str] = None,
        value: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        message = f"{resource} duplicado (ya existe)"
        if field and value:
            message += f": {field}='{value}'"
        super().__init__(message=message, status_code=409, details=details)


class StoreUnavailableException(AppException):
    """Excepción cuando la base de datos no responde o una escritura falla."""

    def __init__(
        self,
        message: str = "Base de datos no disponible",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=503, details=details)
