"""
Servicio base con operaciones de lógica de negocio comunes.
Esta clase proporciona una base para las clases de servicio que implementan
la lógica de negocio y coordinan las operaciones del repositorio.
"""

from typing import TypeVar, Generic, List, Callable, Any
import logging

from core.exceptions import ValidationException

logger = logging.getLogger(__name__)

R = TypeVar('R')  # Repository


class BaseService(Generic[R]):
    """
    Servicio base que proporciona operaciones lógicas de negocio comunes.
    Esta clase debe ser heredada por servicios de operaciones específicas.
    """

    def __init__(self, repository: R):
        """
        Inicializa el servicio.

        Args:
            repository: The repository instance for data access
        """
        self.repository = repository

    def raise_if_invalid(self, errors: List[str], message: str = "Datos inválidos") -> None:
        """
        Lanza ValidationException con todas las reglas incumplidas.

        Raises:
            ValidationException: Si la lista de errores no está vacía
        """
        if errors:
            raise ValidationException(message=message, errors=errors)

    def run_side_effect(self, description: str, func: Callable[..., Any], *args, **kwargs) -> bool:
        """
        Ejecuta un efecto secundario posterior a la persistencia.

        Los fallos se registran y no se propagan: la escritura ya confirmada
        no se deshace.

        Returns:
            True si el efecto se ejecutó sin errores
        """
        try:
            func(*args, **kwargs)
            return True
        except Exception as e:
            logger.warning(f"Efecto secundario '{description}' falló: {e}", exc_info=True)
            return False
