"""
Utilidades para manejo de fechas y zonas horarias.

Este módulo proporciona funciones para trabajar con fechas
en la zona horaria configurada de la aplicación.
"""
from datetime import datetime
from zoneinfo import ZoneInfo
from config import settings


def get_local_timezone() -> ZoneInfo:
    """
    Obtiene la zona horaria configurada.

    Returns:
        ZoneInfo: Zona horaria de la aplicación.
    """
    return ZoneInfo(settings.timezone)


def get_local_now() -> datetime:
    """
    Obtiene la fecha y hora actual en la zona horaria local configurada.

    Returns:
        datetime: Fecha y hora actual con zona horaria.
    """
    return datetime.now(get_local_timezone())


def get_store_now() -> datetime:
    """
    Hora local sin tzinfo, tal como se guarda en las columnas DateTime.

    Returns:
        datetime: Fecha y hora actual naive.
    """
    return get_local_now().replace(tzinfo=None)
