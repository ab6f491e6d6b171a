"""módulo de base de datos con manejo de errores y configuración centralizada."""
from typing import Generator
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from .models import Base, UserORM, AuditLogORM

from config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str):
    """Crea el engine con opciones adecuadas al backend de la URL.

    SQLite necesita check_same_thread=False porque FastAPI ejecuta las
    dependencias síncronas en un threadpool; la base en memoria además
    debe compartir una única conexión (StaticPool).
    """
    options = {
        "echo": settings.debug_mode,
        "future": True,
        "pool_pre_ping": True,  #verifica conexiones antes de usarlas
    }
    if database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            options["poolclass"] = StaticPool
    else:
        options["pool_recycle"] = 3600  #recicla conexiones cada hora
    return create_engine(database_url, **options)


#engine / session con configuración centralizada
engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db() -> Generator[Session, None, None]:
    """dependencia de FastAPI que provee una sesión por request.

    Yields:
        Session: Sesión de SQLAlchemy

    Nota:
        - Hace rollback automático si hay excepciones SQLAlchemy
        - Cierra la sesión al terminar el request
    """
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Error de base de datos en sesión: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def create_tables() -> None:
    """Crear tablas ORM en la base de datos.

    Raises:
        SQLAlchemyError: Si hay error al crear las tablas
    """
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Tablas de base de datos creadas/verificadas exitosamente")
    except SQLAlchemyError as e:
        logger.error(f"Error al crear tablas: {e}", exc_info=True)
        raise


def get_database_url() -> str:
    """Obtiene la URL de la base de datos (sin credenciales sensibles)."""
    return engine.url.render_as_string(hide_password=True)


__all__ = [
    "Base",
    "UserORM",
    "AuditLogORM",
    "engine",
    "SessionLocal",
    "build_engine",
    "get_db",
    "create_tables",
    "get_database_url",
]
