from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
import uvicorn
import logging

from config import settings, configure_logging
from routes import users_router
from models.common import HealthCheckResponse
from database import db

logger = logging.getLogger(__name__)

# Configurar logging una sola vez al inicio
configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Maneja el ciclo de vida de la aplicación."""
    # Startup
    try:
        db.create_tables()
    except SQLAlchemyError as e:
        logger.warning(f"No se pudieron crear tablas en la base de datos: {e}")
    yield
    # Shutdown
    db.engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Gestión de usuarios organizada en capas Repository / Service / DTO / Controller.",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    debug=settings.debug_mode
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Endpoint raíz con información de la API."""
    return {
        "message": settings.app_name,
        "version": settings.app_version,
        "status": "active",
        "environment": "production" if settings.is_production else "development",
        "docs": "/docs",
        "redoc": "/redoc"
    }


app.include_router(users_router)


@app.get("/health", response_model=HealthCheckResponse)
def health_check():
    """Health check endpoint con verificación de base de datos."""
    try:
        with db.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "connected"
    except SQLAlchemyError as e:
        logger.error(f"Health check: Error de conexión a BD ({db.get_database_url()}): {e}")
        db_status = "disconnected"

    return HealthCheckResponse(
        status="healthy" if db_status == "connected" else "unhealthy",
        service=settings.app_name,
        version=settings.app_version,
        database=db_status,
        environment="production" if settings.is_production else "development",
    )


if __name__ == "__main__":
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower()
    )
