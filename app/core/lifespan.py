"""
Gestión del ciclo de vida de la aplicación FastAPI.

Este módulo maneja los eventos de startup y shutdown de la aplicación:
configuración de logging, creación de repositorios y del cliente de
geocodificación, y su cierre ordenado.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import get_environment_info, get_settings
from app.core.logging_config import setup_logging
from app.db.geocoding_client import GeocodingClient
from app.db.memory import OrderRepository, ProductRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gestión del ciclo de vida de la aplicación.
    Maneja eventos de startup y shutdown de manera ordenada.

    Args:
        app: Instancia de FastAPI
    """
    settings = get_settings()

    # === STARTUP ===
    startup_configure_logging()
    logger.info(f"🚀 Iniciando {settings.APP_NAME} v{settings.APP_VERSION}...")
    logger.debug(f"Entorno: {get_environment_info()}")

    try:
        await startup_initialize_repositories(app)
        await startup_initialize_geocoding_client(app)
        logger.info("🎉 Aplicación iniciada correctamente")
    except Exception as e:
        logger.error(f"❌ Error durante el startup: {e}")
        await shutdown_close_geocoding_client(app)
        raise

    # === YIELD (aplicación corriendo) ===
    yield

    # === SHUTDOWN ===
    logger.info(f"🛑 Cerrando {settings.APP_NAME}...")
    await shutdown_close_geocoding_client(app)
    logger.info("👋 Aplicación cerrada correctamente")


# === FUNCIONES DE STARTUP ===


def startup_configure_logging() -> None:
    """Configura el sistema de logging."""
    setup_logging()
    logger.info("✅ Sistema de logging configurado")


async def startup_initialize_repositories(app: FastAPI) -> None:
    """
    Crea los repositorios en memoria y los publica en app.state.

    El catálogo se carga desde PRODUCT_CATALOG_PATH si está configurado.
    """
    settings = get_settings()

    if settings.PRODUCT_CATALOG_PATH:
        product_repo = ProductRepository.from_json_file(settings.PRODUCT_CATALOG_PATH)
    else:
        product_repo = ProductRepository()

    app.state.product_repository = product_repo
    app.state.order_repository = OrderRepository()

    logger.info(f"✅ Repositorios inicializados - Catálogo: {await product_repo.count()} productos")


async def startup_initialize_geocoding_client(app: FastAPI) -> None:
    """Abre la sesión HTTP compartida con el servicio de geocodificación."""
    client = GeocodingClient(base_url=get_settings().GEOCODING_API_URL)
    await client.initialize()
    app.state.geocoding_client = client
    logger.info(f"✅ Cliente de geocodificación listo: {client.base_url}")


# === FUNCIONES DE SHUTDOWN ===


async def shutdown_close_geocoding_client(app: FastAPI) -> None:
    """Cierra la sesión HTTP del geocodificador si existe."""
    client = getattr(app.state, "geocoding_client", None)
    if client is not None:
        await client.close()
        app.state.geocoding_client = None
        logger.info("✅ Cliente de geocodificación cerrado")
