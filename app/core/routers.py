"""
Configuración centralizada de routers para la aplicación FastAPI.

Este módulo se encarga de registrar todos los routers de la API,
configurar endpoints base y organizar las rutas de manera estructurada.
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.v1.endpoints.orders import router as orders_router
from app.api.v1.endpoints.products import router as products_router
from app.core.config import get_settings
from app.version import version_info

logger = logging.getLogger(__name__)

API_V1_PREFIX = "/api/v1"


def create_root_endpoints(app: FastAPI) -> None:
    """
    Crea endpoints raíz de la aplicación.

    Args:
        app: Instancia de FastAPI
    """
    settings = get_settings()

    @app.get("/", tags=["Root"], summary="API Info")
    async def root():
        """
        Endpoint raíz que proporciona información básica de la API.

        Returns:
            Dict con información de la API
        """
        return {
            "message": settings.APP_NAME,
            "description": "Validación y registro de pedidos con envío a Francia",
            "version": settings.APP_VERSION,
            "status": "running",
            "documentation": "/docs" if (settings.DEBUG or settings.ENABLE_DOCS) else "disabled",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "endpoints": {
                "health": "/health",
                "version": "/version",
                "api_v1": API_V1_PREFIX,
                "orders": f"{API_V1_PREFIX}/orders",
                "products": f"{API_V1_PREFIX}/products",
            },
        }

    @app.get("/ping", tags=["Root"], summary="Simple Ping")
    async def ping():
        """
        Endpoint simple para verificar que la API responde.

        Returns:
            Dict con pong y timestamp
        """
        return {"message": "pong", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.get("/version", tags=["Root"], summary="Version Info")
    async def version():
        """Versión del servicio y del intérprete."""
        return version_info()


def create_health_endpoints(app: FastAPI) -> None:
    """
    Crea el endpoint de health check.

    Args:
        app: Instancia de FastAPI
    """
    settings = get_settings()

    @app.get("/health", tags=["Health"], summary="Health Check")
    async def health_check(request: Request):
        """
        Verifica que los componentes creados en el startup estén disponibles.

        Returns:
            JSONResponse 200 si todo está listo, 503 en caso contrario
        """
        state = request.app.state
        client = getattr(state, "geocoding_client", None)

        services = {
            "order_repository": "healthy" if getattr(state, "order_repository", None) else "unavailable",
            "product_repository": "healthy" if getattr(state, "product_repository", None) else "unavailable",
            "geocoding_client": "healthy" if client is not None and client.session is not None else "unavailable",
        }
        overall = all(value == "healthy" for value in services.values())

        return JSONResponse(
            status_code=200 if overall else 503,
            content={
                "status": "healthy" if overall else "unhealthy",
                "version": settings.APP_VERSION,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "services": services,
                "environment": settings.ENVIRONMENT,
                "debug": settings.DEBUG,
            },
        )


def configure_api_routers(app: FastAPI) -> None:
    """
    Registra los routers de la API v1.

    Args:
        app: Instancia de FastAPI
    """
    app.include_router(orders_router, prefix=API_V1_PREFIX)
    app.include_router(products_router, prefix=API_V1_PREFIX)


def configure_all_routers(app: FastAPI) -> None:
    """
    Configura todos los routers y endpoints de la aplicación.

    Args:
        app: Instancia de FastAPI
    """
    create_root_endpoints(app)
    create_health_endpoints(app)
    configure_api_routers(app)

    logger.info("✅ Routers configurados")
