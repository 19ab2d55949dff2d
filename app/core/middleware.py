"""
Configuración de Middleware para la aplicación FastAPI.

Este módulo centraliza la configuración de middleware:
- CORS
- Request logging con identificador de request
"""

import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.core.exception_handlers import global_exception_handler
from app.core.logging_config import request_id_var

logger = logging.getLogger(__name__)


def configure_cors_middleware(app: FastAPI) -> None:
    """
    Configura middleware CORS para permitir requests cross-origin.

    Args:
        app: Instancia de FastAPI
    """
    allowed_origins = get_settings().ALLOWED_ORIGINS or ["*"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Accept", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Process-Time", "X-Request-ID"],
    )

    logger.info(f"✅ CORS configurado - Origins permitidos: {allowed_origins}")


def configure_request_logging_middleware(app: FastAPI) -> None:
    """
    Configura middleware para logging de todas las requests/responses.

    Args:
        app: Instancia de FastAPI
    """

    @app.middleware("http")
    async def log_requests_middleware(request: Request, call_next):
        """
        Middleware que loggea cada request/response y propaga el X-Request-ID.
        """
        request_id = request.headers.get("X-Request-ID") or generate_request_id()
        token = request_id_var.set(request_id)
        start_time = time.time()

        logger.info(f"📨 [{request_id}] {request.method} {request.url.path} - Client: {get_client_ip(request)}")

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"❌ [{request_id}] {request.method} {request.url.path} - Error: {str(e)} - Time: {process_time:.3f}s"
            )
            # Se responde aquí para que el 500 conserve el request_id
            response = await global_exception_handler(request, e)
        finally:
            request_id_var.reset(token)

        process_time = time.time() - start_time
        logger.info(
            f"{get_status_emoji(response.status_code)} [{request_id}] {request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.3f}s"
        )

        response.headers["X-Process-Time"] = f"{process_time:.3f}"
        response.headers["X-Request-ID"] = request_id

        threshold = get_settings().SLOW_REQUEST_THRESHOLD
        if process_time > threshold:
            logger.warning(f"🐌 [{request_id}] Slow request detected: {process_time:.3f}s > {threshold}s")

        return response


def configure_all_middleware(app: FastAPI) -> None:
    """
    Configura todos los middlewares de la aplicación.
    Se ejecutan en orden inverso al que se agregan.

    Args:
        app: Instancia de FastAPI
    """
    configure_request_logging_middleware(app)
    configure_cors_middleware(app)


def generate_request_id() -> str:
    """
    Genera un ID único para cada request.

    Returns:
        str: ID único de 8 caracteres
    """
    return str(uuid.uuid4())[:8]


def get_client_ip(request: Request) -> str:
    """
    Obtiene la IP real del cliente considerando proxies.

    Args:
        request: Request de FastAPI

    Returns:
        str: IP del cliente
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host

    return "unknown"


def get_status_emoji(status_code: int) -> str:
    """Emoji según el código de estado HTTP."""
    if 200 <= status_code < 300:
        return "✅"
    elif 300 <= status_code < 400:
        return "↩️"
    elif 400 <= status_code < 500:
        return "⚠️"
    elif 500 <= status_code < 600:
        return "❌"
    else:
        return "📤"
