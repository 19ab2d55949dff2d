"""
Manejadores de excepciones centralizados para la aplicación FastAPI.

Este módulo define los manejadores de excepciones personalizados y globales,
proporcionando respuestas consistentes y logging apropiado para cada tipo de error.
"""

import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.core.logging_config import request_id_var
from app.utils.error_handler import AddressLookupException, AppException, ValidationException

logger = logging.getLogger(__name__)


def _request_id(request: Request) -> Optional[str]:
    return request_id_var.get() or request.headers.get("X-Request-ID")


def _error_body(request: Request, error_type: str, message: Any, **fields) -> Dict[str, Any]:
    return {
        "error": True,
        "error_type": error_type,
        "message": message,
        **fields,
        "path": str(request.url.path),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "request_id": _request_id(request),
    }


async def validation_exception_handler(request: Request, exc: ValidationException) -> JSONResponse:
    """
    Manejador para rechazos de negocio de un pedido.

    Args:
        request: Request de FastAPI
        exc: Excepción de validación

    Returns:
        JSONResponse: Respuesta JSON con el motivo del rechazo
    """
    logger.warning(
        f"Validation Exception: {exc.message} - "
        f"Code: {exc.error_code.value} - "
        f"Field: {exc.field} - "
        f"URL: {request.url}"
    )

    settings = get_settings()
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(
            request,
            "validation_error",
            exc.message,
            error_code=exc.error_code.value,
            field=exc.field,
            invalid_value=exc.invalid_value if settings.DEBUG else None,
        ),
    )


async def address_lookup_exception_handler(request: Request, exc: AddressLookupException) -> JSONResponse:
    """
    Manejador específico para fallos del servicio de geocodificación.

    Args:
        request: Request de FastAPI
        exc: Excepción de transporte del geocodificador

    Returns:
        JSONResponse: Respuesta JSON 502
    """
    logger.error(
        f"Geocoding Exception: {exc.message} - "
        f"API Code: {exc.details.get('api_response_code')} - "
        f"Endpoint: {exc.details.get('endpoint')} - "
        f"URL: {request.url}"
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(
            request,
            "geocoding_api_error",
            exc.message,
            error_code=exc.error_code.value,
            geocoding_response_code=exc.details.get("api_response_code"),
        ),
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Manejador para el resto de excepciones de la aplicación.
    """
    logger.error(
        f"App Exception: {exc.message} - "
        f"Code: {exc.error_code.value} - "
        f"URL: {request.url} - "
        f"Details: {exc.details}"
    )

    settings = get_settings()
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(
            request,
            "application_error",
            exc.message,
            error_code=exc.error_code.value,
            details=exc.to_dict() if settings.DEBUG else None,
        ),
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Manejador para bodies que no respetan el esquema de la API.
    """
    logger.warning(f"Request Validation Error: {exc.errors()} - URL: {request.url}")

    return JSONResponse(
        status_code=422,
        content=_error_body(
            request,
            "request_validation_error",
            "Request body does not match the expected schema",
            errors=[{"loc": list(err.get("loc", [])), "msg": err.get("msg")} for err in exc.errors()],
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Manejador para HTTPException de FastAPI y Starlette.
    """
    logger.warning(f"HTTP Exception: {exc.status_code} - {exc.detail} - URL: {request.url}")

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, "http_error", exc.detail, status_code=exc.status_code),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Manejador global para excepciones no capturadas.

    Args:
        request: Request de FastAPI
        exc: Excepción no manejada

    Returns:
        JSONResponse: Respuesta JSON de error interno
    """
    logger.error(
        f"Unhandled Exception: {str(exc)} - "
        f"Type: {type(exc).__name__} - "
        f"URL: {request.url} - "
        f"Traceback: {''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))}"
    )

    # Sin exponer detalles internos fuera de DEBUG
    error_message = "Internal server error occurred"
    if get_settings().DEBUG:
        error_message = f"{type(exc).__name__}: {str(exc)}"

    return JSONResponse(
        status_code=500,
        content=_error_body(request, "internal_server_error", error_message),
    )


def configure_exception_handlers(app: FastAPI) -> None:
    """
    Registra todos los manejadores de excepciones en la aplicación.
    Los más específicos primero.

    Args:
        app: Instancia de FastAPI
    """
    app.add_exception_handler(ValidationException, validation_exception_handler)
    app.add_exception_handler(AddressLookupException, address_lookup_exception_handler)
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("✅ Manejadores de excepciones configurados")
