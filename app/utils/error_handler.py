"""
Sistema de manejo de errores personalizado.

Este módulo define todas las excepciones personalizadas de la aplicación
y proporciona utilidades para manejo consistente de errores.
"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ErrorCode(Enum):
    """
    Códigos de error estandardizados para la aplicación.
    """

    # Errores generales
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Errores de validación de pedidos
    INCOMPLETE_CUSTOMER = "INCOMPLETE_CUSTOMER"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    UNSUPPORTED_COUNTRY = "UNSUPPORTED_COUNTRY"
    INCOMPLETE_ADDRESS = "INCOMPLETE_ADDRESS"
    ADDRESS_NOT_FOUND = "ADDRESS_NOT_FOUND"

    # Errores de servicios externos
    GEOCODING_API_ERROR = "GEOCODING_API_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"


class ErrorSeverity(Enum):
    """
    Niveles de severidad para errores.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AppException(Exception):
    """
    Excepción base para todas las excepciones personalizadas de la aplicación.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
    ):
        """
        Inicializa la excepción.

        Args:
            message: Mensaje de error
            error_code: Código de error estandardizado
            details: Información adicional del error
            status_code: Código HTTP asociado
            severity: Severidad del error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        self.severity = severity
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convierte la excepción a diccionario.

        Returns:
            Dict: Representación de la excepción
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "details": self.details,
            "status_code": self.status_code,
            "severity": self.severity.value,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        """String representation del error."""
        return f"{self.error_code.value}: {self.message}"


class ValidationException(AppException):
    """
    Excepción para errores de validación de datos.
    """

    def __init__(
        self,
        message: str,
        field: str,
        invalid_value: Any = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        **kwargs,
    ):
        """
        Inicializa la excepción de validación.

        Args:
            message: Mensaje de error
            field: Campo que falló la validación
            invalid_value: Valor que causó el error
            error_code: Código de error específico de la regla
            **kwargs: Argumentos adicionales para AppException
        """
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=422,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )
        self.field = field
        self.invalid_value = invalid_value

        self.details.update(
            {
                "field": field,
                "invalid_value": str(invalid_value) if invalid_value is not None else None,
            }
        )


class IncompleteCustomerException(ValidationException):
    """El cliente no tiene nombre o apellido."""

    def __init__(self, **kwargs):
        super().__init__(
            message="customer name not completed",
            field="customer",
            error_code=ErrorCode.INCOMPLETE_CUSTOMER,
            **kwargs,
        )


class ProductNotFoundException(ValidationException):
    """Una línea del pedido referencia un producto inexistente."""

    def __init__(self, product_id: str, **kwargs):
        super().__init__(
            message=f"product ({product_id}) not found",
            field="line_items.product_id",
            invalid_value=product_id,
            error_code=ErrorCode.PRODUCT_NOT_FOUND,
            **kwargs,
        )
        self.product_id = product_id


class UnsupportedCountryException(ValidationException):
    """El destino está fuera del país soportado."""

    def __init__(self, country: str, **kwargs):
        super().__init__(
            message="send in France only",
            field="shipping_address.country",
            invalid_value=country,
            error_code=ErrorCode.UNSUPPORTED_COUNTRY,
            **kwargs,
        )


class IncompleteAddressException(ValidationException):
    """Falta calle, ciudad o código postal."""

    def __init__(self, **kwargs):
        super().__init__(
            message="address not complete",
            field="shipping_address",
            error_code=ErrorCode.INCOMPLETE_ADDRESS,
            **kwargs,
        )


class AddressNotFoundException(ValidationException):
    """El geocodificador no devolvió ningún candidato."""

    def __init__(self, query: Optional[str] = None, **kwargs):
        super().__init__(
            message="address not found",
            field="shipping_address",
            invalid_value=query,
            error_code=ErrorCode.ADDRESS_NOT_FOUND,
            **kwargs,
        )


class AddressLookupException(AppException):
    """
    Excepción para fallos de transporte con el servicio de geocodificación.

    Cubre errores de conexión, respuestas no 2xx y cuerpos que no se
    pueden interpretar como colección de features.
    """

    def __init__(
        self,
        message: str,
        api_response_code: Optional[int] = None,
        endpoint: Optional[str] = None,
        **kwargs,
    ):
        """
        Inicializa la excepción de geocodificación.

        Args:
            message: Mensaje de error
            api_response_code: Código HTTP devuelto por el geocodificador
            endpoint: Endpoint consultado
            **kwargs: Argumentos adicionales para AppException
        """
        super().__init__(
            message=message,
            error_code=ErrorCode.GEOCODING_API_ERROR,
            status_code=502,
            severity=ErrorSeverity.HIGH,
            **kwargs,
        )
        self.api_response_code = api_response_code
        self.endpoint = endpoint

        self.details.update({"api_response_code": api_response_code, "endpoint": endpoint})


# === FUNCIONES DE UTILIDAD ===


def log_error(
    exception: Exception,
    context: Optional[Dict[str, Any]] = None,
    level: int = logging.ERROR,
) -> None:
    """
    Loggea un error de manera consistente.

    Args:
        exception: Excepción a loggear
        context: Contexto adicional
        level: Nivel de logging
    """
    context = context or {}

    log_data = {
        "exception_type": type(exception).__name__,
        "exception_message": str(exception),
        **context,
    }

    if isinstance(exception, AppException):
        message = f"{exception.error_code.value}: {exception.message}"
        log_data.update(
            {
                "error_code": exception.error_code.value,
                "severity": exception.severity.value,
            }
        )
    else:
        message = f"Unhandled exception: {type(exception).__name__}: {str(exception)}"

    logger.log(level, message, extra=log_data)
