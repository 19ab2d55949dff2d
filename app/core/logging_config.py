"""
Configuración del sistema de logging.

Este módulo configura el logging de la aplicación con:
- Handler de consola (con colores en modo DEBUG)
- Archivos rotativos de log y de errores
- Logging estructurado en JSON para producción
- Registro de llamadas a APIs externas (geocodificación)
"""

import json
import logging
import logging.config
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from app.core.config import get_settings

# Identificador de la request en curso, asignado por el middleware HTTP
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

_STANDARD_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "taskName",
        "request_id",
    }
)


class ColoredFormatter(logging.Formatter):
    """
    Formatter personalizado que agrega colores a los logs en consola.
    """

    # Códigos de color ANSI
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Verde
        "WARNING": "\033[33m",  # Amarillo
        "ERROR": "\033[31m",  # Rojo
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record):
        formatted = super().format(record)

        # Solo en terminales
        if hasattr(sys.stderr, "isatty") and sys.stderr.isatty():
            color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
            reset = self.COLORS["RESET"]
            formatted = formatted.replace(record.levelname, f"{color}{record.levelname}{reset}")

        return formatted


class StructuredFormatter(logging.Formatter):
    """
    Formatter para logging estructurado en JSON.
    Útil para sistemas de monitoreo como ELK Stack.
    """

    def format(self, record):
        """
        Formatea el record como JSON estructurado.

        Args:
            record: LogRecord a formatear

        Returns:
            str: Mensaje en formato JSON
        """
        settings = get_settings()

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "app_name": settings.APP_NAME,
            "app_version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
        }

        request_id = getattr(record, "request_id", None)
        if request_id:
            log_entry["request_id"] = request_id

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        # Campos pasados con extra=
        extra_fields = {key: value for key, value in record.__dict__.items() if key not in _STANDARD_RECORD_ATTRS}
        if extra_fields:
            log_entry["extra"] = extra_fields

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class RequestContextFilter(logging.Filter):
    """
    Filtro que agrega el request_id actual a cada record.
    """

    def filter(self, record):
        record.request_id = request_id_var.get()
        return True


def setup_logging() -> None:
    """
    Configura el sistema de logging completo de la aplicación.
    """
    settings = get_settings()

    if settings.LOG_FILE_PATH:
        Path(settings.LOG_FILE_PATH).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(get_logging_configuration())

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL))

    request_filter = RequestContextFilter()
    for handler in root_logger.handlers:
        handler.addFilter(request_filter)

    configure_specific_loggers()

    logger = logging.getLogger(__name__)
    logger.info(f"Sistema de logging configurado - Nivel: {settings.LOG_LEVEL}")
    if settings.LOG_FILE_PATH:
        logger.info(f"Logs guardándose en: {settings.LOG_FILE_PATH}")


def _sibling_log_path(log_file_path: str, suffix: str, extension: Optional[str] = None) -> str:
    """Ruta junto al log principal, nunca igual a él."""
    path = Path(log_file_path)
    extension = extension or path.suffix or ".log"
    sibling = path.with_name(f"{path.stem}{suffix}{extension}")
    if sibling == path:
        sibling = path.with_name(f"{path.stem}{suffix}_structured{extension}")
    return str(sibling)


def get_logging_configuration() -> Dict[str, Any]:
    """
    Genera configuración completa de logging.

    Returns:
        Dict: Configuración para logging.config.dictConfig
    """
    settings = get_settings()

    config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": ("%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s"),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "colored": {
                "()": ColoredFormatter,
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {"()": StructuredFormatter},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.LOG_LEVEL,
                "formatter": "colored" if settings.DEBUG else "standard",
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            "uvicorn.access": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
            "uvicorn.error": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
        },
        "root": {"level": settings.LOG_LEVEL, "handlers": ["console"]},
    }

    if settings.LOG_FILE_PATH:
        max_bytes = settings.LOG_MAX_SIZE_MB * 1024 * 1024

        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": settings.LOG_LEVEL,
            "formatter": "detailed",
            "filename": settings.LOG_FILE_PATH,
            "maxBytes": max_bytes,
            "backupCount": settings.LOG_BACKUP_COUNT,
            "encoding": "utf-8",
        }

        config["handlers"]["error_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "ERROR",
            "formatter": "detailed",
            "filename": _sibling_log_path(settings.LOG_FILE_PATH, "_errors"),
            "maxBytes": max_bytes,
            "backupCount": settings.LOG_BACKUP_COUNT,
            "encoding": "utf-8",
        }

        if settings.is_production:
            config["handlers"]["json_file"] = {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "INFO",
                "formatter": "json",
                "filename": _sibling_log_path(settings.LOG_FILE_PATH, "", ".json"),
                "maxBytes": max_bytes,
                "backupCount": settings.LOG_BACKUP_COUNT,
                "encoding": "utf-8",
            }
            config["root"]["handlers"].append("json_file")

        config["root"]["handlers"].extend(["file", "error_file"])

    return config


def configure_specific_loggers() -> None:
    """
    Configura niveles de loggers de la aplicación y de librerías externas.
    """
    settings = get_settings()

    logging.getLogger("app.services").setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
    logging.getLogger("app.api").setLevel(logging.INFO)
    logging.getLogger("app.db").setLevel(logging.INFO)

    # Reducir verbosidad de librerías externas
    for logger_name in ["aiohttp.access", "aiohttp.client", "httpx", "httpcore", "uvicorn"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def log_api_call(method: str, url: str, status_code: int, duration: float, **kwargs):
    """
    Logger específico para llamadas a APIs externas.

    Args:
        method: Método HTTP
        url: URL de la API
        status_code: Código de respuesta
        duration: Duración en segundos
        **kwargs: Datos adicionales
    """
    logger = logging.getLogger("app.api.call")

    extra_data = {
        "method": method,
        "url": url,
        "status_code": status_code,
        "duration_ms": round(duration * 1000, 2),
        "api_timestamp": datetime.now(timezone.utc).isoformat(),
        **kwargs,
    }

    if 200 <= status_code < 300:
        level = logging.INFO
    elif 400 <= status_code < 500:
        level = logging.WARNING
    else:
        level = logging.ERROR

    logger.log(
        level,
        f"API call: {method} {url} -> {status_code} ({duration * 1000:.1f}ms)",
        extra=extra_data,
    )
