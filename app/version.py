"""
Version information for the Order Validation Service.

Single source of truth: pyproject.toml
Runtime access via importlib.metadata with fallback.
"""

from __future__ import annotations

import os
import sys
from typing import Any

# Fallback version if package metadata unavailable (dev mode)
_FALLBACK_VERSION = "0.1.0"


def get_version() -> str:
    """Get the package version from metadata or fallback."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("order-validation-service")
    except PackageNotFoundError:
        return _FALLBACK_VERSION


VERSION = get_version()


def version_info() -> dict[str, Any]:
    """
    Get version information.

    Returns:
        dict with version, python_version and environment
    """
    return {
        "version": VERSION,
        "python_version": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        "build_number": os.environ.get("BUILD_NUMBER"),
        "environment": os.environ.get("ENVIRONMENT", "development"),
    }
