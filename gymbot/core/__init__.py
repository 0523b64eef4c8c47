"""
Core utilities shared across the GYMBot API.

This package hosts configuration (env vars, storage path, CORS origins) and
logging setup. Routers and services depend on these primitives instead of
reading the environment themselves.
"""

from .config import Settings, get_settings
from .log import configure_logging

__all__ = ["Settings", "get_settings", "configure_logging"]
