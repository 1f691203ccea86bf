"""Core: config, lifespan, rate limiting, and exception handlers."""

from app.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
