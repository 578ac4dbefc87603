"""Environment-driven configuration: `from app.config import settings`."""

from app.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
