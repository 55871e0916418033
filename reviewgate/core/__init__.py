"""Core app configuration, database and credential primitives."""

from reviewgate.core.config import get_settings, settings
from reviewgate.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
