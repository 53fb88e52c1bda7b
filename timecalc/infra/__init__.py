"""Infrastructure layer - Configuration and persistence"""

from .store import KeyValueStore, InMemoryKeyValueStore, JsonFileKeyValueStore
from .template_repository import TemplateRepository, TEMPLATE_STORAGE_KEY
from .config import Settings, get_settings, reload_settings

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "TemplateRepository",
    "TEMPLATE_STORAGE_KEY",
    "Settings",
    "get_settings",
    "reload_settings",
]
