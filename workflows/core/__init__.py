"""Core configuration and shared constants."""

from workflows.core.config import Settings, get_settings
from workflows.core.constants import (
    DESCRIPTION_MAX_CHARS,
    DESCRIPTION_FRAGMENT_SEPARATOR,
    JSON_ERROR_CONTEXT_CHARS,
    INT_COLUMN_MIN,
    INT_COLUMN_MAX,
)

__all__ = [
    "Settings",
    "get_settings",
    "DESCRIPTION_MAX_CHARS",
    "DESCRIPTION_FRAGMENT_SEPARATOR",
    "JSON_ERROR_CONTEXT_CHARS",
    "INT_COLUMN_MIN",
    "INT_COLUMN_MAX",
]
