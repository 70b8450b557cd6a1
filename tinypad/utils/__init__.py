"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    SETTINGS_GEOMETRY,
    SETTINGS_LAST_DIR,
    STATUS_MSEC,
    TEXT_FILTER,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "SETTINGS_GEOMETRY",
    "SETTINGS_LAST_DIR",
    "TEXT_FILTER",
    "STATUS_MSEC",
]
