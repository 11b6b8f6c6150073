"""App constants."""

from .constants import (
    APP_NAME,
    APP_ORG,
    TEXT_FILE_FILTER,
    TEXT_SUFFIX,
    TITLE_PREFIX,
    UNTITLED,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "TITLE_PREFIX",
    "UNTITLED",
    "TEXT_SUFFIX",
    "TEXT_FILE_FILTER",
]
