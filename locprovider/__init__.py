"""Localization provider package.

Exposes the runtime `LocalizationProvider`, the design-time stand-ins and
the resource bundles it reads from. The Qt adapter lives in
`locprovider.qt_binding` so the core can be used without PySide6 loaded.
"""

from .abstractions import (
    DesignTimeProviderProtocol,
    LocalizationProviderProtocol,
    ResourceBundle,
)
from .culture import detect_system_culture, parse_culture
from .design_time import DesignTimeLocalizationProvider, DesignTimeWindowContext
from .errors import BundleNotFoundError, LocalizationError, ResourceNotFoundError
from .provider import MISSING_KEY_TEMPLATE, LocalizationProvider
from .resource_bundle import DictResourceBundle, JsonResourceBundle

__all__ = [
    "BundleNotFoundError",
    "DesignTimeLocalizationProvider",
    "DesignTimeProviderProtocol",
    "DesignTimeWindowContext",
    "DictResourceBundle",
    "JsonResourceBundle",
    "LocalizationError",
    "LocalizationProvider",
    "LocalizationProviderProtocol",
    "MISSING_KEY_TEMPLATE",
    "ResourceBundle",
    "ResourceNotFoundError",
    "detect_system_culture",
    "parse_culture",
]
