"""Exceptions raised by the localization provider."""

from __future__ import annotations

from typing import Optional


class LocalizationError(Exception):
    """Base class for every error raised by ``locprovider``."""


class ResourceNotFoundError(LocalizationError, KeyError):
    """An object or stream resource is missing for the active culture."""

    def __init__(self, key: str, culture: Optional[str] = None):
        self.key = key
        self.culture = culture
        if culture:
            message = f"Key '{key}' not found in resources for culture '{culture}'."
        else:
            message = f"Key '{key}' not found in resources."
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class BundleNotFoundError(LocalizationError, LookupError):
    """A resource bundle name could not be resolved."""

    def __init__(self, name: str, reason: Optional[str] = None):
        self.name = name
        message = f"Resource bundle '{name}' could not be located"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
