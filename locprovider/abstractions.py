"""Contracts shared by bundles, providers and the design-time stub."""

from __future__ import annotations

from typing import Any, BinaryIO, Callable, Optional, Protocol, Union, runtime_checkable

from babel import Locale


@runtime_checkable
class ResourceBundle(Protocol):
    """A named, culture-partitioned key -> value store.

    Lookups return ``None`` when the key is absent for the culture and all of
    its fallbacks; they never raise for a missing key.
    """

    def lookup_string(self, key: str, culture: Locale) -> Optional[str]:
        ...

    def lookup_object(self, key: str, culture: Locale) -> Optional[Any]:
        ...

    def lookup_stream(self, key: str, culture: Locale) -> Optional[BinaryIO]:
        ...

    def release(self) -> None:
        """Drop every cached resource; later lookups reload lazily."""
        ...


@runtime_checkable
class LocalizationProviderProtocol(Protocol):
    """What a view model exposes to bound UI as ``loc`` at run time."""

    def __getitem__(self, key: str) -> str:
        ...

    def get_string(self, key: str) -> str:
        ...

    def get_object(self, key: str) -> Any:
        ...

    def get_stream(self, key: str) -> BinaryIO:
        ...

    def update_context(self, resource: Union[str, ResourceBundle]) -> None:
        ...

    def update_culture(self, culture: Union[Locale, str, None]) -> None:
        ...

    def get_culture(self) -> Locale:
        ...

    def subscribe(self, callback: Callable[[], None]) -> None:
        ...

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        ...


@runtime_checkable
class DesignTimeProviderProtocol(Protocol):
    """
    Placeholder provider for visual designers.

    Implementations return the key itself in a recognisable form, see
    ``DesignTimeLocalizationProvider``.
    """

    def __getitem__(self, key: str) -> str:
        ...
