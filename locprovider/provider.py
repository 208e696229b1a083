"""Runtime localization provider bound to by view models."""

from __future__ import annotations

import logging
import threading
from typing import Any, BinaryIO, Callable, List, Optional, Set, Tuple, Union

from babel import Locale

from .abstractions import ResourceBundle
from .culture import CultureLike, culture_tag, detect_system_culture, parse_culture
from .errors import ResourceNotFoundError
from .resource_bundle import JsonResourceBundle

logger = logging.getLogger(__name__)

MISSING_KEY_TEMPLATE = "! MISSING KEY:{key}!"

Subscriber = Callable[[], None]


def _resolve_bundle(resource: Union[str, ResourceBundle]) -> ResourceBundle:
    if isinstance(resource, str):
        return JsonResourceBundle.from_name(resource)
    return resource


def _check_key(key: str) -> None:
    if not isinstance(key, str) or not key:
        raise ValueError(f"Resource key must be a non-empty string, got {key!r}")


class LocalizationProvider:
    """
    Resolves resource keys against the active (bundle, culture) pair.

    A view model typically owns one provider per screen and exposes it to
    bound UI as ``loc``. Switching the bundle (``update_context``) or the
    culture (``update_culture``) sends one generic change notification to
    every subscriber; subscribers are expected to re-read all bound values.

    Missing strings degrade to a visible placeholder instead of raising,
    missing objects and streams raise ``ResourceNotFoundError``.
    """

    def __init__(
        self,
        resource: Union[str, ResourceBundle],
        culture: Optional[CultureLike] = None,
    ):
        # Raises BundleNotFoundError if the name cannot be resolved
        self._bundle: ResourceBundle = _resolve_bundle(resource)
        self._culture: Locale = (
            parse_culture(culture) if culture is not None else detect_system_culture()
        )

        # Guards _bundle and _culture together
        self._lock = threading.RLock()
        self._subscribers: List[Subscriber] = []
        self._reported_missing: Set[Tuple[str, str]] = set()

        logger.debug(
            f"LocalizationProvider created for {self._bundle!r} "
            f"({culture_tag(self._culture)})"
        )

    @property
    def culture(self) -> Locale:
        return self.get_culture()

    @property
    def bundle(self) -> ResourceBundle:
        with self._lock:
            return self._bundle

    def _snapshot(self) -> Tuple[ResourceBundle, Locale]:
        with self._lock:
            return self._bundle, self._culture

    # ----------------------------------------------------------------------
    # Lookups
    # ----------------------------------------------------------------------
    def __getitem__(self, key: str) -> str:
        return self.get_string(key)

    def get_string(self, key: str) -> str:
        _check_key(key)
        bundle, culture = self._snapshot()

        value = bundle.lookup_string(key, culture)
        if value is not None:
            return value

        tag = culture_tag(culture)
        with self._lock:
            first_report = (key, tag) not in self._reported_missing
            self._reported_missing.add((key, tag))
        if first_report:
            logger.warning(f"Missing string resource '{key}' in {bundle!r} ({tag})")
        return MISSING_KEY_TEMPLATE.format(key=key)

    def get_object(self, key: str) -> Any:
        _check_key(key)
        bundle, culture = self._snapshot()

        value = bundle.lookup_object(key, culture)
        if value is None:
            raise ResourceNotFoundError(key, culture_tag(culture))
        return value

    def get_stream(self, key: str) -> BinaryIO:
        _check_key(key)
        bundle, culture = self._snapshot()

        stream = bundle.lookup_stream(key, culture)
        if stream is None:
            raise ResourceNotFoundError(key, culture_tag(culture))
        return stream

    def get_culture(self) -> Locale:
        with self._lock:
            return self._culture

    # ----------------------------------------------------------------------
    # Switching
    # ----------------------------------------------------------------------
    def update_culture(self, culture: Optional[CultureLike]) -> None:
        """Switch culture; equal or ``None`` cultures are ignored."""
        if culture is None:
            return

        new_culture = parse_culture(culture)
        with self._lock:
            if new_culture == self._culture:
                return
            old_culture = self._culture
            self._culture = new_culture

        logger.debug(
            f"Culture changed {culture_tag(old_culture)} -> {culture_tag(new_culture)}"
        )
        self.notify()

    def update_context(self, resource: Union[str, ResourceBundle]) -> None:
        """
        Replace the active bundle and notify, even if nothing changed.

        The old bundle is released before the new one is installed. A name
        that cannot be resolved raises BundleNotFoundError and leaves the
        current bundle in place.
        """
        new_bundle = _resolve_bundle(resource)
        with self._lock:
            self._bundle.release()
            self._bundle = new_bundle
            self._reported_missing.clear()

        logger.debug(f"Context changed to {new_bundle!r}")
        self.notify()

    def close(self) -> None:
        """Release the active bundle when the owning view model goes away."""
        with self._lock:
            self._bundle.release()
            self._reported_missing.clear()

    # ----------------------------------------------------------------------
    # Change notification
    # ----------------------------------------------------------------------
    def subscribe(self, callback: Subscriber) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        try:
            self._subscribers.remove(callback)
        except ValueError:
            pass

    def notify(self, name: Optional[str] = None) -> None:
        """
        Tell every subscriber that bound values may be stale.

        ``name`` is only used for logging; subscribers always receive the
        generic "everything changed" notification.
        """
        if name:
            logger.debug(f"Change notification for {name}")

        for callback in list(self._subscribers):
            try:
                callback()
            except Exception:
                # repr() of a dead Qt slot raises too, so keep the message plain
                logger.exception("Localization subscriber failed")
