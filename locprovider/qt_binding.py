"""Qt adapter exposing a LocalizationProvider to widgets and QML."""

from __future__ import annotations

import shiboken6
from PySide6.QtCore import Property, QObject, Signal, Slot

from .culture import culture_tag
from .provider import LocalizationProvider


class QtLocalizationBinding(QObject):
    """
    Re-emits provider notifications as the ``changed`` signal.

    Usage:

        binding = QtLocalizationBinding(view_model.loc, parent=window)
        binding.changed.connect(window.retranslate_ui)
        label.setText(binding.get("Title"))

    QML can bind through ``get`` and re-evaluate on ``changed``.
    """

    changed = Signal()

    def __init__(self, provider: LocalizationProvider, parent: QObject | None = None):
        super().__init__(parent)
        self._provider = provider
        self._provider.subscribe(self._on_provider_changed)

        # The provider usually outlives the widget owning this binding
        subscriber = self._on_provider_changed
        self.destroyed.connect(lambda: provider.unsubscribe(subscriber))

    @property
    def provider(self) -> LocalizationProvider:
        return self._provider

    @Slot(str, result=str)
    def get(self, key: str) -> str:
        return self._provider.get_string(key)

    def _get_culture_name(self) -> str:
        return culture_tag(self._provider.get_culture())

    culture_name = Property(str, _get_culture_name, notify=changed)

    def detach(self) -> None:
        """Stop listening to the provider."""
        self._provider.unsubscribe(self._on_provider_changed)

    def _on_provider_changed(self) -> None:
        if not shiboken6.isValid(self):
            self._provider.unsubscribe(self._on_provider_changed)
            return
        self.changed.emit()
