"""Design-time stand-ins used by visual designers and UI previews."""

from __future__ import annotations


class DesignTimeLocalizationProvider:
    """Returns a placeholder for every key: "HelloWorld" -> "[HelloWorld]"."""

    def __getitem__(self, key: str) -> str:
        return f"[{key}]"

    def get(self, key: str) -> str:
        return self[key]


class DesignTimeWindowContext:
    """Data context handed to designers in place of a real view model."""

    def __init__(self):
        self._loc = DesignTimeLocalizationProvider()

    @property
    def loc(self) -> DesignTimeLocalizationProvider:
        return self._loc
