"""View model for the sample main window."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from babel import Locale

from locprovider import LocalizationProvider
from locprovider.culture import CultureLike, culture_tag, parse_culture
from settings_store import load_culture, save_culture

logger = logging.getLogger(__name__)

# {ProjectName}.{ResourcesFolder}.{ContextFolder}.{BaseName}
MAIN_WINDOW_BUNDLE = "sample_app.resources.main_window.MainWindow"
SETTINGS_BUNDLE = "sample_app.resources.settings.Settings"

SUPPORTED_CULTURES = ["en-US", "en-GB", "de-DE", "fr-FR"]

MAIN_SCREEN = "main"
SETTINGS_SCREEN = "settings"


def _saved_culture() -> Optional[Locale]:
    saved = load_culture()
    if saved is None:
        return None
    try:
        return parse_culture(saved)
    except ValueError as e:
        logger.warning(f"Ignoring saved culture {saved!r}: {e}")
        return None


class MainWindowViewModel:
    """Owns the window's ``loc`` provider and the screen/language state."""

    def __init__(self, culture: Optional[CultureLike] = None):
        if culture is None:
            culture = _saved_culture()
        self.loc = LocalizationProvider(MAIN_WINDOW_BUNDLE, culture)
        self.screen = MAIN_SCREEN

    def available_cultures(self) -> List[Tuple[str, str]]:
        """Return (tag, display name) pairs, each name in its own language."""
        cultures = []
        for tag in SUPPORTED_CULTURES:
            loc = parse_culture(tag)
            name = loc.get_display_name(loc) or tag
            cultures.append((tag, name[:1].upper() + name[1:]))
        return cultures

    def current_culture_tag(self) -> str:
        return culture_tag(self.loc.get_culture())

    def switch_language(self, tag: str) -> None:
        self.loc.update_culture(tag)
        save_culture(self.current_culture_tag())

    def show_settings(self) -> None:
        self.loc.update_context(SETTINGS_BUNDLE)
        self.screen = SETTINGS_SCREEN

    def show_main(self) -> None:
        self.loc.update_context(MAIN_WINDOW_BUNDLE)
        self.screen = MAIN_SCREEN

    def toggle_screen(self) -> None:
        if self.screen == MAIN_SCREEN:
            self.show_settings()
        else:
            self.show_main()

    def close(self) -> None:
        self.loc.close()
