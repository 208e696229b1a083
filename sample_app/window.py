"""Sample main window bound to a localization provider."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from locprovider import LocalizationProvider, ResourceNotFoundError
from locprovider.qt_binding import QtLocalizationBinding

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Every visible string is read from ``context.loc``.

    ``context`` is either a ``MainWindowViewModel`` (run time) or a
    ``DesignTimeWindowContext`` (preview), in which case the window only shows
    "[Key]" placeholders and the language/screen controls are disabled.
    """

    def __init__(self, context, parent=None):
        super().__init__(parent)
        self.context = context
        self.loc = context.loc
        self.is_design_time = not isinstance(self.loc, LocalizationProvider)

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        layout = QVBoxLayout(self.central_widget)

        self.logo_label = QLabel()
        self.logo_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.logo_label)

        self.greeting_label = QLabel()
        self.greeting_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.greeting_label)

        row = QHBoxLayout()
        self.language_label = QLabel()
        row.addWidget(self.language_label)
        self.language_combo = QComboBox()
        row.addWidget(self.language_combo)
        layout.addLayout(row)

        self.screen_button = QPushButton()
        layout.addWidget(self.screen_button)

        self.footer_label = QLabel()
        self.footer_label.setWordWrap(True)
        layout.addWidget(self.footer_label)

        self.binding = None
        if self.is_design_time:
            self.language_combo.setEnabled(False)
            self.screen_button.setEnabled(False)
        else:
            self._populate_languages()
            self.language_combo.currentIndexChanged.connect(self._on_language_chosen)
            self.screen_button.clicked.connect(self.context.toggle_screen)

            self.binding = QtLocalizationBinding(self.loc, self)
            self.binding.changed.connect(self.retranslate_ui)

        self.retranslate_ui()

    def _populate_languages(self) -> None:
        current = self.context.current_culture_tag()
        self.language_combo.blockSignals(True)
        for tag, name in self.context.available_cultures():
            self.language_combo.addItem(name, tag)
            if tag == current:
                self.language_combo.setCurrentIndex(self.language_combo.count() - 1)
        self.language_combo.blockSignals(False)

    def _on_language_chosen(self, index: int) -> None:
        tag = self.language_combo.itemData(index)
        if tag:
            self.context.switch_language(tag)

    def retranslate_ui(self) -> None:
        """Re-read every bound string from the provider."""
        self.setWindowTitle(self.loc["Title"])
        self.greeting_label.setText(self.loc["Greeting"])
        self.language_label.setText(self.loc["LanguageLabel"])
        self.screen_button.setText(self.loc["SettingsButton"])
        self.footer_label.setText(self.loc["Footer"])

        if self.is_design_time:
            self.logo_label.setText(self.loc["Logo"])
            return

        self._apply_window_size()
        self._apply_logo()

    def _apply_window_size(self) -> None:
        try:
            size = self.loc.get_object("WindowSize")
            self.resize(int(size["width"]), int(size["height"]))
        except (ResourceNotFoundError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Keeping current window size: {e}")

    def _apply_logo(self) -> None:
        try:
            stream = self.loc.get_stream("Logo")
        except ResourceNotFoundError:
            # Not every context ships a logo
            self.logo_label.clear()
            self.logo_label.hide()
            return

        with stream:
            pixmap = QPixmap()
            if not pixmap.loadFromData(stream.read()):
                logger.warning("Logo resource could not be decoded")
                self.logo_label.hide()
                return

        self.logo_label.setPixmap(pixmap)
        self.logo_label.show()
