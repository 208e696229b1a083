"""Application entrypoint.

Kept small so `main.py` can remain a thin wrapper.
"""

from __future__ import annotations

import argparse
import logging
import sys

from PySide6.QtCore import QCoreApplication, QLoggingCategory
from PySide6.QtWidgets import QApplication

from locprovider import DesignTimeWindowContext
from sample_app.view_model import MainWindowViewModel
from sample_app.window import MainWindow
from settings_store import APP_NAME


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Localization provider sample")
    parser.add_argument(
        "--culture", help="Start with this culture, e.g. de-DE (default: saved/system)"
    )
    parser.add_argument(
        "--design",
        action="store_true",
        help="Preview the window with design-time placeholders",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_known_args(argv)[0]


def main(argv=None) -> int:
    """Run the sample Qt application."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    QLoggingCategory.setFilterRules("qt.text.font.db=false\n")

    app = QApplication(sys.argv)
    QCoreApplication.setApplicationName(APP_NAME)

    if args.design:
        context = DesignTimeWindowContext()
    else:
        context = MainWindowViewModel(args.culture)

    window = MainWindow(context)
    window.show()
    try:
        return app.exec()
    finally:
        if not args.design:
            context.close()
