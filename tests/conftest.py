import os
import sys

import pytest

# Qt widgets need a platform plugin even when nothing is shown
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from locprovider import DictResourceBundle  # noqa: E402


@pytest.fixture(scope="session")
def app_instance():
    """Create a QApplication instance for the test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    return app


@pytest.fixture
def login_bundle():
    """The App.Login bundle: German and US English titles."""
    return DictResourceBundle(
        {
            "": {"Title": "Login", "Banner": b"\x89PNG-neutral"},
            "de-DE": {"Title": "Anmeldung", "Layout": {"columns": 2}},
            "en-US": {"Title": "Login", "Layout": {"columns": 1}},
        },
        name="App.Login",
    )


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    import settings_store

    settings_file = tmp_path / "settings.json"
    monkeypatch.setattr(settings_store, "settings_path", lambda: settings_file)
    return settings_file
