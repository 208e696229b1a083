import json

from babel import Locale

from locprovider import DesignTimeWindowContext
from sample_app.view_model import MAIN_SCREEN, SETTINGS_SCREEN, MainWindowViewModel
from sample_app.window import MainWindow


def test_view_model_uses_explicit_culture(isolated_settings):
    vm = MainWindowViewModel("de-DE")

    assert vm.loc["Greeting"] == "Hallo, Welt!"
    assert vm.current_culture_tag() == "de-DE"


def test_view_model_restores_saved_culture(isolated_settings):
    isolated_settings.write_text(json.dumps({"culture": "fr-FR"}), encoding="utf-8")

    vm = MainWindowViewModel()
    assert vm.loc.get_culture() == Locale("fr", "FR")
    assert vm.loc["Title"] == "Exemple de localisation"


def test_view_model_ignores_invalid_saved_culture(isolated_settings, monkeypatch):
    import locprovider.provider as provider_module

    isolated_settings.write_text(json.dumps({"culture": "xx-QQ"}), encoding="utf-8")
    monkeypatch.setattr(provider_module, "detect_system_culture", lambda: Locale("en", "GB"))

    vm = MainWindowViewModel()
    assert vm.current_culture_tag() == "en-GB"


def test_switch_language_persists_choice(isolated_settings):
    vm = MainWindowViewModel("en-US")
    calls = []
    vm.loc.subscribe(lambda: calls.append(1))

    vm.switch_language("de-DE")

    assert calls == [1]
    assert vm.loc["SettingsButton"] == "Einstellungen"
    data = json.loads(isolated_settings.read_text(encoding="utf-8"))
    assert data["culture"] == "de-DE"


def test_toggle_screen_switches_context(isolated_settings):
    vm = MainWindowViewModel("de-DE")

    vm.toggle_screen()
    assert vm.screen == SETTINGS_SCREEN
    assert vm.loc["Title"] == "Einstellungen"
    assert vm.loc["SettingsButton"] == "Zurück"

    vm.toggle_screen()
    assert vm.screen == MAIN_SCREEN
    assert vm.loc["Title"] == "Lokalisierungsbeispiel"


def test_available_cultures_cover_supported_tags(isolated_settings):
    vm = MainWindowViewModel("en-US")
    cultures = dict(vm.available_cultures())

    assert set(cultures) == {"en-US", "en-GB", "de-DE", "fr-FR"}
    assert cultures["de-DE"].startswith("Deutsch")


def test_us_english_overrides_neutral_footer(isolated_settings):
    vm = MainWindowViewModel("en-US")
    assert vm.loc["Footer"].endswith("update.")

    vm.switch_language("en-GB")
    assert vm.loc["Footer"].endswith("refresh.")


def test_window_retranslates_on_language_switch(app_instance, isolated_settings):
    vm = MainWindowViewModel("de-DE")
    window = MainWindow(vm)

    assert window.windowTitle() == "Lokalisierungsbeispiel"
    assert window.greeting_label.text() == "Hallo, Welt!"

    vm.switch_language("fr-FR")
    assert window.windowTitle() == "Exemple de localisation"
    assert window.language_label.text() == "Langue"


def test_window_combo_drives_view_model(app_instance, isolated_settings):
    vm = MainWindowViewModel("en-US")
    window = MainWindow(vm)

    index = window.language_combo.findData("de-DE")
    window.language_combo.setCurrentIndex(index)

    assert vm.current_culture_tag() == "de-DE"
    assert window.footer_label.text().startswith("Wechseln")


def test_window_hides_logo_in_settings_context(app_instance, isolated_settings):
    vm = MainWindowViewModel("en-US")
    window = MainWindow(vm)

    window.screen_button.click()

    assert vm.screen == SETTINGS_SCREEN
    assert window.windowTitle() == "Settings"
    assert window.logo_label.isHidden()


def test_design_time_window_shows_placeholders(app_instance):
    window = MainWindow(DesignTimeWindowContext())

    assert window.is_design_time
    assert window.windowTitle() == "[Title]"
    assert window.greeting_label.text() == "[Greeting]"
    assert window.logo_label.text() == "[Logo]"
    assert not window.language_combo.isEnabled()
