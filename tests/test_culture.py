import pytest
from babel import Locale

from locprovider import culture
from locprovider.culture import culture_tag, fallback_chain, parse_culture


@pytest.mark.parametrize("raw", ["de-DE", "de_DE", "de_DE.UTF-8", "de_DE@euro"])
def test_parse_culture_accepts_common_spellings(raw):
    assert parse_culture(raw) == Locale("de", "DE")


def test_parse_culture_passes_locales_through():
    loc = Locale("fr", "FR")
    assert parse_culture(loc) is loc


@pytest.mark.parametrize("raw", ["", "   ", "xx-QQ", None])
def test_parse_culture_rejects_invalid_values(raw):
    with pytest.raises(ValueError):
        parse_culture(raw)


def test_culture_tag_uses_hyphens_and_script():
    assert culture_tag(Locale("de", "DE")) == "de-DE"
    assert culture_tag(Locale("de")) == "de"
    assert culture_tag(Locale.parse("zh_Hans_CN")) == "zh-Hans-CN"


def test_fallback_chain_ends_with_neutral_resources():
    assert fallback_chain(Locale("de", "AT")) == ["de-AT", "de", ""]
    assert fallback_chain(Locale("de")) == ["de", ""]
    assert fallback_chain(Locale.parse("zh_Hans_CN")) == ["zh-Hans-CN", "zh-Hans", "zh", ""]


def test_detect_system_culture_reads_environment(monkeypatch):
    for var in ("LANGUAGE", "LC_ALL", "LC_CTYPE", "LANG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LANG", "fr_FR.UTF-8")

    assert culture.detect_system_culture() == Locale("fr", "FR")


def test_detect_system_culture_falls_back_to_default(monkeypatch):
    monkeypatch.setattr(culture, "default_locale", lambda: None)
    monkeypatch.setattr(culture.locale, "getlocale", lambda: (None, None))

    assert culture.detect_system_culture() == Locale.parse(culture.DEFAULT_CULTURE)


def test_detect_system_culture_ignores_garbage(monkeypatch):
    monkeypatch.setattr(culture, "default_locale", lambda: "klingon_XX")

    assert culture.detect_system_culture() == Locale.parse(culture.DEFAULT_CULTURE)
