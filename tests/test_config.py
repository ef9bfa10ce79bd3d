import pytest

from probcalc.config import Settings


def test_defaults(monkeypatch):
    for name in ("PROBCALC_HOST", "PROBCALC_PORT", "PROBCALC_LOG_LEVEL",
                 "PROBCALC_PLOT_DPI", "PROBCALC_INDEX_HTML"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings.bind == "127.0.0.1:5009"
    assert settings.log_level == "INFO"
    assert settings.index_html is None


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PROBCALC_PORT", "8080")
    monkeypatch.setenv("PROBCALC_LOG_LEVEL", "debug")
    monkeypatch.setenv("PROBCALC_PLOT_DPI", "72")
    settings = Settings.from_env()
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.plot_dpi == 72


def test_bad_integer(monkeypatch):
    monkeypatch.setenv("PROBCALC_PORT", "eighty")
    with pytest.raises(ValueError, match="PROBCALC_PORT"):
        Settings.from_env()
