import pytest

from faye import config


def test_defaults(monkeypatch):
    monkeypatch.delenv("FAYE_MAX_DEPTH", raising=False)
    monkeypatch.delenv("FAYE_COLOR", raising=False)
    assert config.get_max_depth() == 1000
    assert config.get_color_mode() == "auto"


@pytest.mark.parametrize("raw,expected", [("25", 25), (" 40 ", 40), ("", 1000)])
def test_max_depth(monkeypatch, raw, expected):
    monkeypatch.setenv("FAYE_MAX_DEPTH", raw)
    assert config.get_max_depth() == expected


@pytest.mark.parametrize("raw", ["ten", "0", "-5", "1.5"])
def test_max_depth_rejects_bad_values(monkeypatch, raw):
    monkeypatch.setenv("FAYE_MAX_DEPTH", raw)
    with pytest.raises(ValueError):
        config.get_max_depth()


@pytest.mark.parametrize("raw,expected", [("never", "never"), ("Always", "always"), ("rainbow", "auto")])
def test_color_mode(monkeypatch, raw, expected):
    monkeypatch.setenv("FAYE_COLOR", raw)
    assert config.get_color_mode() == expected
