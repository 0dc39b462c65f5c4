from textify import config


def test_env_int(monkeypatch):
    monkeypatch.delenv("TEXTIFY_TEST_INT", raising=False)
    assert config._env_int("TEXTIFY_TEST_INT", 5) == 5
    monkeypatch.setenv("TEXTIFY_TEST_INT", "12")
    assert config._env_int("TEXTIFY_TEST_INT", 5) == 12
    monkeypatch.setenv("TEXTIFY_TEST_INT", "lots")
    assert config._env_int("TEXTIFY_TEST_INT", 5) == 5


def test_default_config_shape():
    cfg = config.DEFAULT_CONFIG
    assert cfg["counting"]["words_per_minute"] > 0
    assert cfg["whitespace"]["tab_size"] == 4
    bounds = [b for b, _ in cfg["analysis"]["readability_bands"]]
    assert bounds == sorted(bounds, reverse=True)
