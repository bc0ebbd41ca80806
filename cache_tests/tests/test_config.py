import importlib

import expiration_cache.config as config_mod
from expiration_cache.core.cache import ExpirationCache


def _reload_with_env(monkeypatch, env):
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return importlib.reload(config_mod)


def test_config_reads_environment(monkeypatch):
    try:
        cfg = _reload_with_env(
            monkeypatch,
            {
                "EXPIRATION_CACHE_MAX_SIZE": " 12 ",
                "EXPIRATION_CACHE_DEFAULT_TTL": "2.5",
                "EXPIRATION_CACHE_THREAD_SAFE": "no",
            },
        )
        assert cfg.DEFAULT_MAX_SIZE == 12
        assert cfg.DEFAULT_TTL_SECONDS == 2.5
        assert cfg.THREAD_SAFE is False
    finally:
        monkeypatch.undo()
        importlib.reload(config_mod)


def test_config_falls_back_on_bad_values(monkeypatch):
    try:
        cfg = _reload_with_env(
            monkeypatch,
            {"EXPIRATION_CACHE_MAX_SIZE": "lots", "EXPIRATION_CACHE_DEFAULT_TTL": ""},
        )
        assert cfg.DEFAULT_MAX_SIZE == 256
        assert cfg.DEFAULT_TTL_SECONDS == 60.0
    finally:
        monkeypatch.undo()
        importlib.reload(config_mod)


def test_cache_defaults_come_from_config(monkeypatch):
    monkeypatch.setattr(config_mod, "DEFAULT_MAX_SIZE", 3)
    monkeypatch.setattr(config_mod, "DEFAULT_TTL_SECONDS", 7.0)

    c = ExpirationCache()

    assert c.get_max_cache_size() == 3
    assert c.default_expiration == 7.0


def test_config_rejects_non_positive_ttl(monkeypatch):
    try:
        cfg = _reload_with_env(monkeypatch, {"EXPIRATION_CACHE_DEFAULT_TTL": "0"})
        assert cfg.DEFAULT_TTL_SECONDS == 60.0

        cfg = _reload_with_env(monkeypatch, {"EXPIRATION_CACHE_DEFAULT_TTL": "-5"})
        assert cfg.DEFAULT_TTL_SECONDS == 60.0

        assert ExpirationCache().default_expiration == 60.0
    finally:
        monkeypatch.undo()
        importlib.reload(config_mod)
