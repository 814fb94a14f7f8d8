"""Tests for the configuration loader."""

from pathlib import Path

import pytest

from warehouse_shelving.enterprise.config.settings import get_settings


def test_settings_load_default_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Default environment should combine base settings and dev overrides."""

    config_dir = tmp_path / "config"
    env_dir = config_dir / "environments"
    env_dir.mkdir(parents=True)

    (config_dir / "settings.yaml").write_text(
        """
        environment: dev
        permutations:
          max_length: 6
        database:
          enabled: false
          pool_size: 3
        """,
        encoding="utf-8",
    )

    (env_dir / "dev.yaml").write_text(
        """
        database:
          pool_size: 7
        logging:
          level: DEBUG
        """,
        encoding="utf-8",
    )

    monkeypatch.setenv("WS_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("WS_ENVIRONMENT", raising=False)

    get_settings.cache_clear()
    settings = get_settings()

    assert settings.environment == "dev"
    assert settings.permutations.max_length == 6
    assert settings.database.enabled is False
    assert settings.database.pool_size == 7
    assert settings.logging.level == "DEBUG"


def test_settings_env_override(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Environment variables should override YAML configuration."""

    config_dir = tmp_path / "config"
    env_dir = config_dir / "environments"
    env_dir.mkdir(parents=True)

    (config_dir / "settings.yaml").write_text(
        """
        environment: prod
        permutations:
          max_length: 4
        seed:
          demo_data: true
        """,
        encoding="utf-8",
    )

    (env_dir / "prod.yaml").write_text("{}", encoding="utf-8")

    monkeypatch.setenv("WS_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("WS_ENVIRONMENT", "prod")
    monkeypatch.setenv("WS_PERMUTATIONS__MAX_LENGTH", "8")

    get_settings.cache_clear()
    settings = get_settings()

    assert settings.environment == "prod"
    assert settings.permutations.max_length == 8
    assert settings.seed.demo_data is True


def test_settings_defaults_without_files(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("WS_CONFIG_DIR", str(tmp_path / "missing"))
    monkeypatch.delenv("WS_ENVIRONMENT", raising=False)

    get_settings.cache_clear()
    settings = get_settings()

    assert settings.environment == "dev"
    assert settings.database.enabled is False
    assert settings.permutations.max_length == 10
    assert settings.telemetry.service_name == "warehouse-shelving-api"


def test_settings_cache_clear(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Clearing the cache should re-read configuration files."""

    config_dir = tmp_path / "config"
    env_dir = config_dir / "environments"
    env_dir.mkdir(parents=True)

    (config_dir / "settings.yaml").write_text("{}", encoding="utf-8")
    (env_dir / "dev.yaml").write_text("{}", encoding="utf-8")

    monkeypatch.setenv("WS_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("WS_ENVIRONMENT", raising=False)

    get_settings.cache_clear()
    first = get_settings()

    monkeypatch.setenv("WS_ENVIRONMENT", "qa")
    (env_dir / "qa.yaml").write_text(
        "logging:\n  level: WARNING\n",
        encoding="utf-8",
    )

    get_settings.cache_clear()
    second = get_settings()

    assert first.environment == "dev"
    assert second.environment == "qa"
    assert second.logging.level == "WARNING"
