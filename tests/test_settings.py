import pytest

from routing.settings import (
    DEFAULT_OSRM_BASE_URL,
    DEFAULT_USER_SERVICE_URL,
    RoutingSettings,
    default_settings,
)

ENV_VARS = [
    "OSRM_BASE_URL",
    "BASE_URL",
    "USER_SERVICE_URL",
    "OSRM_TIMEOUT_SECONDS",
    "USER_SERVICE_TIMEOUT_SECONDS",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # set-then-delete so monkeypatch also removes anything a .env file loads
    for name in ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    empty_env = tmp_path / ".env"
    empty_env.write_text("")
    return str(empty_env)


def test_defaults(clean_env):
    settings = RoutingSettings.from_env(clean_env)

    assert settings == default_settings()
    assert settings.osrm_base_url == DEFAULT_OSRM_BASE_URL
    assert settings.user_service_url == DEFAULT_USER_SERVICE_URL


def test_reads_environment(clean_env, monkeypatch):
    monkeypatch.setenv("OSRM_BASE_URL", "http://localhost:5000/")
    monkeypatch.setenv("USER_SERVICE_URL", "http://localhost:8081")
    monkeypatch.setenv("OSRM_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("USER_SERVICE_TIMEOUT_SECONDS", "1")

    settings = RoutingSettings.from_env(clean_env)

    assert settings.osrm_base_url == "http://localhost:5000"
    assert settings.user_service_url == "http://localhost:8081"
    assert settings.osrm_timeout_seconds == 2.5
    assert settings.user_service_timeout_seconds == 1.0


def test_legacy_base_url_is_used_for_osrm(clean_env, monkeypatch):
    monkeypatch.setenv("BASE_URL", "http://router.project-osrm.org")

    assert RoutingSettings.from_env(clean_env).osrm_base_url == "http://router.project-osrm.org"


def test_reads_dotenv_file(clean_env, tmp_path):
    env_file = tmp_path / "routing.env"
    env_file.write_text("USER_SERVICE_URL=http://users.internal:9000\n")

    settings = RoutingSettings.from_env(str(env_file))

    assert settings.user_service_url == "http://users.internal:9000"


def test_non_positive_timeout_is_rejected(clean_env, monkeypatch):
    monkeypatch.setenv("OSRM_TIMEOUT_SECONDS", "0")

    with pytest.raises(ValueError):
        RoutingSettings.from_env(clean_env)


def test_validate_rejects_empty_urls():
    with pytest.raises(ValueError):
        RoutingSettings(osrm_base_url="").validate()
    with pytest.raises(ValueError):
        RoutingSettings(user_service_url="").validate()
