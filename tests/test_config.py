import pytest

from gong_mcp.config import DEFAULT_BASE_URL, load_settings
from gong_mcp.errors import ConfigurationError


def test_load_settings_from_env():
    settings = load_settings(
        {
            "GONG_ACCESS_KEY": "key",
            "GONG_ACCESS_SECRET": "secret",
            "GONG_TIMEOUT": "12.5",
            "GONG_LOG_LEVEL": "debug",
        }
    )

    assert settings.credentials.access_key == "key"
    assert settings.credentials.secret() == "secret"
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == 12.5
    assert settings.log_level == "DEBUG"


def test_secret_is_not_exposed_in_repr():
    settings = load_settings({"GONG_ACCESS_KEY": "key", "GONG_ACCESS_SECRET": "hunter2"})

    assert "hunter2" not in repr(settings)
    assert "hunter2" not in str(settings.credentials)


@pytest.mark.parametrize(
    "env, missing",
    [
        ({}, ["GONG_ACCESS_KEY", "GONG_ACCESS_SECRET"]),
        ({"GONG_ACCESS_KEY": "key"}, ["GONG_ACCESS_SECRET"]),
        ({"GONG_ACCESS_KEY": "", "GONG_ACCESS_SECRET": "secret"}, ["GONG_ACCESS_KEY"]),
    ],
)
def test_missing_credentials_raise(env, missing):
    with pytest.raises(ConfigurationError) as excinfo:
        load_settings(env)

    assert excinfo.value.details == {"missing": missing}
    for name in missing:
        assert name in excinfo.value.message


def test_malformed_timeout_raises():
    with pytest.raises(ConfigurationError, match="Invalid Gong configuration"):
        load_settings({"GONG_ACCESS_KEY": "key", "GONG_ACCESS_SECRET": "secret", "GONG_TIMEOUT": "soon"})


def test_credentials_are_immutable():
    settings = load_settings({"GONG_ACCESS_KEY": "key", "GONG_ACCESS_SECRET": "secret"})

    with pytest.raises(Exception):
        settings.credentials.access_key = "other"
