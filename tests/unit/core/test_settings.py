import pytest
from pydantic import ValidationError as PydanticValidationError

from credforge.core.config.settings import Settings, settings


def test_test_environment_is_loaded():
    assert settings.APP_ENV == "test"
    assert settings.BCRYPT_WORK_FACTOR == 4
    assert settings.DEBUG is False


def test_key_defaults():
    assert settings.DEFAULT_KEY_LENGTH == 32
    assert settings.DEFAULT_HEX_LENGTH == 64
    assert settings.DEFAULT_BYTE_LENGTH == 32
    assert settings.DEFAULT_API_KEY_PREFIX == "api"
    assert settings.DEFAULT_BATCH_COUNT == 5


def test_development_enables_debug(monkeypatch):
    monkeypatch.setenv("APP_ENV", "development")
    assert Settings().DEBUG is True


def test_missing_jwt_secret_gets_ephemeral_value(monkeypatch):
    monkeypatch.setenv("JWT_SECRET_KEY", "")

    first = Settings(_env_file=None)
    second = Settings(_env_file=None)

    secret = first.JWT_SECRET_KEY.get_secret_value()
    assert len(secret) == 43
    assert secret != second.JWT_SECRET_KEY.get_secret_value()


def test_secret_is_not_exposed_in_repr():
    assert settings.JWT_SECRET_KEY.get_secret_value() not in repr(settings)


@pytest.mark.parametrize("work_factor", ["3", "32"])
def test_bcrypt_work_factor_bounds(monkeypatch, work_factor):
    monkeypatch.setenv("BCRYPT_WORK_FACTOR", work_factor)
    with pytest.raises(PydanticValidationError):
        Settings(_env_file=None)
