import pytest

from appointment_api.core.config import Settings, load_settings, validate_runtime_config


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.setattr('appointment_api.core.config.load_dotenv', lambda: False)
    for name in (
        'APP_ENV', 'DATABASE_URL', 'JWT_SECRET_KEY', 'JWT_ALGORITHM', 'JWT_EXPIRES_MINUTES',
        'BCRYPT_ROUNDS', 'RESET_SCHEMA_ON_STARTUP', 'CORS_ORIGINS', 'LOG_LEVEL', 'HOST', 'PORT',
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_load_settings_defaults(clean_env) -> None:
    settings = load_settings()

    assert settings == Settings()
    assert settings.jwt_expires_minutes is None
    assert settings.port == 4000


def test_load_settings_reads_environment(clean_env) -> None:
    clean_env.setenv('DATABASE_URL', 'postgresql://app@localhost/appointments')
    clean_env.setenv('JWT_EXPIRES_MINUTES', '30')
    clean_env.setenv('RESET_SCHEMA_ON_STARTUP', 'yes')
    clean_env.setenv('CORS_ORIGINS', 'http://a.test, http://b.test,')
    clean_env.setenv('LOG_LEVEL', 'debug')

    settings = load_settings()

    assert settings.database_url == 'postgresql://app@localhost/appointments'
    assert settings.jwt_expires_minutes == 30
    assert settings.reset_schema_on_startup is True
    assert settings.cors_origins == ('http://a.test', 'http://b.test')
    assert settings.log_level == 'DEBUG'


def test_production_requires_a_real_secret() -> None:
    with pytest.raises(RuntimeError):
        validate_runtime_config(Settings(app_env='production'))

    validate_runtime_config(Settings(app_env='production', jwt_secret_key='s3cret'))
    validate_runtime_config(Settings())
