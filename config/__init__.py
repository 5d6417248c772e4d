import os

_MODULES_BY_ENV = {
    "production": "config.production",
    "prod": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
}


def get_settings_module() -> str:
    """Settings module for APP_ENV; unknown or unset means development."""
    env = os.getenv("APP_ENV", "").strip().lower()
    return _MODULES_BY_ENV.get(env, "config.development")
