import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module; anything unknown means development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "paystream.config.production"

    if env in {"test", "testing"}:
        return "paystream.config.testing"

    return "paystream.config.development"
