import os


def get_settings_module() -> str:
    # APP_ENV selects the settings module; development is the default.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "clinic_timepay.config.production"

    if env in {"test", "testing"}:
        return "clinic_timepay.config.testing"

    return "clinic_timepay.config.development"
