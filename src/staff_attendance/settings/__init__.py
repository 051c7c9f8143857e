import os


def get_settings_module() -> str:
    # APP_ENV selects the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "staff_attendance.settings.production"

    if env in {"test", "testing"}:
        return "staff_attendance.settings.testing"

    return "staff_attendance.settings.development"
