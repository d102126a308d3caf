from config.settings import *  # noqa: F401,F403


DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

STOCKOPS_API_KEYS = {
    "dev-manager-key": {"role": "manager", "name": "Dev Manager"},
    "dev-staff-key": {"role": "staff", "name": "Dev Staff"},
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

LOGGING["loggers"]["apps"]["level"] = "WARNING"  # noqa: F405
