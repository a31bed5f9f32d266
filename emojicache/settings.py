import os
import zoneinfo
from pathlib import Path


def env_int(name, default):
    """Integer env var; empty or non-numeric values fall back to the default."""
    try:
        value = int(os.getenv(name, ""))
    except ValueError:
        return default
    return value or default


def env_timezone(name, default):
    """IANA zone name from env; empty or POSIX-style values (":/etc/localtime")
    fall back to the default."""
    value = os.getenv(name) or default
    try:
        zoneinfo.ZoneInfo(value)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError):
        return default
    return value


# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "fallback-secret-key")
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    "emojicache",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "emojicache.middleware.JsonExceptionMiddleware",
]

# /foo and /foo/ are different items, never redirect between them
APPEND_SLASH = False

ROOT_URLCONF = "emojicache.urls"

WSGI_APPLICATION = "emojicache.wsgi.application"

# Existence on disk is the only state
DATABASES = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = env_timezone("TZ", "UTC")
USE_I18N = False
USE_TZ = True

PORT = env_int("PORT", 8006)

# Outbound proxy; every catalog and CDN request goes through it
PROXY = os.getenv("PROXY") or "192.168.2.6"
PROXY_PORT = env_int("PROXY_PORT", 25566)
TIMEOUT = env_int("TIMEOUT", 10000)  # milliseconds

EMOJI_DIR = Path(os.getenv("EMOJI_DIR") or BASE_DIR / "emoji")
DOWNLOAD_WORKERS = env_int("DOWNLOAD_WORKERS", 16)

CATALOG_BASE_URL = (
    "https://github.com/Altpapier/Skyblock-Item-Emojis/raw/refs/heads/main/v3"
)
EMOJIS_URL = f"{CATALOG_BASE_URL}/emojis.json"
ITEM_HASH_URL = f"{CATALOG_BASE_URL}/itemHash.json"
CDN_URL_TEMPLATE = "https://cdn.discordapp.com/emojis/{asset_id}"

SCHEDULER_ENABLED = os.getenv("SCHEDULER_ENABLED", "true").lower() == "true"
SYNC_CRON_HOUR = 0
SYNC_CRON_MINUTE = 0
HEARTBEAT_INTERVAL_HOURS = 6
