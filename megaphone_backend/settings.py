"""
settings.py — Django project configuration for the Megaphone Announcements widget

What this file configures
===============================================================================
- Core Django wiring (INSTALLED_APPS, MIDDLEWARE, TEMPLATES, DB)
- The Megaphone store connection (a second database alias built from StoreConfig)
- Widget knobs: truncation length and date format used by the renderer
- REST Framework defaults (public, read-only JSON for the widget API)
- CORS so host pages on other origins can fetch the widget
- CSP: only same-origin scripts (the toggle script ships as a static file)
- Static files served by WhiteNoise in production
- Swagger (drf-yasg) for /api/docs/

How environment variables drive behavior (deployment-safe)
===============================================================================
DJANGO_DEBUG              -> Enables dev mode when true. Defaults to True locally.
DJANGO_SECRET_KEY         -> Required when DJANGO_DEBUG=False (production).
DJANGO_ALLOWED_HOSTS      -> Comma-separated list of allowed hostnames in prod.
DATABASE_URL              -> Optional URL for the "default" database (SQLite otherwise).
MEGAPHONE_DB_SERVER       -> Hostname of the Megaphone MySQL server. When unset the
                             widget reads announcements from the "default" database.
MEGAPHONE_DB_PORT         -> Optional port for the Megaphone server.
MEGAPHONE_DB_DATABASE     -> Megaphone schema name.
MEGAPHONE_DB_USERNAME     -> Read-only account for the Megaphone schema.
MEGAPHONE_DB_PASSWORD     -> Password for that account.
MEGAPHONE_TRUNCATE_AT     -> Characters shown before "show more" (default 300).
MEGAPHONE_DATE_FORMAT     -> Django date format for timestamps (default "jS F Y").
MEGAPHONE_LOG_LEVEL       -> Level of the "announcements" logger (default INFO).
CORS_ALLOW_ALL_ORIGINS    -> Dev toggle to allow any origin (default True in dev).
CORS_ALLOWED_ORIGINS      -> Comma-separated list of exact origins (prod).
WIDGET_FRAME_ANCESTORS    -> Comma-separated origins allowed to embed the widget.

Why some ordering matters
===============================================================================
- We compute DEBUG first so SECRET_KEY can enforce "prod requires a key."
- The Megaphone alias is only added when a server is configured, so local dev
  and the test suite run entirely on SQLite.
"""

from pathlib import Path
from urllib.parse import urlparse
import os

import dj_database_url

from announcements.config import StoreConfig


# ---------------------------
# Helpers for env parsing
# ---------------------------
def _get_bool(env_key: str, default: bool = False) -> bool:
    """Parse booleans from env like '1', 'true', 'yes'."""
    raw = os.environ.get(env_key, str(default))
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}

def _get_int(env_key: str, default: int) -> int:
    raw = os.environ.get(env_key, "").strip()
    return int(raw) if raw else default

def _get_list(env_key: str, default=None):
    """Parse comma-separated lists from env (e.g., 'a.com,b.com')."""
    if default is None:
        default = []
    raw = os.environ.get(env_key)
    if not raw:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]

def _origin_from(url: str) -> str:
    """Turn a full URL into an origin string (scheme://host[:port])."""
    p = urlparse(url or "")
    if not p.scheme or not p.hostname:
        return ""
    return f"{p.scheme}://{p.hostname}" + (f":{p.port}" if p.port else "")


BASE_DIR = Path(__file__).resolve().parent.parent

# Reads DJANGO_DEBUG from env. Defaults to True for dev.
DEBUG = _get_bool("DJANGO_DEBUG", True)


# --- CORS (host pages fetch the widget from other origins) --------------------
CORS_ALLOW_ALL_ORIGINS = _get_bool("CORS_ALLOW_ALL_ORIGINS", DEBUG)
CORS_ALLOWED_ORIGINS = _get_list("CORS_ALLOWED_ORIGINS", [])
CORS_ALLOW_METHODS = ["GET", "OPTIONS"]

# --- Framing / CSP --------------------------------------------------------------
# The widget may be embedded by intranet pages in an <iframe>; framing is
# controlled by CSP frame-ancestors only (no X-Frame-Options header).

_allowed_ancestors = {"'self'"}
for o in CORS_ALLOWED_ORIGINS + _get_list("WIDGET_FRAME_ANCESTORS", []):
    origin = _origin_from(o)
    if origin:
        _allowed_ancestors.add(origin)

# django-csp v4+ format:
CONTENT_SECURITY_POLICY = {
    "DIRECTIVES": {
        "default-src": ["'self'"],
        # show more / show less are wired by static/announcements/megaphone.js
        "script-src": ["'self'"],
        # announcement blocks carry inline style attributes
        "style-src": ["'self'", "'unsafe-inline'"],
        "frame-ancestors": sorted(_allowed_ancestors),
    }
}


# SECRET_KEY with safe production enforcement
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY") or (
    "django-insecure-megaphone-dev-key-7c1f0e2b9d" if DEBUG else None
)
if not SECRET_KEY:
    raise RuntimeError("DJANGO_SECRET_KEY must be set when DJANGO_DEBUG=False")

ALLOWED_HOSTS = _get_list("DJANGO_ALLOWED_HOSTS", ["*"] if DEBUG else ["127.0.0.1"])


INSTALLED_APPS = [
    # Django core (auth/contenttypes are needed by DRF's anonymous user)
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.staticfiles',

    # Third-party
    'rest_framework',
    'corsheaders',
    'drf_yasg',                                   # Swagger/OpenAPI docs
    'csp',

    # Local apps
    'announcements',
]

SWAGGER_SETTINGS = {
    "USE_SESSION_AUTH": False,   # the API is public; no login in the docs
    "SECURITY_DEFINITIONS": None,
}

MIDDLEWARE = [
    # CORS should be as high as possible
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.common.CommonMiddleware',

    'django.middleware.security.SecurityMiddleware',
    "csp.middleware.CSPMiddleware",
    'whitenoise.middleware.WhiteNoiseMiddleware',  # Serves static in prod
]

REST_FRAMEWORK = {
    # Announcements are public; authentication is handled by the host pages.
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": (
        "rest_framework.permissions.AllowAny",
    ),
    "DEFAULT_RENDERER_CLASSES": (
        "rest_framework.renderers.JSONRenderer",
    ),
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "UNAUTHENTICATED_USER": None,
}

ROOT_URLCONF = 'megaphone_backend.urls'
WSGI_APPLICATION = 'megaphone_backend.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
        },
    },
]


# --- Database (DATABASE_URL when set; SQLite otherwise) ---
DB_URL = os.environ.get("DATABASE_URL", "").strip()
IS_POSTGRES = DB_URL.startswith("postgres://") or DB_URL.startswith("postgresql://")

if DB_URL:
    DATABASES = {
        "default": dj_database_url.parse(
            DB_URL,
            conn_max_age=0,          # widget requests release their connection
            ssl_require=IS_POSTGRES,
        )
    }
else:
    # Default to SQLite for local dev/CI
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

# --- Megaphone store ---
# Credentials live in an explicit StoreConfig; the repository only ever sees
# the alias name. Without a configured server the "default" database doubles
# as the store (dev, CI, seed_megaphone).
MEGAPHONE_STORE = StoreConfig.from_env()
if MEGAPHONE_STORE.is_configured:
    DATABASES["megaphone"] = MEGAPHONE_STORE.as_database()
    MEGAPHONE_DATABASE_ALIAS = "megaphone"
else:
    MEGAPHONE_DATABASE_ALIAS = "default"

# --- Widget rendering ---
MEGAPHONE_TRUNCATE_AT = _get_int("MEGAPHONE_TRUNCATE_AT", 300)
MEGAPHONE_DATE_FORMAT = os.environ.get("MEGAPHONE_DATE_FORMAT", "jS F Y")


LANGUAGE_CODE = 'en-gb'
TIME_ZONE = os.environ.get("DJANGO_TIME_ZONE", "Europe/London")
USE_I18N = True
USE_TZ = True

# Static (toggle script + Swagger UI assets)
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "django.request": {  # 500s, 404s with exceptions
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": True,
        },
        "django": {
            "handlers": ["console"],
            "level": "INFO",
        },
        "announcements": {
            "handlers": ["console"],
            "level": os.environ.get("MEGAPHONE_LOG_LEVEL", "INFO").upper(),
            "propagate": False,
        },
    },
}
