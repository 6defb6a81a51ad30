import os
import structlog
import sys

from corsheaders.defaults import default_headers
from dotenv import load_dotenv


BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
LOG_DIR = os.path.join(BASE_DIR, 'var/log')

if not os.path.exists(LOG_DIR):
    os.makedirs(LOG_DIR)

# Load Environment variables, defaulting to prod, where
# we don't inject DJANGO_ENV.
DJANGO_ENV = os.getenv("DJANGO_ENV", "prod")
ENVIRONMENTS = {
  "local": ".env.local",
  "docker": ".env.docker",
}

sys.stdout.write(f"Loading environment {DJANGO_ENV}\n")
dotenv_path = os.path.join(BASE_DIR, "config", ENVIRONMENTS.get(DJANGO_ENV) or ".env")

sys.stdout.write(f"Loading environment variables from {dotenv_path}\n")
load_dotenv(dotenv_path)


def to_bool(value):
    return str(value).lower() == "true"


# Secrets
SECRET_KEY = os.getenv("SECRET_KEY")

# Simulator Golf Tour
SGT_BASE_URL = os.getenv("SGT_BASE_URL", "https://simulatorgolftour.com/sgt-api/club-admin")
SGT_CLUB_URL = os.getenv("SGT_CLUB_URL", "birdiesbayside")
SGT_USERNAME = os.getenv("SGT_USERNAME")
SGT_PASSWORD = os.getenv("SGT_PASSWORD")
SGT_SYNC_INTERVAL_MINUTES = int(os.getenv("SGT_SYNC_INTERVAL_MINUTES", "60"))
SGT_SYNC_TOURNAMENT_LIMIT = int(os.getenv("SGT_SYNC_TOURNAMENT_LIMIT", "20"))

# Other common settings that vary by environment
allowed_hosts = os.getenv("ALLOWED_HOSTS")
if allowed_hosts is not None:
  ALLOWED_HOSTS = list(allowed_hosts.split(","))

trusted_origins = os.getenv("CSRF_TRUSTED_ORIGINS")
if trusted_origins is not None:
  CSRF_TRUSTED_ORIGINS = list(trusted_origins.split(","))

allowed_origins = os.getenv("CORS_ALLOWED_ORIGINS")
if allowed_origins is not None:
  CORS_ALLOWED_ORIGINS = list(allowed_origins.split(","))
else:
  CORS_ALLOW_ALL_ORIGINS = True

CORS_ALLOW_HEADERS = (
    *default_headers,
    "x-client-info",
    "apikey",
)

DEBUG = to_bool(os.getenv("DEBUG", "False"))
SECURE_SSL_REDIRECT = to_bool(os.getenv("SECURE_SSL_REDIRECT", "False"))
SESSION_COOKIE_SECURE = to_bool(os.getenv("SESSION_COOKIE_SECURE", "False"))
CSRF_COOKIE_SECURE = to_bool(os.getenv("CSRF_COOKIE_SECURE", "False"))

# Common settings
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

ROOT_URLCONF = "birdies.urls"

WSGI_APPLICATION = "birdies.wsgi.application"

LANGUAGE_CODE = "en-au"

TIME_ZONE = "Australia/Melbourne"

USE_I18N = False

USE_TZ = True

STATIC_URL = "static/"
STATIC_ROOT = os.path.join(BASE_DIR, "var/static")

INSTALLED_APPS = (
    "corsheaders",
    "django_celery_beat",
    "django_celery_results",
    "django.contrib.contenttypes",
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "django_structlog",
    "rest_framework",
    "rest_framework.authtoken",
    "core",
    "members",
    "tours",
    "scores",
    "sgt",
)

MIDDLEWARE = (
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "django_structlog.middlewares.RequestMiddleware",
)

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

REST_FRAMEWORK = {
    "DEFAULT_PERMISSION_CLASSES": ("rest_framework.permissions.IsAuthenticatedOrReadOnly",),
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework.authentication.TokenAuthentication",
        "rest_framework.authentication.SessionAuthentication",
    ),
    "EXCEPTION_HANDLER": "core.exception_handler.custom_exception_handler",
}

# Logging
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json_formatter": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": structlog.processors.JSONRenderer(),
        },
        "plain_console": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": structlog.dev.ConsoleRenderer(),
        },
        "key_value": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": structlog.processors.KeyValueRenderer(key_order=['timestamp', 'level', 'event', 'logger']),
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain_console",
        },
        "flat_line_file": {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": LOG_DIR + "/birdies.log",
            "when": "W0",
            "backupCount": 12,
            "formatter": "key_value",
        },
        "celery_file": {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": LOG_DIR + "/celery.log",
            "when": "W0",
            "backupCount": 12,
            "formatter": "key_value",
        },
    },
    "loggers": {
        "django_structlog": {
            "handlers": ["console", "flat_line_file"],
            "level": "ERROR",
        },
        "celery": {
            "handlers": ["console", "celery_file"],
            "level": "INFO",
        },
        "core": {
            "handlers": ["console", "flat_line_file"],
            "level": "INFO",
        },
        "scores": {
            "handlers": ["console", "flat_line_file"],
            "level": "INFO",
        },
        "sgt": {
            "handlers": ["console", "flat_line_file"],
            "level": "INFO",
        },
    }
}

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

DJANGO_STRUCTLOG_CELERY_ENABLED = True

# Database
DATABASES = {
    'default': {
        'ENGINE': os.getenv("DATABASE_ENGINE", "django.db.backends.postgresql"),
        'NAME': os.getenv("DATABASE_NAME"),
        'USER': os.getenv("DATABASE_USER"),
        'PASSWORD': os.getenv("DATABASE_PASSWORD"),
        'HOST': os.getenv("DATABASE_HOST"),
        'PORT': os.getenv("DATABASE_PORT"),
    }
}

# Caching (the SGT api key lives in the default cache)
REDIS_URL = os.getenv("REDIS_URL")

if REDIS_URL:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.redis.RedisCache",
            "LOCATION": REDIS_URL,
        },
    }
else:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
            "LOCATION": "birdies",
        },
    }

# Celery
CELERY_BROKER_URL = REDIS_URL
CELERY_RESULT_BACKEND = "django-db"
CELERY_TIMEZONE = TIME_ZONE
CELERY_ACCEPT_CONTENT = ["json"]
CELERY_TASK_SERIALIZER = "json"
CELERY_RESULT_SERIALIZER = "json"
CELERY_TASK_TRACK_STARTED = True
CELERY_BEAT_SCHEDULE = {
    "sync-sgt-data": {
        "task": "sgt.tasks.sync_sgt_data",
        "schedule": SGT_SYNC_INTERVAL_MINUTES * 60,
    },
}
