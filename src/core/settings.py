"""Django settings for flatfile-wiki project."""

from pathlib import Path

from decouple import Csv, config

# Build paths
BASE_DIR = Path(__file__).resolve().parent.parent
VAR_DIR = BASE_DIR.parent / "var"

# Security
SECRET_KEY = config("SECRET_KEY", default="django-insecure-local-development-key")
DEBUG = config("DEBUG", default=False, cast=bool)
ALLOWED_HOSTS = config("ALLOWED_HOSTS", default="*", cast=Csv())

# Application definition
INSTALLED_APPS = [
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "core.apps.CoreConfig",
    "wiki",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "core.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.static",
                "django.contrib.messages.context_processors.messages",
                "core.context_processors.get_title",
            ]
        },
    }
]

WSGI_APPLICATION = "core.wsgi.application"

# No database: pages live on the filesystem
DATABASES = {}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files
STATIC_URL = "/static/"
STATIC_ROOT = VAR_DIR / "static"

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedStaticFilesStorage",
    },
}

WHITENOISE_USE_FINDERS = True

# Site configuration
SITE_TITLE = config("SITE_TITLE", default="Flatfile Wiki")

# Use cookie-based messages (no session required)
MESSAGE_STORAGE = "django.contrib.messages.storage.cookie.CookieStorage"

# Page storage configuration
WIKI_PAGES_PATH = Path(config("WIKI_PAGES_PATH", default=str(VAR_DIR / "pages")))
WIKI_TEMPLATE_PATH = Path(config("WIKI_TEMPLATE_PATH", default=str(BASE_DIR / "core" / "templates")))
WIKI_FRONT_PAGE = config("WIKI_FRONT_PAGE", default="FrontPage")

# Logging
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "INFO",
    },
}
