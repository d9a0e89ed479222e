import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('SEARCHSYSTEM_SECRET_KEY', 'django-insecure-searchsystem-development-key')

DEBUG = os.environ.get('SEARCHSYSTEM_DEBUG', '1') == '1'

ALLOWED_HOSTS = os.environ.get('SEARCHSYSTEM_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',')

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'searchsystem.apps.SearchSystemConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'searchsystem_site.urls'

WSGI_APPLICATION = 'searchsystem_site.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

USE_TZ = True

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'searchsystem': {
            'handlers': ['console'],
            'level': os.environ.get('SEARCHSYSTEM_LOG_LEVEL', 'INFO'),
        },
    },
}

SEARCHSYSTEM = {
    'DEFAULT_MAX_ERRORS': 1,
    'MAX_PATTERN_LENGTH': 64,
    'MAX_TEXT_LENGTH': 10000,
    'RECOGNIZER_SYMBOLS': ('a', 'b'),
}
