"""
Django settings for the schooldesk project.

Values come from the environment (optionally a .env file at the project root).
"""
import os
from pathlib import Path

from dotenv import load_dotenv


BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')


# ---------------------
# Security
# ---------------------
SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-change-me')
DEBUG = os.getenv('DEBUG', '1') == '1'
ALLOWED_HOSTS = [h.strip() for h in os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',') if h.strip()]


# ---------------------
# Applications
# ---------------------
INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'accounts',
    'schools',
    'academics',
    'staff',
    'students',
    'events',
    'library',
    'front_office',
    'attendance',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.locale.LocaleMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
]

ROOT_URLCONF = 'schooldesk.urls'
WSGI_APPLICATION = 'schooldesk.wsgi.application'

TEMPLATES = []

AUTH_USER_MODEL = 'accounts.User'


# ---------------------
# Database
# ---------------------
SQLITE_PATH = os.getenv('SQLITE_PATH', str(BASE_DIR / 'school.db'))

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': SQLITE_PATH,
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# ---------------------
# Internationalization
# ---------------------
LANGUAGE_CODE = 'en'
TIME_ZONE = os.getenv('TIME_ZONE', 'UTC')
USE_I18N = True
USE_TZ = True


# ---------------------
# API
# ---------------------
API_PAGE_SIZE = int(os.getenv('API_PAGE_SIZE', 20))
API_MAX_PAGE_SIZE = int(os.getenv('API_MAX_PAGE_SIZE', 100))

# Student spreadsheet import (bytes)
STUDENT_IMPORT_MAX_BYTES = int(os.getenv('STUDENT_IMPORT_MAX_BYTES', 10 * 1024 * 1024))


# ---------------------
# Logging
# ---------------------
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '[%(asctime)s] %(levelname)s in %(module)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'default',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': os.getenv('DJANGO_LOG_LEVEL', 'WARNING'),
            'propagate': False,
        },
    },
}
