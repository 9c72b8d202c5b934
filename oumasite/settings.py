"""
Django settings for the oumasite project.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('SECRET_KEY', 'ouma-machinery-dev-secret-key')

DEBUG = os.environ.get('DEBUG', 'True').lower() == 'true'

ALLOWED_HOSTS = os.environ.get('ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',')

# Default port for `manage.py runserver`
PORT = int(os.environ.get('PORT', '3000'))

INSTALLED_APPS = [
    'website',  # before staticfiles so its runserver (PORT aware) wins
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'django.contrib.sessions',
    'django.contrib.staticfiles',
    'rest_framework',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'website.middleware.AccessLogMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'website.middleware.LocaleMiddleware',
]

ROOT_URLCONF = 'oumasite.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.template.context_processors.csrf',
                'website.context_processors.site',
            ],
        },
    },
]

WSGI_APPLICATION = 'oumasite.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'database.sqlite',
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

SESSION_ENGINE = 'django.contrib.sessions.backends.db'
SESSION_EXPIRE_AT_BROWSER_CLOSE = False

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.PBKDF2PasswordHasher',
    'django.contrib.auth.hashers.PBKDF2SHA1PasswordHasher',
]

LANGUAGE_CODE = 'zh-hans'
TIME_ZONE = 'Asia/Shanghai'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'
STATICFILES_DIRS = [BASE_DIR / 'static'] if (BASE_DIR / 'static').exists() else []

# Uploaded images / videos / documents; served as /images/, /videos/, /docs/
MEDIA_ROOT = BASE_DIR / 'public'
UPLOAD_FOLDERS = ('images', 'videos', 'docs')

DATA_UPLOAD_MAX_NUMBER_FILES = 200

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': ['rest_framework.permissions.AllowAny'],
    'UNAUTHENTICATED_USER': None,
    'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'],
}

# ---- Site behaviour ----
SUPPORTED_LANGUAGES = ('zh', 'en')
ZH_COUNTRIES = ('CN', 'TW', 'HK', 'MO')
DEFAULT_LANGUAGE_ON_GEO_ERROR = 'zh'

# GeoLite2-City database; lookups return no location when unset
GEOIP_DATABASE = os.environ.get('GEOIP_DATABASE', '')

ACCESS_LOG_EXCLUDED_PREFIXES = ('/css', '/js', '/images', '/videos', '/docs', '/static', '/admin', '/favicon.ico')

PLUGIN_COMMAND_TIMEOUT = int(os.environ.get('PLUGIN_COMMAND_TIMEOUT', '300'))
PLUGIN_OUTPUT_LIMIT = 1024 * 1024

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'console': {
            'format': '[{asctime}] {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'console',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django.db.backends': {
            'level': 'WARNING',
        },
    },
}
