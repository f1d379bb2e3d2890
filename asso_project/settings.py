"""
Django settings for asso_project.

Deployment-specific values (secrets, database, payment provider credentials)
come from environment variables. Everything an administrator can change at
runtime lives in the Setting table instead (see core.site_settings).
"""
import os
from datetime import timedelta
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env(name, default=None):
    return os.environ.get(name, default)


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def env_int(name, default):
    value = os.environ.get(name)
    return int(value) if value else default


SECRET_KEY = env('DJANGO_SECRET_KEY', 'django-insecure-change-me-in-production')

DEBUG = env_bool('DJANGO_DEBUG', True)

ALLOWED_HOSTS = [h.strip() for h in env('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',') if h.strip()]


# Application definition

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    'rest_framework',
    'rest_framework_simplejwt.token_blacklist',

    'core',
    'core.user_accounts',
    'core.permissions',
    'core.site_settings',
    'core.media_library',
    'events',
    'cafeteria',
    'content',
    'payments',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'core.permissions.middleware.RouteGuardMiddleware',
]

ROOT_URLCONF = 'asso_project.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'asso_project.wsgi.application'


# Database

DATABASES = {
    'default': {
        'ENGINE': env('DATABASE_ENGINE', 'django.db.backends.sqlite3'),
        'NAME': env('DATABASE_NAME', str(BASE_DIR / 'db.sqlite3')),
        'USER': env('DATABASE_USER', ''),
        'PASSWORD': env('DATABASE_PASSWORD', ''),
        'HOST': env('DATABASE_HOST', ''),
        'PORT': env('DATABASE_PORT', ''),
    }
}


# Authentication

AUTH_USER_MODEL = 'user_accounts.User'

AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
        'OPTIONS': {'min_length': 6},
    },
]


# Internationalization

LANGUAGE_CODE = 'en-us'

TIME_ZONE = env('DJANGO_TIME_ZONE', 'Europe/Paris')

USE_I18N = True

USE_TZ = True


# Static files and uploads

STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

MEDIA_URL = '/uploads/'
MEDIA_ROOT = Path(env('MEDIA_ROOT', str(BASE_DIR / 'uploads')))

UPLOAD_MAX_FILE_SIZE = env_int('UPLOAD_MAX_FILE_SIZE', 5 * 1024 * 1024)

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# Cache (site settings read-through cache and public response cache)

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'asso-portal',
    }
}

SITE_SETTINGS_CACHE_TTL = env_int('SITE_SETTINGS_CACHE_TTL', 300)

PUBLIC_PAGE_CACHE_TTL = env_int('PUBLIC_PAGE_CACHE_TTL', 60)


# Django REST framework

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'core.user_accounts.authentication.CookieJWTAuthentication',
    ),
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.IsAuthenticated',
    ),
    'DEFAULT_RENDERER_CLASSES': (
        'asso_project.response_formatter.StandardizedJSONRenderer',
    ),
    'EXCEPTION_HANDLER': 'asso_project.response_formatter.custom_exception_handler',
    'TEST_REQUEST_DEFAULT_FORMAT': 'json',
}

SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME': timedelta(minutes=env_int('JWT_ACCESS_MINUTES', 60)),
    'REFRESH_TOKEN_LIFETIME': timedelta(days=env_int('JWT_REFRESH_DAYS', 7)),
    'ROTATE_REFRESH_TOKENS': False,
    'BLACKLIST_AFTER_ROTATION': True,
    'SIGNING_KEY': SECRET_KEY,
    'AUTH_HEADER_TYPES': ('Bearer',),
    'USER_ID_FIELD': 'id',
    'USER_ID_CLAIM': 'user_id',
}

# Cookie carrying the signed session token for browser clients
SESSION_TOKEN_COOKIE = env('SESSION_TOKEN_COOKIE', 'asso_session')
SESSION_TOKEN_COOKIE_SECURE = env_bool('SESSION_TOKEN_COOKIE_SECURE', not DEBUG)


# SumUp payment processor

SUMUP_API_URL = env('SUMUP_API_URL', 'https://api.sumup.com')
SUMUP_API_KEY = env('SUMUP_API_KEY', '')
SUMUP_MERCHANT_CODE = env('SUMUP_MERCHANT_CODE', '')
SUMUP_TIMEOUT_SECONDS = env_int('SUMUP_TIMEOUT_SECONDS', 15)


# Logging

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': env('DJANGO_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
        'asso_project': {'handlers': ['console'], 'level': 'INFO', 'propagate': False},
        'core': {'handlers': ['console'], 'level': 'INFO', 'propagate': False},
        'events': {'handlers': ['console'], 'level': 'INFO', 'propagate': False},
        'cafeteria': {'handlers': ['console'], 'level': 'INFO', 'propagate': False},
        'content': {'handlers': ['console'], 'level': 'INFO', 'propagate': False},
        'payments': {'handlers': ['console'], 'level': 'INFO', 'propagate': False},
    },
}
