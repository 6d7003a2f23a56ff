import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

ENV_LOCAL = 'local'
ENV_DEV = 'dev'
ENV_PROD = 'prod'

APP_ENV = os.environ.get('APP_ENV', ENV_LOCAL)

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'insecure-local-key')

DEBUG = os.environ.get('DJANGO_DEBUG', '1' if APP_ENV == ENV_LOCAL else '0') == '1'

ALLOWED_HOSTS = os.environ.get('DJANGO_ALLOWED_HOSTS', '*').split(',')

INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'rest_framework',
    'reviewers',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'review_balancer.urls'
APPEND_SLASH = False

WSGI_APPLICATION = 'review_balancer.wsgi.application'

if os.environ.get('POSTGRES_HOST'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'HOST': os.environ['POSTGRES_HOST'],
            'PORT': os.environ.get('POSTGRES_PORT', '5432'),
            'USER': os.environ.get('POSTGRES_USER', 'postgres'),
            'PASSWORD': os.environ.get('POSTGRES_PASSWORD', ''),
            'NAME': os.environ.get('POSTGRES_DB', 'reviewers'),
            'OPTIONS': {
                'sslmode': os.environ.get('POSTGRES_SSLMODE', 'disable'),
            },
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

USE_TZ = True
TIME_ZONE = 'UTC'

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'],
    'DEFAULT_PARSER_CLASSES': ['rest_framework.parsers.JSONParser'],
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [],
    'UNAUTHENTICATED_USER': None,
}

LOG_LEVEL = {
    ENV_LOCAL: 'DEBUG',
    ENV_DEV: 'DEBUG',
    ENV_PROD: 'INFO',
}.get(APP_ENV, 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'pretty': {
            'format': '[{asctime}] {levelname:<7} {name}: {message}',
            'style': '{',
        },
        'structured': {
            'format': 'time={asctime} level={levelname} logger={name} env=' + APP_ENV + ' msg="{message}"',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'pretty' if APP_ENV == ENV_LOCAL else 'structured',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'reviewers': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'django.request': {
            'handlers': ['console'],
            'level': 'ERROR',
            'propagate': False,
        },
    },
}
