"""
Django settings for onassist project.

Values that differ between environments are read from the environment,
with a local .env file loaded first.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv('SECRET_KEY', 'dev-only-insecure-key')
DEBUG = os.getenv('DEBUG', 'False') == 'True'
ALLOWED_HOSTS = [h for h in os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if h]

# Public root of the site, no trailing slash
SITE_URL = os.getenv('SITE_URL', 'https://onassist.lovable.app').rstrip('/')

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # my applications
    'catalog',
    'locations',
    'sitemap',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'onassist.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'onassist.wsgi.application'

if os.getenv('DBENGINE') == 'mysql':
    import pymysql
    pymysql.install_as_MySQLdb()
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.mysql',
            'NAME': os.getenv('DBNAME'),
            'USER': os.getenv('DBUSER'),
            'PASSWORD': os.getenv('MYDBPSSWD'),
            'HOST': os.getenv('DBHOST'),
            'PORT': os.getenv('DBPORT', '3306'),
            'OPTIONS': {'charset': 'utf8mb4'},
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

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# Sitemap generation
# 1) SITEMAP_CAPACITY: urls per sitemap document. The protocol allows 50000,
#    we stay well below to keep file size and build time down.
# 2) SITEMAP_DEBOUNCE_SECONDS: catalog changes within this window share one rebuild.
# 3) SITEMAP_LISTEN_FOR_CHANGES: rebuild when categories/services are saved or deleted.
SITEMAP_CAPACITY = int(os.getenv('SITEMAP_CAPACITY', '10000'))
SITEMAP_DEBOUNCE_SECONDS = float(os.getenv('SITEMAP_DEBOUNCE_SECONDS', '30'))
SITEMAP_LISTEN_FOR_CHANGES = os.getenv('SITEMAP_LISTEN_FOR_CHANGES', 'True') == 'True'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'filters': {
        'trigger': {
            '()': 'utils.log_filters.TriggerFilter',
        },
    },
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name} {message}',
            'style': '{',
        },
        'sitemap': {
            'format': '{asctime} {levelname} {name} [{trigger}] {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
        'sitemap_console': {
            'class': 'logging.StreamHandler',
            'filters': ['trigger'],
            'formatter': 'sitemap',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'sitemap': {
            'handlers': ['sitemap_console'],
            'level': os.getenv('SITEMAP_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
