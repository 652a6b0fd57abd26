"""
Quick-start development settings - unsuitable for production
See https://docs.djangoproject.com/en/5.2/howto/deployment/checklist/
"""
import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
SECRET_KEY = 'm2c-4d8x)z3o6k@f_9yqj!w1sr0v%e7hb5#tlan^ug+pi$dc'
DEBUG = True
ALLOWED_HOSTS = ['*']

# Application definition

INSTALLED_APPS = [
    'userdisplay',
]

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

# Internationalization
# https://docs.djangoproject.com/en/5.2/topics/i18n/

LANGUAGE_CODE = 'en-gb'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Logging

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'userdisplay': {
            'format': '[{asctime}] {levelname} {name}: {message}',
            'style': '{',
        }
    },
    'handlers': {
        'console': {
            'level': 'INFO',
            'class': 'logging.StreamHandler',
        },
        'userdisplay': {
            'level': 'INFO',
            'class': 'logging.StreamHandler',
            'formatter': 'userdisplay',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
        },
        'userdisplay': {
            'handlers': ['userdisplay'],
            'level': 'INFO',
            'propagate': False,
        },
    }
}

# Badge display
# Each role may override 'label', 'class' and 'tag'. Anything left out falls
# back to the defaults in userdisplay.utils.DEFAULT_BADGES.

USERDISPLAY_BADGES = {
    'staff': {
        'label': 'Staff',
        'class': 'badge badge-success',
    },
    'moderator': {
        'label': 'Mod',
        'class': 'badge badge-primary',
    },
}
