from pathlib import Path

from celery.schedules import crontab
from decouple import Csv, config

# -------------------------------
# Diretórios base
# -------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent

# -------------------------------
# Segurança e debug
# -------------------------------
SECRET_KEY = config('SECRET_KEY', default='dev-insecure-checkup-alerts')
DEBUG = config('DEBUG', default=False, cast=bool)
ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='localhost,127.0.0.1', cast=Csv())

# -------------------------------
# Lembretes de check-up
# -------------------------------
# "django" persiste no banco; "memory" mantém tudo no processo (demo/dev)
CHECKUP_REPOSITORY_BACKEND    = config('CHECKUP_REPOSITORY_BACKEND', default='django')
CHECKUP_CLINIC_ID             = config('CHECKUP_CLINIC_ID', default='')
CHECKUP_REMINDER_WINDOW_DAYS  = config('CHECKUP_REMINDER_WINDOW_DAYS', default=7, cast=int)
CHECKUP_SCAN_INTERVAL_SECONDS = config('CHECKUP_SCAN_INTERVAL_SECONDS', default=3600, cast=int)

# -------------------------------
# Canais (apenas log, sem provedor real)
# -------------------------------
DEFAULT_FROM_EMAIL     = config('DEFAULT_FROM_EMAIL', default='contato@saudetotal.com.br')
WHATSAPP_SENDER_NUMBER = config('WHATSAPP_SENDER_NUMBER', default='')

# -------------------------------
# Celery
# -------------------------------
CELERY_BROKER_URL                 = config('CELERY_BROKER_URL', default='memory://')
CELERY_RESULT_BACKEND             = config('CELERY_RESULT_BACKEND', default='cache+memory://')
CELERY_TASK_ACKS_LATE             = True
CELERY_TASK_REJECT_ON_WORKER_LOST = True
CELERY_WORKER_PREFETCH_MULTIPLIER = 1
CELERY_TASK_ALWAYS_EAGER          = config('CELERY_TASK_ALWAYS_EAGER', default=False, cast=bool)
CELERY_ACCEPT_CONTENT             = ["json"]
CELERY_TASK_SERIALIZER            = "json"
CELERY_TIMEZONE                   = 'America/Sao_Paulo'
CELERY_TASK_QUEUES = {
    "default":        {"exchange": "default",        "routing_key": "default"},
    "dead_letter":    {"exchange": "dead_letter",    "routing_key": "dead_letter"},
    "checkup_alerts": {"exchange": "checkup_alerts", "routing_key": "checkup_alerts"},
}
CELERY_TASK_DEFAULT_QUEUE = 'default'
CELERY_TASK_DEFAULT_EXCHANGE = 'default'
CELERY_TASK_DEFAULT_ROUTING_KEY = 'default'

# --- AGENDADOR (CELERY BEAT) ---
CELERY_BEAT_SCHEDULE = {
    # Varredura de lembretes de check-up no início de cada hora.
    'scan-checkup-reminders-hourly': {
        'task': 'clinic_dashboard_api.tasks.scan_checkup_reminders',
        'schedule': crontab(minute=0),
    },
}

# -------------------------------
# Apps, Middleware, URLs
# -------------------------------
INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'clinic_dashboard_api.apps.ClinicDashboardConfig',
    'plugins.django_interface.apps.DjangoInterfaceConfig',
]

MIDDLEWARE = [
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'clinic_dashboard_api.urls'
WSGI_APPLICATION = 'clinic_dashboard_api.wsgi.application'

# -------------------------------
# Banco de Dados
# -------------------------------
DB_ENGINE = config('DB_ENGINE', default='django.db.backends.sqlite3')
DATABASES = {
    'default': {
        'ENGINE':   DB_ENGINE,
        'NAME':     config('DB_NAME', default=str(BASE_DIR / 'db.sqlite3')),
        'USER':     config('DB_USER', default=''),
        'PASSWORD': config('DB_PASS', default=''),
        'HOST':     config('DB_HOST', default=''),
        'PORT':     config('DB_PORT', default=''),
    }
}

# -------------------------------
# Internacionalização
# -------------------------------
LANGUAGE_CODE = 'pt-br'
TIME_ZONE     = 'America/Sao_Paulo'
USE_I18N      = True
USE_TZ        = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
