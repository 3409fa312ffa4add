import os

from celery import Celery

from config.structlog_config import configure_logging

# Define o módulo de configurações do Django para o Celery.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

configure_logging()

# Cria a instância do app Celery.
app = Celery('clinic_dashboard_api')

# Todas as configurações do Celery começam com CELERY_ no settings.py
# (ex: CELERY_BROKER_URL, CELERY_BEAT_SCHEDULE).
app.config_from_object('django.conf:settings', namespace='CELERY')

app.autodiscover_tasks(['clinic_dashboard_api'])
