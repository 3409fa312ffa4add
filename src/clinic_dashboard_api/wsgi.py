import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

# O DI container é montado em ClinicDashboardConfig.ready()
application = get_wsgi_application()
