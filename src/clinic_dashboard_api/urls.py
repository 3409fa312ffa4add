from django.urls import path

from checkup_alerts.adapters.observability.metrics import metrics

urlpatterns = [
    path('metrics/', metrics, name='metrics'),
]
