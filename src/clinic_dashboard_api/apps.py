from django.apps import AppConfig


class ClinicDashboardConfig(AppConfig):
    name = "clinic_dashboard_api"
    verbose_name = "Clinic Dashboard API"

    def ready(self):
        from django.conf import settings

        # ─── DI container ───────────────────────────────────────────
        from checkup_alerts.adapters.config.composition_root import (
            setup_di_container_from_settings,
        )

        setup_di_container_from_settings(settings)
