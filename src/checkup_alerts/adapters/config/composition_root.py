from dependency_injector import containers, providers

container = None

def setup_di_container_from_settings(settings, *, rebuild: bool = False):  # noqa: PLR0915
    """Inicializa o DI container após o Django já estar com settings carregados."""
    global container  # noqa: PLW0603
    if container is not None and not rebuild:
        import structlog
        structlog.get_logger().debug("DI container já inicializado.")
        return container

    # ------- IMPORTS DE INFRA E ADAPTERS -------
    from datetime import timedelta
    from zoneinfo import ZoneInfo

    # Notificadores e métricas
    from checkup_alerts.adapters.notifiers.registry import get_notifier
    from checkup_alerts.adapters.observability.metrics import register_metric_listeners

    # Repositórios concretos (Django ORM e memória)
    from checkup_alerts.adapters.repositories.alert_repo_impl import AlertRepoImpl
    from checkup_alerts.adapters.repositories.clinic_settings_repo_impl import ClinicSettingsRepoImpl
    from checkup_alerts.adapters.repositories.in_memory_repos import (
        InMemoryAlertRepo,
        InMemoryClinicSettingsRepo,
        InMemoryMessageRepo,
        InMemoryPatientRepo,
    )
    from checkup_alerts.adapters.repositories.message_repo_impl import MessageRepoImpl
    from checkup_alerts.adapters.repositories.patient_repo_impl import PatientRepoImpl

    # ------- IMPORTS DO CORE -------
    # Commands
    from checkup_alerts.core.application.commands.alert_commands import (
        ScanCheckupRemindersCommand,
        SendAlertCommand,
    )
    from checkup_alerts.core.application.commands.clinic_settings_commands import (
        UpdateClinicSettingsCommand,
    )
    from checkup_alerts.core.application.commands.patient_commands import (
        CreatePatientCommand,
        DeletePatientCommand,
        UpdatePatientCommand,
    )
    from checkup_alerts.core.application.cqrs import CommandBusImpl, QueryBusImpl

    # Handlers
    from checkup_alerts.core.application.handlers.alert_handlers import (
        ListAlertsHandler,
        ListMessagesHandler,
        ScanCheckupRemindersHandler,
        SendAlertHandler,
    )
    from checkup_alerts.core.application.handlers.clinic_settings_handlers import (
        UpdateClinicSettingsHandler,
    )
    from checkup_alerts.core.application.handlers.dashboard_handlers import DashboardSummaryHandler
    from checkup_alerts.core.application.handlers.patient_handlers import (
        CreatePatientHandler,
        DeletePatientHandler,
        UpdatePatientHandler,
    )

    # Queries
    from checkup_alerts.core.application.queries.alert_queries import ListAlertsQuery, ListMessagesQuery
    from checkup_alerts.core.application.queries.dashboard_queries import GetDashboardSummaryQuery

    # Serviços
    from checkup_alerts.core.application.services.alert_dispatcher import AlertDispatcher
    from checkup_alerts.core.application.services.checkup_alert_service import CheckupAlertFacadeService
    from checkup_alerts.core.application.services.dashboard_service import DashboardService
    from checkup_alerts.core.application.services.demo_seed import seed_demo_data
    from checkup_alerts.core.application.services.reminder_scanner import ReminderScanner
    from checkup_alerts.core.application.services.reminder_scheduler import ReminderScheduler
    from checkup_alerts.core.domain.services.event_dispatcher import EventDispatcher

    class Container(containers.DeclarativeContainer):
        config = providers.Configuration()

        # Event Dispatcher
        event_dispatcher = providers.Singleton(EventDispatcher)

        # ------- REPOSITÓRIOS (backend escolhido por CHECKUP_REPOSITORY_BACKEND) -------
        patient_repo = providers.Selector(
            config.repository_backend,
            django=providers.Singleton(PatientRepoImpl, clinic_id=config.clinic_id),
            memory=providers.Singleton(InMemoryPatientRepo),
        )
        alert_repo = providers.Selector(
            config.repository_backend,
            django=providers.Singleton(AlertRepoImpl, clinic_id=config.clinic_id),
            memory=providers.Singleton(InMemoryAlertRepo),
        )
        clinic_settings_repo = providers.Selector(
            config.repository_backend,
            django=providers.Singleton(ClinicSettingsRepoImpl, clinic_id=config.clinic_id),
            memory=providers.Singleton(InMemoryClinicSettingsRepo),
        )
        message_repo = providers.Selector(
            config.repository_backend,
            django=providers.Singleton(MessageRepoImpl, clinic_id=config.clinic_id),
            memory=providers.Singleton(InMemoryMessageRepo),
        )

        # ------- CANAIS -------
        whatsapp_notifier = providers.Singleton(get_notifier, "whatsapp")
        email_notifier = providers.Singleton(get_notifier, "email")

        # ------- SERVIÇOS -------
        time_zone = providers.Singleton(ZoneInfo, config.time_zone)
        reminder_window = providers.Singleton(timedelta, days=config.reminder_window_days)
        scan_interval = providers.Singleton(timedelta, seconds=config.scan_interval_seconds)

        reminder_scanner = providers.Singleton(
            ReminderScanner,
            patient_repo=patient_repo,
            alert_repo=alert_repo,
            dispatcher=event_dispatcher,
            reminder_window=reminder_window,
            tz=time_zone,
        )
        alert_dispatcher = providers.Singleton(
            AlertDispatcher,
            alert_repo=alert_repo,
            patient_repo=patient_repo,
            settings_repo=clinic_settings_repo,
            message_repo=message_repo,
            whatsapp_channel=whatsapp_notifier,
            email_channel=email_notifier,
            dispatcher=event_dispatcher,
        )
        dashboard_service = providers.Factory(
            DashboardService,
            patient_repo=patient_repo,
            alert_repo=alert_repo,
            message_repo=message_repo,
        )
        demo_seeder = providers.Callable(
            seed_demo_data,
            patient_repo=patient_repo,
            alert_repo=alert_repo,
            message_repo=message_repo,
            settings_repo=clinic_settings_repo,
        )

        # ------- HANDLERS -------
        scan_checkup_reminders_handler = providers.Factory(ScanCheckupRemindersHandler, scanner=reminder_scanner)
        send_alert_handler = providers.Factory(SendAlertHandler, alert_dispatcher=alert_dispatcher)
        create_patient_handler = providers.Factory(CreatePatientHandler, repo=patient_repo)
        update_patient_handler = providers.Factory(UpdatePatientHandler, repo=patient_repo)
        delete_patient_handler = providers.Factory(DeletePatientHandler, repo=patient_repo)
        update_clinic_settings_handler = providers.Factory(UpdateClinicSettingsHandler, repo=clinic_settings_repo)
        list_alerts_handler = providers.Factory(ListAlertsHandler, repo=alert_repo)
        list_messages_handler = providers.Factory(ListMessagesHandler, repo=message_repo)
        dashboard_handler = providers.Factory(DashboardSummaryHandler, service=dashboard_service)

        # ------- BUSES E FACHADA -------
        command_bus = providers.Singleton(CommandBusImpl, dispatcher=event_dispatcher)
        query_bus = providers.Singleton(QueryBusImpl)

        checkup_alert_service = providers.Singleton(
            CheckupAlertFacadeService,
            command_bus=command_bus,
            query_bus=query_bus,
        )
        reminder_scheduler = providers.Singleton(
            ReminderScheduler,
            run=checkup_alert_service.provided.scan,
            interval=scan_interval,
        )

        def init(self):
            register_metric_listeners(self.event_dispatcher())

            # Registrar comandos no CommandBus
            bus = self.command_bus()
            bus.register(ScanCheckupRemindersCommand, self.scan_checkup_reminders_handler())
            bus.register(SendAlertCommand, self.send_alert_handler())
            bus.register(CreatePatientCommand, self.create_patient_handler())
            bus.register(UpdatePatientCommand, self.update_patient_handler())
            bus.register(DeletePatientCommand, self.delete_patient_handler())
            bus.register(UpdateClinicSettingsCommand, self.update_clinic_settings_handler())

            # Registrar queries no QueryBus
            qb = self.query_bus()
            qb.register(ListAlertsQuery, self.list_alerts_handler())
            qb.register(ListMessagesQuery, self.list_messages_handler())
            qb.register(GetDashboardSummaryQuery, self.dashboard_handler())

    # ------- INSTANCIAÇÃO E CONFIG -------
    container = Container()
    container.config.repository_backend.from_value(getattr(settings, "CHECKUP_REPOSITORY_BACKEND", "django"))
    container.config.clinic_id.from_value(getattr(settings, "CHECKUP_CLINIC_ID", None) or None)
    container.config.time_zone.from_value(getattr(settings, "TIME_ZONE", "UTC"))
    container.config.reminder_window_days.from_value(getattr(settings, "CHECKUP_REMINDER_WINDOW_DAYS", 7))
    container.config.scan_interval_seconds.from_value(getattr(settings, "CHECKUP_SCAN_INTERVAL_SECONDS", 3600))

    # Inicializa os buses com todos os handlers
    Container.init(container)
    return container


def get_container():
    """Container global; monta a partir do `django.conf.settings` se ainda não existir."""
    if container is None:
        from django.conf import settings
        return setup_di_container_from_settings(settings)
    return container
