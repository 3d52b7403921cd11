from django.apps import AppConfig


class NotificationsConfig(AppConfig):
    name = "notifications"
    verbose_name = "Notificaciones de registro"

    def ready(self):
        from notifications.infrastructure import receivers  # noqa: F401
