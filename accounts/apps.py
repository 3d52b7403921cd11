from django.apps import AppConfig


class AccountsConfig(AppConfig):
    name = "accounts"
    verbose_name = "Ciclo de vida de cuentas"

    def ready(self):
        # Registra los receptores de signals de documentos
        from accounts.infrastructure import receivers  # noqa: F401
