# notifications/application/configuration.py
from dataclasses import dataclass
from enum import Enum

from django.conf import settings

DEFAULT_MAIL_TEMPLATE = "XWiki.RegistrationNotificationMail"


class NotificationMode(str, Enum):
    IMMEDIATE = "IMMEDIATE"
    EMAIL_VERIFICATION = "EMAIL_VERIFICATION"


@dataclass(frozen=True)
class NotificationPolicy:
    mode: NotificationMode
    recipients: tuple[str, ...]
    template_id: str


class RegistrationNotifierConfiguration:
    """
    Lee la configuración en cada llamada (sin caché): los cambios de settings
    se ven en la siguiente decisión. Ningún valor ausente es error.
    """

    def __init__(self, source=None):
        # source: cualquier objeto con atributos tipo settings (por defecto django.conf.settings)
        self.source = source if source is not None else settings

    def _get(self, key: str, default):
        value = getattr(self.source, key, None)
        return default if value is None else value

    def get_recipients(self) -> list[str]:
        raw = self._get("REGISTRATION_NOTIFIER_EMAIL_ADDRESSES", "")
        if isinstance(raw, (list, tuple)):
            raw = ",".join(raw)
        if not raw.strip():
            return []
        return [addr.strip() for addr in raw.split(",") if addr.strip()]

    def get_template_id(self) -> str:
        return self._get("REGISTRATION_NOTIFIER_EMAIL_TEMPLATE", "") or DEFAULT_MAIL_TEMPLATE

    def is_email_verification_mode(self) -> bool:
        return str(self._get("USE_EMAIL_VERIFICATION", "")) == "1"

    def get_mode(self) -> NotificationMode:
        if self.is_email_verification_mode():
            return NotificationMode.EMAIL_VERIFICATION
        return NotificationMode.IMMEDIATE

    def get_admin_email(self) -> str:
        return self._get("ADMIN_EMAIL", "") or self._get("DEFAULT_FROM_EMAIL", "")

    def isolate_failures(self) -> bool:
        return bool(self._get("REGISTRATION_NOTIFIER_ISOLATE_FAILURES", False))

    def get_policy(self) -> NotificationPolicy:
        return NotificationPolicy(
            mode=self.get_mode(),
            recipients=tuple(self.get_recipients()),
            template_id=self.get_template_id(),
        )
