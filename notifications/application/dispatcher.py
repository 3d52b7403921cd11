# notifications/application/dispatcher.py
import logging
from dataclasses import dataclass, field
from typing import Protocol

from accounts.domain.value_objects import LifecycleEvent
from notifications.application.configuration import (NotificationPolicy,
                                                     RegistrationNotifierConfiguration)
from notifications.application.errors import MailDeliveryError
from notifications.application.policies import should_dispatch

logger = logging.getLogger(__name__)


class Mailer(Protocol):
    def send(self, from_email, to, cc, bcc, subject, template_id, context) -> bool: ...


@dataclass
class DispatchOutcome:
    template_id: str
    sent: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def delivered(self) -> bool:
        return not self.failed and not self.skipped


def render_context(event: LifecycleEvent) -> dict[str, str]:
    # Tal cual vienen del evento: sin trim, escape ni validación
    return event.user_data.as_map()


class NotificationDispatcher:
    def __init__(self, mailer: Mailer, configuration: RegistrationNotifierConfiguration | None = None):
        self.mailer = mailer
        self.configuration = configuration or RegistrationNotifierConfiguration()

    def dispatch(self, event: LifecycleEvent, policy: NotificationPolicy) -> DispatchOutcome:
        """
        Envía la plantilla a cada destinatario, en orden.
        Por defecto el primer fallo corta el bucle y el resto queda en `skipped`;
        con REGISTRATION_NOTIFIER_ISOLATE_FAILURES se intentan todos.
        """
        sender = self.configuration.get_admin_email()
        isolate = self.configuration.isolate_failures()
        context = render_context(event)
        outcome = DispatchOutcome(template_id=policy.template_id)

        recipients = list(policy.recipients)
        for idx, recipient in enumerate(recipients):
            try:
                ok = self.mailer.send(sender, recipient, None, None, "", policy.template_id, context)
                if ok is False:
                    raise MailDeliveryError(recipient, "el transporte rechazó el mensaje")
            except MailDeliveryError:
                logger.exception(
                    "Registration notification for [%s] failed for recipient <%s>",
                    event.document_id, recipient,
                )
                outcome.failed.append(recipient)
                if not isolate:
                    outcome.skipped.extend(recipients[idx + 1:])
                    break
                continue
            outcome.sent.append(recipient)

        logger.info(
            "Registration notification %s for [%s]: sent=%d failed=%d skipped=%d",
            event.type.value, event.document_id,
            len(outcome.sent), len(outcome.failed), len(outcome.skipped),
        )
        return outcome


def notify_registration(
    event: LifecycleEvent,
    mailer: Mailer,
    configuration: RegistrationNotifierConfiguration | None = None,
) -> DispatchOutcome | None:
    """Aplica el filtro de destinatarios y la política; despacha si corresponde."""
    configuration = configuration or RegistrationNotifierConfiguration()
    policy = configuration.get_policy()
    if not should_dispatch(policy, event.type):
        logger.debug(
            "Skipping %s for [%s] (mode=%s, recipients=%d)",
            event.type.value, event.document_id, policy.mode.value, len(policy.recipients),
        )
        return None
    return NotificationDispatcher(mailer, configuration).dispatch(event, policy)
