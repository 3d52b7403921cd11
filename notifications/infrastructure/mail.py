# notifications/infrastructure/mail.py
import logging
from smtplib import SMTPException

from django.core.mail import EmailMessage
from django.template import TemplateDoesNotExist, TemplateSyntaxError
from django.template.loader import render_to_string

from notifications.application.errors import MailDeliveryError
from notifications.infrastructure.metrics import NOTIFICATION_SENDS

logger = logging.getLogger(__name__)


def template_names(template_id: str) -> tuple[str, str]:
    """Plantillas (cuerpo, asunto) para un id tipo "XWiki.RegistrationNotificationMail"."""
    base = f"notifications/mail/{template_id}"
    return f"{base}.txt", f"{base}.subject.txt"


class DjangoTemplateMailer:
    """
    Transporte de correo: renderiza la plantilla con el contexto y envía vía
    EMAIL_BACKEND. Un solo punto de entrada: send().
    """

    def __init__(self, connection=None):
        self.connection = connection

    def render(self, template_id: str, subject: str, context: dict) -> tuple[str, str]:
        body_tpl, subject_tpl = template_names(template_id)
        body = render_to_string(body_tpl, context)
        if not subject.strip():
            # El asunto sale de la plantilla; una sola línea
            subject = " ".join(render_to_string(subject_tpl, context).split())
        return subject, body

    def send(self, from_email, to, cc, bcc, subject, template_id, context) -> bool:
        try:
            subject, body = self.render(template_id, subject or "", context)
            message = EmailMessage(
                subject=subject,
                body=body,
                from_email=from_email or None,
                to=[to],
                cc=[cc] if cc else None,
                bcc=[bcc] if bcc else None,
                connection=self.connection,
            )
            sent = message.send(fail_silently=False)
        except (TemplateDoesNotExist, TemplateSyntaxError) as exc:
            NOTIFICATION_SENDS.labels(result="failed").inc()
            raise MailDeliveryError(to, f"plantilla inválida {exc}") from exc
        except (SMTPException, OSError) as exc:
            NOTIFICATION_SENDS.labels(result="failed").inc()
            raise MailDeliveryError(to, str(exc)) from exc

        result = "sent" if sent else "failed"
        NOTIFICATION_SENDS.labels(result=result).inc()
        logger.debug("Mail %s to <%s> with template %s: %s", subject, to, template_id, result)
        return bool(sent)
