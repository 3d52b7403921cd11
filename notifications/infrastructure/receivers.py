# notifications/infrastructure/receivers.py
from django.dispatch import receiver

from accounts.domain.value_objects import LifecycleEvent
from accounts.infrastructure.signals import user_created, user_validated
from notifications.application.dispatcher import notify_registration
from notifications.infrastructure.mail import DjangoTemplateMailer


@receiver(user_created, dispatch_uid="notifications.registration.user_created")
@receiver(user_validated, dispatch_uid="notifications.registration.user_validated")
def registration_notifier(sender, event: LifecycleEvent, source=None, data=None, **kwargs):
    return notify_registration(event, DjangoTemplateMailer())
