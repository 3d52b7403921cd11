from accounts.domain.value_objects import LifecycleEventType
from notifications.application.configuration import NotificationMode, NotificationPolicy

# (modo, tipo de evento) -> ¿notificar?
NOTIFY_TABLE = {
    (NotificationMode.IMMEDIATE, LifecycleEventType.USER_CREATED): True,
    (NotificationMode.IMMEDIATE, LifecycleEventType.USER_VALIDATED): False,
    (NotificationMode.EMAIL_VERIFICATION, LifecycleEventType.USER_CREATED): False,
    (NotificationMode.EMAIL_VERIFICATION, LifecycleEventType.USER_VALIDATED): True,
}


def should_notify(mode: NotificationMode, event_type: LifecycleEventType) -> bool:
    return NOTIFY_TABLE[(NotificationMode(mode), LifecycleEventType(event_type))]


def should_dispatch(policy: NotificationPolicy, event_type: LifecycleEventType) -> bool:
    """Sin destinatarios nunca se despacha, sea cual sea el modo."""
    if not policy.recipients:
        return False
    return should_notify(policy.mode, event_type)
