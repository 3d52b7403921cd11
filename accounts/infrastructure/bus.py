from accounts.domain.value_objects import Document, LifecycleEvent, LifecycleEventType
from accounts.infrastructure.signals import user_created, user_validated

SIGNALS = {
    LifecycleEventType.USER_CREATED: user_created,
    LifecycleEventType.USER_VALIDATED: user_validated,
}


class SignalEventBus:
    """Publica eventos de ciclo de vida como signals de Django."""

    def notify(self, event: LifecycleEvent, source: Document, data: dict[str, str]):
        return SIGNALS[event.type].send(
            sender=LifecycleEvent, event=event, source=source, data=data
        )
