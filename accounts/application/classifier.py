# accounts/application/classifier.py
import logging

from accounts.domain.value_objects import (Document, LifecycleEvent,
                                           LifecycleEventType, MutationEvent,
                                           MutationKind, UserData, UserRecord)

logger = logging.getLogger(__name__)

# Valor literal que marca una cuenta activa. Comparación exacta: no vale "truthy".
ACTIVE = 1


class TransitionClassifier:
    """
    Traduce una mutación de documento en, a lo sumo, un evento de ciclo de vida.

    - CREATED con objeto de usuario -> USER_CREATED (sin mirar `active`).
    - UPDATED con `active` pasando de != 1 a 1 -> USER_VALIDATED.
    - Cualquier otro caso -> None.
    """

    def __init__(self, store):
        self.store = store

    def classify(self, event: MutationEvent) -> LifecycleEvent | None:
        document = event.document
        if not self.store.has_user_record(document):
            return None

        record = self.read_user_record(document)

        if event.kind is MutationKind.CREATED:
            return self._lifecycle_event(LifecycleEventType.USER_CREATED, event, record)

        if not self._is_active(document):
            return None

        try:
            previous = self.store.fetch_previous_revision(document)
        except Exception:
            # HistoryRetrievalError o cualquier fallo del backend de historial: no se notifica
            logger.exception(
                "Error while retrieving previous version of document with name [%s]",
                event.document_id,
            )
            return None

        if self.store.has_user_record(previous) and self._is_active(previous):
            # Ya estaba activo: no se repite la validación
            return None

        return self._lifecycle_event(LifecycleEventType.USER_VALIDATED, event, record)

    def read_user_record(self, document: Document) -> UserRecord:
        fields = document.user_record or {}
        return UserRecord(
            active=fields.get("active"),
            first_name=self.store.get_string_field(document, "first_name"),
            last_name=self.store.get_string_field(document, "last_name"),
            email=self.store.get_string_field(document, "email"),
        )

    def _is_active(self, document: Document) -> bool:
        return self.store.get_int_field(document, "active") == ACTIVE

    @staticmethod
    def _lifecycle_event(event_type, event: MutationEvent, record: UserRecord) -> LifecycleEvent:
        lifecycle = LifecycleEvent(
            type=event_type,
            document_id=event.document_id,
            user_data=UserData(
                first_name=record.first_name,
                last_name=record.last_name,
                email=record.email,
            ),
        )
        logger.info("Lifecycle event %s derived from [%s]", event_type.value, event.document_id)
        return lifecycle


def classify(event: MutationEvent, store) -> LifecycleEvent | None:
    return TransitionClassifier(store).classify(event)
