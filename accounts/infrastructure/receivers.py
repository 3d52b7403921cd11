# accounts/infrastructure/receivers.py
import logging
import re

from django.conf import settings
from django.dispatch import receiver

from accounts.application.classifier import TransitionClassifier
from accounts.application.event_bus import get_event_bus
from accounts.domain.value_objects import Document, MutationEvent
from accounts.infrastructure.metrics import LIFECYCLE_EVENTS
from accounts.infrastructure.signals import document_created, document_updated
from accounts.infrastructure.stores import get_document_store

logger = logging.getLogger(__name__)


def user_document_pattern() -> re.Pattern:
    # Solo documentos del espacio reservado de usuarios, en cualquier wiki
    space = getattr(settings, "ACCOUNTS_USER_SPACE", "XWiki")
    return re.compile(rf"^[^:]+:{re.escape(space)}\..*$")


def handle_mutation(event: MutationEvent):
    """Clasifica la mutación y publica el evento derivado, si lo hay."""
    document = event.document
    if not user_document_pattern().match(document.reference.qualified):
        return None

    store = get_document_store()
    lifecycle = TransitionClassifier(store).classify(event)
    # La revisión actual será la "previa" de la próxima actualización
    store.record(document)
    if lifecycle is None:
        return None

    LIFECYCLE_EVENTS.labels(type=lifecycle.type.value).inc()
    get_event_bus().notify(lifecycle, document, lifecycle.user_data.as_map())
    return lifecycle


@receiver(document_created, dispatch_uid="accounts.document_created")
def on_document_created(sender, document: Document, **kwargs):
    handle_mutation(MutationEvent.created(document))


@receiver(document_updated, dispatch_uid="accounts.document_updated")
def on_document_updated(sender, document: Document, **kwargs):
    handle_mutation(MutationEvent.updated(document))
