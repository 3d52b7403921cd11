# accounts/infrastructure/stores.py
from collections import OrderedDict
from functools import lru_cache
from typing import Any

from django.conf import settings
from django.utils.module_loading import import_string

from accounts.domain.errors import CollaboratorResolutionError, HistoryRetrievalError
from accounts.domain.value_objects import Document, DocumentReference

DEFAULT_DOCUMENT_STORE = "accounts.infrastructure.stores.InMemoryDocumentStore"


class BaseDocumentStore:
    """
    Acceso de solo lectura a documentos y a su historial.
    Clase base abstracta: las subclases implementan fetch_previous_revision;
    el resto lee del Document.
    """

    def has_user_record(self, document: Document) -> bool:
        return document.user_record is not None

    def get_string_field(self, document: Document, name: str) -> str:
        value = (document.user_record or {}).get(name)
        if value is None:
            return ""
        return str(value)

    def get_int_field(self, document: Document, name: str) -> int:
        value: Any = (document.user_record or {}).get(name)
        # Solo enteros almacenados como tales; bool es subclase de int y no cuenta.
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return 0

    def fetch_previous_revision(self, document: Document) -> Document:
        raise NotImplementedError

    def record(self, document: Document) -> None:
        """Se llama con cada revisión observada. Los stores con historial propio lo ignoran."""
        return None


class InMemoryDocumentStore(BaseDocumentStore):
    """
    Historial de revisiones en memoria, indexado por referencia y versión.
    Se alimenta con las mutaciones observadas; guarda las últimas
    MAX_REVISIONS versiones de cada documento.
    """

    MAX_REVISIONS = 10

    def __init__(self, max_revisions: int | None = None):
        self.max_revisions = max_revisions or self.MAX_REVISIONS
        self._revisions: dict[DocumentReference, OrderedDict[str, Document]] = {}

    def save(self, document: Document) -> Document:
        history = self._revisions.setdefault(document.reference, OrderedDict())
        history[document.version] = document
        history.move_to_end(document.version)
        while len(history) > self.max_revisions:
            history.popitem(last=False)
        return document

    def record(self, document: Document) -> None:
        self.save(document)

    def revisions(self, reference: DocumentReference) -> list[Document]:
        return list(self._revisions.get(reference, {}).values())

    def fetch_previous_revision(self, document: Document) -> Document:
        if not document.previous_version:
            raise HistoryRetrievalError(document.document_id, reason="sin versión previa")
        history = self._revisions.get(document.reference, {})
        try:
            return history[document.previous_version]
        except KeyError:
            raise HistoryRetrievalError(
                document.document_id, document.previous_version, "revisión inexistente"
            ) from None

    def clear(self):
        self._revisions.clear()


@lru_cache(maxsize=None)
def get_document_store() -> BaseDocumentStore:
    path = getattr(settings, "ACCOUNTS_DOCUMENT_STORE", DEFAULT_DOCUMENT_STORE)
    try:
        store_class = import_string(path)
        store = store_class()
    except Exception as exc:
        raise CollaboratorResolutionError(
            f"No se pudo obtener el document store '{path}'"
        ) from exc
    if type(store).fetch_previous_revision is BaseDocumentStore.fetch_previous_revision:
        raise CollaboratorResolutionError(
            f"'{path}' no implementa fetch_previous_revision"
        )
    return store
