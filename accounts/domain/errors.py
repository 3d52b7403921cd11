class HistoryRetrievalError(Exception):
    """La revisión previa del documento no está disponible o está corrupta."""

    def __init__(self, document_id: str, version: str | None = None, reason: str = ""):
        self.document_id = document_id
        self.version = version
        msg = f"No se pudo recuperar la revisión previa de [{document_id}]"
        if version:
            msg += f" (versión {version})"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class CollaboratorResolutionError(RuntimeError):
    """No se pudo obtener un colaborador externo (bus de eventos, store)."""
