# accounts/application/event_bus.py
"""
Resolución perezosa del bus de eventos.

El bus NO puede ser dependencia directa del receptor de documentos: el arranque
del mecanismo de distribución necesita que todos los receptores existan antes.
Se resuelve en el primer publish y queda memoizado para todo el proceso.
"""
from functools import lru_cache

from django.conf import settings
from django.utils.module_loading import import_string

from accounts.domain.errors import CollaboratorResolutionError

DEFAULT_EVENT_BUS = "accounts.infrastructure.bus.SignalEventBus"


@lru_cache(maxsize=None)
def get_event_bus():
    path = getattr(settings, "ACCOUNTS_EVENT_BUS", DEFAULT_EVENT_BUS)
    try:
        return import_string(path)()
    except Exception as exc:
        raise CollaboratorResolutionError(
            f"Could not retrieve an event bus from '{path}'"
        ) from exc
