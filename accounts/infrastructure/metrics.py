from prometheus_client import Counter

LIFECYCLE_EVENTS = Counter(
    "accounts_lifecycle_events_total",
    "Eventos de ciclo de vida de usuario derivados de mutaciones de documentos",
    ["type"],
)
