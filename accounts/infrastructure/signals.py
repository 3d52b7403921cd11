# accounts/infrastructure/signals.py
from django.dispatch import Signal

# Entrada: los emite el content store. kwargs: document=<Document>
document_created = Signal()
document_updated = Signal()

# Salida: eventos de ciclo de vida. kwargs: event=<LifecycleEvent>, source=<Document>, data=<dict>
user_created = Signal()
user_validated = Signal()
