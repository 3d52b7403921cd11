from prometheus_client import Counter

NOTIFICATION_SENDS = Counter(
    "notifications_registration_mail_total",
    "Envíos de correo de notificación de registro, por resultado",
    ["result"],
)
