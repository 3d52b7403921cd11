class MailDeliveryError(Exception):
    """Fallo al enviar la notificación a un destinatario."""

    def __init__(self, recipient: str, reason: str = ""):
        self.recipient = recipient
        msg = f"No se pudo enviar la notificación a <{recipient}>"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
