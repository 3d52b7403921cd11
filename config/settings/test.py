from .base import *  # noqa: F401,F403

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
DEFAULT_FROM_EMAIL = "Wiki <no-reply@wiki>"
ADMIN_EMAIL = "admin@wiki.local"

ACCOUNTS_USER_SPACE = "XWiki"
ACCOUNTS_EVENT_BUS = "accounts.infrastructure.bus.SignalEventBus"
ACCOUNTS_DOCUMENT_STORE = "accounts.infrastructure.stores.InMemoryDocumentStore"

REGISTRATION_NOTIFIER_EMAIL_ADDRESSES = ""
REGISTRATION_NOTIFIER_EMAIL_TEMPLATE = "XWiki.RegistrationNotificationMail"
USE_EMAIL_VERIFICATION = "0"
REGISTRATION_NOTIFIER_ISOLATE_FAILURES = False

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
