import os
from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parents[2]
env = environ.Env()
environ.Env.read_env(os.path.join(BASE_DIR, os.environ.get("ENV_FILE", ".env")))

# --- Núcleo ---
SECRET_KEY = env("SECRET_KEY", default="change-me")
DEBUG = env.bool("DEBUG", default=True)
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["*"])

LANGUAGE_CODE = "es-ve"
TIME_ZONE = "America/Caracas"
USE_I18N = True
USE_TZ = True

# --- Apps ---
INSTALLED_APPS = [
    # Django
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # Observabilidad (métricas y salud)
    "django_prometheus",
    "health_check",
    "health_check.db",
    # DRF
    "rest_framework",
    "drf_spectacular",
]

INSTALLED_APPS += [
    # Dominios
    "accounts.apps.AccountsConfig",
    # Infra notificaciones/correo
    "notifications.apps.NotificationsConfig",
]

# --- Middleware ---
MIDDLEWARE = [
    "django_prometheus.middleware.PrometheusBeforeMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "django_prometheus.middleware.PrometheusAfterMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ]
        },
    }
]

WSGI_APPLICATION = "config.wsgi.application"

# --- Base de datos ---
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": env("DB_NAME", default="wiki"),
        "USER": env("DB_USER", default="postgres"),
        "PASSWORD": env("DB_PASSWORD", default="postgres"),
        "HOST": env("DB_HOST", default="localhost"),
        "PORT": env("DB_PORT", default="5432"),
    },
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

EMAIL_BACKEND = env(
    "EMAIL_BACKEND", default="django.core.mail.backends.console.EmailBackend"
)
EMAIL_HOST = env("EMAIL_HOST", default="")
EMAIL_PORT = env.int("EMAIL_PORT", default=587)
EMAIL_HOST_USER = env("EMAIL_HOST_USER", default="")
EMAIL_HOST_PASSWORD = env("EMAIL_HOST_PASSWORD", default="")
EMAIL_USE_TLS = env.bool("EMAIL_USE_TLS", default=True)
DEFAULT_FROM_EMAIL = env("DEFAULT_FROM_EMAIL", default="Wiki <no-reply@wiki>")

# --- Ciclo de vida de cuentas ---
# Espacio reservado de documentos de usuario ("<wiki>:XWiki.<Nombre>")
ACCOUNTS_USER_SPACE = env("ACCOUNTS_USER_SPACE", default="XWiki")
# Colaboradores resolubles por ruta; el bus se resuelve en el primer uso
ACCOUNTS_EVENT_BUS = env(
    "ACCOUNTS_EVENT_BUS", default="accounts.infrastructure.bus.SignalEventBus"
)
ACCOUNTS_DOCUMENT_STORE = env(
    "ACCOUNTS_DOCUMENT_STORE",
    default="accounts.infrastructure.stores.InMemoryDocumentStore",
)

# --- Notificación de registro ---
# Lista separada por comas; vacío = no se notifica a nadie
REGISTRATION_NOTIFIER_EMAIL_ADDRESSES = env(
    "REGISTRATION_NOTIFIER_EMAIL_ADDRESSES", default=""
)
REGISTRATION_NOTIFIER_EMAIL_TEMPLATE = env(
    "REGISTRATION_NOTIFIER_EMAIL_TEMPLATE", default="XWiki.RegistrationNotificationMail"
)
# "1" = se notifica al validar la cuenta; cualquier otro valor = al crearla
USE_EMAIL_VERIFICATION = env("USE_EMAIL_VERIFICATION", default="0")
ADMIN_EMAIL = env("ADMIN_EMAIL", default=DEFAULT_FROM_EMAIL)
# False: un fallo corta el envío al resto de destinatarios
REGISTRATION_NOTIFIER_ISOLATE_FAILURES = env.bool(
    "REGISTRATION_NOTIFIER_ISOLATE_FAILURES", default=False
)

# --- Archivos estáticos ---
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# --- DRF ---
REST_FRAMEWORK = {
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",
        "rest_framework.authentication.BasicAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.IsAuthenticated"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
}

# --- OpenAPI ---
SPECTACULAR_SETTINGS = {
    "TITLE": "Registration Notifier API",
    "DESCRIPTION": "Eventos de ciclo de vida de usuarios y notificación de registro",
    "VERSION": "0.1.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "SERVE_PERMISSIONS": ["rest_framework.permissions.IsAdminUser"],
}

# --- Logs ---
LOG_LEVEL = env("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"}
    },
    "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "verbose"}},
    "root": {"handlers": ["console"], "level": "INFO"},
    "loggers": {
        "accounts": {"level": LOG_LEVEL},
        "notifications": {"level": LOG_LEVEL},
    },
}
