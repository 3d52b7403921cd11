# notifications/api/routers.py
from django.urls import path

from .views.registration_notifier import RegistrationNotifierView

urlpatterns = [
    path(
        "notifications/registration-notifier/",
        RegistrationNotifierView.as_view(),
        name="notifications-registration-notifier",
    ),
]
