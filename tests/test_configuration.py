from types import SimpleNamespace

import pytest
from django.test import override_settings

from notifications.application.configuration import (DEFAULT_MAIL_TEMPLATE,
                                                     NotificationMode,
                                                     RegistrationNotifierConfiguration)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", []),
        ("   ", []),
        (None, []),
        ("admin@x.com", ["admin@x.com"]),
        ("a@x.com,b@x.com", ["a@x.com", "b@x.com"]),
        (" a@x.com , ,b@x.com,", ["a@x.com", "b@x.com"]),
        (["a@x.com", "b@x.com"], ["a@x.com", "b@x.com"]),
    ],
)
def test_recipients_parsing(raw, expected):
    conf = RegistrationNotifierConfiguration(
        SimpleNamespace(REGISTRATION_NOTIFIER_EMAIL_ADDRESSES=raw)
    )
    assert conf.get_recipients() == expected


def test_defaults_when_nothing_is_configured():
    conf = RegistrationNotifierConfiguration(SimpleNamespace())
    assert conf.get_recipients() == []
    assert conf.get_template_id() == DEFAULT_MAIL_TEMPLATE
    assert conf.get_mode() is NotificationMode.IMMEDIATE
    assert conf.get_admin_email() == ""
    assert conf.isolate_failures() is False


@pytest.mark.parametrize(
    "value, mode",
    [
        ("1", NotificationMode.EMAIL_VERIFICATION),
        (1, NotificationMode.EMAIL_VERIFICATION),
        ("0", NotificationMode.IMMEDIATE),
        ("true", NotificationMode.IMMEDIATE),
        ("yes", NotificationMode.IMMEDIATE),
        (" 1", NotificationMode.IMMEDIATE),
        ("", NotificationMode.IMMEDIATE),
    ],
)
def test_mode_is_email_verification_only_for_literal_one(value, mode):
    conf = RegistrationNotifierConfiguration(SimpleNamespace(USE_EMAIL_VERIFICATION=value))
    assert conf.get_mode() is mode


def test_blank_template_falls_back_to_default():
    conf = RegistrationNotifierConfiguration(
        SimpleNamespace(REGISTRATION_NOTIFIER_EMAIL_TEMPLATE="")
    )
    assert conf.get_template_id() == DEFAULT_MAIL_TEMPLATE


def test_admin_email_falls_back_to_default_from_email():
    conf = RegistrationNotifierConfiguration(
        SimpleNamespace(ADMIN_EMAIL="", DEFAULT_FROM_EMAIL="no-reply@wiki")
    )
    assert conf.get_admin_email() == "no-reply@wiki"


def test_settings_are_read_at_every_call():
    conf = RegistrationNotifierConfiguration()

    with override_settings(REGISTRATION_NOTIFIER_EMAIL_ADDRESSES="a@x.com", USE_EMAIL_VERIFICATION="0"):
        first = conf.get_policy()
    with override_settings(REGISTRATION_NOTIFIER_EMAIL_ADDRESSES="b@x.com", USE_EMAIL_VERIFICATION="1"):
        second = conf.get_policy()

    assert first.recipients == ("a@x.com",)
    assert first.mode is NotificationMode.IMMEDIATE
    assert second.recipients == ("b@x.com",)
    assert second.mode is NotificationMode.EMAIL_VERIFICATION
