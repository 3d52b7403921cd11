import pytest

from accounts.domain.value_objects import LifecycleEventType
from notifications.application.configuration import NotificationMode, NotificationPolicy
from notifications.application.policies import should_dispatch, should_notify

CREATED = LifecycleEventType.USER_CREATED
VALIDATED = LifecycleEventType.USER_VALIDATED


@pytest.mark.parametrize(
    "mode, event_type, expected",
    [
        (NotificationMode.IMMEDIATE, CREATED, True),
        (NotificationMode.IMMEDIATE, VALIDATED, False),
        (NotificationMode.EMAIL_VERIFICATION, CREATED, False),
        (NotificationMode.EMAIL_VERIFICATION, VALIDATED, True),
    ],
)
def test_should_notify_table(mode, event_type, expected):
    assert should_notify(mode, event_type) is expected
    # Pura: misma entrada, misma salida
    assert should_notify(mode, event_type) is expected


def test_should_notify_accepts_raw_values():
    assert should_notify("EMAIL_VERIFICATION", "USER_VALIDATED") is True


@pytest.mark.parametrize("mode", list(NotificationMode))
@pytest.mark.parametrize("event_type", [CREATED, VALIDATED])
def test_empty_recipients_never_dispatch(mode, event_type):
    policy = NotificationPolicy(mode=mode, recipients=(), template_id="T")
    assert should_dispatch(policy, event_type) is False


def test_recipients_defer_to_policy_table():
    policy = NotificationPolicy(
        mode=NotificationMode.IMMEDIATE, recipients=("admin@x.com",), template_id="T"
    )
    assert should_dispatch(policy, CREATED) is True
    assert should_dispatch(policy, VALIDATED) is False
