import pytest

from accounts.application.event_bus import get_event_bus
from accounts.domain.value_objects import Document, DocumentReference
from accounts.infrastructure.stores import get_document_store

JOHN = {"first_name": "John", "last_name": "Doe", "email": "john@x.com"}


def user_document(active=0, version="1.1", previous_version=None,
                  qualified="W:XWiki.JohnDoe", **fields):
    record = dict(JOHN, **fields)
    if active is not None:
        record["active"] = active
    return Document(
        reference=DocumentReference.parse(qualified),
        version=version,
        previous_version=previous_version,
        user_record=record,
    )


def plain_document(version="1.1", previous_version=None, qualified="W:XWiki.WebHome"):
    return Document(
        reference=DocumentReference.parse(qualified),
        version=version,
        previous_version=previous_version,
        user_record=None,
    )


@pytest.fixture
def store():
    s = get_document_store()
    s.clear()
    yield s
    s.clear()


@pytest.fixture(autouse=True)
def _reset_event_bus():
    get_event_bus.cache_clear()
    yield
    get_event_bus.cache_clear()


class RecordingMailer:
    def __init__(self, fail_for=(), reject_for=()):
        self.calls = []
        self.fail_for = set(fail_for)
        self.reject_for = set(reject_for)

    def send(self, from_email, to, cc, bcc, subject, template_id, context):
        from notifications.application.errors import MailDeliveryError

        self.calls.append(
            {
                "from": from_email,
                "to": to,
                "cc": cc,
                "bcc": bcc,
                "subject": subject,
                "template_id": template_id,
                "context": dict(context),
            }
        )
        if to in self.fail_for:
            raise MailDeliveryError(to, "smtp caído")
        return to not in self.reject_for

    @property
    def recipients(self):
        return [c["to"] for c in self.calls]


@pytest.fixture
def mailer():
    return RecordingMailer()
