import pytest
from django.test import override_settings

from accounts.application.event_bus import get_event_bus
from accounts.domain.errors import CollaboratorResolutionError
from accounts.domain.value_objects import LifecycleEvent, LifecycleEventType
from accounts.infrastructure.bus import SignalEventBus
from accounts.infrastructure.signals import document_created

from .conftest import user_document


class RecordingBus:
    instances = 0

    def __init__(self):
        RecordingBus.instances += 1
        self.events = []

    def notify(self, event, source, data):
        self.events.append((event, source, data))


@pytest.fixture
def recording_bus():
    RecordingBus.instances = 0
    with override_settings(ACCOUNTS_EVENT_BUS="tests.test_event_bus.RecordingBus"):
        yield


def test_default_bus_is_the_signal_bus():
    assert isinstance(get_event_bus(), SignalEventBus)


def test_bus_is_memoized():
    assert get_event_bus() is get_event_bus()


def test_bus_is_resolved_lazily_on_first_publish(store, recording_bus):
    assert RecordingBus.instances == 0

    document_created.send(sender=None, document=user_document())
    document_created.send(sender=None, document=user_document(qualified="W:XWiki.JaneDoe"))

    bus = get_event_bus()
    assert RecordingBus.instances == 1
    assert [e.document_id for e, _, _ in bus.events] == ["XWiki.JohnDoe", "XWiki.JaneDoe"]


def test_nothing_to_publish_does_not_resolve_the_bus(store, recording_bus):
    document_created.send(sender=None, document=user_document(qualified="W:Main.Page"))
    assert RecordingBus.instances == 0


@override_settings(ACCOUNTS_EVENT_BUS="accounts.infrastructure.nope.MissingBus")
def test_unresolvable_bus_is_fatal(store):
    with pytest.raises(CollaboratorResolutionError):
        document_created.send(sender=None, document=user_document())


def test_signal_bus_routes_by_event_type():
    from accounts.infrastructure.signals import user_validated

    seen = []

    def listener(sender, event, **kwargs):
        seen.append(event)

    user_validated.connect(listener, dispatch_uid="test.bus.validated")
    try:
        event = LifecycleEvent(type=LifecycleEventType.USER_VALIDATED, document_id="XWiki.JohnDoe")
        SignalEventBus().notify(event, source=None, data=event.user_data.as_map())
    finally:
        user_validated.disconnect(dispatch_uid="test.bus.validated")

    assert seen == [event]


class BusWithArgs:
    def __init__(self, url):
        self.url = url


@override_settings(ACCOUNTS_EVENT_BUS="tests.test_event_bus.BusWithArgs")
def test_bus_constructor_failure_is_a_resolution_error():
    with pytest.raises(CollaboratorResolutionError):
        get_event_bus()
