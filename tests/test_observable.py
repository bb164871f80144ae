import pytest

from notifier.change_events import ChangeRecord
from notifier.observable import ObservableProperty, notifier_of, observe, release
from notifier.observers import RecordingObserver


class Counter:
    count = ObservableProperty()

    def __init__(self, count: int) -> None:
        self.count = count
        self.label = "plain"


def test_initial_assignment_does_not_notify():
    c = Counter(1)
    assert c.count == 1
    assert notifier_of(c, "count").active_count == 0


def test_assignment_notifies_observers():
    c = Counter(5)
    a, b = RecordingObserver(), RecordingObserver()
    observe(c, "count", a.update)
    observe(c, "count", b.update)

    c.count += 1

    assert a.records == [ChangeRecord(5, 6)]
    assert b.records == [ChangeRecord(5, 6)]
    assert c.count == 6


def test_instances_have_independent_notifiers():
    c1, c2 = Counter(0), Counter(0)
    obs = RecordingObserver()
    observe(c1, "count", obs.update)
    c2.count = 10
    assert obs.records == []


def test_observe_unknown_or_plain_attribute_raises():
    c = Counter(0)
    with pytest.raises(AttributeError):
        observe(c, "missing", lambda rec: None)
    with pytest.raises(AttributeError):
        observe(c, "label", lambda rec: None)


def test_read_before_first_assignment_raises():
    class Lazy:
        value = ObservableProperty()

    with pytest.raises(AttributeError):
        Lazy().value


def test_class_access_returns_descriptor():
    assert isinstance(Counter.count, ObservableProperty)
    assert Counter.count.name == "count"


def test_release_cancels_all_subscriptions():
    c = Counter(0)
    obs = RecordingObserver()
    h = observe(c, "count", obs.update)
    release(c)
    c.count = 3
    assert obs.records == []
    assert h.active is False


def test_property_attached_after_class_creation_is_rejected():
    class Late:
        pass

    Late.value = ObservableProperty()
    with pytest.raises(TypeError):
        Late().value = 1
