import pytest

from atlas_settings.core.notifications import ChangeNotifier


def test_delivery_in_registration_order():
    notifier = ChangeNotifier()
    calls = []

    notifier.subscribe(lambda key: calls.append(("first", key)))
    notifier.subscribe(lambda key: calls.append(("second", key)))
    notifier.notify("Quality")

    assert calls == [("first", "Quality"), ("second", "Quality")]
    assert len(notifier) == 2


def test_subscribe_works_as_decorator():
    notifier = ChangeNotifier()
    calls = []

    @notifier.subscribe
    def on_change(key):
        calls.append(key)

    notifier.notify("Looped")

    assert calls == ["Looped"]
    assert callable(on_change)


def test_subscribe_rejects_non_callable():
    with pytest.raises(TypeError):
        ChangeNotifier().subscribe("not callable")


def test_observer_may_unsubscribe_during_delivery():
    notifier = ChangeNotifier()
    calls = []

    def once(key):
        calls.append(("once", key))
        notifier.unsubscribe(once)

    notifier.subscribe(once)
    notifier.subscribe(lambda key: calls.append(("always", key)))

    notifier.notify("A")
    notifier.notify("B")

    assert calls == [("once", "A"), ("always", "A"), ("always", "B")]


def test_observer_exception_stops_delivery():
    notifier = ChangeNotifier()
    calls = []

    def broken(key):
        raise RuntimeError("observer failed")

    notifier.subscribe(broken)
    notifier.subscribe(calls.append)

    with pytest.raises(RuntimeError):
        notifier.notify("Quality")

    assert calls == []
