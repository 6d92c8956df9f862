import logging

from board_camera.utils.observable import (
    AbortController,
    AsyncObservable,
    SynchronousObservable,
)


def test_synchronous_observable_notifies_in_subscription_order():
    observable = SynchronousObservable()
    calls = []
    observable.subscribe(lambda value: calls.append(("first", value)))
    observable.subscribe(lambda value: calls.append(("second", value)))

    observable.notify(3)

    assert calls == [("first", 3), ("second", 3)]


def test_async_observable_defers_until_scheduler_runs(scheduler):
    observable = AsyncObservable(scheduler)
    calls = []
    observable.subscribe(calls.append)

    observable.notify("a")
    observable.notify("b")

    assert calls == []
    assert scheduler.run_all() == 2
    assert calls == ["a", "b"]


def test_unsubscribe_removes_observer():
    observable = SynchronousObservable()
    calls = []
    unsubscribe = observable.subscribe(calls.append)

    unsubscribe()
    unsubscribe()
    observable.notify(1)

    assert calls == []
    assert len(observable) == 0


def test_queued_notification_is_dropped_after_unsubscribe(scheduler):
    observable = AsyncObservable(scheduler)
    calls = []
    unsubscribe = observable.subscribe(calls.append)

    observable.notify(1)
    unsubscribe()
    scheduler.run_all()

    assert calls == []


def test_observer_can_unsubscribe_another_during_dispatch():
    observable = SynchronousObservable()
    calls = []
    handles = {}

    def first(value):
        calls.append(("first", value))
        handles["second"]()

    observable.subscribe(first)
    handles["second"] = observable.subscribe(lambda value: calls.append(("second", value)))

    observable.notify(1)
    observable.notify(2)

    assert calls == [("first", 1), ("first", 2)]


def test_abort_signal_unsubscribes_every_linked_observer():
    observable = SynchronousObservable()
    controller = AbortController()
    calls = []
    observable.subscribe(lambda value: calls.append(("a", value)), controller.signal)
    observable.subscribe(lambda value: calls.append(("b", value)), controller.signal)
    observable.subscribe(lambda value: calls.append(("c", value)))

    controller.abort()
    observable.notify(1)

    assert calls == [("c", 1)]
    assert controller.signal.aborted


def test_already_aborted_signal_registers_nothing():
    observable = SynchronousObservable()
    controller = AbortController()
    controller.abort()

    unsubscribe = observable.subscribe(lambda value: None, controller.signal)

    assert len(observable) == 0
    unsubscribe()


def test_failing_observer_is_logged_and_others_still_run(caplog):
    observable = SynchronousObservable()
    calls = []

    def broken(value):
        raise RuntimeError("boom")

    observable.subscribe(broken)
    observable.subscribe(calls.append)

    with caplog.at_level(logging.ERROR, logger="board_camera.utils.observable"):
        observable.notify(5)

    assert calls == [5]
    assert "Observer" in caplog.text
    assert "boom" in caplog.text


def test_abort_from_inside_a_callback_drops_queued_notifications(scheduler):
    observable = AsyncObservable(scheduler)
    controller = AbortController()
    calls = []

    def first(value):
        calls.append(("first", value))
        controller.abort()

    observable.subscribe(first, controller.signal)
    observable.subscribe(lambda value: calls.append(("second", value)), controller.signal)
    observable.subscribe(lambda value: calls.append(("third", value)))

    observable.notify("a")
    observable.notify("b")
    assert scheduler.run_all() == 6

    assert calls == [("first", "a"), ("third", "a"), ("third", "b")]
    assert len(observable) == 1
    controller.abort()
    assert controller.signal.aborted
