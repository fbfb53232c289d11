from __future__ import annotations

import time


def _pump(qapp, seconds: float) -> None:
    deadline = time.monotonic() + seconds
    while time.monotonic() < deadline:
        qapp.processEvents()
        time.sleep(0.005)


def test_cancel_all_on_empty_registry_is_noop(scheduler) -> None:
    emitted: list[int] = []
    scheduler.active_count_changed.connect(emitted.append)

    scheduler.cancel_all()
    scheduler.cancel_all()

    assert scheduler.active_count == 0
    assert emitted == []


def test_cancel_all_stops_every_scheduled_timer(qapp, scheduler) -> None:
    for _ in range(3):
        scheduler.schedule(lambda: None)
    timers = list(scheduler._timers)
    assert scheduler.active_count == 3
    assert all(t.isActive() for t in timers)

    scheduler.cancel_all()

    assert scheduler.active_count == 0
    assert not any(t.isActive() for t in timers)


def test_scheduled_callbacks_fire_until_cancelled(qapp, scheduler) -> None:
    fired = {"a": 0, "b": 0}
    scheduler.schedule(lambda: fired.__setitem__("a", fired["a"] + 1))
    scheduler.schedule(lambda: fired.__setitem__("b", fired["b"] + 1))

    _pump(qapp, 0.2)
    assert fired["a"] > 0
    assert fired["b"] > 0

    scheduler.cancel_all()
    snapshot = dict(fired)
    _pump(qapp, 0.1)
    assert fired == snapshot


def test_active_count_signal_tracks_schedule_and_cancel(scheduler) -> None:
    emitted: list[int] = []
    scheduler.active_count_changed.connect(emitted.append)

    scheduler.schedule(lambda: None)
    scheduler.schedule(lambda: None)
    scheduler.cancel_all()

    assert emitted == [1, 2, 0]


def test_default_interval_is_100ms(qapp) -> None:
    from button_insets.ui.infrastructure.tick_scheduler import TickScheduler

    assert TickScheduler().interval_ms == 100
