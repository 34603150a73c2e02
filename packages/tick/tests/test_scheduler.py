"""Tests for Scheduler one-shot/periodic entries and Handle cancellation."""

import pytest
from tick import Handle, Scheduler


class TestAfter:
    """One-shot callbacks."""

    def test_fires_after_delay(self):
        sched = Scheduler()
        fired = []
        sched.after(3, lambda: fired.append(sched.now))

        sched.advance(2)
        assert fired == []
        sched.advance()
        assert fired == [3]

    def test_fires_exactly_once(self):
        sched = Scheduler()
        fired = []
        handle = sched.after(1, lambda: fired.append(True))
        sched.advance(10)
        assert fired == [True]
        assert not handle.active
        assert not handle.cancelled

    @pytest.mark.parametrize("delay", [0, -1])
    def test_non_positive_delay_rejected(self, delay):
        sched = Scheduler()
        with pytest.raises(ValueError):
            sched.after(delay, lambda: None)

    def test_same_tick_fires_in_scheduling_order(self):
        sched = Scheduler()
        order = []
        sched.after(2, lambda: order.append("a"))
        sched.after(2, lambda: order.append("b"))
        sched.after(1, lambda: order.append("c"))
        sched.advance(2)
        assert order == ["c", "a", "b"]

    def test_chained_callback_waits_for_next_tick(self):
        """A callback scheduled from inside a firing callback is not run in the same tick."""
        sched = Scheduler()
        fired = []

        def first():
            fired.append(("first", sched.now))
            sched.after(1, lambda: fired.append(("second", sched.now)))

        sched.after(1, first)
        sched.advance()
        assert fired == [("first", 1)]
        sched.advance()
        assert fired == [("first", 1), ("second", 2)]

    def test_advance_returns_fired_count(self):
        sched = Scheduler()
        sched.after(1, lambda: None)
        sched.after(1, lambda: None)
        assert sched.advance() == 2
        assert sched.advance() == 0


class TestEvery:
    """Recurring callbacks."""

    def test_fires_on_interval(self):
        sched = Scheduler()
        fired = []
        sched.every(3, lambda: fired.append(sched.now))
        sched.advance(10)
        assert fired == [3, 6, 9]

    def test_interval_one_fires_every_tick(self):
        sched = Scheduler()
        fired = []
        sched.every(1, lambda: fired.append(sched.now))
        sched.advance(4)
        assert fired == [1, 2, 3, 4]

    def test_non_positive_interval_rejected(self):
        sched = Scheduler()
        with pytest.raises(ValueError):
            sched.every(0, lambda: None)

    def test_cancel_from_inside_callback_stops_recurrence(self):
        sched = Scheduler()
        fired = []
        holder: list[Handle] = []

        def cb():
            fired.append(sched.now)
            if len(fired) == 2:
                holder[0].cancel()

        holder.append(sched.every(1, cb))
        sched.advance(5)
        assert fired == [1, 2]
        assert sched.pending() == 0


class TestCancellation:
    """Handle.cancel() semantics."""

    def test_cancelled_one_shot_never_fires(self):
        sched = Scheduler()
        fired = []
        handle = sched.after(2, lambda: fired.append(True))
        handle.cancel()
        sched.advance(5)
        assert fired == []
        assert handle.cancelled

    def test_cancel_is_idempotent(self):
        sched = Scheduler()
        handle = sched.every(2, lambda: None)
        handle.cancel()
        handle.cancel()
        assert not handle.active

    def test_cancel_after_fire_is_noop(self):
        sched = Scheduler()
        handle = sched.after(1, lambda: None)
        sched.advance()
        handle.cancel()
        assert not handle.active

    def test_pending_counts_live_entries(self):
        sched = Scheduler()
        a = sched.after(5, lambda: None)
        sched.every(2, lambda: None)
        assert sched.pending() == 2
        a.cancel()
        assert sched.pending() == 1

    def test_cancel_all(self):
        sched = Scheduler()
        fired = []
        h1 = sched.after(1, lambda: fired.append(1))
        h2 = sched.every(1, lambda: fired.append(2))
        sched.cancel_all()
        sched.advance(3)
        assert fired == []
        assert h1.cancelled and h2.cancelled
        sched.cancel_all()

    def test_handle_repr(self):
        sched = Scheduler()
        handle = sched.every(4, lambda: None)
        assert "every 4" in repr(handle)
        assert "active" in repr(handle)
