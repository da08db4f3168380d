from PySide6.QtTest import QTest

from tictactoe_cpu.turn_timer import TurnTimer


def test_scheduled_action_fires_once():
    timer = TurnTimer()
    calls = []
    fired = []
    timer.fired.connect(fired.append)
    token = timer.schedule(10, lambda: calls.append("run"))
    assert timer.pending and timer.is_active(token)
    QTest.qWait(150)
    assert calls == ["run"]
    assert fired == [token]
    assert not timer.pending
    assert not timer.is_active(token)


def test_new_schedule_supersedes_pending_one():
    timer = TurnTimer()
    calls = []
    first = timer.schedule(20, lambda: calls.append("first"))
    second = timer.schedule(20, lambda: calls.append("second"))
    assert not timer.is_active(first)
    assert timer.is_active(second)
    assert second.serial > first.serial
    QTest.qWait(200)
    assert calls == ["second"]


def test_cancel_drops_pending_action():
    timer = TurnTimer()
    calls = []
    cancelled = []
    timer.cancelled.connect(cancelled.append)
    token = timer.schedule(20, lambda: calls.append("run"))
    timer.cancel()
    QTest.qWait(150)
    assert calls == []
    assert cancelled == [token]
    assert not timer.pending


def test_cancel_without_pending_is_a_no_op():
    timer = TurnTimer()
    cancelled = []
    timer.cancelled.connect(cancelled.append)
    timer.cancel()
    assert cancelled == []


def test_callback_may_schedule_follow_up():
    timer = TurnTimer()
    calls = []

    def step_one():
        calls.append("one")
        timer.schedule(10, lambda: calls.append("two"))

    timer.schedule(10, step_one)
    QTest.qWait(300)
    assert calls == ["one", "two"]
    assert not timer.pending
