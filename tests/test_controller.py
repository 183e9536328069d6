"""Snapshots and change notifications from the application controller."""

from times_tables.models import AnswerOutcome, Difficulty


def test_snapshot_of_fresh_problem(controller) -> None:
    snap = controller.snapshot()
    assert (snap.num1, snap.num2) == (3, 4)
    assert snap.score == "0/10"
    assert snap.display_answer == "?"
    assert snap.difficulty == Difficulty.easy
    assert snap.completion is None


def test_every_operation_notifies_once(controller) -> None:
    seen = []
    controller.subscribe(seen.append)
    controller.press_digit("1")
    controller.press_digit("2")
    assert seen[-1].display_answer == "12"
    controller.delete()
    controller.set_difficulty("medium")
    controller.reset()
    assert len(seen) == 5


def test_unsubscribe_stops_notifications(controller) -> None:
    seen = []
    unsubscribe = controller.subscribe(seen.append)
    controller.press_digit("1")
    unsubscribe()
    controller.press_digit("2")
    assert len(seen) == 1


def test_failing_listener_does_not_break_others(controller) -> None:
    def broken(_snap) -> None:
        raise RuntimeError("boom")

    seen = []
    controller.subscribe(broken)
    controller.subscribe(seen.append)
    outcome, snap = controller.submit()
    assert outcome is None
    assert len(seen) == 1


def test_completion_message(controller) -> None:
    controller.game.num_correct = 9
    controller.press_digit("1")
    controller.press_digit("2")
    outcome, snap = controller.submit()
    assert outcome == AnswerOutcome.correct
    assert snap.session_complete is True
    assert snap.score == "10/10"
    assert snap.completion.title == "Congratulations!"
    assert snap.completion.body == "You've completed all 10 questions!"
    assert snap.completion.action == "Play Again"

    snap = controller.reset()
    assert snap.session_complete is False
    assert snap.completion is None
    assert snap.num_correct == 0
