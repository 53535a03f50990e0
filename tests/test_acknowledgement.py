from __future__ import annotations

from api.models.schemas import Urgency
from reminders.acknowledgement import AcknowledgementController
from reminders.deriver import ReminderDeriver, VisibilityScope
from reminders.flags import notified_key, taken_key
from tests.helpers import at


def test_toggle_is_its_own_inverse(flags) -> None:
    controller = AcknowledgementController(flags)
    assert controller.is_taken("1-11-09:00") is False
    assert controller.toggle_taken("1-11-09:00") is True
    assert controller.is_taken("1-11-09:00") is True
    assert controller.toggle_taken("1-11-09:00") is False
    assert controller.is_taken("1-11-09:00") is False
    # undo removes the key rather than storing False
    assert taken_key("1-11-09:00") not in flags.keys()


def test_toggle_does_not_touch_notified_flag(flags) -> None:
    flags.set_flag(notified_key("1-11-09:00"), True)
    controller = AcknowledgementController(flags)
    controller.toggle_taken("1-11-09:00")
    controller.toggle_taken("1-11-09:00")
    assert flags.get_flag(notified_key("1-11-09:00")) is True


def test_mark_all_taken_then_derive_shows_taken(flags, store) -> None:
    deriver = ReminderDeriver(flags)
    scope = VisibilityScope.for_patient(2)
    pending = [event.id for event in deriver.derive(store.list(), scope, at(9, 10))]
    assert len(pending) == 2

    result = AcknowledgementController(flags).mark_all_taken(pending)
    assert result.marked == pending
    assert result.nothing_to_do is False

    events = deriver.derive(store.list(), scope, at(9, 10))
    assert all(event.acknowledged for event in events)
    assert {event.display_urgency for event in events} == {Urgency.TAKEN}


def test_mark_all_taken_skips_already_taken(flags) -> None:
    controller = AcknowledgementController(flags)
    controller.toggle_taken("A")
    result = controller.mark_all_taken(["A", "B", "B"])
    assert result.marked == ["B"]
    assert result.already_taken == ["A"]


def test_mark_all_taken_with_nothing_pending_reports_no_op(flags) -> None:
    result = AcknowledgementController(flags).mark_all_taken([])
    assert result.nothing_to_do is True
    assert result.marked == []
    assert flags.keys() == []
