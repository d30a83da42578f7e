from regform.config.constants import VALIDATE_ALL_SENTINEL
from regform.validation.touch_tracker import TouchTracker


def test_untouched_field_is_not_eligible():
    tracker = TouchTracker()
    assert not tracker.is_eligible("city")


def test_touch_makes_field_eligible():
    tracker = TouchTracker()
    tracker.touch("city")
    assert tracker.is_touched("city")
    assert tracker.is_eligible("city")
    assert not tracker.is_eligible("zip_code")


def test_touch_all_sets_sentinel():
    tracker = TouchTracker()
    tracker.touch_all(["city", "zip_code"])
    assert tracker.bulk_validated
    assert tracker.is_eligible("email_address")
    assert tracker.touched_fields() == {"city", "zip_code"}
    assert VALIDATE_ALL_SENTINEL not in tracker.touched_fields()


def test_reset():
    tracker = TouchTracker()
    tracker.touch_all(["city"])
    tracker.reset()
    assert not tracker.bulk_validated
    assert not tracker.is_eligible("city")
