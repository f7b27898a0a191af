from sortable import Direction, Sorter, SortState, StateNotifier
from factories import RecordField


def test_publish_reaches_subscribers_in_order():
    notifier = StateNotifier()
    received = []
    notifier.subscribe(lambda change: received.append(("a", change)))
    notifier.subscribe(lambda change: received.append(("b", change)))
    notifier.publish("payload")
    assert received == [("a", "payload"), ("b", "payload")]


def test_once_subscription():
    notifier = StateNotifier()
    count = 0

    def incr(_):
        nonlocal count
        count += 1

    notifier.subscribe(incr, once=True)
    notifier.publish(1)
    notifier.publish(2)
    assert count == 1
    assert notifier.subscriber_count() == 0


def test_error_isolation():
    notifier = StateNotifier()
    order = []

    def bad(_):
        order.append("bad")
        raise RuntimeError("boom")

    def good(_):
        order.append("good")

    notifier.subscribe(bad)
    notifier.subscribe(good)
    notifier.publish(123)
    assert order == ["bad", "good"]
    assert len(notifier.errors) == 1


def test_unsubscribe_and_cancel():
    notifier = StateNotifier()
    hits = []
    sub = notifier.subscribe(hits.append)
    other = notifier.subscribe(hits.append)
    other.cancel()
    notifier.publish("x")
    notifier.unsubscribe(sub)
    notifier.publish("y")
    assert hits == ["x"]


# Sorter notifications -------------------------------------------------------


def test_sorter_notifies_after_mutation():
    sorter = Sorter(RecordField)
    changes = []
    sorter.subscribe(changes.append)
    sorter.toggle_field(RecordField.NAME)
    assert len(changes) == 1
    assert changes[0].previous == SortState(RecordField.SCORE, Direction.DESCENDING)
    assert changes[0].current == SortState(RecordField.NAME, Direction.ASCENDING)
    assert changes[0].changed


def test_sorter_state_is_updated_before_notification():
    sorter = Sorter(RecordField)
    seen = []
    sorter.subscribe(lambda change: seen.append(sorter.get_state() == change.current))
    sorter.set_field(RecordField.NAME, Direction.DESCENDING)
    assert seen == [True]


def test_ignored_requests_do_not_notify():
    sorter = Sorter(RecordField)
    changes = []
    sorter.subscribe(changes.append)
    sorter.toggle_field(RecordField.NOTES)
    sorter.set_field(RecordField.NOTES, Direction.ASCENDING)
    assert changes == []


def test_repeat_set_notifies_without_change():
    sorter = Sorter(RecordField)
    changes = []
    sorter.subscribe(changes.append)
    sorter.set_field(RecordField.SCORE, Direction.DESCENDING)
    assert len(changes) == 1 and not changes[0].changed


def test_failing_subscriber_keeps_state_change():
    sorter = Sorter(RecordField)

    def explode(_):
        raise ValueError("render failed")

    sorter.subscribe(explode)
    sorter.toggle_field(RecordField.RANK)
    assert sorter.get_state().field is RecordField.RANK
    assert len(sorter.notifier.errors) == 1


def test_sorter_unsubscribe():
    sorter = Sorter(RecordField)
    changes = []
    sub = sorter.subscribe(changes.append)
    sorter.unsubscribe(sub)
    sorter.toggle_field(RecordField.NAME)
    assert changes == []


def test_subscriber_may_mutate_sorter():
    sorter = Sorter(RecordField)
    fields = []

    def follow(change):
        fields.append(change.current.field)
        if change.current.field is RecordField.NAME:
            sorter.toggle_field(RecordField.RANK)

    sorter.subscribe(follow)
    sorter.toggle_field(RecordField.NAME)
    assert fields == [RecordField.NAME, RecordField.RANK]
    assert sorter.get_state().field is RecordField.RANK


def test_shared_notifier():
    notifier = StateNotifier()
    sorter = Sorter(RecordField, notifier=notifier)
    changes = []
    notifier.subscribe(changes.append)
    sorter.toggle_field(RecordField.NAME)
    assert [c.current.field for c in changes] == [RecordField.NAME]
