from windowquote.notify import ConfirmAction, Notice, NotificationChannel, PendingConfirmation


def test_one_message_at_a_time():
    ch = NotificationChannel()
    assert not ch.visible
    ch.confirm(ConfirmAction.DELETE_QUOTE, "q1", "Delete?")
    ch.notify("Saved", "success")
    assert ch.current == Notice("Saved", "success")
    assert ch.pending is None


def test_take_pending_consumes_once():
    ch = NotificationChannel()
    ch.confirm(ConfirmAction.LOAD_QUOTE, {"id": 1}, "Load?")
    pending = ch.take_pending()
    assert pending == PendingConfirmation(ConfirmAction.LOAD_QUOTE, {"id": 1}, "Load?")
    assert ch.take_pending() is None
    assert not ch.visible


def test_take_pending_leaves_plain_notice():
    ch = NotificationChannel()
    ch.notify("hi")
    assert ch.take_pending() is None
    assert ch.visible
    ch.dismiss()
    assert ch.current is None
