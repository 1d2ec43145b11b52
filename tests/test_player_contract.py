from playbar.utils.video.player import PlayerEvent, PlayerNotifier


def test_notifier_delivers_to_each_listener():
    notifier = PlayerNotifier()
    calls = []
    notifier.subscribe(PlayerEvent.PLAYING, lambda: calls.append("a"))
    notifier.subscribe(PlayerEvent.PLAYING, lambda: calls.append("b"))
    notifier.subscribe(PlayerEvent.PAUSED, lambda: calls.append("paused"))

    notifier.emit(PlayerEvent.PLAYING)

    assert calls == ["a", "b"]


def test_listener_can_unsubscribe_while_notified():
    notifier = PlayerNotifier()
    calls = []

    def once():
        calls.append("once")
        notifier.unsubscribe(PlayerEvent.READY, once)

    notifier.subscribe(PlayerEvent.READY, once)
    notifier.subscribe(PlayerEvent.READY, lambda: calls.append("always"))

    notifier.emit(PlayerEvent.READY)
    notifier.emit(PlayerEvent.READY)

    assert calls == ["once", "always", "always"]


def test_unsubscribe_unknown_callback_returns_false():
    notifier = PlayerNotifier()
    assert notifier.unsubscribe(PlayerEvent.READY, lambda: None) is False
    assert notifier.listener_count() == 0
