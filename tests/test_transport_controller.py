from fakes import FakePlayer

from playbar.controllers.playback_session import PlaybackSession
from playbar.controllers.transport_controller import (PlaybackState,
                                                      TransportController,
                                                      TransportLabel)
from playbar.utils.video.player import PlayerEvent, PlayerStatus


def _wired(player, **kwargs):
    labels = []
    controller = TransportController(player, on_label=labels.append, **kwargs)
    player.subscribe(PlayerEvent.PLAYING, controller.on_playing)
    player.subscribe(PlayerEvent.PAUSED, controller.on_paused)
    player.subscribe(PlayerEvent.READY, controller.on_ready)
    player.subscribe(PlayerEvent.END_OF_MEDIA, controller.on_end_of_media)
    player.subscribe(PlayerEvent.MEDIA_CHANGED, controller.on_media_changed)
    return controller, labels


def test_ready_captures_duration_and_defers_refresh():
    player = FakePlayer()
    deferred = []
    refreshes = []
    controller, _ = _wired(player, defer=deferred.append, on_refresh=lambda: refreshes.append(1))

    player.become_ready(90_000)

    assert controller.session.total_duration == 90_000
    assert controller.session.ready is True
    assert controller.state is PlaybackState.READY
    assert refreshes == []
    assert len(deferred) == 1

    deferred[0]()
    assert refreshes == [1]


def test_duration_is_captured_once_per_media():
    player = FakePlayer()
    controller, _ = _wired(player)
    player.become_ready(90_000)
    player.become_ready(45_000)
    assert controller.session.total_duration == 90_000


def test_click_on_ready_player_plays_and_shows_pause():
    player = FakePlayer(status=PlayerStatus.READY, duration=10_000)
    controller, labels = _wired(player)

    controller.click()

    assert player.status() is PlayerStatus.PLAYING
    assert labels[-1] is TransportLabel.PAUSE
    assert controller.state is PlaybackState.PLAYING


def test_click_while_playing_pauses_and_shows_play():
    player = FakePlayer(status=PlayerStatus.READY, duration=10_000)
    controller, labels = _wired(player)
    controller.click()

    controller.click()

    assert player.status() is PlayerStatus.PAUSED
    assert labels[-1] is TransportLabel.PLAY
    assert controller.state is PlaybackState.PAUSED


def test_click_on_stopped_player_plays():
    player = FakePlayer(status=PlayerStatus.STOPPED, duration=10_000)
    controller, labels = _wired(player)
    controller.click()
    assert player.playback_commands()[0] == ('play',)
    assert labels[-1] is TransportLabel.PAUSE


def test_click_while_halted_issues_nothing():
    player = FakePlayer(status=PlayerStatus.HALTED)
    controller, labels = _wired(player)
    state_before = controller.state

    controller.click()

    assert player.playback_commands() == []
    assert labels == []
    assert controller.state is state_before


def test_click_while_unknown_issues_nothing():
    player = FakePlayer(status=PlayerStatus.UNKNOWN)
    controller, labels = _wired(player)
    controller.click()
    assert player.playback_commands() == []
    assert labels == []


def test_end_of_media_arms_replay_once():
    player = FakePlayer(status=PlayerStatus.READY, duration=10_000)
    controller, labels = _wired(player)
    controller.click()

    player.reach_end()

    assert controller.session.replay_armed is True
    assert controller.state is PlaybackState.ENDED_AWAITING_REPLAY
    assert labels[-1] is TransportLabel.REPLAY
    commands_after_first_end = list(player.commands)

    player.notifier.emit(PlayerEvent.END_OF_MEDIA)

    assert player.commands == commands_after_first_end
    assert labels[-1] is TransportLabel.REPLAY


def test_paused_notification_after_end_keeps_replay_label():
    player = FakePlayer(status=PlayerStatus.READY, duration=10_000)
    controller, labels = _wired(player)
    controller.click()
    player.reach_end()

    controller.on_paused()

    assert labels[-1] is TransportLabel.REPLAY
    assert controller.state is PlaybackState.ENDED_AWAITING_REPLAY


def test_replay_click_seeks_to_start_then_plays():
    player = FakePlayer(status=PlayerStatus.READY, duration=10_000)
    controller, labels = _wired(player)
    controller.click()
    player.reach_end()
    player.commands.clear()

    controller.click()

    commands = player.playback_commands()
    assert commands[0] == ('seek', 0.0)
    assert ('play',) in commands[1:]
    assert controller.session.replay_armed is False
    assert controller.state is PlaybackState.PLAYING
    assert labels[-1] is TransportLabel.PAUSE


def test_second_end_of_media_after_replay_rearms():
    player = FakePlayer(status=PlayerStatus.READY, duration=10_000)
    controller, labels = _wired(player)
    controller.click()
    player.reach_end()
    controller.click()

    player.reach_end()

    assert controller.session.replay_armed is True
    assert labels[-1] is TransportLabel.REPLAY


def test_playing_from_elsewhere_disarms_replay():
    player = FakePlayer(status=PlayerStatus.READY, duration=10_000)
    controller, labels = _wired(player)
    controller.click()
    player.reach_end()

    player.play()

    assert controller.session.replay_armed is False
    assert labels[-1] is TransportLabel.PAUSE


def test_media_change_resets_session():
    player = FakePlayer(status=PlayerStatus.READY, duration=10_000)
    refreshes = []
    controller, labels = _wired(player, on_refresh=lambda: refreshes.append(1))
    player.become_ready(10_000)
    controller.click()
    player.reach_end()

    player.change_media()

    assert controller.session == PlaybackSession()
    assert controller.state is PlaybackState.UNKNOWN
    assert labels[-1] is TransportLabel.PLAY
    assert refreshes


def test_handlers_do_not_command_a_halted_player():
    player = FakePlayer(status=PlayerStatus.HALTED)
    controller, _ = _wired(player)

    controller.on_playing()
    controller.on_paused()
    controller.on_end_of_media()

    assert player.playback_commands() == []
