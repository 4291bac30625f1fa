import pygame

from squish.constants import LEVEL_TIME_S, MAX_FRAME_S


def squish_all(game):
    """Click the center of each flying mosquito until none are left."""
    for _ in range(len(game.mosquitoes)):
        target = next(m for m in game.mosquitoes if m.interactive)
        assert game.handle_click((int(target.x), int(target.y)))


def test_new_game_spawns_first_level(game):
    assert game.state.level == 1
    assert len(game.mosquitoes) == 3
    assert game.asset_notice is not None
    assert not game.game_over


def test_click_squishes_one_mosquito(game):
    target = game.mosquitoes[0]
    assert game.handle_click((int(target.x), int(target.y)))
    assert game.state.remaining == 2
    assert sum(1 for m in game.mosquitoes if m.squished) == 1
    assert game.splats_playing == 1


def test_click_on_empty_space_is_a_miss(game):
    for m in game.mosquitoes:
        m.x, m.y = 500, 300
    assert game.handle_click((5, 5)) is False
    assert game.misses == 1
    assert game.state.remaining == 3


def test_clearing_level_advances_after_splats_finish(game):
    squish_all(game)
    assert game.state.remaining == 0
    assert game.state.level == 1

    for _ in range(10):
        game.update(0.1)
        if game.state.level == 2:
            break

    assert game.state.level == 2
    assert game.state.remaining == 4
    assert len(game.mosquitoes) == 4
    assert game.state.timer == LEVEL_TIME_S
    assert "Reached level 2" in open(game.logger.log_file, encoding="utf-8").read()


def test_timeout_ends_game_and_blocks_clicks(game):
    game.update(LEVEL_TIME_S + 0.5)
    assert game.game_over
    assert game.state.timer_text == "Time: 0.00"

    target = game.mosquitoes[0]
    assert game.handle_click((int(target.x), int(target.y))) is False
    assert game.state.remaining == 3
    assert "GAME OVER" in open(game.logger.log_file, encoding="utf-8").read()


def test_restart_key_after_game_over(game):
    game.update(LEVEL_TIME_S + 0.5)
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r))
    assert not game.game_over
    assert game.state.level == 1
    assert len(game.mosquitoes) == 3


def test_pause_freezes_timer_and_clicks(game):
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p))
    game.update(LEVEL_TIME_S + 1)
    assert not game.game_over
    assert game.state.timer == LEVEL_TIME_S
    target = game.mosquitoes[0]
    assert game.handle_click((int(target.x), int(target.y))) is False


def test_quit_events(game):
    assert game.handle_event(pygame.event.Event(pygame.QUIT)) is False
    assert game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)) is False
    assert game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_m)) is True
    assert game.muted


def test_draw_all_screens(game):
    game.show_fps = True
    game.show_hitboxes = True
    game.draw(60.0)
    game.mosquitoes[0].squish()
    game.paused = True
    game.draw(60.0)
    game.paused = False
    game.update(LEVEL_TIME_S + 1)
    game.draw(60.0)


class StalledClock:
    """Clock whose every frame reports a long stall."""

    def __init__(self, ms):
        self.ms = ms

    def tick(self, framerate=0):
        return self.ms

    def get_fps(self):
        return 0.0


def test_stalled_frame_is_capped(game):
    game.clock = StalledClock(6000)
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.run()
    assert not game.state.over
    assert abs(game.state.timer - (LEVEL_TIME_S - MAX_FRAME_S)) < 1e-9


def test_resize_rescales_fonts_and_keeps_mosquitoes_inside(game):
    old_font = game.hud.font
    game.handle_event(pygame.event.Event(pygame.VIDEORESIZE, w=300, h=200, size=(300, 200)))
    assert (game.current_width, game.current_height) == (300, 200)
    assert game.hud.font is game.font_medium
    assert game.hud.font is not old_font
    assert game.game_over_screen.font_big is game.font_big

    for m in game.mosquitoes:
        m.x, m.y = 900, 500
    game.update(1 / 60)
    for m in game.mosquitoes:
        rect = m.get_rect()
        assert rect.right <= 300 and rect.bottom <= 200


def test_load_sound_missing_file(game, tmp_path):
    assert game.load_sound(str(tmp_path / "nope.wav")) is None


def test_load_sound_corrupt_file(game, tmp_path):
    bad = tmp_path / "bad.wav"
    bad.write_bytes(b"definitely not audio")
    assert game.load_sound(str(bad)) is None


class CountingSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def test_play_sound_respects_mute(game):
    sound = CountingSound()
    game.play_sound(sound)
    game.toggle_mute()
    game.play_sound(sound)
    game.play_sound(None)
    assert sound.plays == 1
