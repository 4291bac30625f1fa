"""Game controller"""

from __future__ import annotations

import os
import pygame

from .constants import (
    WIDTH, HEIGHT, FPS, BG_COLOR, FONT_NAME, FONT_SIZE_MEDIUM, FONT_SIZE_LARGE,
    MIN_FONT_SIZE_MEDIUM, MIN_FONT_SIZE_LARGE, TICKS_PER_SECOND, MAX_FRAME_S, LOG_FILE, MOSQUITO_DIR,
    SQUISH_SFX_PATH, LEVEL_UP_SFX_PATH
)
from .assets import AssetLoader
from .logger import GameLogger
from .mosquito import Mosquito
from .spawner import Spawner
from .state import GameState
from .ui import HUD, GameOverScreen


class Game:
    """
    Main game controller: initializes subsystems, runs the loop, handles input,
    updates entities, and draws the frame.
    """

    def __init__(self, log_file: str = LOG_FILE, asset_dir: str = MOSQUITO_DIR,
                 spawner: Spawner | None = None) -> None:
        """Initialize subsystems, load assets, and set initial game state."""
        pygame.init()
        pygame.display.set_caption("Squish the Mosquito")

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        self.font_medium = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.font_big = pygame.font.Font(FONT_NAME, FONT_SIZE_LARGE)
        self.current_width = WIDTH
        self.current_height = HEIGHT
        self.logger = GameLogger(log_file)

        self.assets = AssetLoader(asset_dir, logger=self.logger).load()
        self.asset_notice = None
        if self.assets.has_errors:
            self.asset_notice = f"{len(self.assets.errors)} mosquito frame(s) missing, using built-in art"
        self.spawner = spawner or Spawner(self.assets.fly_frames, self.assets.splat_frames)

        self.paused = False
        self.show_fps = False
        self.show_hitboxes = False
        self.fps_samples = []

        # Audio
        self.sfx_volume = 0.7
        self.muted = False
        self.audio_enabled = False
        self.snd_squish: pygame.mixer.Sound | None = None
        self.snd_level_up: pygame.mixer.Sound | None = None
        self.init_audio()

        self.hud = HUD(self.font_medium)
        self.game_over_screen = GameOverScreen(self.font_big, self.font_medium)

        self.state = GameState()
        self.reset_game()

        # Created last so the first tick does not include setup time
        self.clock = pygame.time.Clock()

    # --------------------------------- Setup ----------------------------------------

    def init_audio(self) -> None:
        """
        Initialize the mixer and load optional sound effects. Any failure leaves
        the game silent.
        """
        try:
            pygame.mixer.init(frequency=22050, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            print(f"Audio unavailable: {e}")
            return
        self.audio_enabled = True
        self.snd_squish = self.load_sound(SQUISH_SFX_PATH)
        self.snd_level_up = self.load_sound(LEVEL_UP_SFX_PATH)

    def load_sound(self, path: str) -> pygame.mixer.Sound | None:
        if not os.path.exists(path):
            print(f"Sound effect file not found: {path}")
            return None
        try:
            sound = pygame.mixer.Sound(path)
            sound.set_volume(self.sfx_volume)
            return sound
        except pygame.error as e:
            print(f"Failed to load sound effect {path}: {e}")
            return None

    def play_sound(self, sound: pygame.mixer.Sound | None) -> None:
        if sound is not None and not self.muted:
            sound.play()

    # --------------------------------- State ----------------------------------------

    def reset_game(self) -> None:
        """Reset all game state to initial values and spawn level 1."""
        self.state.reset()
        self.misses = 0
        self.splats_playing = 0
        self.mosquitoes: list[Mosquito] = self.spawner.spawn_level(
            self.state.level, self.current_width, self.current_height)

    @property
    def game_over(self) -> bool:
        return self.state.over

    def next_level(self) -> None:
        """Advance the level and replace the swarm."""
        self.state.advance_level()
        self.mosquitoes = self.spawner.spawn_level(
            self.state.level, self.current_width, self.current_height)
        self.play_sound(self.snd_level_up)
        self.logger.log_level_up(self.state.level)

    def on_splat_done(self) -> None:
        self.splats_playing -= 1

    def update(self, dt: float) -> None:
        """
        Advance the game by ``dt`` seconds: countdown, animations, level flow.
        """
        if self.paused or self.game_over:
            return

        if self.state.tick(dt):
            self.logger.log_game_over(self.state.level, self.state.total_squished)
            return

        delta = dt * TICKS_PER_SECOND
        bounds = (self.current_width, self.current_height)
        for m in self.mosquitoes:
            m.update(delta, bounds)
        self.mosquitoes = [m for m in self.mosquitoes if not m.finished]

        if self.state.cleared and self.splats_playing == 0:
            self.next_level()

    # --------------------------------- Input ----------------------------------------

    def handle_click(self, pos: tuple[int, int]) -> bool:
        """
        Squish the topmost mosquito under ``pos``.

        Returns
        -------
        bool
            True if a mosquito was squished.
        """
        if self.paused or self.game_over:
            return False

        for m in reversed(self.mosquitoes):
            if m.contains_point(pos):
                m.squish(on_done=self.on_splat_done)
                self.splats_playing += 1
                self.state.squish()
                self.play_sound(self.snd_squish)
                self.logger.log_click(pos, True, f"Mosquito at ({int(m.x)}, {int(m.y)}), "
                                                 f"{self.state.remaining} left")
                return True

        self.misses += 1
        self.logger.log_click(pos, False, "No target hit")
        return False

    def handle_resize(self, new_width: int, new_height: int) -> None:
        """Track the new playfield size; mosquitoes stay inside it on their next update."""
        if new_width != self.current_width or new_height != self.current_height:
            self.current_width = new_width
            self.current_height = new_height
            self.screen.fill(BG_COLOR)

            scale_factor = min(new_width / WIDTH, new_height / HEIGHT)
            self.update_font_scaling(scale_factor)
            print(f"Window resized to {new_width}x{new_height} with scale factor {scale_factor:.2f}")

    def update_font_scaling(self, scale_factor: float) -> None:
        """Update font sizes for responsive text scaling."""
        new_medium_size = max(MIN_FONT_SIZE_MEDIUM, int(FONT_SIZE_MEDIUM * scale_factor))
        new_large_size = max(MIN_FONT_SIZE_LARGE, int(FONT_SIZE_LARGE * scale_factor))

        self.font_medium = pygame.font.Font(FONT_NAME, new_medium_size)
        self.font_big = pygame.font.Font(FONT_NAME, new_large_size)

        self.hud.update_fonts(self.font_medium)
        self.game_over_screen.update_fonts(self.font_big, self.font_medium)

    def toggle_pause(self) -> None:
        if not self.game_over:
            self.paused = not self.paused

    def toggle_mute(self) -> None:
        self.muted = not self.muted

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Dispatch one event; returns False when the game should quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.VIDEORESIZE:
            self.handle_resize(event.w, event.h)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            elif event.key == pygame.K_r and self.game_over:
                self.reset_game()
            elif event.key == pygame.K_m:
                self.toggle_mute()
            elif event.key == pygame.K_p:
                self.toggle_pause()
            elif event.key == pygame.K_f:
                self.show_fps = not self.show_fps
            elif event.key == pygame.K_b:
                self.show_hitboxes = not self.show_hitboxes
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.handle_click(event.pos)
        return True

    # --------------------------------- Loop -----------------------------------------

    def run(self) -> None:
        """Main game loop: process events, update, render; exits on quit request."""
        running = True
        while running:
            # Cap frame rate; a stalled frame counts as at most MAX_FRAME_S
            dt = min(self.clock.tick(FPS) / 1000.0, MAX_FRAME_S)

            self.fps_samples.append(self.clock.get_fps())
            if len(self.fps_samples) > 10:
                self.fps_samples.pop(0)
            avg_fps = sum(self.fps_samples) / len(self.fps_samples)

            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False

            self.update(dt)
            self.draw(avg_fps)

        pygame.quit()

    # --------------------------------- Rendering ------------------------------------

    def draw(self, fps: float = 0.0) -> None:
        """
        Compose the frame: bg -> mosquitoes -> HUD -> game over overlay.
        """
        self.screen.fill(BG_COLOR)

        for m in self.mosquitoes:
            m.draw(self.screen)
            if self.show_hitboxes:
                m.draw_hitbox(self.screen)

        self.hud.draw(self.screen, self.state, self.show_fps, fps,
                      self.paused, self.muted, self.asset_notice)

        if self.game_over:
            self.game_over_screen.draw(self.screen, self.state, self.misses)

        pygame.display.flip()
