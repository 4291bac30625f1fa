"""HUD and Game Over screen"""

import pygame

from .constants import (
    HUD_PADDING, TEXT_COLOR, GAME_OVER_COLOR,
    FONT_NAME, FONT_SIZE_SMALL
)
from .state import GameState


class HUD:
    """Heads-Up Display: countdown and level on the left, indicators on the right."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)

    def update_fonts(self, new_font: pygame.font.Font) -> None:
        """Update fonts for responsive scaling."""
        self.font = new_font

    def draw(self, surf: pygame.Surface, state: GameState, show_fps: bool = False,
             fps: float = 0.0, paused: bool = False, muted: bool = False,
             asset_notice: str | None = None) -> None:
        """Render timer, level and remaining count plus optional indicators."""
        current_width = surf.get_width()
        current_height = surf.get_height()

        # LEFT SIDE: timer, level, remaining
        left_x = HUD_PADDING
        left_y = HUD_PADDING

        timer_surf = self.font.render(state.timer_text, True, TEXT_COLOR)
        surf.blit(timer_surf, (left_x, left_y))
        left_y += timer_surf.get_height() + 4

        for line in (f"Level: {state.level}", f"Mosquitoes: {state.remaining}"):
            text_surf = self.small_font.render(line, True, TEXT_COLOR)
            surf.blit(text_surf, (left_x, left_y))
            left_y += text_surf.get_height() + 4

        if asset_notice:
            notice = self.small_font.render(asset_notice, True, (255, 220, 120))
            surf.blit(notice, (left_x, current_height - notice.get_height() - HUD_PADDING))

        # RIGHT SIDE: optional indicators
        right_y = HUD_PADDING
        if show_fps:
            fps_color = (0, 255, 0) if fps >= 55 else (255, 255, 0) if fps >= 30 else (255, 0, 0)
            fps_text = self.small_font.render(f"FPS: {fps:.1f}", True, fps_color)
            surf.blit(fps_text, (current_width - fps_text.get_width() - HUD_PADDING, right_y))
            right_y += fps_text.get_height() + 4

        if muted:
            muted_text = self.small_font.render("MUTED", True, (255, 150, 150))
            surf.blit(muted_text, (current_width - muted_text.get_width() - HUD_PADDING, right_y))

        if paused:
            pause_text = self.font.render("PAUSED", True, (255, 255, 100))
            pause_y = max(80, int(current_height * 0.15))  # 15% from top, minimum 80px
            text_rect = pause_text.get_rect(center=(current_width // 2, pause_y))
            # Semi-transparent background
            bg_rect = text_rect.inflate(20, 10)
            bg_surf = pygame.Surface(bg_rect.size, pygame.SRCALPHA)
            bg_surf.fill((0, 0, 0, 128))
            surf.blit(bg_surf, bg_rect)
            surf.blit(pause_text, text_rect)


class GameOverScreen:
    """Game over screen with final stats and restart option."""
    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font):
        self.font_big = font_big
        self.font_small = font_small

    def update_fonts(self, new_font_big: pygame.font.Font, new_font_small: pygame.font.Font) -> None:
        """Update fonts for responsive scaling."""
        self.font_big = new_font_big
        self.font_small = new_font_small

    def draw(self, surf: pygame.Surface, state: GameState, misses: int) -> None:
        """
        Draw game over screen centered on the current surface.
        """
        current_width = surf.get_width()
        current_height = surf.get_height()

        # Semi-transparent overlay
        overlay = pygame.Surface((current_width, current_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        surf.blit(overlay, (0, 0))

        game_over_text = self.font_big.render("Game Over", True, GAME_OVER_COLOR)
        title_y = current_height // 2
        game_over_rect = game_over_text.get_rect(center=(current_width // 2, title_y))
        surf.blit(game_over_text, game_over_rect)

        stats_lines = [
            f"Reached level {state.level}",
            f"Squished: {state.total_squished}",
            f"Misses: {misses}",
        ]

        y_offset = title_y + game_over_rect.height
        for line in stats_lines:
            text_surf = self.font_small.render(line, True, TEXT_COLOR)
            text_rect = text_surf.get_rect(center=(current_width // 2, y_offset))
            surf.blit(text_surf, text_rect)
            y_offset += 30

        inst_text = self.font_small.render("Press R to restart or ESC to quit", True, (200, 200, 200))
        inst_rect = inst_text.get_rect(center=(current_width // 2, y_offset + 30))
        surf.blit(inst_text, inst_rect)
