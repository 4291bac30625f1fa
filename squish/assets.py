"""Mosquito frame loading.

Frames are looked up by filename convention (``frame_{i}.png`` for flight,
``splat_{i}.png`` for the splat). If any frame of an animation is missing or
unreadable the whole animation is replaced by procedurally drawn frames, so the
game stays playable without the art.
"""

from __future__ import annotations

import math
import os
import pygame

from .constants import (
    MOSQUITO_DIR,
    FLY_FRAMES,
    SPLAT_FRAMES,
    FLY_FRAME_PATTERN,
    SPLAT_FRAME_PATTERN,
    SPRITE_W,
    SPRITE_H,
)
from .logger import GameLogger


def make_fly_frames(count: int = FLY_FRAMES) -> list[pygame.Surface]:
    """Draw a mosquito with wings flapping over ``count`` frames."""
    frames = []
    cx, cy = SPRITE_W // 2, SPRITE_H // 2
    for i in range(count):
        surf = pygame.Surface((SPRITE_W, SPRITE_H), pygame.SRCALPHA)
        # Wing angle swings through a full sine cycle across the frames
        flap = math.sin(2 * math.pi * i / count)
        wing_h = int(6 + 8 * abs(flap))
        wing_y = cy - 4 - wing_h
        pygame.draw.ellipse(surf, (220, 235, 255, 170), (cx - 16, wing_y, 14, wing_h))
        pygame.draw.ellipse(surf, (220, 235, 255, 170), (cx + 2, wing_y, 14, wing_h))
        # Legs
        for dx in (-6, 0, 6):
            pygame.draw.line(surf, (40, 30, 30), (cx + dx, cy + 2), (cx + dx * 2, cy + 14), 1)
        # Body, head and proboscis
        pygame.draw.ellipse(surf, (60, 45, 40), (cx - 4, cy - 6, 18, 9))
        pygame.draw.circle(surf, (40, 30, 30), (cx - 7, cy - 2), 4)
        pygame.draw.line(surf, (40, 30, 30), (cx - 10, cy - 1), (cx - 20, cy + 3), 2)
        frames.append(surf)
    return frames


def make_splat_frames(count: int = SPLAT_FRAMES) -> list[pygame.Surface]:
    """Draw a red blot that spreads and fades over ``count`` frames."""
    frames = []
    cx, cy = SPRITE_W // 2, SPRITE_H // 2
    max_r = min(SPRITE_W, SPRITE_H) // 2 - 2
    for i in range(count):
        progress = (i + 1) / count
        surf = pygame.Surface((SPRITE_W, SPRITE_H), pygame.SRCALPHA)
        alpha = int(255 * (1.0 - 0.6 * progress))
        radius = max(2, int(max_r * progress))
        pygame.draw.circle(surf, (180, 20, 20, alpha), (cx, cy), radius)
        # Droplets thrown outwards
        for k in range(6):
            angle = 2 * math.pi * k / 6
            dist = radius + 3
            pos = (int(cx + math.cos(angle) * dist), int(cy + math.sin(angle) * dist))
            pygame.draw.circle(surf, (150, 10, 10, alpha), pos, max(1, radius // 4))
        frames.append(surf)
    return frames


class AssetLoader:
    """
    Loads flight and splat frames from the asset directory.

    Attributes
    ----------
    fly_frames : list[pygame.Surface]
        12 flight frames, loaded or procedural.
    splat_frames : list[pygame.Surface]
        6 splat frames, loaded or procedural.
    errors : list[tuple[str, str]]
        (path, reason) for every frame that failed to load.
    """

    def __init__(self, asset_dir: str = MOSQUITO_DIR, logger: GameLogger | None = None) -> None:
        self.asset_dir = asset_dir
        self.logger = logger
        self.errors: list[tuple[str, str]] = []
        self.fly_frames: list[pygame.Surface] = []
        self.splat_frames: list[pygame.Surface] = []

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def load(self) -> AssetLoader:
        self.fly_frames = self._load_sequence(FLY_FRAME_PATTERN, FLY_FRAMES, make_fly_frames)
        self.splat_frames = self._load_sequence(SPLAT_FRAME_PATTERN, SPLAT_FRAMES, make_splat_frames)
        return self

    def _record_error(self, path: str, reason: str) -> None:
        print(f"Failed to load mosquito frame {path}: {reason}")
        self.errors.append((path, reason))
        if self.logger is not None:
            self.logger.log_asset_error(path, reason)

    def _load_sequence(self, pattern: str, count: int, fallback) -> list[pygame.Surface]:
        frames = []
        failed = False
        for i in range(count):
            path = os.path.join(self.asset_dir, pattern.format(i))
            if not os.path.exists(path):
                self._record_error(path, "file not found")
                failed = True
                continue
            try:
                frame = pygame.image.load(path)
            except pygame.error as e:
                self._record_error(path, str(e))
                failed = True
                continue
            # convert_alpha needs a display mode; headless loads keep the raw surface
            if pygame.display.get_init() and pygame.display.get_surface() is not None:
                frame = frame.convert_alpha()
            frames.append(frame)

        if failed:
            return fallback(count)
        return frames
