from __future__ import annotations

import math
import random

from .constants import (
    FLY_ANIM_SPEED, FLY_ANIM_JITTER, MAX_DRIFT_SPEED, SPAWN_MARGIN
)
from .mosquito import Mosquito
from .state import GameState


class Spawner:
    """
    Creates the mosquitoes for a level at random positions on the playfield.

    Notes
    - Every mosquito gets a slightly different flight animation speed so the
      swarm does not flap in sync.
    - Pass a seeded ``random.Random`` for reproducible layouts.
    """

    def __init__(self, fly_frames: list, splat_frames: list, rng: random.Random | None = None) -> None:
        self.fly_frames = fly_frames
        self.splat_frames = splat_frames
        self.rng = rng or random.Random()

    def random_position(self, width: int, height: int) -> tuple[float, float]:
        """Pick a point inside the playfield, keeping a margin when there is room for one."""
        margin_x = SPAWN_MARGIN if width > 2 * SPAWN_MARGIN else 0
        margin_y = SPAWN_MARGIN if height > 2 * SPAWN_MARGIN else 0
        return (self.rng.uniform(margin_x, width - margin_x),
                self.rng.uniform(margin_y, height - margin_y))

    def random_velocity(self) -> tuple[float, float]:
        angle = self.rng.uniform(0, 2 * math.pi)
        speed = self.rng.uniform(0.3, 1.0) * MAX_DRIFT_SPEED
        return (math.cos(angle) * speed, math.sin(angle) * speed)

    def spawn_mosquito(self, width: int, height: int) -> Mosquito:
        return Mosquito(
            self.random_position(width, height),
            self.fly_frames,
            self.splat_frames,
            fly_speed=FLY_ANIM_SPEED + self.rng.random() * FLY_ANIM_JITTER,
            velocity=self.random_velocity(),
        )

    def spawn_level(self, level: int, width: int, height: int) -> list[Mosquito]:
        """
        Spawn the whole swarm for ``level``.

        Returns
        -------
        list[Mosquito]
            ``level + 2`` flying mosquitoes.
        """
        return [self.spawn_mosquito(width, height) for _ in range(GameState.mosquitoes_for(level))]
