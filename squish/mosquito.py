"""Mosquito entity: flight animation, drift, hit testing, squish and rendering."""

from __future__ import annotations

import pygame

from .animation import AnimatedSprite
from .constants import FLY_ANIM_SPEED, SPLAT_ANIM_SPEED


class Mosquito:
    """
    One mosquito that can be squished.

    Lifecycle:
    - FLYING:   looping flight animation, drifts around and bounces off the
                playfield edges, clickable.
    - SQUISHED: hidden and no longer clickable; a one-shot splat animation
                plays where it was hit.
    - FINISHED: splat animation done; the game removes it.

    The sprite is anchored at its center, so ``(x, y)`` is the middle of the
    frame for both drawing and hit testing.
    """

    def __init__(self, pos: tuple[float, float], fly_frames: list[pygame.Surface],
                 splat_frames: list[pygame.Surface], fly_speed: float = FLY_ANIM_SPEED,
                 velocity: tuple[float, float] = (0.0, 0.0)) -> None:
        self.x, self.y = pos
        self.vx, self.vy = velocity
        self.flight = AnimatedSprite(fly_frames, animation_speed=fly_speed, loop=True)
        self.flight.play()
        self.splat_frames = splat_frames
        self.splat: AnimatedSprite | None = None
        self.visible = True
        self.interactive = True

    # ------------------------------- Update & State ----------------------------------

    @property
    def squished(self) -> bool:
        return self.splat is not None

    @property
    def finished(self) -> bool:
        return self.splat is not None and self.splat.completed

    def squish(self, on_done=None) -> bool:
        """
        Swap the flight animation for the splat animation.

        Parameters
        ----------
        on_done : callable, optional
            Called once when the splat animation has played through.

        Returns
        -------
        bool
            False if this mosquito was already squished.
        """
        if self.squished or not self.interactive:
            return False
        self.flight.stop()
        self.visible = False
        self.interactive = False
        self.splat = AnimatedSprite(self.splat_frames, animation_speed=SPLAT_ANIM_SPEED,
                                    loop=False, on_complete=on_done)
        self.splat.play()
        return True

    def update(self, delta: float, bounds: tuple[int, int]) -> None:
        """
        Advance animations and drift by ``delta`` ticks inside ``bounds`` (w, h).
        """
        if self.splat is not None:
            self.splat.update(delta)
            return

        self.flight.update(delta)

        width, height = bounds
        half_w = self.flight.image.get_width() / 2
        half_h = self.flight.image.get_height() / 2
        self.x += self.vx * delta
        self.y += self.vy * delta

        # Reflect off the edges so the whole sprite stays on screen
        if self.x < half_w:
            self.x, self.vx = half_w, abs(self.vx)
        elif self.x > width - half_w:
            self.x, self.vx = width - half_w, -abs(self.vx)
        if self.y < half_h:
            self.y, self.vy = half_h, abs(self.vy)
        elif self.y > height - half_h:
            self.y, self.vy = height - half_h, -abs(self.vy)

    # ------------------------------- Hit testing -------------------------------------

    def get_rect(self) -> pygame.Rect:
        return self.flight.image.get_rect(center=(int(self.x), int(self.y)))

    def contains_point(self, point: tuple[int, int]) -> bool:
        """Rectangle hit test; squished mosquitoes never match."""
        if not self.interactive or not self.visible:
            return False
        return self.get_rect().collidepoint(point)

    # ------------------------------- Rendering ---------------------------------------

    def draw(self, surf: pygame.Surface) -> None:
        if self.splat is not None:
            if not self.splat.completed:
                frame = self.splat.image
                surf.blit(frame, frame.get_rect(center=(int(self.x), int(self.y))))
            return

        if not self.visible:
            return
        frame = self.flight.image
        # Frames face left; mirror when drifting right
        if self.vx > 0:
            frame = pygame.transform.flip(frame, True, False)
        surf.blit(frame, self.get_rect())

    def draw_hitbox(self, surf: pygame.Surface) -> None:
        """Outline the clickable area for debugging."""
        color = (0, 255, 0) if self.interactive else (128, 128, 128)
        pygame.draw.rect(surf, color, self.get_rect(), 2)
