"""Frame-based sprite animation.

Frames advance by ``animation_speed`` per 60 Hz tick, so a speed of 0.2 shows
each frame for five ticks. Timing is fed in from the game loop rather than read
from the clock, which keeps pausing trivial.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Sequence


class AnimatedSprite:
    """
    Plays a sequence of frames, looping or once.

    Lifecycle:
    - created stopped on frame 0
    - PLAYING:  ``update`` advances ``current_frame``
    - COMPLETE: a non-looping sprite holds its last frame, stops, and calls
                ``on_complete`` once
    """

    def __init__(self, frames: Sequence[Any], animation_speed: float = 1.0,
                 loop: bool = True, on_complete: Callable[[], None] | None = None) -> None:
        if not frames:
            raise ValueError("AnimatedSprite needs at least one frame")
        self.frames = list(frames)
        self.animation_speed = animation_speed
        self.loop = loop
        self.on_complete = on_complete
        self.playing = False
        self.completed = False
        self._position = 0.0

    @property
    def total_frames(self) -> int:
        return len(self.frames)

    @property
    def current_frame(self) -> int:
        return int(math.floor(self._position))

    @property
    def image(self) -> Any:
        return self.frames[self.current_frame]

    def play(self) -> None:
        if self.completed and not self.loop:
            return
        self.playing = True

    def stop(self) -> None:
        self.playing = False

    def update(self, delta: float) -> None:
        """Advance by ``delta`` ticks (1.0 == one frame at 60 FPS)."""
        if not self.playing:
            return

        self._position += self.animation_speed * delta

        if self.loop:
            self._position %= self.total_frames
            return

        if self._position >= self.total_frames:
            self._position = float(self.total_frames - 1)
            self.playing = False
            self.completed = True
            if self.on_complete is not None:
                self.on_complete()
