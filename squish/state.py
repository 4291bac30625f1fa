"""Level, remaining-mosquito and countdown bookkeeping.

Kept free of pygame so the rules can be exercised without a display.
"""

from __future__ import annotations

from .constants import LEVEL_TIME_S, EXTRA_MOSQUITOES


class GameStateError(Exception):
    """Raised when a state transition is requested out of order."""


class GameState:
    """
    The three counters that drive a run.

    Attributes
    ----------
    level : int
        Current wave, starting at 1. A level holds ``level + 2`` mosquitoes.
    remaining : int
        Mosquitoes still flying in the current level. Never negative.
    timer : float
        Seconds left in the current level. May dip below zero on the frame
        the countdown expires; use ``display_time`` for rendering.
    over : bool
        True once the countdown expired with mosquitoes still flying.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Return to level 1 with a fresh countdown."""
        self.level = 1
        self.over = False
        self.total_squished = 0
        self.start_level()

    @staticmethod
    def mosquitoes_for(level: int) -> int:
        return level + EXTRA_MOSQUITOES

    def start_level(self) -> int:
        """Reset the countdown and the remaining count for the current level."""
        self.timer = LEVEL_TIME_S
        self.remaining = self.mosquitoes_for(self.level)
        return self.remaining

    # ------------------------------- Transitions ---------------------------------------

    def tick(self, dt: float) -> bool:
        """
        Run the countdown by ``dt`` seconds.

        The countdown only runs while mosquitoes remain, so a cleared level
        cannot be lost while its last splat animation plays out.

        Returns
        -------
        bool
            True on the single tick that ends the game.
        """
        if self.over or self.remaining <= 0:
            return False
        self.timer -= dt
        if self.timer <= 0:
            self.over = True
            return True
        return False

    def squish(self) -> bool:
        """
        Count one squished mosquito.

        Returns
        -------
        bool
            True when this squish cleared the level.
        """
        if self.over or self.remaining <= 0:
            return False
        self.remaining -= 1
        self.total_squished += 1
        return self.remaining == 0

    @property
    def cleared(self) -> bool:
        return not self.over and self.remaining == 0 and self.timer > 0

    def advance_level(self) -> int:
        """Move to the next level; only legal once the current one is cleared."""
        if not self.cleared:
            raise GameStateError(
                f"cannot advance from level {self.level}: "
                f"remaining={self.remaining}, timer={self.timer:.2f}, over={self.over}"
            )
        self.level += 1
        return self.start_level()

    # ------------------------------- Display -------------------------------------------

    @property
    def display_time(self) -> float:
        return max(0.0, self.timer)

    @property
    def timer_text(self) -> str:
        return f"Time: {self.display_time:.2f}"
