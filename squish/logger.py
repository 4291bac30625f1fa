"""Markdown logger for gameplay events (clicks, level-ups, game over, asset errors)."""

import datetime


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Squish the Mosquito Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Events\n\n")
                f.write("| Timestamp | Position (x,y) | Result | Details |\n")
                f.write("|-----------|---------------|--------|----------|\n")
        except OSError as e:
            print(f"Failed to initialize log file: {e}")

    def _timestamp(self) -> str:
        return datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds

    def _write_row(self, position: str, result: str, details: str) -> None:
        try:
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {self._timestamp()} | {position} | {result} | {details} |\n")
        except OSError as e:
            print(f"Failed to log {result.lower()} event: {e}")

    def log_click(self, pos: tuple[int, int], hit: bool, details: str = "") -> None:
        """
        Log a mouse click event.

        Parameters
        ----------
        pos : Tuple[int, int]
            Mouse click position (x, y)
        hit : bool
            Whether the click squished a mosquito
        details : str, optional
            Additional details about the click
        """
        self._write_row(f"({pos[0]}, {pos[1]})", "HIT" if hit else "MISS", details)

    def log_level_up(self, level: int) -> None:
        """Log a level up event."""
        self._write_row("LEVEL UP", "SYSTEM", f"Reached level {level}")

    def log_game_over(self, level: int, squished: int) -> None:
        """Log the end of a run."""
        self._write_row("GAME OVER", "SYSTEM", f"Time ran out on level {level} after {squished} squished")

    def log_asset_error(self, path: str, reason: str) -> None:
        """Log an asset that could not be loaded."""
        self._write_row("ASSET", "ERROR", f"{path}: {reason}")
