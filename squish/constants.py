"""Game-wide constants for Squish the Mosquito.

Screen dimensions, colors, font sizes, tuning knobs for levels and
animations, asset paths, and logging configuration.
"""

import os

WIDTH, HEIGHT = 960, 540           # initial window size, resizable
FPS = 60                           # target frame rate
BG_COLOR = (16, 153, 187)          # sky blue playfield
TEXT_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (255, 0, 0)
HUD_PADDING = 10
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 24
FONT_SIZE_LARGE = 48
MIN_FONT_SIZE_MEDIUM = 14
MIN_FONT_SIZE_LARGE = 28

# Level System Settings
LEVEL_TIME_S = 5.0                 # countdown per level
EXTRA_MOSQUITOES = 2               # level 1 = 3 mosquitoes
TICKS_PER_SECOND = 60              # animation speeds are frames per 60 Hz tick
MAX_FRAME_S = 0.1                  # longest frame fed to the countdown

# Animation Settings
FLY_FRAMES = 12
SPLAT_FRAMES = 6
FLY_ANIM_SPEED = 0.2
FLY_ANIM_JITTER = 0.1              # each mosquito gets speed in [0.2, 0.3)
SPLAT_ANIM_SPEED = 0.3

# Procedural fallback sprite size
SPRITE_W, SPRITE_H = 48, 40
SPAWN_MARGIN = 30                  # keep mosquitoes fully on screen

# Drift
MAX_DRIFT_SPEED = 1.5              # pixels per tick

# Log file settings
ROOT_DIR = os.path.dirname(os.path.dirname(__file__))
LOG_FILE = os.path.join(ROOT_DIR, "log.md")
ASSETS_DIR = os.path.join(ROOT_DIR, "assets")
MOSQUITO_DIR = os.path.join(ASSETS_DIR, "mosquito")
FLY_FRAME_PATTERN = "frame_{}.png"
SPLAT_FRAME_PATTERN = "splat_{}.png"
SQUISH_SFX_PATH = os.path.join(ASSETS_DIR, "squish.wav")        # optional
LEVEL_UP_SFX_PATH = os.path.join(ASSETS_DIR, "level_up.wav")    # optional
