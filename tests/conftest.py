import os

# Run pygame headless
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from squish.assets import make_fly_frames, make_splat_frames


@pytest.fixture
def fly_frames():
    return make_fly_frames()


@pytest.fixture
def splat_frames():
    return make_splat_frames()


@pytest.fixture
def game(tmp_path):
    from squish.game import Game

    asset_dir = tmp_path / "mosquito"
    asset_dir.mkdir()
    g = Game(log_file=str(tmp_path / "log.md"), asset_dir=str(asset_dir))
    yield g
    pygame.quit()
