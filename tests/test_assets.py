import pygame

from squish.assets import AssetLoader
from squish.constants import FLY_FRAMES, SPLAT_FRAMES, SPRITE_W, SPRITE_H
from squish.logger import GameLogger


def write_frames(directory, pattern, count, size=(10, 12)):
    for i in range(count):
        surf = pygame.Surface(size)
        surf.fill((i * 10, 0, 0))
        pygame.image.save(surf, str(directory / pattern.format(i)))


def test_loads_frames_by_naming_convention(tmp_path):
    write_frames(tmp_path, "frame_{}.png", FLY_FRAMES)
    write_frames(tmp_path, "splat_{}.png", SPLAT_FRAMES)

    loader = AssetLoader(str(tmp_path)).load()

    assert not loader.has_errors
    assert len(loader.fly_frames) == FLY_FRAMES
    assert len(loader.splat_frames) == SPLAT_FRAMES
    assert loader.fly_frames[0].get_size() == (10, 12)


def test_missing_frame_falls_back_and_is_logged(tmp_path):
    write_frames(tmp_path, "frame_{}.png", FLY_FRAMES - 1)
    write_frames(tmp_path, "splat_{}.png", SPLAT_FRAMES)
    log_file = tmp_path / "log.md"

    loader = AssetLoader(str(tmp_path), logger=GameLogger(str(log_file))).load()

    assert len(loader.errors) == 1
    path, reason = loader.errors[0]
    assert path.endswith(f"frame_{FLY_FRAMES - 1}.png")
    assert reason == "file not found"
    assert len(loader.fly_frames) == FLY_FRAMES
    assert loader.fly_frames[0].get_size() == (SPRITE_W, SPRITE_H)
    assert loader.splat_frames[0].get_size() == (10, 12)
    assert "| ASSET | ERROR |" in log_file.read_text(encoding="utf-8")


def test_unreadable_frame_is_reported(tmp_path):
    write_frames(tmp_path, "frame_{}.png", FLY_FRAMES)
    write_frames(tmp_path, "splat_{}.png", SPLAT_FRAMES)
    (tmp_path / "splat_2.png").write_bytes(b"not a png")

    loader = AssetLoader(str(tmp_path)).load()

    assert [p for p, _ in loader.errors] == [str(tmp_path / "splat_2.png")]
    assert len(loader.splat_frames) == SPLAT_FRAMES
    assert loader.splat_frames[0].get_size() == (SPRITE_W, SPRITE_H)


def test_empty_directory_uses_builtin_art(tmp_path):
    loader = AssetLoader(str(tmp_path)).load()
    assert len(loader.errors) == FLY_FRAMES + SPLAT_FRAMES
    assert len(loader.fly_frames) == FLY_FRAMES
    assert len(loader.splat_frames) == SPLAT_FRAMES
