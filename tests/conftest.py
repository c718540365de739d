from pathlib import Path

import numpy as np
import pytest
from PIL import Image


def write_image(path: Path, size=(64, 48), mode="RGB", fmt=None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    rng = np.random.default_rng(0)
    channels = {"RGB": 3, "RGBA": 4}[mode]
    pixels = rng.integers(0, 256, size=(size[1], size[0], channels), dtype=np.uint8)
    Image.fromarray(pixels).save(path, format=fmt)
    return path


def write_text(path: Path, text: str = "hello") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def image_tree(tmp_path):
    """Source tree with images at several depths plus one non-image file."""
    src = tmp_path / "origin"
    write_image(src / "img_root.png")
    write_image(src / "dir1" / "img_one.gif", size=(32, 32))
    write_image(src / "dir1" / "dir2" / "img_two.jpg", size=(40, 30))
    write_image(src / "dir1" / "dir2" / "dir3" / "img_alpha.png", mode="RGBA")
    write_text(src / "dir1" / "notes.txt")
    return src
