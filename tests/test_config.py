from pathlib import Path

import pytest

from image_folder_compressor.config import Factor, FolderCompressionConfig


def test_factor_default():
    f = Factor()
    assert f.quality == 80.0
    assert f.size_ratio == 0.8


@pytest.mark.parametrize("quality,ratio", [(100, 1), (0.1, 0.01), (75, 0.7)])
def test_factor_accepts_valid_range(quality, ratio):
    f = Factor(quality, ratio)
    assert 0 < f.quality <= 100
    assert 0 < f.size_ratio <= 1


@pytest.mark.parametrize(
    "quality,ratio",
    [(0, 0.5), (-1, 0.5), (100.01, 0.5), (80, 0), (80, -0.2), (80, 1.5)],
)
def test_factor_rejects_out_of_range(quality, ratio):
    with pytest.raises(ValueError):
        Factor(quality, ratio)


def test_factor_is_immutable():
    f = Factor()
    with pytest.raises(AttributeError):
        f.quality = 10


def test_folder_config_roundtrip_dict():
    config = FolderCompressionConfig(
        input_dir="src",
        output_dir="dst",
        thread_count=4,
        factor=Factor(70, 0.5),
        delete_source=True,
    )

    restored = FolderCompressionConfig.from_dict(config.to_dict())

    assert restored.input_dir == Path("src")
    assert restored.output_dir == Path("dst")
    assert restored.thread_count == 4
    assert restored.factor == Factor(70, 0.5)
    assert restored.delete_source is True
    assert restored.overwrite is False
