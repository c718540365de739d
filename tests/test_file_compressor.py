import pytest
from PIL import Image

from image_folder_compressor.compression import Compressor
from image_folder_compressor.config import Factor
from image_folder_compressor.errors import (
    AlreadyExistsError,
    EncodeError,
    UnsupportedFormatError,
)
from image_folder_compressor.algorithms import PillowCodec

from conftest import write_image, write_text


@pytest.fixture
def dirs(tmp_path):
    src = tmp_path / "src"
    dst = tmp_path / "dst"
    src.mkdir()
    dst.mkdir()
    return src, dst


def test_compress_png_to_resized_jpg(dirs):
    src, dst = dirs
    source = write_image(src / "photo.png", size=(100, 50))

    target = Compressor(source, dst, factor=Factor(75, 0.5)).compress_to_jpg()

    assert target == dst / "photo.jpg"
    with Image.open(target) as img:
        assert img.format == "JPEG"
        assert img.size == (50, 25)
    assert source.exists()


def test_existing_target_is_left_untouched(dirs):
    src, dst = dirs
    source = write_image(src / "photo.png")
    existing = dst / "photo.jpg"
    existing.write_bytes(b"previous content")

    with pytest.raises(AlreadyExistsError):
        Compressor(source, dst, delete_source=True).compress_to_jpg()

    assert existing.read_bytes() == b"previous content"
    assert source.exists()
    assert sorted(p.name for p in dst.iterdir()) == ["photo.jpg"]


def test_overwrite_replaces_existing_target(dirs):
    src, dst = dirs
    source = write_image(src / "photo.png")
    existing = dst / "photo.jpg"
    existing.write_bytes(b"previous content")

    Compressor(source, dst, overwrite=True).compress_to_jpg()

    assert existing.read_bytes()[:2] == b"\xff\xd8"


def test_undecodable_file_is_copied_verbatim(dirs):
    src, dst = dirs
    source = write_text(src / "b.txt", "plain text")

    with pytest.raises(UnsupportedFormatError) as excinfo:
        Compressor(source, dst, delete_source=True).compress_to_jpg()

    assert excinfo.value.copied_to == dst / "b.txt"
    assert (dst / "b.txt").read_text(encoding="utf-8") == "plain text"
    assert not (dst / "b.jpg").exists()
    assert source.exists()


def test_delete_source_after_successful_write(dirs):
    src, dst = dirs
    source = write_image(src / "c.jpg", fmt="JPEG")

    target = Compressor(source, dst, delete_source=True).compress_to_jpg()

    assert target.is_file()
    assert not source.exists()


def test_source_equal_to_destination_is_not_deleted(tmp_path):
    source = write_image(tmp_path / "same.jpg", fmt="JPEG")

    target = Compressor(
        source, tmp_path, delete_source=True, overwrite=True
    ).compress_to_jpg()

    assert target == source
    assert source.is_file()


def test_encode_failure_keeps_source_and_writes_nothing(dirs):
    src, dst = dirs
    source = write_image(src / "photo.png")

    class BrokenEncoder(PillowCodec):
        def encode_jpeg(self, raw, quality):
            raise EncodeError("boom")

    with pytest.raises(EncodeError):
        Compressor(source, dst, delete_source=True, codec=BrokenEncoder()).compress_to_jpg()

    assert source.exists()
    assert list(dst.iterdir()) == []


def test_factor_calculator_receives_image_and_file_size(dirs):
    src, dst = dirs
    source = write_image(src / "photo.png", size=(80, 40))
    calls = []

    def calc(width, height, file_size):
        calls.append((width, height, file_size))
        return Factor(60, 0.25)

    target = Compressor(source, dst, factor_calculator=calc).compress_to_jpg()

    assert calls == [(80, 40, source.stat().st_size)]
    with Image.open(target) as img:
        assert img.size == (20, 10)


def test_target_created_during_encode_is_not_replaced(dirs):
    src, dst = dirs
    source = write_image(src / "photo.png")
    target = dst / "photo.jpg"

    class RacingCodec(PillowCodec):
        def encode_jpeg(self, raw, quality):
            target.write_bytes(b"written by another worker")
            return super().encode_jpeg(raw, quality)

    with pytest.raises(AlreadyExistsError):
        Compressor(source, dst, delete_source=True, codec=RacingCodec()).compress_to_jpg()

    assert target.read_bytes() == b"written by another worker"
    assert source.exists()
    assert sorted(p.name for p in dst.iterdir()) == ["photo.jpg"]
