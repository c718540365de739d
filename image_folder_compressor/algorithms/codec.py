# image_folder_compressor/algorithms/codec.py

from __future__ import annotations
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Protocol

import numpy as np
from PIL import Image

from ..errors import DecodeError, EncodeError


@dataclass
class RawImage:
    """
    Buffer de pixels decodificado.

    pixels: array uint8 com shape (altura, largura, canais), onde canais é
    3 (RGB) ou 4 (RGBA).
    """
    pixels: np.ndarray

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def has_alpha(self) -> bool:
        return self.pixels.shape[2] == 4


class ImageCodec(Protocol):
    """Capacidade de imagem usada pelo compressor. Só a assinatura importa."""

    def decode(self, path: Path) -> RawImage: ...

    def resize(self, raw: RawImage, ratio: float) -> RawImage: ...

    def encode_jpeg(self, raw: RawImage, quality: float) -> bytes: ...


def _has_transparency(img: Image.Image) -> bool:
    return img.mode in ("RGBA", "LA", "PA") or (
        img.mode == "P" and "transparency" in img.info
    )


def flatten_alpha(pixels: np.ndarray) -> np.ndarray:
    """
    RGBA -> RGB.

    Pixels totalmente transparentes viram branco; nos demais o canal alfa
    é simplesmente descartado.
    """
    rgb = pixels[..., :3].copy()
    rgb[pixels[..., 3] == 0] = 255
    return rgb


@dataclass
class PillowCodec:
    """
    Implementação do ImageCodec com Pillow.

    - decode: qualquer formato que o Pillow abra.
    - resize: filtro triangular (bilinear), escala isotrópica truncada.
    - encode_jpeg: JPEG com tabelas de Huffman otimizadas.
    """

    optimize: bool = True
    progressive: bool = False

    def decode(self, path: Path) -> RawImage:
        try:
            with Image.open(path) as img:
                img.load()
                mode = "RGBA" if _has_transparency(img) else "RGB"
                pixels = np.asarray(img.convert(mode), dtype=np.uint8)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            # UnidentifiedImageError é subclasse de OSError
            raise DecodeError(f"Cannot decode {Path(path).name}: {e}") from e
        return RawImage(pixels=pixels)

    def resize(self, raw: RawImage, ratio: float) -> RawImage:
        width = max(1, int(raw.width * ratio))
        height = max(1, int(raw.height * ratio))

        img = Image.fromarray(raw.pixels)
        if (width, height) != img.size:
            img = img.resize((width, height), Image.Resampling.BILINEAR)

        pixels = np.asarray(img, dtype=np.uint8)
        if raw.has_alpha:
            pixels = flatten_alpha(pixels)
        return RawImage(pixels=pixels)

    def encode_jpeg(self, raw: RawImage, quality: float) -> bytes:
        pixels = flatten_alpha(raw.pixels) if raw.has_alpha else raw.pixels
        q = min(100, max(1, int(round(quality))))

        buf = BytesIO()
        try:
            Image.fromarray(pixels).save(
                buf,
                format="JPEG",
                quality=q,
                optimize=self.optimize,
                progressive=self.progressive,
            )
        except (OSError, ValueError) as e:
            raise EncodeError(f"JPEG encode failed: {e}") from e
        return buf.getvalue()
