# image_folder_compressor/algorithms/factor_policy.py

from __future__ import annotations
from dataclasses import dataclass
import math

from ..config import Factor, FactorCalculator


def fixed_factor(factor: Factor) -> FactorCalculator:
    """Calculator that ignores the image and always returns `factor`."""

    def _calc(width: int, height: int, file_size: int) -> Factor:
        return factor

    return _calc


@dataclass(frozen=True)
class SizeBasedFactorPolicy:
    """
    Picks a Factor from the image dimensions and the source file size.

    - Images larger than `max_pixels` are scaled down so that the output
      stays at or below that pixel count (never above `base.size_ratio`).
    - Files heavier than `large_file_bytes` are encoded at `large_file_quality`.

    Pure function of its inputs, so a single instance can be shared by all
    workers.
    """

    base: Factor = Factor()
    max_pixels: int = 1920 * 1080
    large_file_bytes: int = 2 * 1024 * 1024
    large_file_quality: float = 65.0

    def __call__(self, width: int, height: int, file_size: int) -> Factor:
        ratio = self.base.size_ratio
        pixels = width * height * ratio * ratio
        if pixels > self.max_pixels > 0:
            ratio = math.sqrt(self.max_pixels / (width * height))

        quality = self.base.quality
        if file_size > self.large_file_bytes:
            quality = min(quality, self.large_file_quality)

        return Factor(quality=quality, size_ratio=min(ratio, 1.0))
