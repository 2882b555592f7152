import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..errors import TextureLoadError

logger = logging.getLogger(__name__)


class Texture:
    """
    RGB texture held as an (H, W, 3) uint8 array whose row 0 is v = 0
    (bottom of the image file), so uv * (width, height) indexes it directly.
    Out-of-range lookups clamp to the edge; there is no wraparound.
    """

    def __init__(self, pixels):
        pixels = np.asarray(pixels, dtype=np.uint8)
        if pixels.ndim != 3 or pixels.shape[2] < 3:
            raise TextureLoadError(f"texture needs >= 3 channels, got shape {pixels.shape}")
        self.pixels = pixels[:, :, :3]
        self.height, self.width = self.pixels.shape[:2]

    @classmethod
    def from_file(cls, path):
        path = Path(path)
        try:
            with Image.open(path) as im:
                arr = np.asarray(im.convert("RGB"))
        except (OSError, UnidentifiedImageError) as exc:
            raise TextureLoadError(f"cannot load texture {path}: {exc}") from exc
        logger.info("loaded texture %s (%dx%d)", path, arr.shape[1], arr.shape[0])
        return cls(np.flipud(arr))

    def sample(self, px, py):
        x = min(max(int(px), 0), self.width - 1)
        y = min(max(int(py), 0), self.height - 1)
        return self.pixels[y, x]

    def sample_many(self, px, py):
        x = np.clip(np.asarray(px, dtype=np.int64), 0, self.width - 1)
        y = np.clip(np.asarray(py, dtype=np.int64), 0, self.height - 1)
        return self.pixels[y, x]
