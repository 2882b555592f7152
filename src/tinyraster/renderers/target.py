import logging
from pathlib import Path

import numpy as np
from PIL import Image, ImageOps

from ..errors import ImageSaveError, PixelOutOfBoundsError

logger = logging.getLogger(__name__)


class RenderTarget:
    """
    Framebuffer + depth buffer owned together for one rasterization pass.

    Coordinates follow the projection convention (origin bottom-left, +Y up);
    rows are stored top-to-bottom in memory only after the final flip done by
    to_image()/save(). Depth is a flat array indexed x + y*width, and the only
    place that index is computed is index().
    """

    def __init__(self, width, height, background=(0, 0, 0)):
        self.width = int(width)
        self.height = int(height)
        self.color = np.empty((self.height, self.width, 3), dtype=np.uint8)
        self.color[:] = np.asarray(background, dtype=np.uint8)
        self.depth = np.full(self.width * self.height, -np.inf, dtype=np.float64)

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x, y):
        return x + y * self.width

    def _check(self, x, y):
        if not self.in_bounds(x, y):
            raise PixelOutOfBoundsError(x, y, self.width, self.height)

    def set_pixel(self, x, y, color):
        """Unconditional write (lines); no depth test."""
        self._check(x, y)
        self.color[y, x] = color

    def try_write(self, x, y, depth, color) -> bool:
        self._check(x, y)
        i = self.index(x, y)
        if depth > self.depth[i]:
            self.depth[i] = depth
            self.color[y, x] = color
            return True
        return False

    def try_write_many(self, xs, ys, depths, colors):
        """
        Batch try_write for fragments of one primitive. Pixels in a batch must
        be distinct, which holds for a single triangle's bounding-box walk.
        Returns the boolean mask of fragments that passed the depth test.
        """
        xs = np.asarray(xs, dtype=np.int64)
        ys = np.asarray(ys, dtype=np.int64)
        if xs.size and (xs.min() < 0 or ys.min() < 0 or xs.max() >= self.width or ys.max() >= self.height):
            bad = np.where((xs < 0) | (ys < 0) | (xs >= self.width) | (ys >= self.height))[0][0]
            raise PixelOutOfBoundsError(int(xs[bad]), int(ys[bad]), self.width, self.height)
        lin = self.index(xs, ys)
        passed = depths > self.depth[lin]
        if not np.any(passed):
            return passed
        self.depth[lin[passed]] = depths[passed]
        colors = np.asarray(colors, dtype=np.uint8)
        if colors.ndim == 1:
            self.color[ys[passed], xs[passed]] = colors
        else:
            self.color[ys[passed], xs[passed]] = colors[passed]
        return passed

    def depth_at(self, x, y):
        self._check(x, y)
        return self.depth[self.index(x, y)]

    def to_image(self):
        # projection is Y-up, image rows are top-down
        return ImageOps.flip(Image.fromarray(self.color))

    def save(self, path, fmt=None):
        path = Path(path)
        img = self.to_image()
        try:
            img.save(path, format=fmt)
        except (OSError, ValueError, KeyError) as exc:
            raise ImageSaveError(f"cannot save {path}: {exc}") from exc
        logger.info("wrote %dx%d image to %s", self.width, self.height, path)
        return path
