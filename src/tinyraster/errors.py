class RasterError(Exception):
    """Base class for every error raised by tinyraster."""


class InputError(RasterError):
    """Bad or missing input data; the run is aborted before anything is written."""


class MeshLoadError(InputError):
    pass


class TextureLoadError(InputError):
    pass


class MissingTexCoordsError(InputError):
    pass


class PixelOutOfBoundsError(RasterError, IndexError):
    """A writer was handed a pixel outside the render target."""

    def __init__(self, x, y, width, height):
        super().__init__(f"pixel ({x}, {y}) outside {width}x{height} target")
        self.x, self.y = x, y


class ImageSaveError(RasterError):
    pass
