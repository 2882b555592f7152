import enum

class RenderMode(str, enum.Enum):
    wireframe = "wireframe"  # edges only, no depth test
    flat = "flat"            # lambert-shaded solid fill, z-buffered
    textured = "textured"    # flat + nearest-neighbour texture

    @property
    def fills(self) -> bool:
        return self is not RenderMode.wireframe
