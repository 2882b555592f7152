import logging
from dataclasses import dataclass

import numpy as np

from ..errors import InputError
from ..models.mode import RenderMode
from ..utils.geometry import is_degenerate, light_intensity, shade_color
from ..utils.transforms import project, project_edges, to_pixel
from .line import draw_line
from .target import RenderTarget
from .triangle import fill_triangle

logger = logging.getLogger(__name__)


@dataclass
class RenderStats:
    triangles: int = 0
    drawn: int = 0
    culled: int = 0
    degenerate: int = 0
    pixels: int = 0


def _render_wireframe(mesh, config, target, stats):
    color = np.asarray(config.color, dtype=np.uint8)
    for tri in mesh.triangles():
        stats.triangles += 1
        S = to_pixel(project_edges(tri.positions, config.width, config.height,
                                   pixel_center=config.use_pixel_center))
        for i in range(3):
            draw_line(target, S[i], S[(i + 1) % 3], color)
        stats.drawn += 1


def _render_filled(mesh, config, target, stats, texture):
    textured = config.mode is RenderMode.textured
    base = np.asarray(config.color, dtype=np.uint8)
    center = config.use_pixel_center
    for tri in mesh.triangles(require_uvs=textured):
        stats.triangles += 1
        world = tri.positions
        intensity = light_intensity(world[0], world[1], world[2], config.light_dir)
        if intensity <= 0:
            stats.culled += 1
            continue
        P = project(world, config.width, config.height, pixel_center=center)
        if is_degenerate(P, config.degeneracy_eps):
            stats.degenerate += 1
            continue
        if textured:
            n = fill_triangle(target, P, uvs=tri.uvs, texture=texture,
                              intensity=intensity, eps=config.degeneracy_eps)
        else:
            n = fill_triangle(target, P, color=shade_color(base, intensity),
                              eps=config.degeneracy_eps)
        stats.drawn += 1
        stats.pixels += n


def render_with_stats(mesh, config, texture=None):
    """
    One full pass over mesh into a fresh RenderTarget.
    wireframe: Bresenham edges only. flat/textured: project -> light cull ->
    bounding-box fill with depth test (textured also samples texture).
    """
    if config.mode is RenderMode.textured and texture is None:
        raise InputError("textured mode needs a texture")

    target = RenderTarget(config.width, config.height, background=config.background)
    stats = RenderStats()
    if config.mode is RenderMode.wireframe:
        _render_wireframe(mesh, config, target, stats)
    else:
        _render_filled(mesh, config, target, stats, texture)

    logger.info("%s pass: %d triangles, %d drawn, %d culled, %d degenerate, %d pixels",
                config.mode.value, stats.triangles, stats.drawn, stats.culled,
                stats.degenerate, stats.pixels)
    return target, stats


def render(mesh, config, texture=None):
    target, _ = render_with_stats(mesh, config, texture)
    return target
