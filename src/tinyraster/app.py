import argparse
import logging
import sys

from pydantic import ValidationError

from .config import AppConfig
from .errors import RasterError
from .log import configure_logging
from .models.mode import RenderMode
from .renderers.pipeline import render
from .scene.mesh import Mesh
from .scene.primitives import BUILTIN_MODELS
from .scene.texture import Texture

logger = logging.getLogger("tinyraster")


def build_parser():
    p = argparse.ArgumentParser(prog="tinyraster",
                                description="Rasterize an OBJ mesh to an image on the CPU")
    p.add_argument("model", nargs="?",
                   help="Wavefront .obj file or built-in model (%s); default: obj/african_head.obj"
                        % ", ".join(BUILTIN_MODELS))
    p.add_argument("--texture", help="Diffuse texture image for textured mode")
    p.add_argument("-o", "--output", help="Output image path (default: output.jpg)")
    p.add_argument("--format", help="Pillow output format, e.g. JPEG or PNG")
    p.add_argument("--mode", choices=[m.value for m in RenderMode])
    p.add_argument("--width", type=int)
    p.add_argument("--height", type=int)
    p.add_argument("--light", type=float, nargs=3, metavar=("X", "Y", "Z"))
    p.add_argument("--config", help="JSON config file; flags override it")
    p.add_argument("-v", "--verbose", action="count", default=0)
    p.add_argument("-q", "--quiet", action="store_true")
    return p


def resolve_config(args) -> AppConfig:
    cfg = AppConfig.from_file(args.config) if args.config else AppConfig()
    data = cfg.model_dump()
    r, paths = data["render"], data["paths"]
    if args.mode: r["mode"] = args.mode
    if args.width is not None: r["width"] = args.width
    if args.height is not None: r["height"] = args.height
    if args.light: r["light_dir"] = list(args.light)
    if args.model: paths["model"] = args.model
    if args.texture: paths["texture"] = args.texture
    if args.output: paths["output"] = args.output
    if args.format: paths["format"] = args.format
    return AppConfig.model_validate(data)


def load_model(path):
    """Built-in primitive by name, otherwise an OBJ file."""
    factory = BUILTIN_MODELS.get(str(path))
    if factory is not None:
        logger.info("using built-in model %s", path)
        return factory()
    return Mesh.from_obj(path)


def run(cfg: AppConfig):
    mesh = load_model(cfg.paths.model)
    texture = None
    if cfg.render.mode is RenderMode.textured:
        texture = Texture.from_file(cfg.paths.texture)
    target = render(mesh, cfg.render, texture)
    return target.save(cfg.paths.output, cfg.paths.format)


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(-1 if args.quiet else args.verbose)
    try:
        cfg = resolve_config(args)
        run(cfg)
    except RasterError as exc:
        logger.error("%s", exc)
        return 1
    except ValidationError as exc:
        logger.error("invalid configuration: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
