# main.py
import argparse
import logging
import sys
from pathtracer.config import LOG_FORMAT, QUALITY_LEVELS, RENDER_SETTINGS
from pathtracer.renderer.output import write_image
from pathtracer.renderer.parallel import render
from pathtracer.scenes import SCENES, build_scene

logger = logging.getLogger("pathtracer")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a demo scene with the Monte-Carlo path tracer.",
    )
    parser.add_argument("scene", choices=sorted(SCENES), help="scene to render")
    parser.add_argument("-o", "--output", default=RENDER_SETTINGS['output'],
                        help="output image path (format from extension)")
    parser.add_argument("--width", type=int, default=RENDER_SETTINGS['width'],
                        help="image width in pixels; height follows the scene's aspect ratio")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS),
                        help="sample/depth preset, overridden by --samples/--max-depth")
    parser.add_argument("--samples", type=int, help="samples per pixel")
    parser.add_argument("--max-depth", type=int, help="maximum bounces per path")
    parser.add_argument("--workers", type=int, default=RENDER_SETTINGS['workers'],
                        help="render threads, including the main thread")
    parser.add_argument("--seed", type=int, help="seed for a reproducible scene and render")
    parser.add_argument("--texture", help="image wrapped around the globe in the earth scene")
    parser.add_argument("--tone-map", action="store_true",
                        help="use Reinhard tone mapping instead of plain gamma 2")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser

def resolve_settings(args) -> dict:
    """Merge defaults, the quality preset and explicit flags."""
    settings = {
        'samples_per_pixel': RENDER_SETTINGS['samples_per_pixel'],
        'max_depth': RENDER_SETTINGS['max_depth'],
    }
    if args.quality:
        settings.update(QUALITY_LEVELS[args.quality])
    if args.samples is not None:
        settings['samples_per_pixel'] = args.samples
    if args.max_depth is not None:
        settings['max_depth'] = args.max_depth
    return settings

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format=LOG_FORMAT)

    settings = resolve_settings(args)
    options = {}
    if args.texture is not None:
        if args.scene != "earth":
            parser.error("--texture only applies to the earth scene")
        options['texture_path'] = args.texture
    try:
        scene = build_scene(args.scene, args.seed, **options)
    except FileNotFoundError as exc:
        parser.error(str(exc))
    height = int(args.width / scene.aspect_ratio)
    try:
        pixels = render(scene.world, scene.background, scene.camera,
                        args.width, height, settings['samples_per_pixel'],
                        settings['max_depth'], args.workers, args.seed)
    except ValueError as exc:
        parser.error(str(exc))

    write_image(args.output, pixels, settings['samples_per_pixel'], tone_map=args.tone_map)
    logger.info("Done.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
