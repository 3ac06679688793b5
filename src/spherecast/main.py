"""Command line entry point: renders the reference sphere scene to a PPM file."""

import argparse
import sys
import time
from typing import Optional, Sequence

from spherecast.config import DEFAULT_OUTPUT, SceneConfig
from spherecast.renderer.image_export import convert_ppm_to_png
from spherecast.renderer.raytracer import BACKENDS, Renderer


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ray cast a single lit sphere into an ASCII PPM image")
    parser.add_argument(
        "--output",
        type=str,
        default=DEFAULT_OUTPUT,
        help=f"Path of the PPM file to write (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--backend",
        type=str,
        default="python",
        choices=BACKENDS,
        help="Pure Python pipeline or the numba-compiled kernel (default: python)",
    )
    parser.add_argument(
        "--reset-background",
        action="store_true",
        help="Paint missed pixels black instead of repeating the previous pixel color",
    )
    parser.add_argument(
        "--png",
        type=str,
        default=None,
        metavar="PATH",
        help="Also save a PNG copy of the rendered image",
    )
    parser.add_argument("--quiet", action="store_true", help="Only report errors")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    config = SceneConfig.reference(reset_background=args.reset_background)
    renderer = Renderer(config, backend=args.backend, verbose=not args.quiet)

    if not args.quiet:
        print("=== Rendering ===")
        print(f"Scene: {config.describe()}")
        print(f"Backend: {args.backend}")

    start = time.perf_counter()
    try:
        renderer.render_to_file(args.output)
        if args.png:
            convert_ppm_to_png(args.output, args.png)
    except OSError as e:
        print(f"Error writing image: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"Wrote {args.output} in {time.perf_counter() - start:.2f}s")
        if args.png:
            print(f"Wrote {args.png}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
