#!/usr/bin/env python3
"""
PathWeaver - A Python Monte Carlo Path Tracer

Main entry point for rendering the built-in scenes.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

import numpy as np

from pathweaver.renderer import Renderer, RenderSettings
from pathweaver.scenes import SCENES, default_camera
from pathweaver.image import save_image


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='PathWeaver - A Python Monte Carlo Path Tracer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --scene perlin --output perlin.png
  python main.py --width 200 --height 100 --samples 10 --output quick.ppm
  python main.py --scene random --aperture 0.1 --threads 8 --seed 42
        '''
    )

    parser.add_argument('--width', type=int, default=800, help='Image width (default: 800)')
    parser.add_argument('--height', type=int, default=400, help='Image height (default: 400)')
    parser.add_argument('--samples', type=int, default=100, help='Samples per pixel (default: 100)')
    parser.add_argument('--depth', type=int, default=50, help='Max ray depth (default: 50)')
    parser.add_argument('--threads', type=int, default=1, help='Number of threads (0=auto, default: 1)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for a reproducible render')
    parser.add_argument('--scene', type=str, default='perlin', choices=sorted(SCENES),
                        help='Scene to render (default: perlin)')
    parser.add_argument('--aperture', type=float, default=0.0, help='Lens aperture (default: 0 = pinhole)')
    parser.add_argument('--output', type=str, default='output/render.ppm', help='Output filename')
    parser.add_argument('--verbose', action='store_true', help='Log render details')
    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )

    try:
        settings = RenderSettings(
            width=args.width,
            height=args.height,
            samples_per_pixel=args.samples,
            max_depth=args.depth,
            num_threads=args.threads,
            seed=args.seed
        )
        camera = default_camera(settings.aspect_ratio, args.aperture)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print("=" * 60)
    print("PathWeaver Path Tracer")
    print("=" * 60)
    print(f"  Resolution: {settings.width}x{settings.height}")
    print(f"  Samples: {settings.samples_per_pixel}")
    print(f"  Max Depth: {settings.max_depth}")
    print(f"  Threads: {settings.num_threads}")

    world = SCENES[args.scene](np.random.default_rng(args.seed))
    print(f"\nScene: {args.scene} ({len(world)} objects)")

    renderer = Renderer(settings)
    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '#' * filled + '.' * (bar_len - filled)
            print(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    renderer.set_progress_callback(progress_callback)

    start_time = time.time()
    image = renderer.render(world, camera)
    elapsed = time.time() - start_time
    print(f"\nRender completed in {elapsed:.2f} seconds")

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    save_image(image, settings.samples_per_pixel, output_path)
    print(f"Saved to: {output_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
