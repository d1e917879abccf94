"""Headless Parabola Renderer - CLI entry point.

Renders one parabola segment to a PNG without opening a window.

Usage:
    python editor/src/headless.py --focus X Y --focal-length A [options] -o out.png

Examples:
    python editor/src/headless.py --focus 256 256 --focal-length 40 -o parabola.png
    python editor/src/headless.py --focus 100 100 --focal-length 25 --range -50 50 -o seg.png
    python editor/src/headless.py --focus 256 256 --focal-length 40 --rotation 45 --degrees -o tilted.png
"""

import sys
import os
import math
import argparse

# Add editor/src to path so imports work
_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

# No display needed
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from constants import EPSILON, HEADLESS_OUTPUT_WIDTH, HEADLESS_OUTPUT_HEIGHT, HEADLESS_SUPERSAMPLE


def build_parser():
    parser = argparse.ArgumentParser(
        description='Render a parabola segment to a PNG image (headless).',
    )
    parser.add_argument(
        '--focus', nargs=2, type=float, required=True, metavar=('X', 'Y'),
        help='Focus position in output pixels (y grows downward).',
    )
    parser.add_argument(
        '-a', '--focal-length', type=float, required=True,
        help='Focal length: focus at canonical (0, a), directrix at y = -a. Nonzero.',
    )
    parser.add_argument(
        '-r', '--rotation', type=float, default=0.0,
        help='Rotation about the focus (radians unless --degrees).',
    )
    parser.add_argument(
        '--degrees', action='store_true',
        help='Interpret --rotation in degrees.',
    )
    parser.add_argument(
        '--counterclockwise', action='store_true',
        help='Rotate in the opposite sense.',
    )
    parser.add_argument(
        '--range', nargs=2, type=float, metavar=('START', 'END'), dest='draw_range',
        help='Explicit canonical x-range to draw (default: fit to image).',
    )
    parser.add_argument(
        '--size', nargs=2, type=int, default=[HEADLESS_OUTPUT_WIDTH, HEADLESS_OUTPUT_HEIGHT],
        metavar=('WIDTH', 'HEIGHT'),
        help=f'Output image size (default: {HEADLESS_OUTPUT_WIDTH} {HEADLESS_OUTPUT_HEIGHT}).',
    )
    parser.add_argument(
        '--supersample', type=int, default=HEADLESS_SUPERSAMPLE,
        help=f'Supersampling factor (default: {HEADLESS_SUPERSAMPLE}).',
    )
    parser.add_argument(
        '--epsilon', type=float, default=EPSILON,
        help=f'Solver tolerance (default: {EPSILON}).',
    )
    parser.add_argument(
        '-o', '--output',
        default='./parabola.png',
        help='Output PNG path (default: ./parabola.png).',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    from utils.logger import setup_logging
    setup_logging(args.verbose)

    from models.errors import NoVisibleSegmentError, PreconditionError
    from models.geometry import Parabola, ExplicitRange, AUTO_FIT
    from services.headless_renderer import HeadlessRenderer

    rotation = math.radians(args.rotation) if args.degrees else args.rotation
    draw_range = ExplicitRange(*args.draw_range) if args.draw_range else AUTO_FIT

    try:
        parabola = Parabola(args.focus[0], args.focus[1], args.focal_length, rotation, args.counterclockwise)
        renderer = HeadlessRenderer(args.size[0], args.size[1], supersample=args.supersample)
        curve = renderer.render_parabola(parabola, os.path.abspath(args.output), draw_range, args.epsilon)
    except NoVisibleSegmentError as e:
        print(f"Nothing to draw: {e}")
        return 1
    except (PreconditionError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Rendered {args.output}")
    print(f"  start   ({curve.start.x:.3f}, {curve.start.y:.3f})")
    print(f"  control ({curve.control.x:.3f}, {curve.control.y:.3f})")
    print(f"  end     ({curve.end.x:.3f}, {curve.end.y:.3f})")
    return 0


if __name__ == '__main__':
    sys.exit(main())
