#!/usr/bin/env python3
"""
sphere_caster - A minimal Python ray caster

Main entry point for rendering the two-sphere scene.
"""

import argparse
import sys
import time

from sphere_caster.scene import create_default_scene
from sphere_caster.renderer import Renderer, RenderSettings, get_platform_info


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='sphere_caster - render two spheres through a pinhole camera',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py
  python main.py --output renders/spheres.png --threads 4
        '''
    )

    parser.add_argument('--width', type=int, default=512, help='Image width (default: 512)')
    parser.add_argument('--height', type=int, default=512, help='Image height (default: 512)')
    parser.add_argument('--threads', type=int, default=0, help='Number of threads (0=auto)')
    parser.add_argument('--output', type=str, default='output.png', help='Output filename')
    parser.add_argument('--info', action='store_true', help='Show platform info and exit')

    args = parser.parse_args(argv)

    if args.info:
        info = get_platform_info()
        print("sphere_caster Platform Info:")
        print(f"  System: {info['system']}")
        print(f"  Machine: {info['machine']}")
        print(f"  Python: {info['python_version']}")
        print(f"  CPU Cores: {info['cpu_count']}")
        return 0

    try:
        settings = RenderSettings(
            width=args.width,
            height=args.height,
            num_threads=args.threads,
            output=args.output
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("=" * 60)
    print("sphere_caster")
    print("=" * 60)
    print(f"Resolution: {settings.width}x{settings.height}")
    print(f"Threads: {settings.num_threads}")

    scene = create_default_scene()
    renderer = Renderer(settings)

    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '█' * filled + '░' * (bar_len - filled)
            print(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    renderer.set_progress_callback(progress_callback)

    start_time = time.time()
    image = renderer.render(scene)
    elapsed = time.time() - start_time
    print(f"\nRender completed in {elapsed:.2f} seconds")

    print(f"Saving to: {settings.output}")
    renderer.save_image(image, settings.output)

    print("Done!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
