#!/usr/bin/env python3
"""
PhongTracer - A Python Whitted-style Ray Tracer

Main entry point: renders a demo scene and saves it as an image.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from phongtracer.vec3 import Vec3, Color, Point3
from phongtracer.shapes import Sphere, Plane
from phongtracer.materials import Material
from phongtracer.lights import Light
from phongtracer.scene import Scene
from phongtracer.lighting import AmbientMode
from phongtracer.renderer import Renderer, RenderSettings


def create_demo_scene() -> Scene:
    """Create a demo scene: three spheres over a mirror-ish floor, two lights."""
    scene = Scene()

    red = Material(
        ambient=Color(0.2, 0.0, 0.0),
        diffuse=Color(0.8, 0.1, 0.1),
        specular=Color(1.0, 1.0, 1.0),
        shininess=64.0,
        reflectivity=0.2
    )
    blue = Material(
        ambient=Color(0.0, 0.0, 0.2),
        diffuse=Color(0.1, 0.2, 0.8),
        specular=Color(0.6, 0.6, 0.6)
    )
    chrome = Material(
        ambient=Color(0.05, 0.05, 0.05),
        diffuse=Color(0.2, 0.2, 0.2),
        specular=Color(1.0, 1.0, 1.0),
        shininess=128.0,
        reflectivity=0.8
    )
    floor = Material(
        ambient=Color(0.1, 0.1, 0.1),
        diffuse=Color(0.6, 0.6, 0.6),
        specular=Color(0.2, 0.2, 0.2),
        shininess=8.0,
        reflectivity=0.3
    )

    scene.add(Sphere(Point3(0, 0, -5), 1.0, red))
    scene.add(Sphere(Point3(-2.2, -0.5, -6), 1.0, blue))
    scene.add(Sphere(Point3(2.2, -0.3, -6), 1.2, chrome))
    scene.add(Plane(Point3(0, -1.5, 0), Vec3(0, 1, 0), floor))

    scene.add_light(Light(Point3(5, 5, 0)))
    scene.add_light(Light(
        Point3(-5, 3, -2),
        ambient=Color(0.1, 0.1, 0.1),
        diffuse=Color(0.4, 0.4, 0.5),
        specular=Color(0.5, 0.5, 0.5)
    ))

    return scene


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='PhongTracer - A Python Whitted-style Ray Tracer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --output render.png
  python main.py --width 1280 --height 720 --threads 0 --output hd_render.png
        '''
    )

    parser.add_argument('--width', type=int, default=800, help='Image width (default: 800)')
    parser.add_argument('--height', type=int, default=600, help='Image height (default: 600)')
    parser.add_argument('--threads', type=int, default=1, help='Number of threads (0=auto, default: 1)')
    parser.add_argument('--output', type=str, default='output/render.png', help='Output filename')
    parser.add_argument('--ambient', type=str, default=AmbientMode.FIRST_LIGHT.value,
                        choices=[mode.value for mode in AmbientMode],
                        help='Global ambient source (default: first_light)')
    parser.add_argument('--verbose', action='store_true', help='Enable log output')

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    print("=" * 60)
    print("PhongTracer")
    print("=" * 60)

    settings = RenderSettings(
        width=args.width,
        height=args.height,
        num_threads=args.threads,
        ambient_mode=AmbientMode(args.ambient)
    )

    print(f"\nRender Settings:")
    print(f"  Resolution: {settings.width}x{settings.height}")
    print(f"  Threads: {settings.num_threads}")
    print(f"  Ambient: {settings.ambient_mode.value}")

    scene = create_demo_scene()
    print(f"\n  Objects in scene: {len(scene)}")
    print(f"  Lights in scene: {len(scene.lights)}")

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

    print("\nRendering...")
    start_time = time.time()

    image = renderer.render(scene.objects, scene.lights)

    elapsed = time.time() - start_time
    print(f"\nRender completed in {elapsed:.2f} seconds")

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    print(f"\nSaving to: {args.output}")
    renderer.save_image(image, str(output_path))

    print("\nDone!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
