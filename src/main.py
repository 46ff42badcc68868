# main.py
import argparse
import sys
import time

import pygame

from renderer.canvas import Canvas
from renderer.raytracer import MAX_DEPTH, Renderer
from geometry.world import Scene
from scene.loader import load_scene

# Canvas size per quality level; --width/--height override these.
QUALITY_LEVELS = {
    "preview": {"width": 200, "height": 200},
    "standard": {"width": 600, "height": 600},
    "high": {"width": 1000, "height": 1000},
}

class Application:
    """
    Renders a scene once and shows the finished buffer in a pygame window.
    """
    def __init__(self, canvas: Canvas, title: str = "Ray Tracer"):
        self.canvas = canvas
        pygame.init()
        self.screen = pygame.display.set_mode((canvas.width, canvas.height))
        pygame.display.set_caption(title)

    def blit(self):
        frame_surface = pygame.image.frombuffer(self.canvas.to_bytes(),
                                                (self.canvas.width, self.canvas.height), "RGBA")
        self.screen.blit(frame_surface, (0, 0))
        pygame.display.flip()

    def run(self):
        try:
            self.blit()
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False
                clock.tick(30)
        finally:
            pygame.quit()

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Recursive sphere ray tracer")
    parser.add_argument("scene_file", help="Path to a JSON scene file, e.g. scenes/default.json")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="standard",
                        help="Canvas size preset")
    parser.add_argument("--width", type=int, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, help="Canvas height in pixels")
    parser.add_argument("--depth", type=int, default=MAX_DEPTH, help="Reflection recursion depth")
    parser.add_argument("--output", help="Save the render to this image file")
    parser.add_argument("--no-window", action="store_true", help="Don't open a display window")
    parser.add_argument("--debug", action="store_true", help="Print render progress")
    args = parser.parse_args(argv)
    if args.depth < 0:
        parser.error("--depth must not be negative")
    return args

def main(argv=None) -> int:
    args = parse_args(argv)
    quality = QUALITY_LEVELS[args.quality]
    width = args.width or quality["width"]
    height = args.height or quality["height"]

    try:
        description = load_scene(args.scene_file)
        canvas = Canvas(width, height)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Rendering {width}x{height} with {len(description.spheres)} spheres "
          f"and {len(description.lights)} lights...")
    start = time.perf_counter()
    renderer = Renderer(Scene(description.spheres, description.lights), description.viewport,
                        max_depth=args.depth, debug_mode=args.debug)
    renderer.render(canvas)
    print(f"Render finished in {time.perf_counter() - start:.2f}s")

    if args.output:
        canvas.save(args.output)
        print(f"Saved {args.output}")

    if not args.no_window:
        Application(canvas).run()
    return 0

if __name__ == "__main__":
    sys.exit(main())
