# renderer/canvas.py
import numpy as np
from PIL import Image
from core.color import Color

class Canvas:
    """
    RGBA output buffer addressed from its center: pixel (0, 0) is the middle
    of the image, x grows right and y grows down.
    """
    def __init__(self, width: int, height: int):
        if not isinstance(width, int) or not isinstance(height, int) or width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive integers, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 4), dtype=np.uint8)

    def _index(self, x: int, y: int):
        row = self.height // 2 + y
        col = self.width // 2 + x
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"Pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")
        return row, col

    def put_pixel(self, x: int, y: int, color: Color):
        self.pixels[self._index(x, y)] = color.to_rgba8()

    def get_pixel(self, x: int, y: int) -> tuple:
        return tuple(int(c) for c in self.pixels[self._index(x, y)])

    def draw(self) -> np.ndarray:
        """
        Snapshot of the buffer as a (height, width, 4) array, ready to blit.
        """
        return self.pixels.copy()

    def to_bytes(self) -> bytes:
        """
        Row-major RGBA bytes with a top-left origin, width*height*4 long.
        """
        return self.pixels.tobytes()

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)

    def save(self, output_path: str):
        self.to_image().save(output_path)
