# camera/viewport.py
from core.vector import Tuple

class Viewport:
    """
    Virtual image plane of the given logical size at unit distance from the eye.
    """
    def __init__(self, width: float = 1.0, height: float = 1.0):
        self.width = width
        self.height = height

    def canvas_to_viewport(self, canvas, x: int, y: int) -> Tuple:
        """
        Direction from the eye through canvas pixel (x, y).

        y is flipped because canvas rows grow downward while the viewport's
        up axis grows upward.
        """
        return Tuple.vector(
            x * self.width / canvas.width,
            -y * self.height / canvas.height,
            1.0
        )

    def __repr__(self) -> str:
        return f"Viewport({self.width}, {self.height})"
