import pytest

from robaczki.sim.rng import Rng
from robaczki.sim.models import Creature, Food


class RecordingCanvas:
    """Stand-in for PygameCanvas that records calls and tracks push/pop depth."""

    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.calls = []
        self.depth = 0

    def _rec(self, name, *args):
        self.calls.append((name, args))

    def names(self):
        return [n for n, _ in self.calls]

    def background(self, color): self._rec("background", color)
    def push(self):
        self.depth += 1
        self._rec("push")
    def pop(self):
        self.depth -= 1
        self._rec("pop")
    def translate(self, dx, dy): self._rec("translate", dx, dy)
    def rotate(self, a): self._rec("rotate", a)
    def ellipse(self, x, y, w, h, color): self._rec("ellipse", x, y, w, h, color)
    def triangle(self, p1, p2, p3, color): self._rec("triangle", p1, p2, p3, color)
    def polygon(self, points, color): self._rec("polygon", list(points), color)
    def rounded_rect(self, cx, cy, w, h, r, color): self._rec("rounded_rect", cx, cy, w, h, r, color)
    def text(self, s, x, y, color): self._rec("text", s, x, y, color)


@pytest.fixture
def rng():
    return Rng(1234)

@pytest.fixture
def canvas():
    return RecordingCanvas()

@pytest.fixture
def creature():
    # facing +x, 90 deg cone, full resources
    return Creature(id=1, x=0.0, y=0.0, direction=0.0, speed=1.0, view_angle=90.0, view_range=150.0)

@pytest.fixture
def apple():
    return Food(id=7, x=10.0, y=0.0, nutrition_value=3.0)
