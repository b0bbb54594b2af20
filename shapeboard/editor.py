"""Editor state: the chosen figure, its sliders and the measures shown for it."""

from __future__ import annotations

from typing import Callable

from shapeboard.figures import (
    Circle,
    CustomShape,
    Ellipse,
    Figure,
    Hexagon,
    Rectangle,
    Square,
    Star5,
    Star6,
    Star8,
    Triangle,
)
from shapeboard.scene import DrawingScene

_FIGURES: tuple[tuple[str, type[Figure]], ...] = (
    ("Circle", Circle),
    ("Triangle", Triangle),
    ("Rectangle", Rectangle),
    ("Hexagon", Hexagon),
    ("Square", Square),
    ("Ellipse", Ellipse),
    ("5-pointed star", Star5),
    ("6-pointed star", Star6),
    ("8-pointed star", Star8),
)
_CUSTOM_NAME = "Custom"
_CUSTOM_INDEX = len(_FIGURES)

_DEFAULTS: dict[str, int] = {
    "move_x": 0,
    "move_y": 0,
    "rotate": 0,
    "center_x": 0,
    "center_y": 0,
    "circle_radius": 100,
    "custom_size": 1,
    "ellipse_radius": 100,
    "hexagon_radius": 100,
    "rectangle_a": 200,
    "rectangle_b": 100,
    "square_a": 50,
    "triangle_a": 50,
    "star5_radius1": 50,
    "star5_radius2": 50,
    "star6_radius1": 50,
    "star6_radius2": 50,
    "star8_radius1": 50,
    "star8_radius2": 50,
}

# Which slider a control moves: one slider for every page, or one per figure page.
_ROUTES: dict[str, str | dict[int, str]] = {
    "move_x": "move_x",
    "move_y": "move_y",
    "rotate": "rotate",
    "center_x": "center_x",
    "center_y": "center_y",
    "radius": {0: "circle_radius", 3: "hexagon_radius", 5: "ellipse_radius"},
    "length": {2: "rectangle_a"},
    "width": {2: "rectangle_b"},
    "size": {1: "triangle_a", 4: "square_a"},
    "radius1": {6: "star5_radius1", 7: "star6_radius1", 8: "star8_radius1"},
    "radius2": {6: "star5_radius2", 7: "star6_radius2", 8: "star8_radius2"},
    "dot_size": {_CUSTOM_INDEX: "custom_size"},
}

_SLIDER_CONTROL: dict[str, str] = {
    slider: control
    for control, route in _ROUTES.items()
    for slider in ([route] if isinstance(route, str) else route.values())
}


def figure_names() -> list[str]:
    """Names of the selectable figures, in selection order."""
    return [name for name, _ in _FIGURES] + [_CUSTOM_NAME]


def slider_defaults() -> dict[str, int]:
    """Values the sliders return to whenever a figure is selected."""
    return dict(_DEFAULTS)


def _number(measure: Callable[[], float]) -> str:
    try:
        value = measure()
    except ZeroDivisionError:
        return "nan"
    return format(float(value), ".6g")


class Editor:
    """Keeps one figure (or one hand-drawn shape) on a scene and its readout.

    Each adjusting method stands for moving a slider: the change is applied
    only when the slider's value actually changes. Controls without a slider
    on the current page apply their value directly.
    """

    def __init__(self, scene: DrawingScene | None = None) -> None:
        self.scene = scene if scene is not None else DrawingScene()
        self.index = 0
        self.page = 0
        self.panel = 0
        self.drawing = False
        self.custom: CustomShape | None = None
        self.sliders = slider_defaults()
        self._readout = {"area": "", "perimeter": "", "center": ""}
        self._slots: dict[str, Callable[[int], None]] = {
            "move_x": self._on_move_x,
            "move_y": self._on_move_y,
            "rotate": self._on_rotate,
            "center_x": self._on_center_x,
            "center_y": self._on_center_y,
            "radius": self._on_radius,
            "length": self._on_length,
            "width": self._on_width,
            "size": self._on_size,
            "radius1": self._on_radius1,
            "radius2": self._on_radius2,
            "dot_size": self._on_dot_size,
        }
        self.figure: Figure = Circle()
        self.scene.items.append(self.figure)
        self._refresh()
        self.scene.connect(self.add_point)

    def select(self, index: int) -> None:
        """Replace the scene's content with the figure at ``index``."""
        index = int(index)
        if not 0 <= index <= _CUSTOM_INDEX:
            raise ValueError(f"no figure with index {index}")
        if index == self.index:
            return
        self.index = index
        self.panel = 0
        self.page = index
        self.scene.items.clear()
        self.drawing = False

        if index == _CUSTOM_INDEX:
            self.drawing = True
            self._start_drawing()
        else:
            self.figure = _FIGURES[index][1]()
            self.scene.items.append(self.figure)

        if self.drawing:
            self.panel = 1
        else:
            self._on_center_x(0)
            self._on_center_y(0)
            self._refresh()
        self._reset_sliders()

    def move_x(self, value: int) -> None:
        self._adjust("move_x", value)

    def move_y(self, value: int) -> None:
        self._adjust("move_y", value)

    def rotate(self, angle: int) -> None:
        self._adjust("rotate", angle)

    def set_radius(self, value: int) -> None:
        self._adjust("radius", value)

    def set_length(self, value: int) -> None:
        self._adjust("length", value)

    def set_width(self, value: int) -> None:
        self._adjust("width", value)

    def set_size(self, value: int) -> None:
        self._adjust("size", value)

    def set_radius1(self, value: int) -> None:
        self._adjust("radius1", value)

    def set_radius2(self, value: int) -> None:
        self._adjust("radius2", value)

    def set_center_x(self, value: int) -> None:
        self._adjust("center_x", value)

    def set_center_y(self, value: int) -> None:
        self._adjust("center_y", value)

    def set_dot_size(self, value: int) -> None:
        self._adjust("dot_size", value)

    def add_point(self, x: float, y: float) -> None:
        """Add a dot at a scene position when drawing by hand."""
        if self.drawing and self.custom is not None:
            self.custom.add_point(x, y)

    def readout(self) -> dict[str, str]:
        """The texts shown for area, perimeter and centre of mass."""
        return dict(self._readout)

    def _adjust(self, control: str, value: int) -> None:
        value = int(value)
        route = _ROUTES[control]
        slider = route if isinstance(route, str) else route.get(self.index)
        slot = self._slots[control]
        if slider is None:
            slot(value)
        elif self.sliders[slider] != value:
            slot(value)
            self.sliders[slider] = value

    def _reset_sliders(self) -> None:
        for slider, value in _DEFAULTS.items():
            if self.sliders[slider] != value:
                self._slots[_SLIDER_CONTROL[slider]](value)
                self.sliders[slider] = value
        self.figure.flag = True

    def _start_drawing(self) -> None:
        self.custom = CustomShape()
        self._on_center_x(0)
        self._on_center_y(0)
        self.scene.items.append(self.custom)

    def _refresh(self) -> None:
        if not self.drawing:
            self._readout["area"] = _number(self.figure.area)
            self._readout["perimeter"] = _number(self.figure.perimeter)
        cx, cy = self.figure.center
        self._readout["center"] = f"({cx};{cy})"

    def _require_custom(self) -> CustomShape:
        if self.custom is None:
            raise RuntimeError("no hand-drawn shape to adjust")
        return self.custom

    def _on_move_x(self, value: int) -> None:
        if self.drawing:
            self._require_custom().x = value
        else:
            self.figure.x = value
            self._refresh()

    def _on_move_y(self, value: int) -> None:
        if self.drawing:
            self._require_custom().y = value
        else:
            self.figure.y = value
            self._refresh()

    def _on_rotate(self, angle: int) -> None:
        if self.drawing:
            self._require_custom().rotation = angle
        else:
            cx, cy = self.figure.center
            self.figure.origin = (float(cx), float(cy))
            self.figure.rotation = angle
            self._refresh()

    def _on_radius(self, value: int) -> None:
        self.figure.radius = value
        self._refresh()

    def _on_length(self, value: int) -> None:
        self.figure.length = value
        self._refresh()

    def _on_width(self, value: int) -> None:
        self.figure.width = value
        self._refresh()

    def _on_size(self, value: int) -> None:
        self.figure.size = value
        self._refresh()

    def _on_radius1(self, value: int) -> None:
        self.figure.radius1 = value
        self._refresh()

    def _on_radius2(self, value: int) -> None:
        self.figure.radius2 = value
        self._refresh()

    def _on_center_x(self, value: int) -> None:
        if self.drawing:
            custom = self._require_custom()
            custom.center = (value, custom.center[1])
            custom.origin = (float(custom.center[0]), float(custom.center[1]))
        else:
            self.figure.center = (value, self.figure.center[1])
        self._refresh()

    def _on_center_y(self, value: int) -> None:
        if self.drawing:
            custom = self._require_custom()
            custom.center = (custom.center[0], value)
            custom.origin = (float(custom.center[0]), float(custom.center[1]))
        else:
            self.figure.center = (self.figure.center[0], value)
        self._refresh()

    def _on_dot_size(self, value: int) -> None:
        self._require_custom().dot_size = value