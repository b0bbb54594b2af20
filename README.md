# shapeboard

shapeboard is a small editor for plane figures. You pick a figure, change its
dimensions, move it, rotate it or shift its centre, and the editor keeps a
readout of its area, perimeter and centre up to date. The custom figure is
drawn freehand: each left-button press, and each move while the button is
held, adds a dot.

These figures are available, in selection order (index 0 to 9):

| Index | Name           |
|-------|----------------|
| 0     | Circle         |
| 1     | Triangle       |
| 2     | Rectangle      |
| 3     | Hexagon        |
| 4     | Square         |
| 5     | Ellipse        |
| 6     | 5-pointed star |
| 7     | 6-pointed star |
| 8     | 8-pointed star |
| 9     | Custom         |

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## The `shapeboard` command

```
shapeboard [--figure INDEX_OR_NAME]
```

The command reads editing commands from standard input, one per line, and
prints the readout after each command that changes or shows the state, for
example:

```
Circle: area=31415.9 perimeter=628.319 center=(0;0)
```

`--figure` chooses the starting figure by index or by name (names are matched
without regard to case). Without it the editor starts with the circle.

Commands:

- `figures`: list the figures with their indices
- `select <index|name>`: replace the current figure with another one
- `show`: print the readout again
- `move-x <n>`, `move-y <n>`: move the figure
- `rotate <n>`: rotate the figure, in degrees, about its centre
- `radius <n>`, `length <n>`, `width <n>`, `size <n>`, `radius1 <n>`,
  `radius2 <n>`: change the figure's dimensions
- `center-x <n>`, `center-y <n>`: move the reported centre
- `dot-size <n>`: dot size of the custom figure
- `press <x> <y> [left|right|middle]`, `move <x> <y>`,
  `release [left|right|middle]`: mouse actions on the scene; with the custom
  figure selected they add dots, and the readout then also shows the number
  of dots
- `help`: list the commands
- `quit` or `exit`: leave (end of input does the same)

Invalid commands and arguments print a line starting with `error:` and the
editor carries on.

Measures are printed with six significant digits. Selecting a figure puts all
controls back to their defaults (see `slider_defaults()` below).

## Using it as a library

### Figures

`shapeboard.figures` holds the figure classes `Circle`, `Ellipse`, `Hexagon`,
`Rectangle`, `Square`, `Triangle`, `Star5`, `Star6`, `Star8` and
`CustomShape`, all built on `Figure`. Each has the dimensions `radius`,
`radius1`, `radius2`, `length`, `width`, `size`, the multiplier `scale`, the
placement `x`, `y`, `rotation`, `origin` and the reported `center`. Each
reports `area()` and `perimeter()` and lists the `Primitive` drawing
operations it is made of with `primitives()`; `bounding_rect()` gives the
item's bounds.

```python
from shapeboard.figures import Circle, Hexagon, CustomShape, star_points

circle = Circle(radius=50)
print(circle.area(), circle.perimeter())

for primitive in Hexagon().primitives():
    print(primitive.kind, primitive.vertices)

dots = CustomShape(dot_size=3)
dots.add_point(10, 20)   # stored relative to the shape's x and y
print(dots.primitives())

print(star_points(5, 50, 50))   # closed star outline, integer coordinates
```

### Scene

`shapeboard.scene.DrawingScene` keeps the scene's `items` and turns mouse
actions into point events: register a callback with `connect`, and it is
called with `(x, y)` for every left-button `press` and for every `move` while
the left button is held; `release` of the left button ends the drag. Buttons
are given as `MouseButton` members or their names.

### Editor

`shapeboard.editor.Editor` holds the current figure on a scene together with
its controls and readout:

```python
from shapeboard.editor import Editor, figure_names, slider_defaults

print(figure_names())
print(slider_defaults())

editor = Editor()
editor.select(3)          # Hexagon
editor.set_radius(150)
editor.rotate(30)
print(editor.readout())   # {'area': ..., 'perimeter': ..., 'center': '(0;0)'}
```

Each adjusting method (`move_x`, `move_y`, `rotate`, `set_radius`,
`set_length`, `set_width`, `set_size`, `set_radius1`, `set_radius2`,
`set_center_x`, `set_center_y`, `set_dot_size`) takes an integer. `select`
raises `ValueError` for an index outside 0 to 9. After `select(9)` the editor
is in drawing mode: `add_point`, or a press or drag on `editor.scene`, adds a
dot to `editor.custom`, and `set_dot_size` sets how large the dots are.

## What it does not do

shapeboard has no graphical window and draws nothing on screen: figures
describe themselves as lists of primitives, and the `shapeboard` command works
with text commands and a text readout only.