import pytest

from shapeboard.editor import Editor, figure_names, slider_defaults
from shapeboard.figures import Circle, CustomShape, Hexagon, Rectangle, Star5
from shapeboard.scene import MouseButton


def test_figure_names_order():
    names = figure_names()
    assert len(names) == 10
    assert names[0] == "Circle"
    assert names[6] == "5-pointed star"
    assert names[-1] == "Custom"


def test_slider_defaults_match_source():
    defaults = slider_defaults()
    assert defaults["circle_radius"] == 100
    assert defaults["rectangle_a"] == 200
    assert defaults["custom_size"] == 1
    assert defaults["move_x"] == 0


def test_starts_with_circle():
    editor = Editor()
    assert isinstance(editor.figure, Circle)
    assert editor.scene.items == [editor.figure]
    readout = editor.readout()
    assert float(readout["area"]) == pytest.approx(Circle().area(), rel=1e-5)
    assert float(readout["perimeter"]) == pytest.approx(Circle().perimeter(), rel=1e-5)
    assert readout["center"] == "(0;0)"


def test_select_replaces_figure():
    editor = Editor()
    editor.select(2)
    assert isinstance(editor.figure, Rectangle)
    assert editor.scene.items == [editor.figure]
    assert editor.page == 2
    assert editor.panel == 0
    assert float(editor.readout()["area"]) == pytest.approx(Rectangle().area(), rel=1e-5)


@pytest.mark.parametrize("index", [-1, 10])
def test_select_out_of_range(index):
    editor = Editor()
    with pytest.raises(ValueError):
        editor.select(index)


def test_select_same_index_changes_nothing():
    editor = Editor()
    editor.set_radius(40)
    editor.select(0)
    assert editor.figure.radius == 40


def test_set_radius_updates_area():
    editor = Editor()
    editor.set_radius(40)
    assert editor.figure.radius == 40
    assert editor.sliders["circle_radius"] == 40
    assert float(editor.readout()["area"]) == pytest.approx(Circle(radius=40).area(), rel=1e-5)


def test_select_resets_sliders():
    editor = Editor()
    editor.set_radius(40)
    editor.move_x(30)
    editor.select(3)
    assert isinstance(editor.figure, Hexagon)
    assert editor.sliders == slider_defaults()
    assert editor.figure.x == 0
    assert editor.figure.radius == 100


def test_move_and_rotate():
    editor = Editor()
    editor.set_center_x(7)
    editor.move_x(12)
    editor.move_y(-4)
    editor.rotate(45)
    assert (editor.figure.x, editor.figure.y) == (12, -4)
    assert editor.figure.rotation == 45
    assert editor.figure.origin == (7.0, 0.0)


def test_center_readout():
    editor = Editor()
    editor.set_center_x(5)
    editor.set_center_y(-3)
    assert editor.figure.center == (5, -3)
    assert editor.readout()["center"] == "(5;-3)"


def test_star_radii():
    editor = Editor()
    editor.select(6)
    editor.set_radius1(30)
    editor.set_radius2(80)
    assert isinstance(editor.figure, Star5)
    assert (editor.figure.radius1, editor.figure.radius2) == (30, 80)
    assert editor.sliders["star5_radius2"] == 80
    expected = Star5(radius1=30, radius2=80).perimeter()
    assert float(editor.readout()["perimeter"]) == pytest.approx(expected, rel=1e-5)


def test_drawing_mode_collects_points():
    editor = Editor()
    editor.select(9)
    assert editor.drawing
    assert editor.panel == 1
    assert isinstance(editor.custom, CustomShape)
    assert editor.scene.items == [editor.custom]
    editor.scene.press(MouseButton.LEFT, 10, 20)
    editor.scene.move(11, 21)
    editor.scene.release(MouseButton.LEFT)
    editor.scene.move(50, 50)
    assert editor.custom.points == [(10, 20), (11, 21)]


def test_drawing_points_are_relative_to_position():
    editor = Editor()
    editor.select(9)
    editor.move_x(5)
    editor.add_point(10, 20)
    assert editor.custom.x == 5
    assert editor.custom.points == [(5, 20)]


def test_points_ignored_outside_drawing():
    editor = Editor()
    editor.scene.press(MouseButton.LEFT, 1, 1)
    assert editor.custom is None
    assert editor.scene.items == [editor.figure]


def test_dot_size_needs_drawing_shape():
    editor = Editor()
    with pytest.raises(RuntimeError):
        editor.set_dot_size(3)


def test_dot_size_and_center_in_drawing():
    editor = Editor()
    editor.select(9)
    editor.set_dot_size(4)
    editor.set_center_x(6)
    assert editor.custom.dot_size == 4
    assert editor.custom.center == (6, 0)
    assert editor.custom.origin == (6.0, 0.0)


def test_leaving_drawing_restores_measures():
    editor = Editor()
    editor.select(9)
    editor.select(4)
    assert not editor.drawing
    assert editor.panel == 0
    assert float(editor.readout()["area"]) == pytest.approx(editor.figure.area(), rel=1e-5)