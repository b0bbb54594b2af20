import pytest

from shapeboard.scene import DrawingScene, MouseButton


@pytest.fixture
def recorded():
    scene = DrawingScene()
    points = []
    scene.connect(lambda x, y: points.append((x, y)))
    return scene, points


def test_left_press_reports_position(recorded):
    scene, points = recorded
    scene.press(MouseButton.LEFT, 3, 4)
    assert points == [(3, 4)]


def test_other_buttons_are_ignored(recorded):
    scene, points = recorded
    scene.press(MouseButton.RIGHT, 3, 4)
    scene.press(MouseButton.MIDDLE, 5, 6)
    scene.move(7, 8)
    assert points == []


def test_move_without_press_reports_nothing(recorded):
    scene, points = recorded
    scene.move(1, 2)
    assert points == []


def test_drag_reports_every_move(recorded):
    scene, points = recorded
    scene.press(MouseButton.LEFT, 0, 0)
    scene.move(1, 1)
    scene.move(2, 3)
    assert points == [(0, 0), (1, 1), (2, 3)]


def test_release_ends_drag(recorded):
    scene, points = recorded
    scene.press(MouseButton.LEFT, 0, 0)
    scene.release(MouseButton.LEFT)
    scene.move(9, 9)
    assert points == [(0, 0)]


def test_release_of_other_button_keeps_drag(recorded):
    scene, points = recorded
    scene.press(MouseButton.LEFT, 0, 0)
    scene.release(MouseButton.RIGHT)
    scene.move(4, 5)
    assert points == [(0, 0), (4, 5)]


def test_button_names_are_accepted(recorded):
    scene, points = recorded
    scene.press("left", 2, 2)
    assert points == [(2, 2)]


def test_unknown_button_raises(recorded):
    scene, _ = recorded
    with pytest.raises(ValueError):
        scene.press("thumb", 0, 0)


def test_every_listener_is_called():
    scene = DrawingScene()
    first, second = [], []
    scene.connect(lambda x, y: first.append((x, y)))
    scene.connect(lambda x, y: second.append((x, y)))
    scene.press(MouseButton.LEFT, 1, 2)
    assert first == second == [(1, 2)]