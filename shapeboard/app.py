"""Line-oriented front end for the figure editor."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, TextIO

from shapeboard.editor import Editor, figure_names
from shapeboard.scene import MouseButton

_ADJUSTMENTS: dict[str, Callable[[Editor, int], None]] = {
    "move-x": Editor.move_x,
    "move-y": Editor.move_y,
    "rotate": Editor.rotate,
    "radius": Editor.set_radius,
    "length": Editor.set_length,
    "width": Editor.set_width,
    "size": Editor.set_size,
    "radius1": Editor.set_radius1,
    "radius2": Editor.set_radius2,
    "center-x": Editor.set_center_x,
    "center-y": Editor.set_center_y,
    "dot-size": Editor.set_dot_size,
}

_HELP = (
    "commands: figures, select <index|name>, show, "
    + ", ".join(f"{name} <n>" for name in _ADJUSTMENTS)
    + ", press <x> <y> [button], move <x> <y>, release [button], help, quit"
)


def _figure_index(text: str) -> int:
    text = text.strip()
    names = figure_names()
    if text.lstrip("-").isdigit():
        index = int(text)
        if 0 <= index < len(names):
            return index
    else:
        for index, name in enumerate(names):
            if name.lower() == text.lower():
                return index
    raise ValueError(f"unknown figure: {text!r}")


class App:
    """Reads editing commands and prints the readout after each one."""

    def __init__(
        self,
        figure: int = 0,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.editor = Editor()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.editor.select(figure)

    def run(self) -> int:
        self._show()
        for line in self.stdin:
            words = line.split()
            if not words:
                continue
            command, *args = words
            command = command.lower()
            if command in ("quit", "exit"):
                break
            try:
                self._execute(command, args)
            except (ValueError, RuntimeError) as exc:
                self._write(f"error: {exc}")
        return 0

    def _execute(self, command: str, args: list[str]) -> None:
        if command == "help":
            self._write(_HELP)
            return
        if command == "figures":
            for index, name in enumerate(figure_names()):
                self._write(f"{index} {name}")
            return
        if command == "show":
            pass
        elif command == "select":
            self.editor.select(_figure_index(" ".join(args)))
        elif command in _ADJUSTMENTS:
            (value,) = self._numbers(args, 1)
            _ADJUSTMENTS[command](self.editor, int(value))
        elif command == "press":
            button = MouseButton(args[2].lower()) if len(args) > 2 else MouseButton.LEFT
            x, y = self._numbers(args[:2], 2)
            self.editor.scene.press(button, x, y)
        elif command == "move":
            x, y = self._numbers(args, 2)
            self.editor.scene.move(x, y)
        elif command == "release":
            button = MouseButton(args[0].lower()) if args else MouseButton.LEFT
            self.editor.scene.release(button)
        else:
            raise ValueError(f"unknown command: {command}")
        self._show()

    @staticmethod
    def _numbers(args: list[str], count: int) -> list[float]:
        if len(args) != count:
            raise ValueError(f"expected {count} number(s)")
        return [float(arg) for arg in args]

    def _show(self) -> None:
        readout = self.editor.readout()
        points = ""
        if self.editor.drawing and self.editor.custom is not None:
            points = f" points={len(self.editor.custom.points)}"
        self._write(
            f"{figure_names()[self.editor.index]}: area={readout['area']} "
            f"perimeter={readout['perimeter']} center={readout['center']}{points}"
        )

    def _write(self, text: str) -> None:
        print(text, file=self.stdout)


def parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="shapeboard",
        description="Edit a figure and read its area, perimeter and centre.",
    )
    parser.add_argument(
        "--figure",
        type=_figure_index,
        default=0,
        help="figure to start with, by index or name",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    return App(figure=args.figure).run()


if __name__ == "__main__":
    sys.exit(main())