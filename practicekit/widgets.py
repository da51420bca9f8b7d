"""A small tree of text widgets drawn with box characters."""

from __future__ import annotations

import abc
import argparse
import io
from dataclasses import dataclass, field
from typing import TextIO


def _lines(text: str) -> list[str]:
    """Split on newlines, dropping a final empty line and trailing carriage returns."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _center(text: str, width: int) -> str:
    """Center ``text`` in ``width`` columns; any odd space goes to the right."""
    spare = max(width - len(text), 0)
    left = spare // 2
    return " " * left + text + " " * (spare - left)


class Widget(abc.ABC):
    """Something that can be drawn as lines of text."""

    @abc.abstractmethod
    def width(self) -> int:
        """Natural width of the widget."""

    @abc.abstractmethod
    def draw_into(self, buffer: TextIO) -> None:
        """Draw the widget into a text buffer."""

    def draw(self) -> None:
        """Draw the widget on standard output."""
        buffer = io.StringIO()
        self.draw_into(buffer)
        print(buffer.getvalue())


@dataclass
class Label(Widget):
    label: str

    def width(self) -> int:
        return max((len(line) for line in _lines(self.label)), default=0)

    def draw_into(self, buffer: TextIO) -> None:
        buffer.write(f"{self.label}\n")


class Button(Widget):
    def __init__(self, label: str) -> None:
        self.label = Label(label)

    def __repr__(self) -> str:
        return f"Button({self.label.label!r})"

    def width(self) -> int:
        return self.label.width() + 8

    def draw_into(self, buffer: TextIO) -> None:
        width = self.width()
        label = io.StringIO()
        self.label.draw_into(label)
        border = f"+{'-' * width}+\n"
        buffer.write(border)
        for line in _lines(label.getvalue()):
            buffer.write(f"|{_center(line, width)}|\n")
        buffer.write(border)


@dataclass
class Window(Widget):
    title: str
    widgets: list[Widget] = field(default_factory=list)

    def add_widget(self, widget: Widget) -> None:
        self.widgets.append(widget)

    def inner_width(self) -> int:
        return max(len(self.title), max((w.width() for w in self.widgets), default=0))

    def width(self) -> int:
        # Two columns of border and padding on each side.
        return self.inner_width() + 4

    def draw_into(self, buffer: TextIO) -> None:
        inner = io.StringIO()
        for widget in self.widgets:
            widget.draw_into(inner)
        width = self.inner_width()
        buffer.write(f"+-{'-' * width}-+\n")
        buffer.write(f"| {_center(self.title, width)} |\n")
        buffer.write(f"+={'=' * width}=+\n")
        for line in _lines(inner.getvalue()):
            buffer.write(f"| {line.ljust(width)} |\n")
        buffer.write(f"+-{'-' * width}-+\n")


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Draw a sample text window.").parse_args(argv)
    window = Window("Text GUI Demo 1.23")
    window.add_widget(Label("This is a small text GUI demo."))
    window.add_widget(Button("Click me!"))
    window.draw()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())