"""A small state machine driven by messages."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Quit:
    pass


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """Colour, position, message and whether a quit was requested."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    should_quit: bool = False
    message: str = ""

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.should_quit = True

    def echo(self, text: str) -> None:
        self.message = text

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.change_color((red, green, blue))
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(Point(point.x, point.y))
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message: {message!r}")