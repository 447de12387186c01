"""Messages of several kinds and a state machine that processes them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar


class MessageKind(enum.Enum):
    """The kinds of message there are."""

    QUIT = "Quit"
    ECHO = "Echo"
    MOVE = "Move"
    CHANGE_COLOR = "ChangeColor"


def _check_u8(value: int) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"{value} does not fit in an unsigned 8-bit integer")
    return value


@dataclass(frozen=True)
class Point:
    """A position with byte-sized coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8(self.x)
        _check_u8(self.y)


@dataclass(frozen=True)
class ChangeColor:
    """Set the colour to an RGB triple."""

    kind: ClassVar[MessageKind] = MessageKind.CHANGE_COLOR
    color: tuple[int, int, int]

    def __post_init__(self) -> None:
        if len(self.color) != 3:
            raise ValueError("a colour has exactly three components")
        for component in self.color:
            _check_u8(component)
        object.__setattr__(self, "color", tuple(self.color))


@dataclass(frozen=True)
class Echo:
    """Print a piece of text."""

    kind: ClassVar[MessageKind] = MessageKind.ECHO
    text: str


@dataclass(frozen=True)
class Move:
    """Move to a point."""

    kind: ClassVar[MessageKind] = MessageKind.MOVE
    point: Point


@dataclass(frozen=True)
class Quit:
    """Stop the machine."""

    kind: ClassVar[MessageKind] = MessageKind.QUIT


@dataclass
class MachineState:
    """Colour, position and whether the machine has quit."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: ChangeColor | Echo | Move | Quit) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.color = color
            case Move(point=point):
                self.position = point
            case Echo(text=text):
                print(text)
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"not a message: {message!r}")