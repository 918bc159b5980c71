from __future__ import annotations
from enum import IntEnum
from typing import Protocol, Union


class _ToStr(Protocol):
    def __str__(self) -> str:
        ...


class BasicColors(IntEnum):
    Black = 0
    Red = 1
    Green = 2
    Yellow = 3
    Blue = 4
    Magenta = 5
    Cyan = 6
    White = 7


def create_ansi_escape_code(param: str) -> str:
    return f"\x1b[{param}m"


class _Color:
    text: str

    def __init__(self, text: str) -> None:
        self.text = text

    @classmethod
    def from_colorable(cls, target: Colorable) -> _Color:
        if isinstance(target, cls):
            return target
        return cls(str(target))

    def fg(self, color: BasicColors) -> _Color:
        self.text = create_ansi_escape_code(str(30 + color)) + self.text
        return self

    def __str__(self) -> str:
        return self.text + create_ansi_escape_code("0")


Colorable = Union[_Color, _ToStr, str]


def fg(target: Colorable, color: BasicColors) -> _Color:
    return _Color.from_colorable(target).fg(color)
