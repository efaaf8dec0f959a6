"""Colour profiles used to mark up IR text."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from ygtools.color import Color, bold, color


class ColorClass(Enum):
    """The kind of IR element being coloured."""

    INSTR = auto()
    TY = auto()
    VAR = auto()
    NAME = auto()
    VALUE = auto()


@dataclass
class ColorProfile:
    """Colours per IR element class; a bare profile is all black."""

    instr: Color = field(default_factory=Color)
    ty: Color = field(default_factory=Color)
    var: Color = field(default_factory=Color)
    name: Color = field(default_factory=Color)
    value: Color = field(default_factory=Color)

    @classmethod
    def default(cls) -> "ColorProfile":
        """The standard colour scheme."""
        return cls(
            instr=Color(36, 114, 200),
            ty=Color(13, 188, 121),
            var=Color(168, 63, 168),
            name=Color(17, 168, 205),
            value=Color(36, 114, 200),
        )

    def markup(self, text: str, color_class: ColorClass) -> str:
        """Colour ``text`` according to its class; names are also bold."""
        clr = {
            ColorClass.INSTR: self.instr,
            ColorClass.TY: self.ty,
            ColorClass.VAR: self.var,
            ColorClass.NAME: self.name,
            ColorClass.VALUE: self.value,
        }[color_class]
        out = color(text, clr.r, clr.g, clr.b)
        return bold(out) if color_class is ColorClass.NAME else out