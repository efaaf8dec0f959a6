"""ANSI terminal colouring helpers and a small colour-markup encoder."""

from __future__ import annotations

import re
from dataclasses import dataclass

ANSI_RESET = "\x1b[0m"

_HEX_PAIR = re.compile(r"[0-9a-fA-F]{2}")


@dataclass(frozen=True)
class Color:
    """A simple RGB colour; every channel defaults to 0."""

    r: int = 0
    g: int = 0
    b: int = 0


def _wrap(prefix: str, text: str) -> str:
    return f"{prefix}{text}{ANSI_RESET}"


def color(text: str, r: int, g: int, b: int) -> str:
    """Colour the foreground of ``text`` with an RGB value.

    A red channel of -1 means "no colour" and yields an empty string.
    """
    if r == -1:
        return ""
    return _wrap(f"\x1b[38;2;{r};{g};{b}m", text)


def black(text: str) -> str:
    return color(text, 1, 1, 1)


def red(text: str) -> str:
    return color(text, 205, 49, 49)


def green(text: str) -> str:
    return color(text, 13, 188, 121)


def yellow(text: str) -> str:
    return color(text, 229, 229, 16)


def blue(text: str) -> str:
    return color(text, 36, 114, 200)


def magenta(text: str) -> str:
    return color(text, 188, 63, 188)


def cyan(text: str) -> str:
    return color(text, 17, 168, 205)


def white(text: str) -> str:
    return color(text, 255, 255, 255)


def gray(text: str) -> str:
    return color(text, 118, 118, 118)


def bg_color(text: str, r: int, g: int, b: int) -> str:
    """Colour the background of ``text``.

    The channels are emitted in the order red, blue, green.
    """
    return _wrap(f"\x1b[48;2;{r};{b};{g}m", text)


def bg_black(text: str) -> str:
    return bg_color(text, 1, 1, 1)


def bg_red(text: str) -> str:
    return bg_color(text, 205, 49, 49)


def bg_green(text: str) -> str:
    return bg_color(text, 13, 188, 121)


def bg_yellow(text: str) -> str:
    return bg_color(text, 229, 229, 16)


def bg_blue(text: str) -> str:
    return bg_color(text, 36, 114, 200)


def bg_magenta(text: str) -> str:
    return bg_color(text, 188, 63, 188)


def bg_cyan(text: str) -> str:
    return bg_color(text, 17, 168, 205)


def bg_white(text: str) -> str:
    return bg_color(text, 255, 255, 255)


def bg_gray(text: str) -> str:
    return bg_color(text, 118, 118, 118)


def bold(text: str) -> str:
    return _wrap("\x1b[1m", text)


def italic(text: str) -> str:
    return _wrap("\x1b[3m", text)


def underline(text: str) -> str:
    return _wrap("\x1b[4m", text)


def strike(text: str) -> str:
    return _wrap("\x1b[9m", text)


_TAGS = {
    "<black>": black,
    "<red>": red,
    "<blue>": blue,
    "<green>": green,
    "<yellow>": yellow,
    "<magenta>": magenta,
    "<cyan>": cyan,
    "<white>": white,
    "<gray>": gray,
    "<bold>": bold,
    "<italic>": italic,
    "<underline>": underline,
    "<strike>": strike,
}


def _first_hex_tag(text: str) -> str:
    start = text.find("<&")
    if start == -1:
        return ""
    rest = text[start + 2:]
    end = rest.find(">")
    return rest if end == -1 else rest[:end]


def encode(text: str) -> str:
    """Turn colour tags such as ``<blue>`` or ``<&ff8800>`` into ANSI codes.

    Raises ValueError if a six-character ``<&...>`` tag is not valid hex.
    """
    for tag, style in _TAGS.items():
        text = text.replace(tag, style(""))
    text = text.replace(ANSI_RESET, "")

    spec = _first_hex_tag(text)
    if len(spec) == 6:
        names = ("red", "green", "blue")
        channels = []
        for name, pair in zip(names, (spec[0:2], spec[2:4], spec[4:6])):
            if not _HEX_PAIR.fullmatch(pair):
                raise ValueError(
                    f"{name} color channel in encoded color string is invalid: {pair!r}"
                )
            channels.append(int(pair, 16))
        r, g, b = channels
        text = text.replace(f"<&{spec}>", color("", r, g, b).replace(ANSI_RESET, ""))

    return text + ANSI_RESET