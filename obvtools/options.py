"""Command-line options of the board viewer and their completion from the configuration."""

from __future__ import annotations

import dataclasses
import enum
import logging
import math
import re
from collections.abc import Sequence
from dataclasses import dataclass

from obvtools.confparse import APP_NAME, Confparse

logger = logging.getLogger(__name__)

HELP = (
    " [-h] [-V] [-l] [-c <config file>] [-i <intput file>] [-x <width>] [-y <height>]"
    " [-z <fontsize>] [-p <dpi>] [-r <renderer>] [-d]\n"
    "\t-h : This help\n"
    "\t-V : Version information\n"
    "\t-l : slow CPU mode, disables AA and other items to try provide more FPS\n"
    f"\t-c <config file> : alternative configuration file (default is ~/.config/{APP_NAME}/obv.conf)\n"
    "\t-i <input file> : board file to load\n"
    "\t-x <width> : Set window width\n"
    "\t-y <height> : Set window height\n"
    "\t-z <pixels> : Set font size\n"
    "\t-p <dpi> : Set the dpi\n"
    "\t-r <renderer> : Set the renderer [ OPENGL1 = 1; OPENGL3 = 2; OPENGLES2 = 3 ]\n"
    "\t-d : Debug mode\n"
)

DEFAULT_WIDTH = 1100
DEFAULT_HEIGHT = 700
DEFAULT_DPI = 100
DEFAULT_FONT_SIZE = 20.0

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class Renderer(enum.Enum):
    """Rendering back end; DEFAULT means none was chosen."""

    OPENGL1 = 1
    OPENGL3 = 2
    DEFAULT = 3


PREFERRED_RENDERER = Renderer.OPENGL3


class UsageError(Exception):
    """The command line could not be understood."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.usage = HELP


@dataclass
class Options:
    """Settings given on the command line; zero or None means not given."""

    input_file: str | None = None
    config_file: str | None = None
    slow_cpu: bool = False
    width: int = 0
    height: int = 0
    dpi: int = 0
    font_size: float = 0.0
    debug: bool = False
    renderer: Renderer = Renderer.DEFAULT
    pdf_bridge_pdf_path: str | None = None
    pdf_bridge_search_str: str | None = None
    show_help: bool = False
    show_version: bool = False


def renderer_from_int(number: int) -> Renderer:
    """The renderer with the given number; DEFAULT when the number is unknown."""
    try:
        return Renderer(number)
    except ValueError:
        logger.error("Unknown renderer specified: %s", number)
        return Renderer.DEFAULT


def _leading_int(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


_VALUE_OPTIONS = {
    "-c": "<config>",
    "-i": "<input file>",
    "-x": "<window width>",
    "-y": "<window height>",
    "-z": "<font size>",
    "-p": "<dpi>",
    "-r": "<render engine>",
}


def parse_parameters(argv: Sequence[str]) -> Options:
    """Read the arguments that follow the program name.

    Parsing stops at ``-h`` or ``-V``, which set ``show_help`` or
    ``show_version``. A single unrecognised argument is taken as the board
    file to open. Raises UsageError for a missing value or an unknown option.
    """
    args = list(argv)
    options = Options()
    index = 0
    while index < len(args):
        arg = args[index]

        if arg.startswith("-psn_"):
            index += 1
            continue
        if arg == "-h":
            options.show_help = True
            return options
        if arg == "-V":
            options.show_version = True
            return options

        if arg in _VALUE_OPTIONS:
            index += 1
            if index >= len(args) or args[index].startswith("-"):
                raise UsageError(f"Not enough paramters for {arg} {_VALUE_OPTIONS[arg]}")
            value = args[index]
            if arg == "-c":
                options.config_file = value
            elif arg == "-i":
                options.input_file = value
            elif arg == "-x":
                options.width = _leading_int(value)
            elif arg == "-y":
                options.height = _leading_int(value)
            elif arg == "-z":
                options.font_size = _leading_float(value)
            elif arg == "-p":
                dpi = _leading_float(value)
                options.dpi = int(dpi) if math.isfinite(dpi) else 0
            else:
                options.renderer = renderer_from_int(_leading_int(value))
        elif arg == "-l":
            options.slow_cpu = True
        elif arg == "-d":
            options.debug = True
        elif arg.startswith("--reversesearch"):
            rest = args[index + 1 : index + 3]
            if len(rest) < 2 or any(item.startswith("-") for item in rest):
                raise UsageError(
                    "Not enough paramters for --reversesearch <PDF path> <search string>"
                )
            options.pdf_bridge_pdf_path, options.pdf_bridge_search_str = rest
            index += 2
        elif len(args) == 1:
            options.input_file = args[0]
            return options
        else:
            raise UsageError(f"Unknown parameter '{arg}'")
        index += 1
    return options


def resolve_options(options: Options, config: Confparse) -> Options:
    """Fill the settings not given on the command line from the configuration.

    The font size ends up scaled by the dpi, relative to a reference of 100.
    """
    width = options.width or config.parse_int("windowX", DEFAULT_WIDTH)
    height = options.height or config.parse_int("windowY", DEFAULT_HEIGHT)
    renderer = options.renderer
    if renderer is Renderer.DEFAULT:
        renderer = renderer_from_int(config.parse_int("renderer", PREFERRED_RENDERER.value))
    dpi = options.dpi or config.parse_int("dpi", DEFAULT_DPI)
    font_size = options.font_size
    if font_size == 0.0:
        font_size = config.parse_double("fontSize", DEFAULT_FONT_SIZE)
    font_size = (font_size * dpi) / 100
    return dataclasses.replace(
        options,
        width=width,
        height=height,
        renderer=renderer,
        dpi=dpi,
        font_size=font_size,
    )