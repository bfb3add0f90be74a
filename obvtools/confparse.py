"""Reading and in-place editing of ``key = value`` configuration files."""

from __future__ import annotations

import math
import os
import re
from pathlib import Path

APP_NAME = "OpenBoardView"
MAX_VALUE_SIZE = 10240

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_HEX_RE = re.compile(r"\s*\+?(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT32_MAX = 2**32 - 1

_DEFAULT_LINES = [
    "#",
    f"# {APP_NAME} configuration",
    "#",
    "# Renderer options",
    "#  1 = OpenGL1",
    "#  2 = OpenGL3",
    "#  3 = OpenGLES2",
    "renderer=2",
    "",
    "windowX=1200",
    "windowY=700",
    "",
    "# Reference DPI is 100, increase if you have a higher density (ie, small 4K or 2K screen)",
    "dpi=100",
    "",
    "fontName = ",
    "fontSize = 20",
    "showInfoPanel = true",
    "infoPanelWidth = 300",
    "showPins = true",
    "showPosition = true",
    "showNetWeb = true",
    "showBackgroundImage = true",
    "pinSelectMasks = true",
    "pinSizeThresholdLow = 0",
    "pinShapeCircle = true",
    "pinShapeSquare = false",
    "",
    "slowCPU =       false",
    "showFPS =       false",
    "pinHalo =       false",
    "pinHaloDiameter = 1.1",
    "pinHaloThickness = 4",
    "",
    "fillParts =\t\ttrue",
    "showPartName =  true",
    "showPinName =  true",
    "boardFill =\t\ttrue",
    "boardFillSpacing = 3",
    "",
    "zoomFactor = 5",
    "zoomModifier = 5",
    "",
    "panFactor = 30",
    "panModifier = 5",
    "",
    "centerZoomSearchResults = true",
    "infoPanelCenterZoomNets = true",
    "infoPanelSelectPartsOnNet = true",
    "partZoomScaleOutFactor = 3.0",
    "",
    "# Flip board modes",
    "#  0: flip whole board in view port, shift-flip to flip around mouse ptr",
    "#  1: flip around mouse ptr, shift-flip to flip view port",
    "flipMode = 0",
    "",
    "showAnnotations = true",
    "annotationBoxSize = 20",
    "annotationBoxOffset = 8",
    "",
    "netWebThickness = 2",
    "",
    "pdfSoftwarePath = SumatraPDF.exe",
    "#",
    '# "XRayBlue" Theme by Inflex (20160724)',
    "# Colors, format is 0xRRGGBBAA",
    "#",
    "# There's two built in themes, light (default) and dark ",
    "#colorTheme = default",
    "#colorTheme = dark",
    "colorTheme = light",
    "backgroundColor\t\t= 0xffffffff",
    "boardFillColor\t= 0xddddddff",
    "partOutlineColor = 0x444444ff",
    "partHullColor\t\t\t= 0x80808080",
    "partFillColor = 0xffffff77",
    "partTextColor\t\t\t= 0x80808080",
    "partHighlightedFillColor = 0xf4f0f0ff",
    "partHighlightedColor = 0xff0000ee",
    "partHighlightedTextColor\t\t\t= 0xff3030ff",
    "partHighlightedTextBackgroundColor\t\t\t= 0xffff00ff",
    "",
    "# Pin colourings.",
    "#  default is for pins that aren't selected",
    "#  selected is for the actual clicked on pin",
    "#  highlighted is for pins usually on the same network as the selected",
    "#",
    "# There's an absense of 'fill' colours on most because the CPU hit is",
    "# moderately high to do them all ",
    "#",
    "boardOutlineColor\t\t\t= 0x444444ff",
    "pinDefaultColor\t\t\t\t= 0x22aa33ff",
    "pinDefaultTextColor\t\t\t= 0x666688ff",
    "pinTextBackgroundColor\t\t= 0xffffff80",
    "pinGroundColor\t\t\t\t= 0x2222aaff",
    "pinNotConnectedColor\t\t= 0xaaaaaaff",
    "pinTestPadColor\t\t\t\t= 0x888888ff",
    "pinTestPadFillColor\t\t\t\t= 0xbd9e2dff",
    "",
    "pinSelectedColor\t\t\t\t= 0x00000000",
    "pinSelectedFillColor\t\t\t= 0x8888ffff",
    "pinSelectedTextColor\t\t\t= 0xffffffff",
    "",
    "pinSameNetColor\t\t\t= 0x0000ffff",
    "pinSameNetFillColor\t\t= 0x9999ffff",
    "pinSameNetTextColor\t\t= 0x111111ff",
    "",
    "pinHaloColor\t\t\t= 0x22FF2288",
    "",
    "pinNetWebColor = 0xff0000aa",
    "pinNetWebOSColor = 0x0000ff33",
    "",
    "annotationPopupTextColor = 0x000000ff",
    "annotationPopupBackgroundColor = 0xeeeeeeff",
    "annotationBoxColor = 0xff0000aa",
    "annotationStalkColor = 0x000000ff",
    "",
    "selectedMaskPins\t\t= 0xffffffff",
    "selectedMaskParts\t\t= 0xffffffff",
    "selectedMaskOutline\t\t= 0xffffffff",
    "",
    "orMaskPins\t\t= 0x00000000",
    "orMaskParts\t\t= 0x00000000",
    "orMaskOutline\t= 0x00000000",
    "# EndColors",
    "",
    "# FZKey requires 44 32-bit values in order for it to work.",
    "#  If you have the key, put it in here as a single line, each value comma separated",
    "#FZKey = 0x12345678, 0x12345678",
    "FZKey =   ",
    "",
    "# END OF CONF",
]

DEFAULT_CONF = "".join(line + "\r\n" for line in _DEFAULT_LINES)


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


class Confparse:
    """A configuration file held in memory and rewritten on every change.

    Keys are looked up as plain text at the start of a line, followed by
    any mix of ``=``, spaces and tabs, then the value up to the line end.
    """

    def __init__(self) -> None:
        self.filepath: Path | None = None
        self.text: str | None = None

    # Loading

    def load(self, filepath: str | os.PathLike, save_default: bool = False) -> None:
        """Read the configuration file, creating it when missing.

        A missing file is created with the default configuration when
        ``save_default`` is true, empty otherwise. Raises OSError when the
        file can neither be read nor created.
        """
        path = Path(filepath)
        try:
            data = path.read_bytes()
        except OSError:
            self.text = None
            if save_default:
                self.save_default(path)
            else:
                path.write_bytes(b"")
                self._read(path)
            return
        self.filepath = path
        self.text = data.decode(_ENCODING, _ERRORS)

    def save_default(self, filepath: str | os.PathLike) -> None:
        """Write the default configuration to ``filepath`` and load it."""
        path = Path(filepath)
        path.write_bytes(DEFAULT_CONF.encode(_ENCODING))
        self._read(path)

    def _read(self, path: Path) -> None:
        self.text = path.read_bytes().decode(_ENCODING, _ERRORS)
        self.filepath = path

    # Lookup

    def _locate(self, key: str) -> tuple[int, int, int] | None:
        """Return (key start, value start, value end) of the first valid entry."""
        text = self.text
        if not text or not key:
            return None
        limit = len(text)
        nul = text.find("\0")
        search_end = limit if nul < 0 else nul
        start = text.find(key, 0, search_end)
        while start != -1:
            pos = start + len(key)
            if pos < limit and not _is_alnum(text[pos]):
                while pos < limit and text[pos] in "= \t":
                    pos += 1
                at_line_start = start == 0 or text[start - 1] in "\r\n"
                if pos < limit and at_line_start:
                    end = pos
                    while end < limit and text[end] not in "\0\n\r":
                        end += 1
                    return start, pos, end
            start = text.find(key, start + 1, search_end)
        return None

    def parse(self, key: str) -> str | None:
        """Return the raw value for ``key``, or None when absent."""
        found = self._locate(key)
        if found is None:
            return None
        _, begin, end = found
        return self.text[begin:end][:MAX_VALUE_SIZE]

    def parse_str(self, key: str, default: str | None = None) -> str | None:
        """Return the value for ``key`` or ``default``."""
        value = self.parse(key)
        return default if value is None else value

    def parse_int(self, key: str, default: int = 0) -> int:
        """Return the leading decimal integer of the value, or ``default``.

        A value with no digits reads as 0; an out-of-range value gives
        ``default``.
        """
        value = self.parse(key)
        if value is None:
            return default
        match = _INT_RE.match(value)
        if match is None:
            return 0
        number = int(match.group(1))
        if not _INT_MIN <= number <= _INT_MAX:
            return default
        return number

    def parse_hex(self, key: str, default: int = 0) -> int:
        """Return the value read as a 32-bit hexadecimal number, or ``default``."""
        value = self.parse(key)
        if value is None:
            return default
        match = _HEX_RE.match(value)
        if match is None:
            return 0
        number = int(match.group(1), 16)
        if number > _UINT32_MAX:
            return default
        return number

    def parse_double(self, key: str, default: float = 0.0) -> float:
        """Return the leading floating-point number of the value, or ``default``."""
        value = self.parse(key)
        if value is None:
            return default
        match = _FLOAT_RE.match(value)
        if match is None:
            return 0.0
        literal = match.group(1)
        number = float(literal)
        if math.isinf(number) and "inf" not in literal.lower():
            return default
        return number

    def parse_bool(self, key: str, default: bool = False) -> bool:
        """Return True only for the exact value ``true``; ``default`` when absent."""
        value = self.parse(key)
        if value is None:
            return default
        return value == "true"

    # Writing

    def _backup_and_write(self, content: str) -> None:
        path = self.filepath
        os.replace(path, path.with_name(path.name + "~"))
        path.write_bytes(content.encode(_ENCODING, _ERRORS))
        self._read(path)

    def write_str(self, key: str, value: str) -> None:
        """Set ``key`` to ``value`` in the file and reload it.

        An existing entry is replaced in place after the previous file is
        kept with a ``~`` suffix; a new key is added at the end of the file.
        Raises RuntimeError when nothing is loaded and ValueError for an
        empty key.
        """
        if self.text is None or self.filepath is None:
            raise RuntimeError("no configuration loaded")
        if not key:
            raise ValueError("empty configuration key")
        text = self.text
        if key not in text:
            self._backup_and_write(f"{text}\r\n{key} = {value}")
            return
        found = self._locate(key)
        if found is not None:
            _, begin, end = found
            self._backup_and_write(text[:begin] + value + text[end:])
            return
        with self.filepath.open("ab") as handle:
            handle.write(f"{key} = {value}\r\n".encode(_ENCODING, _ERRORS))
        self._read(self.filepath)

    def write_bool(self, key: str, value: bool) -> None:
        """Store a boolean as ``true`` or ``false``."""
        self.write_str(key, "true" if value else "false")

    def write_int(self, key: str, value: int) -> None:
        """Store a decimal integer."""
        self.write_str(key, str(int(value)))

    def write_hex(self, key: str, value: int) -> None:
        """Store a 32-bit value as ``0x`` followed by eight hex digits."""
        self.write_str(key, f"0x{int(value) & _UINT32_MAX:08x}")

    def write_float(self, key: str, value: float) -> None:
        """Store a floating-point number with six decimals."""
        self.write_str(key, "%f" % value)