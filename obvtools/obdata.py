"""Measured values for board parts and nets, read from OBData text files."""

from __future__ import annotations

import logging
import os
import re
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DOWNLOAD_URL = "https://openboarddata.org/"
DOWNLOAD_BOARD_PATH = "laptops/apple/820-00165"
DEFAULT_CONDITION = "Default"
TABLE_HEADERS = ("Condition", "D", "V", "R", "Note")

_LEADING_FLOAT = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def url_decode(text: str) -> str:
    """Decode ``%XX`` escapes, then turn every ``+`` into a space."""
    return urllib.parse.unquote(text, errors="surrogateescape").replace("+", " ")


def url_encode(text: str) -> str:
    """Escape every character outside the unreserved URL set."""
    return urllib.parse.quote(text, safe="")


@dataclass
class ComponentDatum:
    """One value recorded for a part."""

    component_name: str = ""
    valuetype: str = ""
    value: str = ""
    comment: str = ""


@dataclass
class NetworkDatum:
    """One value recorded for a net under a given condition."""

    network: str = ""
    condition: str = ""
    valuetype: str = ""
    value: str = ""
    comment: str = ""


def _fields(line: str, separator: str, count: int) -> list[str]:
    parts = line.split(separator)[:count]
    return parts + [""] * (count - len(parts))


def _format_measure(value: str) -> str:
    if value[:1].isdigit():
        match = _LEADING_FLOAT.match(value)
        if match is not None:
            return "%.3f" % float(match.group(0))
    return value


class OBData:
    """Part and net data of one board, with the current display state."""

    def __init__(self) -> None:
        self.obdatacomponents: list[ComponentDatum] = []
        self.obdatanetworks: list[NetworkDatum] = []
        self.conditions: list[str] = []
        self.current_condition = ""
        self.current_filename: Path | None = None
        self.fileloaded = False
        self.datapoints = 0
        self._last_network = ""
        self.reset_pin_values()
        self.reset_part_values()

    # Loading

    def _download(self, path: Path) -> None:
        logger.info("Attempting to download file from openboarddata.org: %s", path)
        post_data = f"a=generate&bpath={DOWNLOAD_BOARD_PATH}".encode("ascii")
        try:
            with urllib.request.urlopen(DOWNLOAD_URL, data=post_data) as response:
                content = response.read()
        except (urllib.error.URLError, OSError) as exc:
            raise OSError(f"Download from openboarddata.org failed with error: {exc}") from exc
        path.write_bytes(content)
        logger.info("Successfully downloaded %d bytes", len(content))

    def load(self, filepath: str | os.PathLike) -> None:
        """Read an OBData file, downloading it first when it is missing.

        Raises OSError when the download fails or the file cannot be read.
        """
        path = Path(filepath)
        self.datapoints = 0
        if not path.exists():
            self._download(path)
        if not path.exists():
            return

        self.current_filename = path
        self.fileloaded = False
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise OSError(f"Could not open OBData file: {path}") from exc

        lines = raw.decode("utf-8", "surrogateescape").split("\n")
        if lines and lines[-1] == "":
            lines.pop()

        in_components = False
        in_networks = False
        network_count = 0
        for line in lines:
            if len(line) == 1 or line.startswith("###"):
                continue
            if "COMPONENTS_DATA_START" in line:
                in_components = True
                continue
            if "NETS_DATA_START" in line:
                in_networks = True
                continue

            if in_components:
                if "COMPONENTS_DATA_END" in line:
                    in_components = False
                    continue
                name, valuetype, value = _fields(line, " ", 3)
                self.obdatacomponents.append(ComponentDatum(name, valuetype, value))

            if in_networks:
                if "NETS_DATA_END" in line:
                    in_networks = False
                    continue
                head, valuetype, value, comment = _fields(line, " ", 4)
                network, condition = _fields(head, "/", 2)
                datum = NetworkDatum(network, condition, valuetype, value, comment)
                self.obdatanetworks.append(datum)
                if datum.network != self._last_network:
                    if datum.condition.upper() == "DEFAULT":
                        network_count += 1
                    self._last_network = datum.network

        self.fileloaded = True
        self.datapoints = network_count

        current = ""
        for datum in self.obdatanetworks:
            if datum.condition != current:
                current = datum.condition
                self.conditions.append(current)
        self.current_condition = DEFAULT_CONDITION
        logger.info("Successfully loaded OBData file.")

    # Part values

    def reset_part_values(self) -> None:
        """Clear the accumulated part values."""
        self.value = ""
        self.package = ""
        self.mfg_code = ""
        self.rating = ""
        self.misc = ""
        self.status = ""

    def append_part(self, part: ComponentDatum) -> None:
        """Record a part datum under the field its value type names."""
        field = {
            "v": "value",
            "p": "package",
            "c": "mfg_code",
            "r": "rating",
            "m": "misc",
            "s": "status",
        }.get(part.valuetype)
        if field is not None:
            setattr(self, field, part.value)

    def _collect_part(self, partname: str) -> ComponentDatum | None:
        self.reset_part_values()
        found = None
        for part in self.obdatacomponents:
            if part.component_name == partname:
                self.append_part(part)
                found = part
        return found

    def part_value(self, partname: str) -> str:
        """The last recorded value of a part, after a newline; empty when none."""
        if not self.fileloaded or not self.obdatacomponents:
            return ""
        found = self._collect_part(partname)
        if found is None:
            return ""
        return "\n" + found.value

    def part_tooltip(self, part_name: str) -> str:
        """Tooltip text listing what is known about a part."""
        if self._collect_part(part_name) is None:
            return part_name
        lines = ""
        if len(self.value) > 1:
            lines += "Value: " + self.value + "\n"
        if len(self.package) > 1:
            lines += "Package: " + self.package + "\n"
        if len(self.mfg_code) > 1:
            lines += "Mfg_Code: " + self.mfg_code + "\n"
        if len(self.rating) > 1:
            lines += "Rating: " + self.rating + "\n"
        if len(self.misc) > 1:
            lines += "Misc: " + self.misc + "\n"
        if len(self.status) > 2:
            lines += "Status: " + self.status + "\n"
        return f"{part_name}\n{lines}"

    # Pin values

    def reset_pin_values(self) -> None:
        """Clear the accumulated pin measurements."""
        self.diode = "-"
        self.voltage = "-"
        self.resistance = "-"
        self.alias = ""
        self.comment = ""

    def append_pin(self, pin: NetworkDatum) -> None:
        """Record a net datum under the field its value type names."""
        field = {
            "d": "diode",
            "v": "voltage",
            "r": "resistance",
            "a": "alias",
            "t": "comment",
        }.get(pin.valuetype)
        if field is not None:
            setattr(self, field, pin.value)

    def pins_for_net(self, net_name: str) -> list[NetworkDatum]:
        """Data of a net shown under the current condition."""
        pins = []
        for pin in self.obdatanetworks:
            if pin.network != net_name:
                continue
            if self.current_condition != DEFAULT_CONDITION:
                if (
                    url_decode(pin.condition) == self.current_condition
                    or pin.condition != DEFAULT_CONDITION
                ):
                    pins.append(pin)
            else:
                pins.append(pin)
        return pins

    def condition_rows(self, pins: list[NetworkDatum]) -> list[tuple[str, str, str, str, str]]:
        """One table row per condition: condition, diode, voltage, resistance, note."""
        rows: list[tuple[str, str, str, str, str]] = []
        if not pins:
            return rows
        order: list[str] = []
        for pin in pins:
            if pin.condition not in order:
                order.append(pin.condition)

        self.reset_pin_values()
        for condition in order:
            active = pins[0]
            for pin in pins:
                if pin.condition == condition:
                    self.append_pin(pin)
                    active = pin
            self.resistance = self.resistance.upper()
            rows.append(
                (
                    url_decode(active.condition),
                    _format_measure(self.diode),
                    _format_measure(self.voltage),
                    self.resistance,
                    url_decode(self.comment),
                )
            )
            self.reset_pin_values()
        return rows