import pytest

from obvtools.confparse import Confparse
from obvtools.options import (
    Options,
    Renderer,
    UsageError,
    parse_parameters,
    renderer_from_int,
    resolve_options,
)


def _config(tmp_path, content):
    path = tmp_path / "obv.conf"
    path.write_bytes(content.encode())
    config = Confparse()
    config.load(path)
    return config


@pytest.mark.parametrize(
    "number, expected",
    [(1, Renderer.OPENGL1), (2, Renderer.OPENGL3), (3, Renderer.DEFAULT), (9, Renderer.DEFAULT)],
)
def test_renderer_from_int(number, expected):
    assert renderer_from_int(number) is expected


def test_value_options():
    options = parse_parameters(
        ["-i", "board.brd", "-c", "my.conf", "-x", "800", "-y", "600", "-z", "14.5", "-r", "1"]
    )
    assert options.input_file == "board.brd"
    assert options.config_file == "my.conf"
    assert options.width == 800
    assert options.height == 600
    assert options.font_size == 14.5
    assert options.renderer is Renderer.OPENGL1


def test_flags():
    options = parse_parameters(["-l", "-d"])
    assert options.slow_cpu is True
    assert options.debug is True
    assert options.input_file is None


def test_dpi_is_truncated():
    assert parse_parameters(["-p", "96.7"]).dpi == 96


def test_non_numeric_width_reads_as_zero():
    assert parse_parameters(["-x", "abc"]).width == 0


def test_single_argument_is_input_file():
    assert parse_parameters(["board.brd"]).input_file == "board.brd"


def test_unknown_parameter_raises():
    with pytest.raises(UsageError, match="Unknown parameter 'bogus'"):
        parse_parameters(["-d", "bogus"])


@pytest.mark.parametrize("args", [["-c"], ["-i", "-d"], ["-x"]])
def test_missing_value_raises(args):
    with pytest.raises(UsageError, match="Not enough paramters"):
        parse_parameters(args)


def test_psn_argument_is_ignored():
    options = parse_parameters(["-psn_0_123", "-d"])
    assert options.debug is True


def test_help_stops_parsing():
    options = parse_parameters(["-h", "bogus", "extra"])
    assert options.show_help is True


def test_version_flag():
    assert parse_parameters(["-V"]).show_version is True


def test_reversesearch():
    options = parse_parameters(["--reversesearch", "doc.pdf", "R12"])
    assert options.pdf_bridge_pdf_path == "doc.pdf"
    assert options.pdf_bridge_search_str == "R12"


def test_reversesearch_missing_values():
    with pytest.raises(UsageError):
        parse_parameters(["--reversesearch", "doc.pdf"])


def test_resolve_defaults_from_empty_config(tmp_path):
    resolved = resolve_options(Options(), _config(tmp_path, ""))
    assert resolved.width == 1100
    assert resolved.height == 700
    assert resolved.renderer is Renderer.OPENGL3
    assert resolved.dpi == 100
    assert resolved.font_size == 20.0


def test_resolve_reads_config(tmp_path):
    config = _config(tmp_path, "windowX=1200\r\nwindowY=900\r\nrenderer=1\r\ndpi=100\r\nfontSize = 16\r\n")
    resolved = resolve_options(Options(), config)
    assert resolved.width == 1200
    assert resolved.height == 900
    assert resolved.renderer is Renderer.OPENGL1
    assert resolved.font_size == 16.0


def test_command_line_wins_over_config(tmp_path):
    config = _config(tmp_path, "windowX=1200\r\nwindowY=900\r\nrenderer=1\r\n")
    options = parse_parameters(["-x", "640", "-y", "480", "-r", "2"])
    resolved = resolve_options(options, config)
    assert (resolved.width, resolved.height) == (640, 480)
    assert resolved.renderer is Renderer.OPENGL3


def test_font_size_scaled_by_dpi(tmp_path):
    options = parse_parameters(["-z", "10", "-p", "200"])
    resolved = resolve_options(options, _config(tmp_path, ""))
    assert resolved.font_size == 20.0
    assert options.font_size == 10.0