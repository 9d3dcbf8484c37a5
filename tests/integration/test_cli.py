"""Integration tests for the command line interface."""

import shutil
from pathlib import Path
from unittest.mock import patch

import pytest
from PIL import Image
from typer.testing import CliRunner

from polyraster import __version__
from polyraster.cli.app import app

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_log_handlers():
    """Keep the renderer from installing logging handlers during CLI runs."""
    with patch("polyraster.core.renderer.configure_logging") as mock_logging:
        yield mock_logging


def test_version():
    """Test --version prints the version and exits cleanly."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_inline_preview(tmp_path: Path):
    """Test inline path data is rendered into a preview PNG."""
    output = tmp_path / "square.png"

    result = runner.invoke(app, ["-d", "M 0,0 H 8 V 8 H 0 Z", "-s", "1", "-o", str(output), "-q"])

    assert result.exit_code == 0, result.output
    with Image.open(output) as image:
        assert image.mode == "RGB"
        assert image.size == ((8 + 8) * 4, (8 + 8) * 4)


def test_raw_output_per_scale(tmp_path: Path):
    """Test --raw writes one grayscale PNG per scale."""
    output = tmp_path / "square.png"

    result = runner.invoke(
        app,
        ["-d", "M 0,0 H 8 V 8 H 0 Z", "-o", str(output), "-s", "1", "-s", "2", "--raw", "-q"],
    )

    assert result.exit_code == 0, result.output
    with Image.open(tmp_path / "square-x1.png") as image:
        assert image.mode == "L"
        assert image.size == (8, 8)
    with Image.open(tmp_path / "square-x2.png") as image:
        assert image.size == (16, 16)
    assert not output.exists()


def test_raw_single_scale_uses_output_path(tmp_path: Path):
    """Test a single raw bitmap is written to the output path unchanged."""
    output = tmp_path / "square.png"

    result = runner.invoke(app, ["-d", "M 0,0 H 8 V 8 H 0 Z", "-s", "1", "-o", str(output), "--raw", "-q"])

    assert result.exit_code == 0, result.output
    assert output.exists()


def test_svg_default_output(tmp_path: Path):
    """Test an SVG source writes its preview next to the source file."""
    source = tmp_path / "emblem.svg"
    shutil.copy(FIXTURES_DIR / "emblem.svg", source)

    result = runner.invoke(app, [str(source), "-s", "1", "-s", "3"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "emblem-raster.png").exists()


def test_verbose_table(tmp_path: Path):
    """Test verbose mode reports rendered bitmaps."""
    source = tmp_path / "emblem.txt"
    shutil.copy(FIXTURES_DIR / "emblem.txt", source)

    result = runner.invoke(app, [str(source), "-v"])

    assert result.exit_code == 0, result.output
    assert "Segments" in result.output
    assert "32x32" in result.output
    assert (tmp_path / "emblem-raster.png").exists()


def test_malformed_path_data(tmp_path: Path):
    """Test malformed path data exits with an error."""
    result = runner.invoke(app, ["-d", "M 0,0 L x,y Z", "-o", str(tmp_path / "bad.png")])

    assert result.exit_code == 1
    assert "Invalid path data" in result.output


def test_no_closed_shapes(tmp_path: Path):
    """Test path data without shapes exits cleanly without writing."""
    output = tmp_path / "nothing.png"

    result = runner.invoke(app, ["-d", "Z", "-o", str(output)])

    assert result.exit_code == 0
    assert not output.exists()


def test_requires_one_source(tmp_path: Path):
    """Test giving both a file and inline data is rejected."""
    source = tmp_path / "shape.txt"
    source.write_text("M 0,0 H 1 V 1 Z")

    result = runner.invoke(app, [str(source), "-d", "M 0,0 H 1 V 1 Z"])

    assert result.exit_code == 1
    assert "exactly one" in result.output


def test_missing_file(tmp_path: Path):
    """Test a missing source file exits with an error."""
    result = runner.invoke(app, [str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_invalid_scale(tmp_path: Path):
    """Test non-positive scales are rejected."""
    result = runner.invoke(app, ["-d", "M 0,0 H 1 V 1 Z", "-s", "0", "-o", str(tmp_path / "x.png")])

    assert result.exit_code == 1
    assert "Invalid scale" in result.output


def test_verbose_and_quiet():
    """Test --verbose and --quiet are mutually exclusive."""
    result = runner.invoke(app, ["-d", "M 0,0 H 1 V 1 Z", "-v", "-q"])

    assert result.exit_code == 1
    assert "--verbose" in result.output


def test_raw_duplicate_scales(tmp_path: Path):
    """Test a repeated scale writes and reports a single file."""
    output = tmp_path / "o.png"

    result = runner.invoke(
        app,
        ["-d", "M 0,0 H 4 V 4 H 0 Z", "--raw", "-s", "1", "-s", "1", "-o", str(output)],
    )

    assert result.exit_code == 0, result.output
    assert output.exists()
    assert not (tmp_path / "o-x1.png").exists()
    assert "1 bitmaps" in result.output


def test_svg_paths_start_at_origin(tmp_path: Path):
    """Test every <path> of an SVG is parsed from a fresh cursor."""
    source = tmp_path / "two.svg"
    source.write_text(
        '<svg xmlns="http://www.w3.org/2000/svg">'
        '<path d="M 0,0 H 10 V 10 H 0 Z"/>'
        '<path d="m 20,20 h 2 v 2 h -2 z"/>'
        "</svg>",
        encoding="utf-8",
    )
    output = tmp_path / "two.png"

    result = runner.invoke(app, [str(source), "--raw", "-s", "1", "-o", str(output), "-q"])

    assert result.exit_code == 0, result.output
    with Image.open(output) as image:
        assert image.size == (22, 22)
        assert image.getpixel((21, 21)) == 255


def test_default_scales_render_one_and_three(tmp_path: Path):
    """Test the 1x and 3x pair is rendered when no scale is given."""
    output = tmp_path / "square.png"

    result = runner.invoke(app, ["-d", "M 0,0 H 8 V 8 H 0 Z", "-o", str(output), "--raw", "-q"])

    assert result.exit_code == 0, result.output
    with Image.open(tmp_path / "square-x1.png") as image:
        assert image.size == (8, 8)
    with Image.open(tmp_path / "square-x3.png") as image:
        assert image.size == (24, 24)


def test_success_reports_average_time(tmp_path: Path):
    """Test the summary line includes the average time per bitmap."""
    result = runner.invoke(app, ["-d", "M 0,0 H 4 V 4 H 0 Z", "-o", str(tmp_path / "s.png")])

    assert result.exit_code == 0, result.output
    assert "ms avg" in result.output
