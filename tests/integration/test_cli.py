"""End-to-end tests for the hatcher command line."""

import re
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest
from typer.testing import CliRunner

from hatcher import __version__
from hatcher.cli.app import app

runner = CliRunner()


def _listing(output: str) -> list[str]:
    """Lines of the numbered segment listing."""
    return [line for line in output.splitlines() if line.startswith("Line ")]


def _drawn(path: Path) -> list[tuple[str, tuple[float, ...]]]:
    """Stroke color and coordinates of every line in a saved drawing."""
    return [
        (
            element.get("stroke"),
            tuple(float(n) for n in re.findall(r"-?[\d.]+", element.get("d"))),
        )
        for element in ET.parse(path).getroot().iter()
        if element.get("stroke") is not None
    ]


@pytest.fixture(autouse=True)
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every command in an empty directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestHatchCommand:
    """Tests for the hatch command."""

    def test_defaults(self, workdir: Path) -> None:
        """Default run lists the lines and writes hatch.svg."""
        result = runner.invoke(app, [])
        assert result.exit_code == 0, result.output
        assert len(_listing(result.output)) == 21
        assert "SVG file generated" in result.output
        strokes = [stroke for stroke, _ in _drawn(workdir / "hatch.svg")]
        assert strokes.count("black") == 21
        assert strokes.count("red") == 4

    def test_horizontal_listing(self) -> None:
        """Lines are numbered from 1 and printed with %g coordinates."""
        result = runner.invoke(app, ["--angle", "0", "--step", "1"])
        assert result.exit_code == 0, result.output
        listing = _listing(result.output)
        assert listing[0] == "Line 1: (0,0) -> (20,0)"
        assert listing[-1] == "Line 11: (0,10) -> (20,10)"
        assert len(listing) == 11

    def test_vertical(self) -> None:
        """90 degrees lists 21 vertical lines."""
        result = runner.invoke(app, ["-a", "90", "-s", "1", "--no-svg"])
        assert result.exit_code == 0, result.output
        listing = _listing(result.output)
        assert len(listing) == 21
        assert listing[5] == "Line 6: (5,0) -> (5,10)"

    def test_negative_angle_matches_equivalent(self) -> None:
        """-45 and 315 print the same lines."""
        first = runner.invoke(app, ["--angle", "-45", "--no-svg"])
        second = runner.invoke(app, ["--angle", "315", "--no-svg"])
        assert first.exit_code == 0, first.output
        assert _listing(first.output) == _listing(second.output)
        assert _listing(first.output)

    @pytest.mark.parametrize("step", ["0", "-1"])
    def test_invalid_step(self, step: str, workdir: Path) -> None:
        """A step of zero or less is a fatal configuration error."""
        result = runner.invoke(app, ["--step", step])
        assert result.exit_code == 1
        assert "step must be greater than zero" in result.output
        assert not (workdir / "hatch.svg").exists()

    def test_custom_rectangle_and_output(self, workdir: Path) -> None:
        """The rectangle and output path can be chosen."""
        output = workdir / "custom.svg"
        result = runner.invoke(
            app,
            ["--angle", "0", "--step", "2", "--rect", "0", "0", "4", "4", "-o", str(output)],
        )
        assert result.exit_code == 0, result.output
        assert len(_listing(result.output)) == 3
        assert output.exists()
        assert not (workdir / "hatch.svg").exists()

    def test_scale(self, workdir: Path) -> None:
        """The scale option changes drawing coordinates."""
        result = runner.invoke(app, ["--angle", "0", "--scale", "1"])
        assert result.exit_code == 0, result.output
        assert ("black", (0, 10, 20, 10)) in _drawn(workdir / "hatch.svg")

    def test_inverted_rectangle(self) -> None:
        """Inverted rectangle bounds exit with an error."""
        result = runner.invoke(app, ["--rect", "20", "0", "0", "10"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_no_svg(self, workdir: Path) -> None:
        """--no-svg skips the file."""
        result = runner.invoke(app, ["--no-svg"])
        assert result.exit_code == 0, result.output
        assert not (workdir / "hatch.svg").exists()
        assert "SVG file generated" not in result.output

    def test_quiet(self, workdir: Path) -> None:
        """--quiet prints nothing but still writes the file."""
        result = runner.invoke(app, ["--quiet"])
        assert result.exit_code == 0, result.output
        assert _listing(result.output) == []
        assert (workdir / "hatch.svg").exists()

    def test_verbose_shows_parameters(self) -> None:
        """--verbose prints the normalized angle and step."""
        result = runner.invoke(app, ["--verbose", "--angle", "405", "--no-svg"])
        assert result.exit_code == 0, result.output
        assert "angle 45" in result.output
        assert "step 1" in result.output

    def test_verbose_and_quiet_conflict(self) -> None:
        """--verbose and --quiet cannot be combined."""
        result = runner.invoke(app, ["--verbose", "--quiet"])
        assert result.exit_code == 1
        assert "Cannot use --verbose and --quiet together" in result.output

    def test_invalid_log_level(self) -> None:
        """Unknown log levels are rejected."""
        result = runner.invoke(app, ["--log-level", "LOUD"])
        assert result.exit_code == 1
        assert "Invalid log level" in result.output

    def test_log_file(self, workdir: Path) -> None:
        """--log-file writes structured events."""
        log_file = workdir / "run.log"
        result = runner.invoke(app, ["--no-svg", "--log-file", str(log_file)])
        assert result.exit_code == 0, result.output
        assert "Hatch lines generated" in log_file.read_text(encoding="utf-8")

    def test_pause_without_terminal(self) -> None:
        """--pause does not block when stdin is not a terminal."""
        result = runner.invoke(app, ["--pause", "--no-svg"])
        assert result.exit_code == 0, result.output

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
