#!/usr/bin/env python3
"""
Tests for the sketchdraw command line.
"""

import json

import pytest
from click.testing import CliRunner

from sketchdraw.cli import cli
from sketchdraw.models import load_drawing


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def drawing_file(tmp_path, sample_data):
    path = tmp_path / "kitchen.json"
    path.write_text(json.dumps(sample_data))
    return path


def test_format_length(runner):
    result = runner.invoke(cli, ["format-length", "914.4", "--unit", "ft"])
    assert result.exit_code == 0
    assert result.output == "3'0\"\n"


def test_format_length_default_unit(runner):
    result = runner.invoke(cli, ["format-length", "1234.5"])
    assert result.output.strip() == "1235mm"


def test_render_to_stdout(runner, drawing_file):
    result = runner.invoke(cli, ["render", str(drawing_file), "--width", "800", "--height", "600"])
    assert result.exit_code == 0
    assert result.output.startswith("<svg")
    assert 'viewBox="0 0 800 600"' in result.output


def test_render_to_file(runner, drawing_file, tmp_path):
    out = tmp_path / "kitchen.svg"
    result = runner.invoke(cli, ["render", str(drawing_file), "-o", str(out)])
    assert result.exit_code == 0
    assert "Exported SVG" in result.output
    assert out.read_text().startswith("<svg")


def test_info(runner, drawing_file):
    result = runner.invoke(cli, ["info", str(drawing_file)])
    assert result.exit_code == 0
    assert "Title: Kitchen - Floor Plan" in result.output
    assert "Scale factor (1200x900): 0.1800" in result.output
    assert "  dimension: 2" in result.output
    assert "  d2: 4000mm" in result.output


def test_set_dimension(runner, drawing_file, tmp_path):
    out = tmp_path / "edited.yaml"
    result = runner.invoke(cli, ["set-dimension", str(drawing_file), "d1", "5950", "-o", str(out)])
    assert result.exit_code == 0
    assert "5950mm" in result.output
    assert load_drawing(out).get_element("d1").value == 5950
    # Source file left alone when -o is given
    assert load_drawing(drawing_file).get_element("d1").value == 6000


def test_set_dimension_unknown_id(runner, drawing_file):
    result = runner.invoke(cli, ["set-dimension", str(drawing_file), "nope", "100"])
    assert result.exit_code != 0
    assert "No dimension" in result.output


def test_set_dimension_rejects_zero(runner, drawing_file):
    result = runner.invoke(cli, ["set-dimension", str(drawing_file), "d1", "0"])
    assert result.exit_code != 0
    assert "positive" in result.output


def test_unsupported_file(runner, tmp_path):
    path = tmp_path / "plan.txt"
    path.write_text("{}")
    result = runner.invoke(cli, ["render", str(path)])
    assert result.exit_code != 0
    assert "Unsupported" in result.output
