"""
CLI tests using click's CliRunner in a temporary working directory.
"""

import logging

import pytest
from click.testing import CliRunner
from fontTools.ttLib import TTFont

from webfont_subset.cli.main import cli
from webfont_subset.core.catalog import SubsetCatalog
from webfont_subset.operations.subset import build_request
from webfont_subset.utils.logging import set_verbose


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return CliRunner()


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0


def test_list_subsets(runner):
    result = runner.invoke(cli, ["list-subsets"])
    assert result.exit_code == 0
    assert "latin: U+0-FF" in result.output
    assert "vietnamese:" in result.output


def test_subset_library_backend(runner, make_font, output_dir):
    """Test the default backend writes WOFF2 files into ./output."""
    make_font("A.ttf")
    make_font("B.otf", {0x42: "B"})

    result = runner.invoke(cli, ["subset", "--subsets", "latin", "--no-progress"])

    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in output_dir.iterdir()) == ["A.woff2", "B.woff2"]
    with TTFont(output_dir / "A.woff2") as font:
        assert 0x41 in font.getBestCmap()
        assert 0x100 not in font.getBestCmap()


def test_subset_comma_separated_names(runner, make_font, output_dir):
    """Test comma-separated subset names with whitespace are combined."""
    make_font("A.ttf")

    result = runner.invoke(
        cli, ["subset", "-s", "latin, latin-ext,unknown", "--no-progress"]
    )

    assert result.exit_code == 0, result.output
    with TTFont(output_dir / "A.woff2") as font:
        assert {0x41, 0x42, 0x100} <= set(font.getBestCmap())


def test_subset_rejects_flavor_with_library_backend(runner, make_font):
    make_font()
    result = runner.invoke(cli, ["subset", "-s", "latin", "--flavor", "woff"])
    assert result.exit_code == 2
    assert "--flavor" in result.output


def test_subset_missing_input_dir(runner, tmp_path):
    result = runner.invoke(
        cli, ["subset", "-s", "latin", "--input", str(tmp_path / "nowhere")]
    )
    assert result.exit_code == 1


def test_subset_external_missing_executable_exits_1(runner, make_font, output_dir):
    """Test a missing external tool terminates with status 1."""
    make_font("A.ttf")
    make_font("B.ttf")

    result = runner.invoke(
        cli,
        [
            "subset",
            "-s",
            "latin",
            "--backend",
            "pyftsubset",
            "--flavor",
            "woff",
            "--executable",
            "definitely-not-pyftsubset-xyz",
            "--jobs",
            "1",
            "--no-progress",
        ],
    )

    assert result.exit_code == 1
    assert not output_dir.exists() or not any(output_dir.glob("*.woff"))


def test_build_request_exits_on_malformed_token():
    """Test a malformed range token aborts before any work."""
    catalog = SubsetCatalog({"broken": ["U+41-"]})
    with pytest.raises(SystemExit) as excinfo:
        build_request(["broken"], catalog)
    assert excinfo.value.code == 1


def test_inspect(runner, make_font, input_dir):
    """Test inspect prints a report per parsable font and keeps going."""
    make_font("A.ttf")
    make_font("B.ttf")
    (input_dir / "junk.ttf").write_bytes(b"junk")
    (input_dir / "bad.woff2").write_bytes(b"wOF2" + bytes(range(256)) * 2)

    result = runner.invoke(cli, ["inspect"])

    assert result.exit_code == 0, result.output
    assert "A.ttf\n" in result.output
    assert "B.ttf\n" in result.output
    assert "Glyphs: 4" in result.output
    assert "Variable: False" in result.output


def test_subset_with_progress_bar(runner, make_font, output_dir):
    """Test a run with the progress bar drawn."""
    make_font("A.ttf")
    make_font("B.ttf")

    result = runner.invoke(cli, ["subset", "-s", "latin", "--jobs", "2"])

    assert result.exit_code == 0, result.output
    assert "Subsetting Subsetting" not in result.output
    assert sorted(p.name for p in output_dir.iterdir()) == ["A.woff2", "B.woff2"]


def test_verbose_flag_enables_debug_logging(runner):
    """Test -v switches the package logger to DEBUG for the run."""
    try:
        result = runner.invoke(cli, ["-v", "list-subsets"])
        assert result.exit_code == 0
        assert logging.getLogger("webfont_subset").isEnabledFor(logging.DEBUG)

        runner.invoke(cli, ["list-subsets"])
        assert not logging.getLogger("webfont_subset").isEnabledFor(logging.DEBUG)
    finally:
        set_verbose(False)
