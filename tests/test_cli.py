import os
from unittest import mock

import pytest

from pipex.cli import USAGE, PipexError, main, run_pipeline


@pytest.fixture
def environ():
    return {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("hello pipe\nsecond line\n")
    return path


def test_cat_through_cat_round_trip(tmp_path, infile, environ):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "cat", "cat", str(outfile), environ)
    assert status == 0
    assert outfile.read_text() == infile.read_text()


def test_arguments_are_split_on_spaces(tmp_path, infile, environ):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "tr a-z A-Z", "cat", str(outfile), environ)
    assert status == 0
    assert outfile.read_text() == infile.read_text().upper()


def test_existing_outfile_is_truncated(tmp_path, infile, environ):
    outfile = tmp_path / "out.txt"
    outfile.write_text("old content " * 100)
    run_pipeline(str(infile), "cat", "cat", str(outfile), environ)
    assert outfile.read_text() == infile.read_text()


def test_missing_infile_still_runs_second(tmp_path, environ):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(tmp_path / "absent.txt"), "cat", "cat", str(outfile), environ)
    assert status == 0
    assert outfile.read_text() == ""


def test_unknown_second_command(tmp_path, infile, environ):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "cat", "no-such-command-here", str(outfile), environ)
    assert status == 1
    assert outfile.read_text() == ""


def test_empty_second_command(tmp_path, infile, environ):
    outfile = tmp_path / "out.txt"
    assert run_pipeline(str(infile), "cat", "   ", str(outfile), environ) == 1


def test_second_status_is_returned(tmp_path, infile, environ):
    outfile = tmp_path / "out.txt"
    assert run_pipeline(str(infile), "cat", "false", str(outfile), environ) == 1
    assert run_pipeline(str(infile), "cat", "true", str(outfile), environ) == 0


def test_unwritable_outfile_raises(tmp_path, infile, environ):
    outfile = tmp_path / "out.txt"
    outfile.write_text("keep")
    with mock.patch("pipex.cli.os.access", return_value=False):
        with pytest.raises(PipexError, match="out.txt"):
            run_pipeline(str(infile), "cat", "cat", str(outfile), environ)
    assert outfile.read_text() == "keep"


@pytest.mark.parametrize("args", [[], ["a"], ["a", "b", "c"], ["a", "b", "c", "d", "e"]])
def test_main_wrong_argument_count(args, capsys):
    assert main(args) == 1
    assert USAGE in capsys.readouterr().err


def test_main_runs_pipeline(tmp_path, infile):
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(outfile)]) == 0
    assert outfile.read_text() == infile.read_text()


def test_main_reports_unwritable_outfile(tmp_path, infile, capsys):
    outfile = tmp_path / "out.txt"
    outfile.write_text("keep")
    with mock.patch("pipex.cli.os.access", return_value=False):
        assert main([str(infile), "cat", "cat", str(outfile)]) == 1
    assert "out.txt" in capsys.readouterr().err