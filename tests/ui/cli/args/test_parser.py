"""Tests for command line argument parser."""

import logging
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from cachewarm.features.warming import DispatchMode
from cachewarm.ui.cli.args import ArgumentParser, WarmArgs


@pytest.fixture
def quiet_logging(mocker: MockerFixture) -> object:
    """Avoid touching real configuration and handlers."""

    mock_config = mocker.patch("cachewarm.ui.cli.args.parser.Config")
    mock_config.load.return_value.log_file = None
    return mocker.patch("cachewarm.ui.cli.args.parser.setup_logger")


def test_create_parser_defaults() -> None:
    """Parser accepts no arguments at all."""

    parsed = ArgumentParser.create_parser().parse_args([])

    assert parsed.root is None
    assert parsed.mode == "immediate"
    assert parsed.workers == 1
    assert parsed.chunk_size == 81920
    assert not parsed.no_progress and not parsed.verbose and not parsed.quiet


def test_root_defaults_to_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, quiet_logging: object
) -> None:
    """Without ROOT the current working directory is warmed."""

    _ = quiet_logging
    monkeypatch.chdir(tmp_path)

    args = ArgumentParser.process_args([])

    assert isinstance(args, WarmArgs)
    assert args.root == tmp_path.absolute()
    assert args.mode is DispatchMode.IMMEDIATE


def test_all_options(tmp_path: Path, mocker: MockerFixture) -> None:
    """Options map onto ``WarmArgs`` and the console level."""

    mock_config = mocker.patch("cachewarm.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("cachewarm.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = tmp_path / "warm.log"

    args = ArgumentParser.process_args(
        [
            str(tmp_path),
            "--mode",
            "staged",
            "--workers",
            "4",
            "--chunk-size",
            "4096",
            "--no-progress",
            "--verbose",
        ]
    )

    assert args.mode is DispatchMode.STAGED
    assert args.workers == 4
    assert args.chunk_size == 4096
    assert args.show_progress is False
    assert args.verbose is True
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG
    assert mock_setup_logger.call_args.kwargs["log_file"] == tmp_path / "warm.log"


def test_quiet_disables_progress(tmp_path: Path, mocker: MockerFixture) -> None:
    """Quiet runs log errors only and hide the bar."""

    mock_config = mocker.patch("cachewarm.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("cachewarm.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = None

    args = ArgumentParser.process_args([str(tmp_path), "--quiet"])

    assert args.quiet is True
    assert args.show_progress is False
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR


@pytest.mark.parametrize("bad", [["--workers", "0"], ["--chunk-size", "-5"], ["--mode", "lazy"]])
def test_invalid_options_exit_with_usage_error(bad: list[str]) -> None:
    """argparse rejects invalid values with exit code 2."""

    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(bad)
    assert excinfo.value.code == 2


def test_verbose_and_quiet_are_exclusive() -> None:
    """Verbosity flags conflict."""

    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["--verbose", "--quiet"])
    assert excinfo.value.code == 2


def test_missing_root_exits(tmp_path: Path, quiet_logging: object) -> None:
    """A root that does not exist is a precondition failure."""

    _ = quiet_logging
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args([str(tmp_path / "missing")])
    assert excinfo.value.code == 1
