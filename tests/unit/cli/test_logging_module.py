import argparse
import types
from pathlib import Path
import logging
from unittest.mock import MagicMock

import pytest

from tsvmat.cli import logging as logging_cli


def _parser():
    parser = argparse.ArgumentParser()
    subparsers = parser.add_subparsers(dest="subcommand", required=True)
    logging_cli.register_subcommands(subparsers)
    return parser


def test_register_subcommands_parses_set_level():
    args = _parser().parse_args(["set-level", "DEBUG"])
    assert args.subcommand == "set-level"
    assert args.level == "DEBUG"


def test_register_subcommands_rejects_unknown_level():
    with pytest.raises(SystemExit):
        _parser().parse_args(["set-level", "LOUD"])


def test_dispatch_set_level_persists_and_reconfigures(monkeypatch, isolated_config):
    reset_mock = MagicMock()
    get_mock = MagicMock()
    monkeypatch.setattr(logging_cli, "reset_logger", reset_mock)
    monkeypatch.setattr(logging_cli, "get_logger", get_mock)
    logging_cli.dispatch(types.SimpleNamespace(subcommand="set-level", level="INFO"))
    reset_mock.assert_called_once_with()
    assert get_mock.call_args.kwargs["level"] == logging.INFO
    assert '"log_level": "INFO"' in isolated_config.read_text()


def test_dispatch_show_path_prints_resolved_path(monkeypatch, capsys):
    expected = Path("/tmp/tsvmat-test.log")
    monkeypatch.setattr(logging_cli, "_resolve_log_file", lambda: expected)
    logging_cli.dispatch(types.SimpleNamespace(subcommand="show-path"))
    assert capsys.readouterr().out.strip() == str(expected.resolve())


def test_dispatch_show_level_prints_configured_level(monkeypatch, capsys):
    monkeypatch.setattr(logging_cli, "get_configured_level", lambda: "WARNING")
    logging_cli.dispatch(types.SimpleNamespace(subcommand="show-level"))
    assert capsys.readouterr().out.strip() == "WARNING"


def test_dispatch_unknown_subcommand_raises():
    with pytest.raises(ValueError):
        logging_cli.dispatch(types.SimpleNamespace(subcommand="rotate"))
