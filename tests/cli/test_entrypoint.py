################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################

"""
Tests that validate parsing CLI groups and commands.
"""

import logging
import sys
from unittest.mock import Mock

import pytest

from wscreate._base import _env
from wscreate._base.cli import _cli_logs, _entry
from wscreate._base.cli._workspace import _create


@pytest.fixture()
def entrypoint(monkeypatch):
    def _entrypoint(command: list):
        argv = [
            # Python sets first argv to the module path when the CLI is run with
            # 'python -m wscreate._base.cli._entry'.
            _entry.__file__,
            # The group and command.
            *command,
        ]
        monkeypatch.setattr(sys, "argv", argv)

    return _entrypoint


class TestCommandTreeAssembly:
    """
    Validates that the command tree was assembled correctly and each command is
    accessible.

    Test boundary: [argv] -> [_entry.main()] -> [sys.exit()]
                                             -> [stdout]
    """

    @staticmethod
    @pytest.mark.parametrize("cmd", [[], ["create"]])
    @pytest.mark.parametrize("help_flag", ["-h", "--help"])
    def test_printing_help(monkeypatch, capsys, cmd, help_flag, entrypoint):
        """
        Prints help to validate that a given command is achievable.
        """
        # Given
        entrypoint(cmd + [help_flag])

        mock_exit = Mock()
        monkeypatch.setattr(sys, "exit", mock_exit)

        # When
        _entry.main()

        # Then
        captured = capsys.readouterr()
        # We assume that a valid help string includes the command itself. This is a
        # heuristic for validating printed help.
        assert " ".join(cmd) in captured.out

        # If the command isn't achievable, click returns status code 2.
        mock_exit.assert_called_with(0)

    @staticmethod
    def test_create_help_lists_options(monkeypatch, capsys, entrypoint):
        entrypoint(["create", "--help"])
        monkeypatch.setattr(sys, "exit", Mock())

        _entry.main()

        captured = capsys.readouterr()
        assert "Repository selection" in captured.out
        assert "--manual" in captured.out
        assert "--multi-project" in captured.out
        assert "--json" in captured.out


class TestCreate:
    @staticmethod
    @pytest.mark.parametrize(
        "args, expected_manual, expected_multi_project, expected_json",
        [
            ([], False, False, False),
            (["--manual"], True, False, False),
            (["--multi-project"], False, True, False),
            (["--json"], False, False, True),
            (["--manual", "--multi-project", "--json"], True, True, True),
        ],
    )
    def test_options(
        monkeypatch,
        entrypoint,
        args,
        expected_manual,
        expected_multi_project,
        expected_json,
    ):
        # Given
        entrypoint(["create"] + args)

        mock_exit = Mock()
        monkeypatch.setattr(sys, "exit", mock_exit)
        mock_action = Mock()
        monkeypatch.setattr(_create.Action, "on_cmd_call", mock_action)

        # When
        _entry.main()

        # Then
        mock_action.assert_called_once_with(
            manual=expected_manual,
            multi_project=expected_multi_project,
            output_json=expected_json,
        )
        mock_exit.assert_called_with(0)

    @staticmethod
    def test_unknown_option(monkeypatch, entrypoint):
        entrypoint(["create", "--wizard"])

        mock_exit = Mock()
        monkeypatch.setattr(sys, "exit", mock_exit)
        mock_action = Mock()
        monkeypatch.setattr(_create.Action, "on_cmd_call", mock_action)

        _entry.main()

        mock_exit.assert_called_with(2)
        mock_action.assert_not_called()


class TestConfigureVerboseness:
    @staticmethod
    def test_verbose_flag_enables_debug(monkeypatch):
        monkeypatch.setenv(_env.WSCREATE_VERBOSE, "1")
        basic_config = Mock()
        monkeypatch.setattr(logging, "basicConfig", basic_config)

        _cli_logs.configure_verboseness_if_needed()

        basic_config.assert_called_once_with(level=logging.DEBUG)

    @staticmethod
    def test_no_flag_leaves_logging_alone(monkeypatch):
        monkeypatch.delenv(_env.WSCREATE_VERBOSE, raising=False)
        basic_config = Mock()
        monkeypatch.setattr(logging, "basicConfig", basic_config)

        _cli_logs.configure_verboseness_if_needed()

        basic_config.assert_not_called()
