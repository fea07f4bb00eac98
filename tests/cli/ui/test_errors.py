################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
import pytest

from wscreate import exceptions
from wscreate._base.cli._ui import _errors
from wscreate.schema.responses import ResponseStatusCode


def test_print_traceback(capsys: pytest.CaptureFixture[str]):
    try:
        try:
            raise KeyError("key")
        except KeyError as e:
            raise RuntimeError("Unable to do thing") from e
    except RuntimeError as e:
        _errors._print_traceback(e)

    captured = capsys.readouterr()

    assert "RuntimeError: Unable to do thing" in captured.err
    assert "KeyError: 'key'" in captured.err
    assert "test_print_traceback" in captured.err


class TestPrettyPrintException:
    @staticmethod
    @pytest.mark.parametrize(
        "exc,stdout_marker,status_code",
        [
            (
                exceptions.ProjectNameDecodeError("bad%zz"),
                "couldn't derive a project name from 'bad%zz'",
                ResponseStatusCode.INVALID_PROJECT_NAME,
            ),
            (
                exceptions.RemoteConnectionError("http://localhost:3986"),
                "Could not connect to the workspace server at http://localhost:3986",
                ResponseStatusCode.CONNECTION_ERROR,
            ),
            (
                exceptions.InvalidTokenError(),
                "The API token is not valid",
                ResponseStatusCode.UNAUTHORIZED,
            ),
            (
                exceptions.ForbiddenError("Access denied"),
                "Access denied",
                ResponseStatusCode.UNAUTHORIZED,
            ),
            (
                exceptions.NotFoundError("Repository not found"),
                "Repository not found",
                ResponseStatusCode.NOT_FOUND,
            ),
            (
                exceptions.NoOptionsAvailableError("Namespace"),
                "No options are available",
                ResponseStatusCode.NOT_FOUND,
            ),
            (
                exceptions.InvalidConfigError("Invalid config file"),
                "Invalid config file",
                ResponseStatusCode.INVALID_CONFIG,
            ),
            (
                exceptions.ServerNotConfiguredError("No server URL"),
                "No server URL",
                ResponseStatusCode.INVALID_CONFIG,
            ),
        ],
    )
    def test_prints_to_stdout(
        capsys: pytest.CaptureFixture[str],
        exc: Exception,
        stdout_marker: str,
        status_code: ResponseStatusCode,
    ):
        # When
        returned = _errors.pretty_print_exception(exc)

        # Then
        captured = capsys.readouterr()
        assert stdout_marker in captured.out
        assert returned == status_code

    @staticmethod
    def test_unknown_http_error_shows_traceback(capsys: pytest.CaptureFixture[str]):
        exc = exceptions.UnknownHTTPError(500, "boom", "http://localhost/gitprovider")
        try:
            raise exc
        except exceptions.UnknownHTTPError as e:
            returned = _errors.pretty_print_exception(e)

        captured = capsys.readouterr()
        assert returned == ResponseStatusCode.CONNECTION_ERROR
        assert "The git provider request failed" in captured.out
        assert "UnknownHTTPError" in captured.err

    @staticmethod
    def test_user_cancelled_is_silent(capsys: pytest.CaptureFixture[str]):
        returned = _errors.pretty_print_exception(exceptions.UserCancelledPrompt())

        captured = capsys.readouterr()
        assert returned == ResponseStatusCode.USER_CANCELLED
        assert captured.out == ""
        assert captured.err == ""

    @staticmethod
    def test_unexpected_error(capsys: pytest.CaptureFixture[str]):
        try:
            raise ValueError("<error sentinel>")
        except ValueError as e:
            returned = _errors.pretty_print_exception(e)

        captured = capsys.readouterr()
        assert returned == ResponseStatusCode.UNKNOWN_ERROR
        assert "Something unexpected happened" in captured.out
        assert "ValueError: <error sentinel>" in captured.err
