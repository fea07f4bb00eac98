################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
import sys
import traceback
from functools import singledispatch

import click

from .... import exceptions
from ....schema.responses import ResponseStatusCode


def _print_traceback(e: Exception):
    tb_lines = traceback.format_exception(type(e), e, e.__traceback__)
    click.secho("".join(tb_lines), fg="red", file=sys.stderr)


@singledispatch
def pretty_print_exception(e: Exception) -> ResponseStatusCode:
    # The default case
    _print_traceback(e)
    click.echo(
        "Something unexpected happened. Please consider reporting this error to the "
        "wscreate maintainers."
    )

    return ResponseStatusCode.UNKNOWN_ERROR


@pretty_print_exception.register
def _(e: exceptions.ProjectNameDecodeError) -> ResponseStatusCode:
    click.echo(
        f"Error: couldn't derive a project name from '{e.name}'. "
        f"{e.message}."
    )
    return ResponseStatusCode.INVALID_PROJECT_NAME


@pretty_print_exception.register
def _(e: exceptions.RemoteConnectionError) -> ResponseStatusCode:
    click.echo(
        f"Could not connect to the workspace server at {e.uri}. "
        "Please check your network connection and the configured server URL."
    )
    return ResponseStatusCode.CONNECTION_ERROR


@pretty_print_exception.register
def _(e: exceptions.InvalidTokenError) -> ResponseStatusCode:
    click.echo("The API token is not valid.\nPlease check your configuration.")
    return ResponseStatusCode.UNAUTHORIZED


@pretty_print_exception.register
def _(e: exceptions.ForbiddenError) -> ResponseStatusCode:
    click.echo(f"Error: {e.message}")
    return ResponseStatusCode.UNAUTHORIZED


@pretty_print_exception.register
def _(e: exceptions.NotFoundError) -> ResponseStatusCode:
    click.echo(f"Error: {e.message}")
    return ResponseStatusCode.NOT_FOUND


@pretty_print_exception.register
def _(e: exceptions.ProviderError) -> ResponseStatusCode:
    _print_traceback(e)
    click.echo(f"The git provider request failed. {e.message}")
    return ResponseStatusCode.CONNECTION_ERROR


@pretty_print_exception.register
def _(_: exceptions.UserCancelledPrompt) -> ResponseStatusCode:
    return ResponseStatusCode.USER_CANCELLED


@pretty_print_exception.register
def _(e: exceptions.NoOptionsAvailableError) -> ResponseStatusCode:
    click.echo(f"{e.message}:\nNo options are available.")
    return ResponseStatusCode.NOT_FOUND


@pretty_print_exception.register
def _(e: exceptions.InvalidConfigError) -> ResponseStatusCode:
    click.echo(e.message)
    return ResponseStatusCode.INVALID_CONFIG


@pretty_print_exception.register
def _(e: exceptions.ServerNotConfiguredError) -> ResponseStatusCode:
    click.echo(e.message)
    return ResponseStatusCode.INVALID_CONFIG
