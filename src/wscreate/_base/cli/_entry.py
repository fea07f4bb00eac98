################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################
"""
"wscreate" CLI entrypoint.

``click`` uses function name as the group and command name.
"""
import cloup

from ._cli_logs import configure_verboseness_if_needed

# Adds '-h' alias for '--help'
CLICK_CTX_SETTINGS = {"help_option_names": ["-h", "--help"]}


@cloup.group(context_settings=CLICK_CTX_SETTINGS)
def wscreate():
    # Normally, click would infer command name from function name. This is different,
    # because it's the top-level group. User-facing name depends on the script entry
    # in pyproject.toml.
    configure_verboseness_if_needed()


@wscreate.command()
@cloup.option_group(
    "Repository selection",
    cloup.option(
        "--manual",
        is_flag=True,
        default=False,
        help="Type in repository URLs instead of browsing your git providers.",
    ),
    cloup.option(
        "--multi-project",
        is_flag=True,
        default=False,
        help="Add more than one project to the workspace.",
    ),
)
@cloup.option(
    "--json",
    "output_json",
    is_flag=True,
    default=False,
    help="Print the resulting creation request as JSON.",
)
def create(manual: bool, multi_project: bool, output_json: bool):
    """
    Collects the data needed to create a workspace.

    Repositories are picked by browsing the git providers configured on the server,
    or by typing in their URLs. The workspace name is suggested from the first
    project and is guaranteed not to clash with existing workspaces.
    """
    from ._workspace._create import Action

    action = Action()
    action.on_cmd_call(
        manual=manual, multi_project=multi_project, output_json=output_json
    )


def main():
    wscreate()


if __name__ == "__main__":
    main()
