"""Click command for create-backend-app."""

import os
import sys

import click

from create_backend_app.scaffold.engine import CURRENT_DIRECTORY
from create_backend_app.scaffold.reporter import ScaffoldReporter
from create_backend_app.scaffold_command import ScaffoldCommand
from create_backend_app.scaffold_opts import DEFAULT_TEMPLATE_DIR, ScaffoldOpts
from create_backend_app.template_renderer import render_template


def _stdin_is_tty():
    return sys.stdin.isatty()


def _resolve_project_name(opts):
    """Prompt for a project name when none was given and a terminal is attached."""
    if opts.project_name is not None:
        if not opts.project_name:
            raise click.BadParameter("must not be empty", param_hint="PROJECT_NAME")
        return opts.project_name
    if opts.interactive and _stdin_is_tty():
        return click.prompt("Project name", default=CURRENT_DIRECTORY)
    return CURRENT_DIRECTORY


@click.command("create-backend-app")
@click.argument("project_name", required=False, metavar="[PROJECT_NAME]")
@click.option(
    "--template-dir",
    envvar="CREATE_BACKEND_APP_TEMPLATE_DIR",
    default=DEFAULT_TEMPLATE_DIR,
    show_default="bundled express template",
    type=click.Path(file_okay=False),
    help="Template directory to copy from.",
)
@click.option("--non-interactive", is_flag=True, help="Never prompt; default the project name to '.'.")
@click.version_option(package_name="create-backend-app")
def main(project_name, template_dir, non_interactive):
    """Scaffold a backend project in the right way without breaking a sweat."""
    opts = ScaffoldOpts(
        project_name=project_name,
        template_dir=os.path.abspath(template_dir),
        non_interactive=non_interactive,
    )
    opts.project_name = _resolve_project_name(opts)

    command = ScaffoldCommand(opts, ScaffoldReporter(), render_template, os.getcwd())
    command.execute()
