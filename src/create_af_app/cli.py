"""Click command for create-af-app."""

import sys

import click

from create_af_app.scaffold.config import (
    APP_COMMAND,
    DEFAULT_TEMPLATE_URL,
    START_UP_TEXT,
    TEMPLATE_URL_ENVVAR,
    ScaffoldConfig,
)
from create_af_app.scaffold.errors import InvalidName, ScaffoldError
from create_af_app.scaffold.orchestrator import Orchestrator, OrchestratorDeps


def _banner(text):
    click.echo("================================================")
    click.echo(f"  {text}")
    click.echo("================================================")
    click.echo("")


def _report_error(exc):
    click.echo(click.style(str(exc), fg="red"), err=True)
    if isinstance(exc, InvalidName):
        click.echo(click.style("Please fix the errors below: ", fg="yellow"), err=True)
        for error in exc.errors:
            click.echo(f" - {click.style(error, fg='red')}", err=True)
        for warning in exc.warnings:
            click.echo(f" - {click.style(warning, fg='yellow')}", err=True)


def _report_success(session):
    _banner("SUCCESS!")
    message = "Airfoil Lab project constructed!"
    if not session.current_dir:
        message += f" cd {session.requested_name} to start!"
    click.echo(click.style(message, fg="green", bold=True))


@click.command(APP_COMMAND)
@click.argument("project_name", required=False)
@click.option(
    "--template-url",
    default=DEFAULT_TEMPLATE_URL,
    envvar=TEMPLATE_URL_ENVVAR,
    show_default=True,
    help="Git repository to clone the project template from.",
)
@click.version_option(package_name="create-af-app")
def main(project_name, template_url):
    """Create an Airfoil Lab Next.js app in PROJECT_NAME (use . for the current directory)."""
    _banner(START_UP_TEXT)

    deps = OrchestratorDeps(config=ScaffoldConfig(template_url=template_url))
    orchestrator = Orchestrator(deps)
    try:
        session = orchestrator.run(project_name)
    except ScaffoldError as exc:
        _report_error(exc)
        sys.exit(exc.exit_code)

    _report_success(session)
