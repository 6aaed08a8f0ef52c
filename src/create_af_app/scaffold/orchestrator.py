"""Scaffold orchestrator: validates input, then runs the transactional steps."""

import os
from dataclasses import dataclass, field
from typing import Callable, Optional

import click

from create_af_app.scaffold.command_runner import CommandRunner
from create_af_app.scaffold.config import ScaffoldConfig
from create_af_app.scaffold.dependencies import (
    build_init_script_command,
    build_install_command,
    collect_dependencies,
)
from create_af_app.scaffold.errors import InvalidName, MissingArgument, PathExists
from create_af_app.scaffold.node_version import check_node_version
from create_af_app.scaffold.package_name import validate_package_name
from create_af_app.scaffold.questions import Prompter
from create_af_app.scaffold.session import ScaffoldSession
from create_af_app.scaffold.supabase_cli import SupabaseCli
from create_af_app.scaffold.template_cloner import TemplateCloner
from create_af_app.scaffold.transaction import ScaffoldTransaction


@dataclass
class OrchestratorDeps:
    """Injectable collaborators for the orchestrator."""

    config: ScaffoldConfig = field(default_factory=ScaffoldConfig)
    runner: object = None
    cloner: object = None
    prompter: object = None
    supabase: object = None
    cwd_fn: Callable[[], str] = os.getcwd

    def __post_init__(self):
        if self.runner is None:
            self.runner = CommandRunner()
        if self.cloner is None:
            self.cloner = TemplateCloner()
        if self.prompter is None:
            self.prompter = Prompter()
        if self.supabase is None:
            self.supabase = SupabaseCli(self.runner)


def _announce(text):
    click.echo(click.style(text, fg="white", bg="blue", bold=True))


# --- Pre-flight checks: no side effects ---

def check_environment(deps):
    check_node_version(deps.runner, deps.config.min_node_major)


def validate_name(project_name, deps):
    if not project_name:
        raise MissingArgument(
            "You have to provide a name to your app.\n"
            "For example :\n"
            f"  {deps.config.app_command} my-app"
        )
    session = ScaffoldSession.for_name(project_name, deps.cwd_fn())
    if session.current_dir:
        return session

    validation = validate_package_name(project_name)
    if not validation.valid_for_new_packages:
        raise InvalidName(project_name, validation.errors, validation.warnings)
    return session


def check_path(session, deps):
    if not session.current_dir and os.path.exists(session.resolved_path):
        raise PathExists(session.resolved_path)
    return session


# --- Transactional steps: each returns the updated session ---

def acquire_template(session, deps):
    _announce("Creating template...")
    deps.cloner.clone(deps.config.template_url, session.resolved_path)
    return session


def configure(session, deps):
    prompter = deps.prompter
    return session.with_changes(
        package_manager=prompter.ask_package_manager(),
        css_choice=prompter.ask_css_styling(),
        backend_services=prompter.ask_backend_services(),
    )


def install_dependencies(session, deps):
    packages = collect_dependencies(session.css_choice, session.backend_services)
    _announce("Installing dependencies...")
    deps.runner.run(
        build_install_command(session.package_manager, packages),
        cwd=session.resolved_path,
    )
    return session


def run_generators(session, deps):
    for service in session.backend_services:
        _announce(f"Initializing {service.value}...")
        deps.runner.run(
            build_init_script_command(session.package_manager, service),
            cwd=session.resolved_path,
        )
    return session


def provision_remote_project(session, deps):
    if not deps.prompter.ask_create_remote_project():
        return session

    supabase = deps.supabase
    supabase.login(cwd=session.resolved_path)
    supabase.list_projects(cwd=session.resolved_path)
    name = deps.prompter.ask_remote_project_name()
    supabase.create_project(name, cwd=session.resolved_path)
    return session.with_changes(create_remote_project=True, remote_project_name=name)


def detach_template(session, deps):
    deps.cloner.detach(session.resolved_path)
    return session


TRANSACTIONAL_STEPS = (
    acquire_template,
    configure,
    install_dependencies,
    run_generators,
    provision_remote_project,
    detach_template,
)


class Orchestrator:
    """Runs one scaffold session from command-line argument to finished project."""

    def __init__(self, deps: Optional[OrchestratorDeps] = None, steps=TRANSACTIONAL_STEPS):
        self._deps = deps or OrchestratorDeps()
        self._steps = steps

    def preflight(self, project_name) -> ScaffoldSession:
        """Validate the environment and project name without touching disk.

        Raises:
            UnsupportedEnvironment, MissingArgument, InvalidName, PathExists
        """
        check_environment(self._deps)
        session = validate_name(project_name, self._deps)
        return check_path(session, self._deps)

    def scaffold(self, session: ScaffoldSession) -> ScaffoldSession:
        """Run every transactional step, rolling back the project on failure.

        Raises:
            ScaffoldFailure: After the project directory has been removed.
        """
        with ScaffoldTransaction(session.resolved_path):
            for step in self._steps:
                session = step(session, self._deps)
        return session

    def run(self, project_name) -> ScaffoldSession:
        return self.scaffold(self.preflight(project_name))
