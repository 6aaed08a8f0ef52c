"""Shared fixtures for scaffold tests."""

import io
import os
import sys

import pytest

# Ensure tests/scaffold/ is on sys.path so test files can import the fakes.
sys.path.insert(0, os.path.dirname(__file__))

from create_af_app.scaffold.config import ScaffoldConfig  # noqa: E402
from create_af_app.scaffold.menu import MenuConfig  # noqa: E402
from create_af_app.scaffold.orchestrator import OrchestratorDeps  # noqa: E402
from fake_command_runner import FakeCommandRunner  # noqa: E402
from fake_prompter import FakePrompter  # noqa: E402
from fake_template_cloner import FakeTemplateCloner  # noqa: E402

TEST_TEMPLATE_URL = "https://example.com/template.git"


def scripted_menu(*answers):
    """Create a MenuConfig that answers prompts in order, then hits EOF."""
    it = iter(answers)

    def input_fn(_prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return MenuConfig(input_fn=input_fn, output=io.StringIO())


def make_deps(cwd, runner=None, cloner=None, prompter=None):
    """Build OrchestratorDeps wired to fakes, rooted at *cwd*."""
    return OrchestratorDeps(
        config=ScaffoldConfig(template_url=TEST_TEMPLATE_URL),
        runner=runner or FakeCommandRunner(),
        cloner=cloner or FakeTemplateCloner(),
        prompter=prompter or FakePrompter(),
        cwd_fn=lambda: str(cwd),
    )


@pytest.fixture
def runner():
    return FakeCommandRunner()
