"""Error taxonomy for the scaffold workflow.

Pre-flight errors are raised before anything touches the filesystem and
need no cleanup. ScaffoldFailure is raised by the transactional region
after the project directory has been rolled back.
"""

import subprocess


class ScaffoldError(Exception):
    """Base class for errors that end a scaffold run with a message."""

    exit_code = 1


class UnsupportedEnvironment(ScaffoldError):
    """The Node.js runtime is missing or older than required."""


class MissingArgument(ScaffoldError):
    """No project name was given on the command line."""


class InvalidName(ScaffoldError):
    """The project name breaks npm package naming rules."""

    def __init__(self, name, errors=(), warnings=()):
        super().__init__(
            f"Cannot create a project named {name} due to npm naming restrictions."
        )
        self.name = name
        self.errors = list(errors)
        self.warnings = list(warnings)


class PathExists(ScaffoldError):
    """The target directory already exists."""

    def __init__(self, path):
        super().__init__(
            "Directory already exist, please choose another directory or project name"
        )
        self.path = path


class ScaffoldFailure(ScaffoldError):
    """A side-effecting step failed and the project directory was removed."""

    def __init__(self, message, exit_code=1):
        super().__init__(message)
        self.exit_code = exit_code


class PromptCancelled(Exception):
    """Interactive input was closed before an answer was given."""


class CommandFailed(subprocess.CalledProcessError):
    """A child process exited with a non-zero status."""

    def __str__(self):
        return f"Command '{' '.join(self.cmd)}' exited with status {self.returncode}."
