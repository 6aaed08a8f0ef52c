"""Node.js runtime check performed before anything is created."""

import re

from create_af_app.scaffold.errors import CommandFailed, UnsupportedEnvironment

_VERSION_PATTERN = re.compile(r"^v?(\d+)(?:\.\d+)*")


def parse_major_version(version):
    """Return the major component of a version string such as ``v18.17.0``."""
    match = _VERSION_PATTERN.match(version.strip())
    if not match:
        raise ValueError(f"Unrecognized Node version: {version!r}")
    return int(match.group(1))


def read_node_version(runner):
    try:
        return runner.capture(["node", "--version"])
    except (OSError, CommandFailed) as exc:
        raise UnsupportedEnvironment(
            "Could not find Node. Please install Node before creating an app."
        ) from exc


def check_node_version(runner, min_major):
    """Raise UnsupportedEnvironment unless Node is at least *min_major*.

    Returns the version string reported by ``node --version``.
    """
    version = read_node_version(runner)
    try:
        major = parse_major_version(version)
    except ValueError as exc:
        raise UnsupportedEnvironment(str(exc)) from exc

    if major < min_major:
        raise UnsupportedEnvironment(
            f"You are running Node {version}.\n"
            f"Create Airfoil Next App requires Node {min_major} or higher.\n"
            "Please update your version of Node."
        )
    return version
