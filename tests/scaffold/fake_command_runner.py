"""FakeCommandRunner: test double for CommandRunner.

Records run() calls and can be told to fail specific commands.
"""

from create_af_app.scaffold.errors import CommandFailed


class FakeCommandRunner:
    """Test double for CommandRunner that records commands instead of running them."""

    def __init__(self, node_version="v18.17.0", capture_error=None):
        self._node_version = node_version
        self._capture_error = capture_error
        self._failing = {}
        self.calls = []

    def set_node_version(self, version):
        self._node_version = version

    def fail_on(self, cmd, returncode=1):
        """Make run() raise CommandFailed when *cmd* is run."""
        self._failing[tuple(cmd)] = returncode

    def run(self, cmd, cwd=None):
        self.calls.append(("run", list(cmd), cwd))
        if tuple(cmd) in self._failing:
            raise CommandFailed(self._failing[tuple(cmd)], list(cmd))

    def capture(self, cmd):
        self.calls.append(("capture", list(cmd)))
        if self._capture_error is not None:
            raise self._capture_error
        if self._node_version is None:
            raise FileNotFoundError(cmd[0])
        return self._node_version

    @property
    def run_commands(self):
        return [cmd for kind, cmd, *_ in self.calls if kind == "run"]
