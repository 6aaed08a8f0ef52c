"""CommandRunner: runs external commands for the scaffold workflow.

Provides an injectable interface for child processes, enabling
FakeCommandRunner in tests without spawning package managers.
"""

import subprocess
from typing import List, Optional

from create_af_app.scaffold.errors import CommandFailed
from create_af_app.scaffold.managed_subprocess import ManagedSubprocess


class CommandRunner:
    """Runs commands synchronously, one at a time."""

    def run(self, cmd: List[str], cwd: Optional[str] = None) -> None:
        """Run *cmd* with the parent's stdin, stdout and stderr.

        Raises:
            CommandFailed: If the command exits with a non-zero status.
            FileNotFoundError: If the executable cannot be found.
        """
        process = subprocess.Popen(cmd, cwd=cwd)
        with ManagedSubprocess(process=process, label=cmd[0]):
            returncode = process.wait()
        if returncode != 0:
            raise CommandFailed(returncode, cmd)

    def capture(self, cmd: List[str]) -> str:
        """Run a short probe command and return its stripped stdout."""
        result = subprocess.run(cmd, capture_output=True, text=True)
        if result.returncode != 0:
            raise CommandFailed(result.returncode, cmd, result.stdout, result.stderr)
        return result.stdout.strip()
