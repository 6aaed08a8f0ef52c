import subprocess
import sys


class ManagedSubprocess:
    """Context manager that stops a child process when the user hits Ctrl+C.

    The child shares the terminal's process group, so it receives SIGINT
    itself. On KeyboardInterrupt the child is terminated (and killed if it
    does not exit within ``terminate_timeout``) before the interrupt
    propagates to the caller.
    """

    def __init__(
        self,
        process: subprocess.Popen,
        label: str,
        terminate_timeout: float = 5.0,
    ):
        self.process = process
        self.label = label
        self.terminate_timeout = terminate_timeout
        self.interrupted = False

    def __enter__(self) -> "ManagedSubprocess":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is KeyboardInterrupt:
            self._stop_process()
        return False

    def _stop_process(self):
        print(
            f"\nInterrupted. Terminating {self.label} process...",
            file=sys.stderr,
        )
        self.process.terminate()
        try:
            self.process.wait(timeout=self.terminate_timeout)
        except subprocess.TimeoutExpired:
            print(
                f"Force-killing {self.label} process...",
                file=sys.stderr,
            )
            self.process.kill()
            self.process.wait()
        self.interrupted = True
