"""ScaffoldTransaction: the rollback boundary around side-effecting steps."""

import os
import shutil

import click

from create_af_app.scaffold.errors import ScaffoldFailure

INTERRUPTED_EXIT_CODE = 130


class ScaffoldTransaction:
    """Context manager that removes what a failed run created under a path.

    If the path did not exist when the transaction began, the whole tree is
    removed on failure. If it already existed (scaffolding into the current
    directory), only entries created during the transaction are removed.

    Parent directories created along with the path (the scope directory of
    an `@scope/name` project) are removed too.

    Any Exception or KeyboardInterrupt raised inside the block is rolled
    back and re-raised as ScaffoldFailure chained to the original.
    """

    def __init__(self, path, remove_tree=shutil.rmtree):
        self.path = path
        self._remove_tree = remove_tree
        self._existed = False
        self._created_root = path
        self._entries_before = frozenset()
        self.rolled_back = False

    def __enter__(self) -> "ScaffoldTransaction":
        self._existed = os.path.isdir(self.path)
        if self._existed:
            self._entries_before = frozenset(os.listdir(self.path))
        else:
            self._created_root = _topmost_missing_dir(self.path)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            return False
        if not issubclass(exc_type, (Exception, KeyboardInterrupt)):
            return False

        exit_code = INTERRUPTED_EXIT_CODE if exc_type is KeyboardInterrupt else 1

        self.rollback()
        raise ScaffoldFailure(
            f"Project was not created: {str(exc_val) or exc_type.__name__}",
            exit_code=exit_code,
        ) from exc_val

    def rollback(self):
        click.echo(click.style("Removing project...", fg="white", bg="blue", bold=True))
        if self._existed:
            for entry in os.listdir(self.path):
                if entry not in self._entries_before:
                    self._remove_entry(os.path.join(self.path, entry))
        elif os.path.lexists(self._created_root):
            self._remove_tree(self._created_root)
        self.rolled_back = True

    def _remove_entry(self, entry_path):
        if os.path.isdir(entry_path) and not os.path.islink(entry_path):
            self._remove_tree(entry_path)
        else:
            os.remove(entry_path)


def _topmost_missing_dir(path):
    """Return the highest ancestor of *path* (or *path* itself) that does not exist yet."""
    path = os.path.abspath(path)
    missing = path
    parent = os.path.dirname(path)
    while parent != missing and not os.path.lexists(parent):
        missing = parent
        parent = os.path.dirname(parent)
    return missing
