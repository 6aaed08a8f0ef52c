"""ScaffoldSession: the state of one scaffold run."""

import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

CURRENT_DIR_NAME = "."


class PackageManager(Enum):
    PNPM = "pnpm"
    NPM = "npm"
    YARN = "yarn"


class CssChoice(Enum):
    NONE = "none"
    CHAKRA_UI = "chakraui"


class BackendService(Enum):
    PRISMA = "prisma"
    SUPABASE = "supabase"


@dataclass(frozen=True)
class ScaffoldSession:
    """Immutable snapshot of a scaffold run.

    Each workflow step returns a new session via ``with_changes()`` rather
    than mutating shared state.
    """

    requested_name: str
    resolved_path: str
    package_manager: Optional[PackageManager] = None
    css_choice: CssChoice = CssChoice.NONE
    backend_services: Tuple[BackendService, ...] = ()
    create_remote_project: bool = False
    remote_project_name: Optional[str] = None

    @classmethod
    def for_name(cls, requested_name: str, cwd: str) -> "ScaffoldSession":
        resolved = os.path.abspath(os.path.join(cwd, requested_name))
        return cls(requested_name=requested_name, resolved_path=resolved)

    @property
    def current_dir(self) -> bool:
        return self.requested_name == CURRENT_DIR_NAME

    def with_changes(self, **changes) -> "ScaffoldSession":
        return replace(self, **changes)
