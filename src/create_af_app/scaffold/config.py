"""Static configuration for the scaffold workflow."""

from dataclasses import dataclass

DEFAULT_TEMPLATE_URL = "https://github.com/tzeweiwee/airfoil-labs-nextjs-template.git"
DEFAULT_MIN_NODE_MAJOR = 14
APP_COMMAND = "create-af-app"
START_UP_TEXT = "Create Airfoil Lab App"
TEMPLATE_URL_ENVVAR = "CREATE_AF_APP_TEMPLATE_URL"


@dataclass(frozen=True)
class ScaffoldConfig:
    """Settings that may be overridden from the command line."""

    template_url: str = DEFAULT_TEMPLATE_URL
    min_node_major: int = DEFAULT_MIN_NODE_MAJOR
    app_command: str = APP_COMMAND
