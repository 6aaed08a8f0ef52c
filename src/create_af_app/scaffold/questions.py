"""The interactive question set asked after the template is cloned."""

from create_af_app.scaffold import menu
from create_af_app.scaffold.session import BackendService, CssChoice, PackageManager

PACKAGE_MANAGER_OPTIONS = [
    ("PNPM", PackageManager.PNPM),
    ("NPM", PackageManager.NPM),
    ("Yarn", PackageManager.YARN),
]

CSS_OPTIONS = [
    ("Skip", CssChoice.NONE),
    ("Chakra UI", CssChoice.CHAKRA_UI),
    ("Mantine", None),
]

BACKEND_OPTIONS = [
    ("Prisma", BackendService.PRISMA),
    ("Supabase", BackendService.SUPABASE),
]


def _labels(options):
    return [label for label, _ in options]


class Prompter:
    """Asks the scaffold questions through numbered menus.

    Args:
        config: MenuConfig used for every question; tests pass scripted input.
    """

    def __init__(self, config=None):
        self._config = config or menu.MenuConfig()

    def ask_package_manager(self) -> PackageManager:
        choice = menu.get_user_choice(
            "Choose a package manager", 1, _labels(PACKAGE_MANAGER_OPTIONS),
            config=self._config,
        )
        return PACKAGE_MANAGER_OPTIONS[choice - 1][1]

    def ask_css_styling(self) -> CssChoice:
        disabled = [i + 1 for i, (_, value) in enumerate(CSS_OPTIONS) if value is None]
        choice = menu.get_user_choice(
            "Choose CSS styling - App comes with Tailwind by default", 1,
            _labels(CSS_OPTIONS), disabled=disabled, config=self._config,
        )
        return CSS_OPTIONS[choice - 1][1]

    def ask_backend_services(self):
        choices = menu.get_user_choices(
            "Choose backend services", _labels(BACKEND_OPTIONS), config=self._config,
        )
        return tuple(BACKEND_OPTIONS[choice - 1][1] for choice in choices)

    def ask_create_remote_project(self) -> bool:
        return menu.confirm(
            "Would you like to create a Supabase project?", default=False,
            config=self._config,
        )

    def ask_remote_project_name(self) -> str:
        return menu.ask_text("Name of the new Supabase project", config=self._config)
