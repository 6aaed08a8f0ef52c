"""Dependency selection and package manager commands."""

from typing import Iterable, List

from create_af_app.scaffold.session import PackageManager

PACKAGE_DEPENDENCIES = {
    "chakraui": "@chakra-ui/react @emotion/react@^11 @emotion/styled@^11 framer-motion@^6",
    # Tailwind ships with the template; not offered as a choice.
    "tailwindcss": "tailwindcss postcss autoprefixer",
    "prisma": "prisma",
    "supabase": "@supabase/supabase-js",
}

INIT_SCRIPT_PREFIX = "init:"


def dependencies_for(choice) -> List[str]:
    """Return the packages for a CSS or backend choice; unknown choices add none."""
    key = getattr(choice, "value", choice)
    return PACKAGE_DEPENDENCIES.get(key, "").split()


def collect_dependencies(css_choice, backend_services: Iterable) -> List[str]:
    """Concatenate the packages for the CSS choice and each backend service."""
    packages = list(dependencies_for(css_choice))
    for service in backend_services:
        packages.extend(dependencies_for(service))
    return packages


def build_install_command(package_manager: PackageManager, packages: List[str]) -> List[str]:
    """Build the install command for *package_manager*.

    With no extra packages the template's own dependencies are installed.
    """
    pm = package_manager.value
    if not packages:
        return [pm, "install"]
    if package_manager is PackageManager.NPM:
        return [pm, "install"] + list(packages)
    return [pm, "add"] + list(packages)


def build_init_script_command(package_manager: PackageManager, service) -> List[str]:
    """Build ``<pm> run init:<service>`` for a backend service generator."""
    return [package_manager.value, "run", f"{INIT_SCRIPT_PREFIX}{service.value}"]
