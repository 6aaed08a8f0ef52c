"""Numbered-option menus for the interactive questions."""

import sys
from dataclasses import dataclass, field
from typing import Callable, Collection, List, Optional, TextIO

from create_af_app.scaffold.errors import PromptCancelled


@dataclass
class MenuConfig:
    """I/O configuration for menu display and input."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stderr)


def _display_options(prompt, options, default, disabled, output):
    print("", file=output)
    print(prompt, file=output)
    for i, option in enumerate(options):
        label = f"  {i + 1}) {option}"
        if i + 1 in disabled:
            label += " (coming soon)"
        elif i + 1 == default:
            label += " [default]"
        print(label, file=output)
    print("", file=output)


def _read_input(prompt_text, config):
    try:
        return config.input_fn(prompt_text).strip()
    except EOFError:
        print("", file=config.output)
        raise PromptCancelled("Input closed before an answer was given.")


def _parse_choice(raw_input, option_count, default, disabled):
    if raw_input == "" and default:
        return default
    if raw_input.isdigit() and 1 <= int(raw_input) <= option_count:
        choice = int(raw_input)
        if choice not in disabled:
            return choice
    return None


def get_user_choice(prompt, default, options, *, disabled: Collection[int] = (), config=None):
    """Display numbered options and return the user's selection.

    Args:
        prompt: Header text displayed above the options.
        default: 1-based index of the default option.
        options: List of option label strings.
        disabled: 1-based indexes shown but not selectable.
        config: MenuConfig with input_fn and output stream (defaults apply).

    Returns:
        1-based index of the selected option.

    Raises:
        PromptCancelled: On EOF (e.g. piped input closed).
    """
    if config is None:
        config = MenuConfig()

    _display_options(prompt, options, default, disabled, config.output)
    prompt_text = f"Enter your choice (1-{len(options)})"
    if default:
        prompt_text += f" [default: {default}]"
    prompt_text += ": "

    while True:
        parsed = _parse_choice(_read_input(prompt_text, config), len(options), default, disabled)
        if parsed is not None:
            return parsed
        print(
            f"Invalid choice. Please enter one of the available numbers between 1 and {len(options)}.",
            file=config.output,
        )


def _parse_choices(raw_input, option_count) -> Optional[List[int]]:
    choices = []
    for part in raw_input.replace(",", " ").split():
        if not part.isdigit() or not 1 <= int(part) <= option_count:
            return None
        if int(part) not in choices:
            choices.append(int(part))
    return choices


def get_user_choices(prompt, options, *, config=None) -> List[int]:
    """Display numbered options and return any number of selections.

    The user enters numbers separated by spaces or commas; an empty answer
    selects nothing. Selections are returned in the order entered.
    """
    if config is None:
        config = MenuConfig()

    _display_options(prompt, options, None, (), config.output)
    prompt_text = f"Enter your choices (1-{len(options)}, separated by spaces) or press Return to skip: "

    while True:
        parsed = _parse_choices(_read_input(prompt_text, config), len(options))
        if parsed is not None:
            return parsed
        print(
            f"Invalid choice. Please enter numbers between 1 and {len(options)}.",
            file=config.output,
        )


def confirm(prompt, default=False, *, config=None) -> bool:
    """Ask a yes/no question."""
    if config is None:
        config = MenuConfig()

    suffix = " [Y/n]: " if default else " [y/N]: "
    while True:
        answer = _read_input(prompt + suffix, config).lower()
        if answer == "":
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        print("Please answer y or n.", file=config.output)


def ask_text(prompt, *, config=None) -> str:
    """Ask for a non-empty line of text."""
    if config is None:
        config = MenuConfig()

    while True:
        answer = _read_input(f"{prompt}: ", config)
        if answer:
            return answer
        print("A value is required.", file=config.output)
