"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` so that ``greeter info``
and the layered configuration paths agree with the installed distribution.

Contents:
    * Module-level metadata constants (name, title, version, ...).
    * :func:`print_info` - render the metadata as an aligned text block.
"""

from __future__ import annotations

name = "greeter"
title = "Greeting service wired through dependency inversion"
version = "1.0.0"
homepage = "https://github.com/greeter-dev/greeter"
author = "greeter developers"
author_email = "dev@greeter.invalid"
shell_command = "greeter"

#: Directory name passed to click.get_app_dir for the per-user config file.
CONFIG_APP_NAME = "greeter"
#: Prefix of environment variables overriding configuration keys.
ENV_PREFIX = "GREETER_"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greeter:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
