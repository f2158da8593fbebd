"""Utility helpers for generating CLI documentation artefacts."""

from __future__ import annotations

from enum import StrEnum

import click
from click.shell_completion import BashComplete, FishComplete, ShellComplete, ZshComplete


class ShellName(StrEnum):
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"


_COMPLETE_CLASSES: dict[ShellName, type[ShellComplete]] = {
    ShellName.BASH: BashComplete,
    ShellName.ZSH: ZshComplete,
    ShellName.FISH: FishComplete,
}

_COMPLETE_VAR = "_METRICGATE_COMPLETE"

_EXIT_STATUS = """\
0  success
1  generic error (unexpected failure)
2  a metric or expression failed validation
65 malformed metric definition file
66 metric definition file missing
78 configuration error
"""


def _root_command() -> click.Group:
    # Imported lazily: the CLI modules import this one.
    from metricgate.cli.root import cli

    return cli  # type: ignore[return-value]


def _collect_option_flags(command: click.Command) -> tuple[str, ...]:
    flags: list[str] = []
    for param in command.params:
        if isinstance(param, click.Option):
            flags.extend(param.opts)
            flags.extend(param.secondary_opts)
    return tuple(sorted({flag for flag in flags if flag}))


def _build_plain_command(cli: click.Group) -> click.Command:
    """Return a plain Click command mirroring the root command.

    Typer's rich help formatter prints straight to the console instead of
    returning text, so the man page is rendered from a plain copy.
    """
    return click.Command(
        name="metricgate",
        callback=cli.callback,
        params=cli.params,
        help=cli.help,
        epilog=cli.epilog,
        context_settings=cli.context_settings,
    )


def _commands_section(cli: click.Group) -> str:
    lines: list[str] = []
    for name in sorted(cli.commands):
        cmd = cli.commands[name]
        lines.append(f"{name}  {cmd.get_short_help_str(limit=70)}")
        flags = _collect_option_flags(cmd)
        if flags:
            lines.append(f"    options: {' '.join(flags)}")
    return "\n".join(lines)


def build_man_page() -> str:
    """Return a plain-text manual page for :mod:`metricgate`'s CLI."""
    cli = _root_command()
    plain_cmd = _build_plain_command(cli)
    ctx = click.Context(plain_cmd, info_name="metricgate")
    help_text = plain_cmd.get_help(ctx).strip()
    sections = [
        "METRICGATE(1)\n",
        "NAME\n----\nmetricgate - metric formula and threshold validator\n\n",
        "SYNOPSIS\n--------\nmetricgate [OPTIONS] COMMAND [ARGS]...\n\n",
        "DESCRIPTION\n-----------\n",
        help_text,
        "\n\nCOMMANDS\n--------\n",
        _commands_section(cli),
        "\n\nEXIT STATUS\n-----------\n",
        _EXIT_STATUS.strip(),
        "\n",
    ]
    return "".join(sections)


def build_completion_script(shell: ShellName | str) -> str:
    """Return a shell completion script for *shell*."""
    cli = _root_command()
    complete_cls = _COMPLETE_CLASSES[ShellName(shell)]
    complete = complete_cls(cli, {}, "metricgate", _COMPLETE_VAR)
    script = complete.source()
    flags: set[str] = set(_collect_option_flags(cli))
    for cmd in cli.commands.values():
        flags.update(_collect_option_flags(cmd))
    return f"# metricgate options: {' '.join(sorted(flags))}\n{script}"


__all__ = ["ShellName", "build_completion_script", "build_man_page"]
