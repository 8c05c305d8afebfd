"""Click base classes with a generated ``--examples`` listing.

Commands take an ``examples=`` template.  A ``{name}`` placeholder in a
template line is filled in from the ``click.Choice`` argument called
*name*, producing one line per choice (per combination when a line
names several).  New system or document types therefore show up in
``--examples`` without editing the commands.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from itertools import product
from typing import Any

import click


def choice_values(cmd: click.Command) -> dict[str, list[str]]:
    """Map each ``click.Choice`` parameter of *cmd* to its allowed values."""
    return {
        param.name: [str(c) for c in param.type.choices]
        for param in cmd.params
        if param.name and isinstance(param.type, click.Choice)
    }


def expand_examples(template: str, choices: Mapping[str, Sequence[str]]) -> list[str]:
    """Expand ``{name}`` placeholders in *template*, line by line."""
    lines: list[str] = []
    for line in template.splitlines():
        names = [name for name in choices if f"{{{name}}}" in line]
        for combo in product(*(choices[name] for name in names)):
            expanded = line
            for name, value in zip(names, combo):
                expanded = expanded.replace(f"{{{name}}}", value)
            if expanded not in lines:
                lines.append(expanded)
    return lines


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value:
        return
    template = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo("\n".join(expand_examples(template, choice_values(ctx.command))))
    ctx.exit(0)


class DotCommand(click.Command):
    """Command accepting an ``examples=`` template."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_show_examples,
                    help="Show usage examples.",
                )
            )


class DotGroup(click.Group):
    """Group whose subcommands default to :class:`DotCommand`."""

    command_class = DotCommand
