#!/usr/bin/env python3
"""Generate CLI reference documentation from the typer app."""

import sys
from pathlib import Path

# Add parent directory to path to import spendbook
sys.path.insert(0, str(Path(__file__).parent.parent))

import click
import typer

from spendbook.cli import app


def format_param(param: click.Parameter) -> str:
    """Format an argument or option as a Markdown bullet."""
    if isinstance(param, click.Argument):
        return f"- `{param.human_readable_name}` (required)"

    flags = ", ".join(f"`{flag}`" for flag in [*param.opts, *param.secondary_opts])
    line = f"- {flags}"

    help_text = getattr(param, "help", None)
    if help_text:
        line += f": {help_text}"

    if param.default is not None and param.default is not False and not param.is_flag:
        line += f" (default: {param.default})"

    return line


def generate_command_doc(name: str, command: click.Command) -> str:
    """Generate documentation for a single command."""
    usage_args = " ".join(p.human_readable_name for p in command.params if isinstance(p, click.Argument))

    lines = [
        f"### {name}",
        "",
        (command.help or "No description available.").strip(),
        "",
        "**Usage:**",
        "",
        "```bash",
        f"spendbook {name} {usage_args}".rstrip(),
        "```",
        "",
    ]

    arguments = [p for p in command.params if isinstance(p, click.Argument)]
    options = [p for p in command.params if isinstance(p, click.Option) and p.name != "help"]

    if arguments:
        lines.extend(["**Arguments:**", ""])
        lines.extend(format_param(p) for p in arguments)
        lines.append("")

    if options:
        lines.extend(["**Options:**", ""])
        lines.extend(format_param(p) for p in options)
        lines.append("")

    return "\n".join(lines)


def generate_cli_reference() -> str:
    """Generate complete CLI reference documentation."""
    group = typer.main.get_command(app)
    assert isinstance(group, click.Group)

    lines = [
        "# CLI Commands Reference",
        "",
        "Complete reference for all spendbook CLI commands and options.",
        "",
        "Expense numbers (`INDEX`) are the `#` column shown by `spendbook list`.",
        "",
        "## Commands",
        "",
    ]

    for name in sorted(group.commands):
        lines.append(generate_command_doc(name, group.commands[name]))
        lines.append("")

    return "\n".join(lines)


def main() -> None:
    """Generate and write CLI reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "reference" / "cli-commands.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(generate_cli_reference())
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
