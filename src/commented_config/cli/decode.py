"""CLI command for restoring comments in YAML writer output."""

from pathlib import Path
from typing import Annotated

import typer


def decode(
    path: Annotated[
        Path,
        typer.Argument(help="File holding YAML with _COMMENT_<n> keys", exists=True, dir_okay=False),
    ],
    compact: Annotated[
        bool,
        typer.Option("--compact", help="Do not insert blank lines between groups"),
    ] = False,
):
    """
    Print a file with its _COMMENT_<n> keys turned back into comments.
    """
    from commented_config.core.config_file import render_config  # noqa: E402

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        typer.secho(f"✗ Error: Failed to read {path}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(render_config(text, compact_lines=compact), nl=False)
