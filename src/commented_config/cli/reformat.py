"""CLI command for rewriting configuration files in place."""

from pathlib import Path
from typing import Annotated

import typer
from rich import print


def reformat(
    path: Annotated[
        Path,
        typer.Argument(help="Configuration file to rewrite (created if missing)"),
    ],
    compact: Annotated[
        bool,
        typer.Option("--compact", help="Do not insert blank lines between groups"),
    ] = False,
):
    """
    Load a configuration file and save it back with its comments.

    Comments are kept and blank lines are normalized.
    """
    # Lazy import core logic
    from commented_config.core.reformat import reformat as reformat_core  # noqa: E402
    from commented_config.errors import CommentedConfigError  # noqa: E402

    typer.echo(f"Reformatting: {path}")
    try:
        comment_count = reformat_core(path, compact_lines=compact)
    except CommentedConfigError as e:
        typer.secho(f"✗ Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    print(f":sparkles: [green] Saved {path} ({comment_count} comments kept) [/green]")
