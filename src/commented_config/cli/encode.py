"""CLI command for showing the comment-as-key form of a configuration file."""

from pathlib import Path
from typing import Annotated

import typer


def encode(
    path: Annotated[
        Path,
        typer.Argument(help="Configuration file to encode", exists=True, dir_okay=False),
    ],
):
    """
    Print a configuration file with every comment turned into a _COMMENT_<n> key.
    """
    from commented_config.core.config_file import read_encoded  # noqa: E402
    from commented_config.errors import CommentedConfigError  # noqa: E402

    try:
        encoded, comment_count = read_encoded(path)
    except CommentedConfigError as e:
        typer.secho(f"✗ Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(encoded, nl=False)
    typer.echo(f"Encoded {comment_count} comments", err=True)
