"""Lightweight CLI for commented-config."""

import typer

app = typer.Typer(
    name="commented-config",
    help="Load and save YAML configuration files without losing their comments",
    no_args_is_help=True,
)


@app.callback()
def callback():
    """commented-config: comment-preserving round trips for YAML configuration files."""
    pass


# Register commands
from commented_config.cli.decode import decode  # noqa: E402
from commented_config.cli.encode import encode  # noqa: E402
from commented_config.cli.reformat import reformat  # noqa: E402

app.command(name="decode")(decode)
app.command(name="encode")(encode)
app.command(name="reformat")(reformat)

__all__ = ["app"]
