#!/usr/bin/env python3
"""Update CLI help documentation in README."""

import subprocess
from pathlib import Path

from rich.console import Console

COMMANDS = [
    ([], "cli-help.svg"),
    (["reformat"], "reformat-help.svg"),
    (["encode"], "encode-help.svg"),
    (["decode"], "decode-help.svg"),
]


def update_help_svg(subcommand: list[str], filename: str):
    """Generate SVG from commented-config <subcommand> --help output."""
    result = subprocess.run(
        ["commented-config", *subcommand, "--help"], capture_output=True, text=True, check=True
    )

    # Size the console to the longest line
    lines = result.stdout.split("\n")
    max_width = max(len(line) for line in lines) if lines else 80
    console_width = max(max_width + 5, 80)

    console = Console(record=True, width=console_width)
    console.print(result.stdout)

    docs_dir = Path("docs")
    docs_dir.mkdir(exist_ok=True)

    output_path = docs_dir / filename
    console.save_svg(str(output_path), title=" ".join(["commented-config", *subcommand]))

    print(f"✓ Updated {output_path}")
    return 0


if __name__ == "__main__":
    for subcommand, filename in COMMANDS:
        update_help_svg(subcommand, filename)
