"""Core logic for rewriting a configuration file in place."""

from pathlib import Path

from commented_config.core.config_file import load_config, save_document


def reformat(path: Path, compact_lines: bool = False) -> int:
    """Load a configuration file and save it back with normalized layout.

    Args:
        path: Configuration file to rewrite
        compact_lines: If True, lines are only ever separated by a single newline

    Returns:
        Number of comment lines the file had
    """
    document = load_config(path)
    save_document(document, compact_lines=compact_lines)
    return document.comment_count
