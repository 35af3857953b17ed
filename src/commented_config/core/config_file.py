"""Core logic for loading and saving YAML configuration files with comments."""

import logging
import os
from pathlib import Path

from commented_config.document import CommentedConfig
from commented_config.errors import ConfigArgumentError, ConfigIOError
from commented_config.utils.comment_codec import decode_comments, encode_comments
from commented_config.utils.layout import normalize_layout
from commented_config.utils.yaml_io import dump_document, parse_document

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".tmp"


def ensure_config_file(path: Path) -> None:
    """Create the parent directories and an empty file if ``path`` does not exist yet.

    Raises:
        ConfigArgumentError: If ``path`` is a directory
        ConfigIOError: If the directory or file cannot be created
    """
    if path.is_dir():
        raise ConfigArgumentError(f"Cannot create configuration from directory: {path}")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if not path.exists():
            logger.debug("Creating empty configuration file %s", path)
            path.touch()
    except OSError as e:
        raise ConfigIOError(f"Failed to create configuration file {path}: {e}") from e


def read_encoded(path: Path) -> tuple[str, int]:
    """Read a configuration file and turn its comments into keys.

    A file that does not exist is treated as empty.

    Args:
        path: Configuration file

    Returns:
        Tuple of (encoded text, number of comment lines in the file)

    Raises:
        ConfigIOError: If the file exists but cannot be read
    """
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        return "", 0
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigIOError(f"Failed to read configuration file {path}: {e}") from e

    return encode_comments(text)


def load_config(path: Path | str) -> CommentedConfig:
    """Load a configuration file, keeping its comments as synthetic entries.

    Args:
        path: Configuration file, created (empty) if missing

    Returns:
        The loaded configuration

    Raises:
        ConfigArgumentError: If ``path`` is a directory
        ConfigIOError: If the file cannot be created or read
        ConfigParseError: If the file is not a valid YAML mapping
    """
    path = Path(path)
    ensure_config_file(path)

    encoded, comment_count = read_encoded(path)
    data = parse_document(encoded)

    logger.debug("Loaded %s with %d comments", path, comment_count)
    return CommentedConfig(data=data, comment_count=comment_count, path=path)


def render_config(serialized_text: str, compact_lines: bool = False) -> str:
    """Turn YAML writer output into the text that goes to disk.

    Args:
        serialized_text: Output of the YAML writer, with synthetic comment entries
        compact_lines: If True, no decorative blank lines are inserted

    Returns:
        Text with real comments and normalized blank lines
    """
    return normalize_layout(decode_comments(serialized_text), compact_lines=compact_lines)


def atomic_write(path: Path, content: str) -> None:
    """Replace the content of ``path`` in one step.

    The text is written to a temporary file next to ``path`` which is then
    moved over it. The temporary file is removed whatever fails.

    Raises:
        ConfigIOError: If the file cannot be written
    """
    temp_file = path.with_name(path.name + TEMP_SUFFIX)
    try:
        with open(temp_file, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_file, path)
    except OSError as e:
        raise ConfigIOError(f"Failed to write configuration file {path}: {e}") from e
    finally:
        if temp_file.exists():
            temp_file.unlink()


def save_config(serialized_text: str, path: Path | str, compact_lines: bool = False) -> None:
    """Restore comments in YAML writer output and write it to ``path``.

    Args:
        serialized_text: Output of the YAML writer, with synthetic comment entries
        path: Destination file, overwritten
        compact_lines: If True, lines are only ever separated by a single newline

    Raises:
        ConfigArgumentError: If ``path`` is a directory
        ConfigIOError: If the file cannot be written
    """
    path = Path(path)
    if path.is_dir():
        raise ConfigArgumentError(f"Cannot save configuration to directory: {path}")

    atomic_write(path, render_config(serialized_text, compact_lines=compact_lines))
    logger.debug("Saved %s", path)


def save_document(document: CommentedConfig, path: Path | str | None = None, compact_lines: bool = False) -> None:
    """Serialize a configuration and save it with its comments.

    Args:
        document: Configuration to save
        path: Destination file, defaults to the file the document was loaded from
        compact_lines: If True, lines are only ever separated by a single newline

    Raises:
        ValueError: If no path is given and the document has none
        ConfigIOError: If the file cannot be written
    """
    target = path if path is not None else document.path
    if target is None:
        raise ValueError("No path given and configuration was not loaded from a file")

    save_config(dump_document(document.data), target, compact_lines=compact_lines)
