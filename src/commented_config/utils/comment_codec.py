"""Utilities for turning YAML comment lines into keys and back again."""

import logging
import re

import yaml

logger = logging.getLogger(__name__)

COMMENT_KEY_PREFIX = "_COMMENT_"

# indent, index, value written after the key
COMMENT_LINE_RE = re.compile(r"^(\s*)" + COMMENT_KEY_PREFIX + r"(\d+):\s?(.*)$")


def split_lines(text: str) -> list[str]:
    """
    Split text on ``\\n``, ``\\r`` and ``\\r\\n`` only.

    Form feeds, ``\\x85``, ``\\u2028`` and the like stay part of their line.
    """
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def is_comment_line(line: str) -> bool:
    """Return True if the stripped line is a ``#`` comment."""
    return line.strip().startswith("#")


def count_comments(text: str) -> int:
    """Count the comment lines in raw file text."""
    return sum(1 for line in split_lines(text) if is_comment_line(line))


def encode_comment_line(line: str, index: int) -> str:
    """
    Rewrite a single comment line as a synthetic YAML entry.

    The indent is kept, the first ``#`` is dropped and single quotes are doubled
    so the text survives as a single-quoted scalar.

    Args:
        line: Raw comment line, e.g. ``"  # it's here"``
        index: Comment index used as the key suffix

    Returns:
        The entry, e.g. ``"  _COMMENT_3: ' it''s here'"``
    """
    body = line.lstrip()
    indent = line[: len(line) - len(body)]
    escaped = body[1:].replace("'", "''")
    return f"{indent}{COMMENT_KEY_PREFIX}{index}: '{escaped}'"


def encode_comments(text: str) -> tuple[str, int]:
    """
    Make raw file text safe for a comment-unaware YAML parser.

    Every comment line becomes a ``_COMMENT_<n>`` entry, numbered from 0 in
    file order. All other lines are kept as they are.

    Args:
        text: Raw file content

    Returns:
        Tuple of (encoded text, number of comments encoded)
    """
    encoded = []
    index = 0
    for line in split_lines(text):
        if is_comment_line(line):
            encoded.append(encode_comment_line(line, index))
            index += 1
        else:
            encoded.append(line)

    logger.debug("Encoded %d comment lines", index)
    if not encoded:
        return "", index
    return "\n".join(encoded) + "\n", index


def _read_scalar(value: str) -> str:
    """Read the comment text back from the scalar the writer emitted."""
    value = value.rstrip()
    if len(value) >= 2 and value.startswith("'") and value.endswith("'"):
        return value[1:-1].replace("''", "'")
    if value.startswith('"'):
        loaded = yaml.safe_load(value)
        return "" if loaded is None else str(loaded)
    if value.startswith("'"):
        # Unterminated quote from the writer: fold it into a single space
        return " " + value[1:]
    return value


def decode_comment_line(line: str) -> str | None:
    """
    Turn a synthetic entry back into a comment line.

    Args:
        line: A line of serialized YAML

    Returns:
        The restored comment line, or None if the line is not a synthetic entry
    """
    match = COMMENT_LINE_RE.match(line)
    if match is None:
        return None
    indent, _, value = match.groups()
    return f"{indent}#{_read_scalar(value)}"


def decode_comments(text: str) -> str:
    """
    Restore real comment lines in text produced by the YAML writer.

    A blank line is placed before each comment that directly follows a
    non-comment line.

    Args:
        text: Serialized YAML containing ``_COMMENT_<n>`` entries

    Returns:
        Text with ``#`` comments
    """
    decoded = []
    last_line_was_content = False
    restored = 0
    for line in split_lines(text):
        comment = decode_comment_line(line)
        if comment is None:
            decoded.append(line)
            last_line_was_content = True
            continue

        if last_line_was_content:
            decoded.append("")
        decoded.append(comment)
        last_line_was_content = False
        restored += 1

    logger.debug("Decoded %d comment lines", restored)
    if not decoded:
        return ""
    return "\n".join(decoded) + "\n"
