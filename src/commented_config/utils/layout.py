"""Blank-line layout heuristics for decoded YAML text.

The YAML writer flattens a file into one line per entry. After the comments
have been restored this module puts back the kind of grouping a person would
write by hand:

1. blank lines left over from decoding are dropped,
2. a spacing pass inserts single blank lines between logical groups,
3. a collapse pass makes sure no more than one blank line ever appears in a row.

The spacing decisions are a small table of rules evaluated against a
``FormattingState`` that is folded over the lines.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

from commented_config.utils.comment_codec import split_lines

# A comment indented further than this (after its "#") counts as "deep"
DEEP_COMMENT_OFFSET = 3


class LineKind(Enum):
    """Classification of a single line of text."""

    CONTENT = "content"
    COMMENT = "comment"
    BLANK = "blank"


@dataclass(frozen=True)
class SourceLine:
    """A line of text together with its classification and offsets."""

    text: str
    kind: LineKind
    indent: int
    comment_offset: int = -1

    @property
    def is_list_item(self) -> bool:
        return self.kind is LineKind.CONTENT and self.text.lstrip().startswith("-")


@dataclass(frozen=True)
class FormattingState:
    """What the spacing pass remembers about the previous line."""

    last_had_content: bool = False
    last_comment_offset: int = -1
    last_indent: int = -1
    force_compact: bool = False


def classify_line(line: str) -> SourceLine:
    """
    Classify a line as content, comment or blank.

    For comments the offset of the text following the ``#`` is recorded too,
    so ``"#     nested"`` has a comment offset of 5.

    Args:
        line: One line without its line terminator

    Returns:
        The classified line
    """
    stripped = line.strip()
    if not stripped:
        return SourceLine(line, LineKind.BLANK, 0)

    indent = len(line) - len(line.lstrip())
    if stripped.startswith("#"):
        after_hash = stripped[1:]
        offset = len(after_hash) - len(after_hash.lstrip()) if after_hash.strip() else 0
        return SourceLine(line, LineKind.COMMENT, indent, offset)

    return SourceLine(line, LineKind.CONTENT, indent)


def _indent_changed(state: FormattingState, line: SourceLine) -> bool:
    return state.last_indent != -1 and line.indent != state.last_indent


def _back_to_shallow_comment(state: FormattingState, line: SourceLine) -> bool:
    return (
        line.comment_offset != -1
        and line.comment_offset <= DEEP_COMMENT_OFFSET
        and state.last_comment_offset > DEEP_COMMENT_OFFSET
    )


def _consecutive_content(state: FormattingState, line: SourceLine) -> bool:
    return state.last_had_content and line.kind is LineKind.CONTENT


def _comment_after_content(state: FormattingState, line: SourceLine) -> bool:
    return state.last_had_content and line.kind is LineKind.COMMENT


SPACING_RULES: tuple[Callable[[FormattingState, SourceLine], bool], ...] = (
    _indent_changed,
    _back_to_shallow_comment,
    _consecutive_content,
    _comment_after_content,
)


def needs_blank_line(state: FormattingState, line: SourceLine, compact_lines: bool = False) -> bool:
    """
    Decide whether a blank line goes in front of ``line``.

    Args:
        state: State left behind by the previous line
        line: The line about to be written
        compact_lines: Disable all decorative spacing

    Returns:
        True if a blank line should be inserted
    """
    if compact_lines or state.force_compact:
        return False
    # Never split a value from whatever follows it unless that is a comment
    if state.last_had_content and line.kind is not LineKind.COMMENT:
        return False
    return any(rule(state, line) for rule in SPACING_RULES)


def advance(state: FormattingState, line: SourceLine) -> FormattingState:
    """Return the state after ``line`` has been written."""
    return FormattingState(
        last_had_content=line.kind is LineKind.CONTENT,
        last_comment_offset=line.comment_offset,
        last_indent=line.indent,
        force_compact=False,
    )


def drop_blank_lines(text: str) -> str:
    """Remove every blank line from ``text``."""
    return "".join(f"{line}\n" for line in split_lines(text) if line.strip())


def apply_spacing(text: str, compact_lines: bool = False) -> str:
    """
    Insert blank lines between logical groups.

    Args:
        text: Text to space out
        compact_lines: If True, no blank lines are inserted

    Returns:
        The spaced text, every line terminated by a newline
    """
    output = []
    state = FormattingState()
    for raw in split_lines(text):
        line = classify_line(raw)
        # List items are one-shot compact
        state = replace(state, force_compact=line.is_list_item)
        if needs_blank_line(state, line, compact_lines):
            output.append("\n")
        output.append(f"{raw}\n")
        state = advance(state, line)
    return "".join(output)


def collapse_blank_lines(text: str) -> str:
    """
    Empty whitespace-only lines and allow at most one blank line in a row.

    Args:
        text: Text to collapse

    Returns:
        The collapsed text
    """
    output = []
    consecutive_blank = 0
    for line in split_lines(text):
        if not line.strip():
            consecutive_blank += 1
            if consecutive_blank < 2:
                output.append("\n")
        else:
            consecutive_blank = 0
            output.append(f"{line}\n")
    return "".join(output)


def normalize_layout(text: str, compact_lines: bool = False) -> str:
    """
    Give decoded YAML a human-looking blank-line layout.

    Args:
        text: Output of ``decode_comments``
        compact_lines: If True, lines are only ever separated by a single newline

    Returns:
        Normalized text
    """
    spaced = apply_spacing(drop_blank_lines(text), compact_lines=compact_lines)
    return collapse_blank_lines(spaced)
