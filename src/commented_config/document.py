"""In-memory representation of a loaded configuration file."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from commented_config.utils.comment_codec import COMMENT_KEY_PREFIX


def is_comment_key(key: Any) -> bool:
    """Return True for synthetic ``_COMMENT_<n>`` keys."""
    return isinstance(key, str) and key.startswith(COMMENT_KEY_PREFIX) and key[len(COMMENT_KEY_PREFIX) :].isdigit()


def _strip_comment_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _strip_comment_keys(v) for k, v in value.items() if not is_comment_key(k)}
    if isinstance(value, list):
        return [_strip_comment_keys(item) for item in value]
    return value


@dataclass
class CommentedConfig:
    """
    A parsed configuration together with the comments it was loaded with.

    Comments live in ``data`` as synthetic ``_COMMENT_<n>`` entries so the YAML
    writer keeps them in place. ``comment_count`` is the number of comment
    lines the file had when it was loaded and is the index the next added
    comment receives.
    """

    data: dict[str, Any] = field(default_factory=dict)
    comment_count: int = 0
    path: Path | None = None

    def _parent_of(self, key: str, create: bool = False) -> tuple[dict[str, Any] | None, str]:
        parts = key.split(".")
        node = self.data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                if not create:
                    return None, parts[-1]
                child = {}
                node[part] = child
            node = child
        return node, parts[-1]

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a value by dotted key, e.g. ``"server.port"``.

        Comment entries are removed from returned mappings.
        """
        parent, name = self._parent_of(key)
        if parent is None or name not in parent:
            return default
        return _strip_comment_keys(parent[name])

    def set(self, key: str, value: Any) -> None:
        """Set a value by dotted key, creating intermediate mappings as needed."""
        parent, name = self._parent_of(key, create=True)
        parent[name] = value

    def keys(self) -> list[str]:
        """Top-level keys, without comment entries."""
        return [k for k in self.data if not is_comment_key(k)]

    def to_dict(self) -> dict[str, Any]:
        """A copy of the configuration values without any comment entries."""
        return _strip_comment_keys(self.data)

    def add_comment(self, text: str, key: str | None = None) -> str:
        """
        Append a comment, either at the top level or inside the mapping at ``key``.

        Args:
            text: Comment text without the leading ``#``, written as ``# <text>``
            key: Dotted key of the mapping that should hold the comment

        Returns:
            The synthetic key the comment was stored under

        Raises:
            ValueError: If ``text`` spans more than one line
        """
        if "\n" in text or "\r" in text:
            raise ValueError("A comment must be a single line, add one comment per line")

        if key is None:
            target = self.data
        else:
            parent, name = self._parent_of(key, create=True)
            if parent.get(name) is None:
                parent[name] = {}
            target = parent[name]
            if not isinstance(target, dict):
                raise TypeError(f"Cannot add a comment to non-mapping value at '{key}'")

        comment_key = f"{COMMENT_KEY_PREFIX}{self.comment_count}"
        target[comment_key] = f" {text}"
        self.comment_count += 1
        return comment_key

    def save(self, compact_lines: bool = False) -> None:
        """Write the configuration back to the file it was loaded from."""
        from commented_config.core.config_file import save_document  # noqa: E402

        save_document(self, compact_lines=compact_lines)

    def reload(self) -> None:
        """Re-read the configuration from disk, discarding unsaved changes."""
        from commented_config.core.config_file import load_config  # noqa: E402

        if self.path is None:
            raise ValueError("Configuration has no path to reload from")
        fresh = load_config(self.path)
        self.data = fresh.data
        self.comment_count = fresh.comment_count
