"""Keep comments in YAML configuration files across load/save cycles."""

from commented_config.core.config_file import load_config, save_config, save_document
from commented_config.document import CommentedConfig
from commented_config.errors import (
    CommentedConfigError,
    ConfigArgumentError,
    ConfigIOError,
    ConfigParseError,
)
from commented_config.utils.comment_codec import count_comments, decode_comments, encode_comments
from commented_config.utils.layout import normalize_layout

__version__ = "0.1.0"

__all__ = [
    "CommentedConfig",
    "CommentedConfigError",
    "ConfigArgumentError",
    "ConfigIOError",
    "ConfigParseError",
    "count_comments",
    "decode_comments",
    "encode_comments",
    "load_config",
    "normalize_layout",
    "save_config",
    "save_document",
]
