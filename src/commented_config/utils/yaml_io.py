"""Parse and serialize configuration mappings with PyYAML."""

from typing import Any

import yaml

from commented_config.errors import ConfigParseError

# Never fold long scalars, the comment decoder works line by line
DUMP_WIDTH = float("inf")
DUMP_INDENT = 2


def parse_document(text: str) -> dict[str, Any]:
    """
    Parse encoded configuration text into a mapping.

    Args:
        text: YAML text with comments already turned into keys

    Returns:
        The parsed mapping (empty dict for an empty document)

    Raises:
        ConfigParseError: If the text is not valid YAML or its root is not a mapping
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid configuration: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(f"Configuration root must be a mapping, got {type(data).__name__}")
    return data


def dump_document(data: dict[str, Any]) -> str:
    """
    Serialize a mapping to YAML text, keeping key order.

    Args:
        data: Mapping to serialize (synthetic comment keys included)

    Returns:
        YAML string, empty for an empty mapping
    """
    if not data:
        return ""

    return yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=False,
        indent=DUMP_INDENT,
        allow_unicode=True,
        width=DUMP_WIDTH,
    )
