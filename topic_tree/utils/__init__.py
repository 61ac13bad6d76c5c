"""Utility modules for topic tree building."""

from .prefix_utils import get_topic_prefixes, is_secondary_source_topic, strip_source_prefix
from .selection_utils import encode_selection, ensure_group_selected, parse_selection

__all__ = [
    "get_topic_prefixes",
    "is_secondary_source_topic",
    "strip_source_prefix",
    "encode_selection",
    "ensure_group_selected",
    "parse_selection",
]
