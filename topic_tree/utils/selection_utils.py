#!/usr/bin/env python3
"""
Checked node id helpers.

Checked nodes are stored as tagged strings: ``t:<topic>``, ``x:<extension>``
and ``name:<group name>``.
"""

from typing import Iterable, List

from ..models import (
    BAG1_TOPIC_GROUP_NAME,
    BAG2_TOPIC_GROUP_NAME,
    SelectedItems,
    SelectionId,
    SelectionKind,
)
from .prefix_utils import is_secondary_source_topic


def parse_selection(checked_nodes: Iterable[str]) -> SelectedItems:
    """Collect checked topics and extensions. Group ids and unknown tags are ignored."""
    selected = SelectedItems()
    for raw in checked_nodes:
        selection_id = SelectionId.parse(raw)
        if selection_id is None:
            continue
        if selection_id.kind is SelectionKind.TOPIC:
            selected.add_topic(selection_id.value)
        elif selection_id.kind is SelectionKind.EXTENSION:
            selected.extensions.add(selection_id.value)
    return selected


def encode_selection(selected: SelectedItems) -> List[str]:
    """Re-tag selected topics and extensions as checked node ids."""
    topic_ids = [SelectionId.topic(topic).encode() for topic in sorted(selected.topics)]
    extension_ids = [SelectionId.extension(ext).encode() for ext in sorted(selected.extensions)]
    return topic_ids + extension_ids


def ensure_group_selected(topic_names: Iterable[str], checked_nodes: List[str]) -> List[str]:
    """
    Check the bag group names needed by the given topics.

    Returns ``checked_nodes`` itself when no group id had to be added, so
    callers can skip downstream updates by identity.
    """
    topic_names = list(topic_names)
    has_bag1_topics = any(not is_secondary_source_topic(topic) for topic in topic_names)
    has_bag2_topics = any(is_secondary_source_topic(topic) for topic in topic_names)

    new_checked_nodes = checked_nodes
    bag1_id = SelectionId.group(BAG1_TOPIC_GROUP_NAME).encode()
    bag2_id = SelectionId.group(BAG2_TOPIC_GROUP_NAME).encode()
    if has_bag1_topics and bag1_id not in checked_nodes:
        new_checked_nodes = [*new_checked_nodes, bag1_id]
    if has_bag2_topics and bag2_id not in checked_nodes:
        new_checked_nodes = [*new_checked_nodes, bag2_id]
    return new_checked_nodes
