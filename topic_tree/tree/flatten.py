"""Flattening of nested topic tree configs."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator

from ..models import TopicNode


def flatten_item(item: TopicNode, name: str) -> Iterator[TopicNode]:
    """Yield leaf and extension nodes of a subtree depth-first, named by their path."""
    # extension nodes are emitted without their children, and their children are still walked
    if item.children is None or item.extension:
        yield replace(item, name=name, children=None)
    for sub_item in item.children or []:
        if not sub_item.name and sub_item.topic:
            sub_item_name = f"{name} {sub_item.topic}"
        else:
            sub_item_name = f"{name} / {sub_item.name}"
        yield from flatten_item(sub_item, sub_item_name)


class FlattenedNodeCache:
    """Single-entry cache of flattened nodes, keyed by identity of the config."""

    def __init__(self):
        self._topic_config: TopicNode | None = None
        self._nodes: tuple[TopicNode, ...] = ()

    def get(self, topic_config: TopicNode) -> tuple[TopicNode, ...]:
        """Get the flattened nodes of a config, computing them on first use."""
        if topic_config is not self._topic_config:
            self._nodes = tuple(
                node
                for item in topic_config.children or []
                for node in flatten_item(item, item.name or "")
            )
            self._topic_config = topic_config
        return self._nodes

    def clear(self) -> None:
        self._topic_config = None
        self._nodes = ()


_flattened_nodes = FlattenedNodeCache()


def get_flattened_tree_nodes(topic_config: TopicNode) -> tuple[TopicNode, ...]:
    """Flatten the top-level children of a base tree. Cached for the process."""
    return _flattened_nodes.get(topic_config)
