#!/usr/bin/env python3
"""
Base topic tree loading.

Handles reading and validating topic tree JSON files and holds the process
default base tree used when callers do not pass one explicitly.
"""

import json
from pathlib import Path
from typing import Any, List, Optional, Union

from .models import Topic, TopicConfigError, TopicNode


DEFAULT_TOPIC_TREE_PATH = Path(__file__).parent / "data" / "default_topic_tree.json"

_STRING_FIELDS = ("name", "topic", "extension", "description")

_default_topic_tree: Optional[TopicNode] = None


def load_topic_tree(path: Union[str, Path]) -> TopicNode:
    """Load a base topic tree from a JSON file."""
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise TopicConfigError(f"Could not read topic tree {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise TopicConfigError(f"Invalid JSON in topic tree {path}: {e}") from e
    return parse_topic_tree(data, source=str(path))


def parse_topic_tree(data: Any, source: str = "<topic tree>") -> TopicNode:
    """
    Validate the JSON shape of a topic tree and build its nodes.

    Type errors raise TopicConfigError. Nodes that break the group/leaf shape
    only print a warning, since the flattened views still handle them.
    """
    if not isinstance(data, dict):
        raise TopicConfigError(f"Topic tree root must be an object (in {source})")
    if not isinstance(data.get("children"), list):
        raise TopicConfigError(f"Topic tree root must have a 'children' list (in {source})")
    return _parse_node(data, "root", source)


def _parse_node(data: Any, location: str, source: str) -> TopicNode:
    """Parse a single node and its children."""
    if not isinstance(data, dict):
        raise TopicConfigError(f"Node at {location} must be an object (in {source})")

    for key in _STRING_FIELDS:
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise TopicConfigError(f"Field '{key}' of node at {location} must be a string (in {source})")

    children = data.get("children")
    if children is not None and not isinstance(children, list):
        raise TopicConfigError(f"Field 'children' of node at {location} must be a list (in {source})")

    if children is not None and data.get("topic") and not data.get("extension"):
        print(f"Warning: Node at {location} has both a topic and children (in {source})")
    if children is None and not data.get("topic") and not data.get("extension"):
        print(f"Warning: Node at {location} has no topic, extension or children (in {source})")

    parsed_children = None
    if children is not None:
        parsed_children = [
            _parse_node(child, f"{location}.children[{index}]", source)
            for index, child in enumerate(children)
        ]

    return TopicNode(
        name=data.get("name") or "",
        topic=data.get("topic"),
        extension=data.get("extension"),
        description=data.get("description"),
        children=parsed_children,
    )


def get_default_topic_tree() -> TopicNode:
    """Get the process default base tree, loading the bundled one on first use."""
    global _default_topic_tree
    if _default_topic_tree is None:
        _default_topic_tree = load_topic_tree(DEFAULT_TOPIC_TREE_PATH)
    return _default_topic_tree


def set_default_topic_tree(topic_config: Optional[TopicNode]) -> None:
    """Replace the process default base tree. None restores the bundled one."""
    global _default_topic_tree
    _default_topic_tree = topic_config


def load_topics(path: Union[str, Path]) -> List[Topic]:
    """Load available topics from a JSON list of names or ``{"name": ...}`` objects."""
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise TopicConfigError(f"Could not read topics file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise TopicConfigError(f"Invalid JSON in topics file {path}: {e}") from e

    if not isinstance(data, list):
        raise TopicConfigError(f"Topics file {path} must contain a list")

    topics = []
    for index, item in enumerate(data):
        if isinstance(item, str):
            topics.append(Topic(name=item))
        elif isinstance(item, dict) and isinstance(item.get("name"), str):
            topics.append(Topic(name=item["name"], datatype=item.get("datatype")))
        else:
            raise TopicConfigError(f"Invalid topic entry {index} in {path}: {item!r}")
    return topics

