#!/usr/bin/env python3
"""
Data models for topic tree building.

Contains the config node, live tree node, selection and display mode types
used throughout the package, plus the shared constants for multi-bag trees.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set


SECOND_BAG_PREFIX = "/webviz_bag_2"
BAG1_TOPIC_GROUP_NAME = "Bag"
BAG2_TOPIC_GROUP_NAME = f"Bag 2 {SECOND_BAG_PREFIX}"

TF_NODE_NAME = "TF"
TF_NODE_DESCRIPTION = "Visualize relationships between /tf frames."


class TopicTreeError(Exception):
    """Base error for the topic tree package."""


class TopicConfigError(TopicTreeError):
    """Raised when a base topic tree cannot be read or is malformed."""


class InvalidDisplayModeError(TopicTreeError, ValueError):
    """Raised for a display mode that is not one of TopicDisplayMode."""


class TopicDisplayMode(Enum):
    """Display modes of the topic selector."""
    SHOW_TREE = "SHOW_TREE"
    SHOW_ALL = "SHOW_ALL"
    SHOW_SELECTED = "SHOW_SELECTED"
    SHOW_AVAILABLE = "SHOW_AVAILABLE"

    @property
    def label(self) -> str:
        return _DISPLAY_MODE_LABELS[self]

    @property
    def is_flattened(self) -> bool:
        """Every mode except the tree mode shows a flat list."""
        return self is not TopicDisplayMode.SHOW_TREE

    @classmethod
    def from_value(cls, value: Any) -> "TopicDisplayMode":
        """Resolve a member, its value, its name or its label (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().upper()
            for mode in cls:
                if wanted in (mode.value, mode.label.upper()):
                    return mode
        raise InvalidDisplayModeError(f"Unknown topic display mode: {value!r}")


_DISPLAY_MODE_LABELS = {
    TopicDisplayMode.SHOW_TREE: "Tree",
    TopicDisplayMode.SHOW_ALL: "All",
    TopicDisplayMode.SHOW_SELECTED: "Selected",
    TopicDisplayMode.SHOW_AVAILABLE: "Available",
}


class SelectionKind(Enum):
    """Tag prefixes of checked node ids."""
    TOPIC = "t:"
    EXTENSION = "x:"
    GROUP = "name:"


@dataclass(frozen=True)
class SelectionId:
    """A checked node id, e.g. ``t:/foo``, ``x:Grid`` or ``name:Bag``."""
    kind: SelectionKind
    value: str

    def encode(self) -> str:
        return f"{self.kind.value}{self.value}"

    @classmethod
    def parse(cls, raw: str) -> Optional["SelectionId"]:
        """Parse a wire id; unrecognized tags yield None."""
        for kind in SelectionKind:
            if raw.startswith(kind.value):
                return cls(kind=kind, value=raw[len(kind.value):])
        return None

    @classmethod
    def topic(cls, topic: str) -> "SelectionId":
        return cls(SelectionKind.TOPIC, topic)

    @classmethod
    def extension(cls, extension: str) -> "SelectionId":
        return cls(SelectionKind.EXTENSION, extension)

    @classmethod
    def group(cls, name: str) -> "SelectionId":
        return cls(SelectionKind.GROUP, name)


@dataclass
class SelectedItems:
    """Topics and extensions extracted from checked node ids.

    ``topic_order`` lists the checked topics once each, in checked order.
    """
    topics: Set[str] = field(default_factory=set)
    extensions: Set[str] = field(default_factory=set)
    topic_order: List[str] = field(default_factory=list)

    def add_topic(self, topic: str) -> None:
        if topic not in self.topics:
            self.topics.add(topic)
            self.topic_order.append(topic)


@dataclass(frozen=True)
class Topic:
    """A topic reported by a data source player."""
    name: str
    datatype: Optional[str] = None


@dataclass
class TopicNode:
    """A node of a topic tree config.

    Group nodes have ``children`` and no topic or extension; leaves have a
    topic and/or an extension. Extension nodes may still carry children in a
    hand-authored base tree.
    """
    name: str = ""
    topic: Optional[str] = None
    extension: Optional[str] = None
    description: Optional[str] = None
    children: Optional[List["TopicNode"]] = None

    def to_dict(self) -> Dict:
        """Convert node to dictionary for JSON serialization."""
        result: Dict[str, Any] = {"name": self.name}
        if self.topic is not None:
            result["topic"] = self.topic
        if self.extension is not None:
            result["extension"] = self.extension
        if self.description is not None:
            result["description"] = self.description
        if self.children is not None:
            result["children"] = [child.to_dict() for child in self.children]
        return result


@dataclass
class TopicConfigResult:
    """Output of building a topic config."""
    topic_config: TopicNode
    checked_nodes: List[str]


@dataclass
class TopicTreeNode:
    """A node of the live tree model rendered by the topic selector."""
    id: str
    name: str
    topic: Optional[str] = None
    extension: Optional[str] = None
    description: Optional[str] = None
    children: List["TopicTreeNode"] = field(default_factory=list)
    checked: bool = False
    visible: bool = True

    def to_dict(self) -> Dict:
        """Convert node to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "topic": self.topic,
            "extension": self.extension,
            "description": self.description,
            "checked": self.checked,
            "visible": self.visible,
            "children": [child.to_dict() for child in self.children],
        }
