"""ASCII tree and JSON rendering for topic trees."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from ..models import TopicConfigResult, TopicDisplayMode, TopicTreeNode


def render_ascii(root: TopicTreeNode) -> str:
    """Render the full live tree as an ASCII string."""
    lines = [_format_label(root)]
    for i, child in enumerate(root.children):
        lines.extend(_render_subtree(child, "", i == len(root.children) - 1))

    node_count, topic_count, checked_count = _count_nodes(root)
    lines.append("")
    lines.append(f"{node_count} nodes | {topic_count} topics | {checked_count} checked")
    return "\n".join(lines)


def _format_label(node: TopicTreeNode) -> str:
    """Format the label for a tree node."""
    marker = "[x]" if node.checked else "[ ]"
    label = f"{marker} {node.name}" if node.name else marker
    if node.topic and node.topic != node.name:
        label += f" ({node.topic})"
    elif node.extension:
        label += f" <{node.extension}>"
    if node.topic and not node.visible:
        label += " (hidden)"
    return label


def _render_subtree(
    node: TopicTreeNode, prefix: str, is_last: bool
) -> list[str]:
    """Recursively render a subtree as ASCII lines."""
    connector = "└── " if is_last else "├── "
    lines = [prefix + connector + _format_label(node)]
    extension = "    " if is_last else "│   "
    child_prefix = prefix + extension
    for i, child in enumerate(node.children):
        lines.extend(
            _render_subtree(child, child_prefix, i == len(node.children) - 1)
        )
    return lines


def _count_nodes(node: TopicTreeNode) -> tuple[int, int, int]:
    """Count nodes, topic nodes and checked nodes below and including ``node``."""
    node_count = 1
    topic_count = 1 if node.topic else 0
    checked_count = 1 if node.checked else 0
    for child in node.children:
        child_nodes, child_topics, child_checked = _count_nodes(child)
        node_count += child_nodes
        topic_count += child_topics
        checked_count += child_checked
    return node_count, topic_count, checked_count


def render_json(
    result: TopicConfigResult, tree: TopicTreeNode, display_mode: TopicDisplayMode
) -> str:
    """Render a built topic config and its live tree as a JSON string."""
    output = {
        "generated_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "display_mode": display_mode.value,
        "checked_nodes": result.checked_nodes,
        "topic_config": result.topic_config.to_dict(),
        "tree": tree.to_dict(),
    }
    return json.dumps(output, indent=2)
