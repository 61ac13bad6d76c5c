"""Live tree model building and topic visibility."""

from __future__ import annotations

from typing import Collection, Iterable

from ..models import SelectionId, TopicNode, TopicTreeNode


def node_id(node: TopicNode) -> str:
    """Get the checked node id of a config node."""
    if node.topic:
        return SelectionId.topic(node.topic).encode()
    if node.extension:
        return SelectionId.extension(node.extension).encode()
    return SelectionId.group(node.name).encode()


def build_tree_model(topic_config: TopicNode, checked_nodes: Iterable[str] = ()) -> TopicTreeNode:
    """Build the live tree model for a topic config."""
    return _build_node(topic_config, set(checked_nodes))


def _build_node(node: TopicNode, checked_nodes: set[str]) -> TopicTreeNode:
    tree_node_id = node_id(node)
    return TopicTreeNode(
        id=tree_node_id,
        name=node.name,
        topic=node.topic,
        extension=node.extension,
        description=node.description,
        children=[_build_node(child, checked_nodes) for child in node.children or []],
        checked=tree_node_id in checked_nodes,
    )


def set_visible_by_hidden_topics(tree: TopicTreeNode, hidden_topics: Collection[str]) -> None:
    """
    Set ``visible`` on every topic node below ``tree`` from the hidden topics.

    Nodes without a topic keep their current visibility. The tree is updated
    in place, so the caller must not mutate it concurrently.
    """
    for child in tree.children:
        if child.topic:
            child.visible = child.topic not in hidden_topics
        # groups of both bags nest their topic nodes one level down
        set_visible_by_hidden_topics(child, hidden_topics)


def get_hidden_topics(tree: TopicTreeNode) -> list[str]:
    """List topics of invisible nodes below ``tree`` in depth-first order."""
    hidden = []
    for child in tree.children:
        if child.topic and not child.visible:
            hidden.append(child.topic)
        hidden.extend(get_hidden_topics(child))
    return hidden
