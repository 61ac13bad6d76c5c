"""Topic config building for the topic selector display modes."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence

from ..config import get_default_topic_tree
from ..models import (
    BAG1_TOPIC_GROUP_NAME,
    BAG2_TOPIC_GROUP_NAME,
    SECOND_BAG_PREFIX,
    TF_NODE_DESCRIPTION,
    TF_NODE_NAME,
    SelectionId,
    Topic,
    TopicConfigResult,
    TopicDisplayMode,
    TopicNode,
)
from ..utils.prefix_utils import get_topic_prefixes, strip_source_prefix
from ..utils.selection_utils import ensure_group_selected, parse_selection
from .flatten import get_flattened_tree_nodes


class TopicConfigBuilder:
    """Builds the topic config shown by the topic selector from a base tree."""

    def __init__(self, topic_config: TopicNode):
        self.topic_config = topic_config

    def build(
        self,
        checked_nodes: list[str],
        topic_display_mode: TopicDisplayMode | str,
        topics: Iterable[Topic],
    ) -> TopicConfigResult:
        """
        Build the topic config for a display mode.

        Flattened modes list leaf nodes by their path name. When topics of a
        second bag are present the list is split into one group per bag, and
        the bag group names are added to the returned checked nodes. Groups are
        checked for every bag with available topics, whether or not any of its
        topics is checked.

        Returned nodes are copies, so editing a result leaves later builds alone.
        """
        mode = TopicDisplayMode.from_value(topic_display_mode)
        if not mode.is_flattened:
            return TopicConfigResult(topic_config=self.topic_config, checked_nodes=checked_nodes)

        topics = list(topics)
        available_topic_names = list(dict.fromkeys(topic.name for topic in topics))
        has_multi_bag = len(get_topic_prefixes(available_topic_names)) > 0
        selected = parse_selection(checked_nodes)

        available_set = set(available_topic_names)
        selected_and_available_topics = [name for name in selected.topic_order if name in available_set]
        # without prefixes, a topic checked in one bag is listed for the other bag too
        selected_available_without_prefix = strip_source_prefix(selected_and_available_topics)
        available_without_prefix = strip_source_prefix(available_topic_names)

        nodes = self._filter_nodes(
            get_flattened_tree_nodes(self.topic_config),
            mode,
            set(selected_available_without_prefix),
            set(available_without_prefix),
            selected.extensions,
        )

        uncategorized_source = (
            selected_available_without_prefix if mode is TopicDisplayMode.SHOW_SELECTED else available_without_prefix
        )
        nodes.extend(self._uncategorized_nodes(nodes, uncategorized_source))

        if self._show_tf_node(mode, topics, checked_nodes):
            nodes.append(TopicNode(name=TF_NODE_NAME, description=TF_NODE_DESCRIPTION, children=[]))

        if not has_multi_bag:
            return TopicConfigResult(
                topic_config=replace(self.topic_config, children=nodes),
                checked_nodes=checked_nodes,
            )

        topic_config = TopicNode(
            name="root",
            children=[
                TopicNode(name=BAG1_TOPIC_GROUP_NAME, children=nodes),
                TopicNode(
                    name=BAG2_TOPIC_GROUP_NAME,
                    children=[
                        replace(node, topic=f"{SECOND_BAG_PREFIX}{node.topic}")
                        for node in nodes
                        if node.topic
                    ],
                ),
            ],
        )
        return TopicConfigResult(
            topic_config=topic_config,
            checked_nodes=ensure_group_selected(available_topic_names, checked_nodes),
        )

    @staticmethod
    def _filter_nodes(
        flattened_nodes: Sequence[TopicNode],
        mode: TopicDisplayMode,
        selected_topics: set[str],
        available_topics: set[str],
        selected_extensions: set[str],
    ) -> list[TopicNode]:
        """Filter flattened nodes for a display mode. Returns copies of the cached nodes."""
        if mode is TopicDisplayMode.SHOW_SELECTED:
            filtered = []
            for node in flattened_nodes:
                if node.topic:
                    if node.topic in selected_topics:
                        filtered.append(replace(node))
                elif node.extension and node.extension in selected_extensions:
                    filtered.append(replace(node))
            return filtered
        if mode is TopicDisplayMode.SHOW_AVAILABLE:
            return [replace(node) for node in flattened_nodes if not node.topic or node.topic in available_topics]
        return [replace(node) for node in flattened_nodes]

    @staticmethod
    def _uncategorized_nodes(nodes: list[TopicNode], topic_names: list[str]) -> list[TopicNode]:
        """Create nodes for topics that no node of the tree covers."""
        covered_topics = {node.topic for node in nodes if node.topic}
        return [TopicNode(name=topic, topic=topic) for topic in topic_names if topic not in covered_topics]

    @staticmethod
    def _show_tf_node(mode: TopicDisplayMode, topics: list[Topic], checked_nodes: list[str]) -> bool:
        """The TF node has no topic, so its visibility depends only on the mode."""
        if mode is TopicDisplayMode.SHOW_ALL:
            return True
        if mode is TopicDisplayMode.SHOW_AVAILABLE:
            return len(topics) > 0
        if mode is TopicDisplayMode.SHOW_SELECTED:
            return SelectionId.group(TF_NODE_NAME).encode() in checked_nodes
        return False


def get_topic_config(
    checked_nodes: list[str],
    topic_display_mode: TopicDisplayMode | str,
    topics: Iterable[Topic],
    topic_config: TopicNode | None = None,
) -> TopicConfigResult:
    """Build the topic config, using the default base tree unless one is given."""
    builder = TopicConfigBuilder(topic_config if topic_config is not None else get_default_topic_tree())
    return builder.build(checked_nodes, topic_display_mode, topics)
