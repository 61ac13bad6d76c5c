"""Topic tree flattening, building and rendering."""

from .builder import TopicConfigBuilder, get_topic_config
from .flatten import FlattenedNodeCache, flatten_item, get_flattened_tree_nodes
from .renderer import render_ascii, render_json
from .visibility import build_tree_model, get_hidden_topics, node_id, set_visible_by_hidden_topics

__all__ = [
    "TopicConfigBuilder",
    "get_topic_config",
    "FlattenedNodeCache",
    "flatten_item",
    "get_flattened_tree_nodes",
    "render_ascii",
    "render_json",
    "build_tree_model",
    "get_hidden_topics",
    "node_id",
    "set_visible_by_hidden_topics",
]
