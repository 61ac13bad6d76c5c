"""Topic tree building for the 3D panel topic selector."""

from .config import get_default_topic_tree, load_topic_tree, set_default_topic_tree
from .models import (
    BAG1_TOPIC_GROUP_NAME,
    BAG2_TOPIC_GROUP_NAME,
    SECOND_BAG_PREFIX,
    InvalidDisplayModeError,
    SelectedItems,
    SelectionId,
    SelectionKind,
    Topic,
    TopicConfigError,
    TopicConfigResult,
    TopicDisplayMode,
    TopicNode,
    TopicTreeError,
    TopicTreeNode,
)
from .tree import TopicConfigBuilder, build_tree_model, get_topic_config, set_visible_by_hidden_topics
from .utils import ensure_group_selected, parse_selection, strip_source_prefix

__all__ = [
    "get_default_topic_tree",
    "load_topic_tree",
    "set_default_topic_tree",
    "BAG1_TOPIC_GROUP_NAME",
    "BAG2_TOPIC_GROUP_NAME",
    "SECOND_BAG_PREFIX",
    "InvalidDisplayModeError",
    "SelectedItems",
    "SelectionId",
    "SelectionKind",
    "Topic",
    "TopicConfigError",
    "TopicConfigResult",
    "TopicDisplayMode",
    "TopicNode",
    "TopicTreeError",
    "TopicTreeNode",
    "TopicConfigBuilder",
    "build_tree_model",
    "get_topic_config",
    "set_visible_by_hidden_topics",
    "ensure_group_selected",
    "parse_selection",
    "strip_source_prefix",
]
