#!/usr/bin/env python3
"""
Main entry point for topic tree building.

Usage:
    topic-tree --topic /foo --topic /webviz_bag_2/foo --mode selected --checked t:/foo
    python3 -m topic_tree.main --tree topic_tree.json --format json
"""

import argparse
import sys
from typing import List, Optional

from .config import get_default_topic_tree, load_topic_tree, load_topics
from .models import Topic, TopicDisplayMode, TopicTreeError
from .tree import build_tree_model, get_topic_config, render_ascii, render_json, set_visible_by_hidden_topics


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Build the topic selector tree for a display mode and the loaded topics."
    )
    parser.add_argument('--tree', help='Base topic tree JSON file (default: bundled tree)')
    parser.add_argument('--topic', action='append', default=[], dest='topics',
                        help='Available topic name (repeatable)')
    parser.add_argument('--topics-file', help='JSON list of topic names or {"name": ...} objects')
    parser.add_argument('--checked', action='append', default=[],
                        help='Checked node id such as t:/foo, x:Grid or name:Bag (repeatable)')
    parser.add_argument('--hidden', action='append', default=[],
                        help='Hidden topic name (repeatable)')
    parser.add_argument('--mode', default='all',
                        help='Display mode: tree, all, selected or available (default: all)')
    parser.add_argument('--format', choices=['ascii', 'json'], default='ascii', help='Output format')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Build the topic tree and print it."""
    args = parse_args(argv)

    try:
        topic_config = load_topic_tree(args.tree) if args.tree else get_default_topic_tree()
        topics = [Topic(name=name) for name in args.topics]
        if args.topics_file:
            topics.extend(load_topics(args.topics_file))
        mode = TopicDisplayMode.from_value(args.mode)
    except TopicTreeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = get_topic_config(args.checked, mode, topics, topic_config=topic_config)
    tree = build_tree_model(result.topic_config, result.checked_nodes)
    set_visible_by_hidden_topics(tree, set(args.hidden))

    if args.format == "json":
        print(render_json(result, tree, mode))
    else:
        print(render_ascii(tree))
    return 0


if __name__ == "__main__":
    sys.exit(main())
