"""
Tests for base topic tree and topics file loading.
"""

import pytest

from topic_tree.config import (
    DEFAULT_TOPIC_TREE_PATH,
    get_default_topic_tree,
    load_topic_tree,
    load_topics,
    parse_topic_tree,
)
from topic_tree.models import Topic, TopicConfigError, TopicNode


class TestLoadTopicTree:
    """Test suite for loading base topic trees."""

    def test_load_valid_tree(self, write_json):
        """A well-formed file becomes a TopicNode tree."""
        path = write_json("tree.json", {
            "name": "root",
            "children": [
                {"name": "A", "children": [{"name": "x", "topic": "/x"}]},
                {"name": "Grid", "extension": "Grid", "description": "Ground grid"},
            ],
        })
        tree = load_topic_tree(path)
        assert tree == TopicNode(name="root", children=[
            TopicNode(name="A", children=[TopicNode(name="x", topic="/x")]),
            TopicNode(name="Grid", extension="Grid", description="Ground grid"),
        ])

    def test_round_trip_through_dict(self, rich_tree):
        """to_dict output parses back to the same tree."""
        assert parse_topic_tree(rich_tree.to_dict()) == rich_tree

    def test_missing_file(self, tmp_path):
        with pytest.raises(TopicConfigError, match="Could not read"):
            load_topic_tree(tmp_path / "missing.json")

    def test_invalid_json(self, write_json):
        path = write_json("tree.json", "{not json")
        with pytest.raises(TopicConfigError, match="Invalid JSON"):
            load_topic_tree(path)

    @pytest.mark.parametrize("data, message", [
        ([], "root must be an object"),
        ({"name": "root"}, "'children' list"),
        ({"children": ["oops"]}, r"root.children\[0\] must be an object"),
        ({"children": [{"name": 3, "topic": "/x"}]}, "Field 'name'"),
        ({"children": [{"name": "A", "children": {}}]}, "Field 'children'"),
    ])
    def test_structural_errors(self, data, message):
        """Type errors in the tree raise with the node location."""
        with pytest.raises(TopicConfigError, match=message):
            parse_topic_tree(data)

    def test_shape_warnings(self, capsys):
        """Nodes mixing topic and children, or empty leaves, only warn."""
        tree = parse_topic_tree({"children": [
            {"name": "A", "topic": "/a", "children": []},
            {"name": "B"},
        ]}, source="tree.json")
        output = capsys.readouterr().out
        assert "Warning: Node at root.children[0] has both a topic and children (in tree.json)" in output
        assert "Warning: Node at root.children[1] has no topic, extension or children (in tree.json)" in output
        assert len(tree.children) == 2

    def test_bundled_default_tree(self, capsys):
        """The bundled tree loads cleanly and is cached."""
        assert DEFAULT_TOPIC_TREE_PATH.exists()
        tree = get_default_topic_tree()
        assert tree is get_default_topic_tree()
        assert tree.children
        assert "Warning" not in capsys.readouterr().out


class TestLoadTopics:
    """Test suite for loading available topics."""

    def test_names_and_objects(self, write_json):
        path = write_json("topics.json", ["/a", {"name": "/b", "datatype": "std_msgs/String"}])
        assert load_topics(path) == [Topic(name="/a"), Topic(name="/b", datatype="std_msgs/String")]

    def test_not_a_list(self, write_json):
        with pytest.raises(TopicConfigError, match="must contain a list"):
            load_topics(write_json("topics.json", {"name": "/a"}))

    def test_invalid_entry(self, write_json):
        with pytest.raises(TopicConfigError, match="Invalid topic entry 1"):
            load_topics(write_json("topics.json", ["/a", 5]))
