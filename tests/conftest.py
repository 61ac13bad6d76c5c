"""Shared fixtures for topic tree tests."""

import json

import pytest

from topic_tree.config import set_default_topic_tree
from topic_tree.models import TopicNode
from topic_tree.tree.flatten import _flattened_nodes


@pytest.fixture(autouse=True)
def reset_process_state():
    """Restore the default base tree and flatten cache around each test."""
    yield
    set_default_topic_tree(None)
    _flattened_nodes.clear()


@pytest.fixture
def simple_tree():
    """root > A > x(/x)"""
    return TopicNode(
        name="root",
        children=[TopicNode(name="A", children=[TopicNode(name="x", topic="/x")])],
    )


@pytest.fixture
def rich_tree():
    """A base tree with groups, unnamed topics and extensions."""
    return TopicNode(
        name="root",
        description="Base tree",
        children=[
            TopicNode(
                name="Vehicle",
                children=[
                    TopicNode(name="Pose", topic="/pose"),
                    TopicNode(
                        name="Sensors",
                        children=[TopicNode(topic="/lidar"), TopicNode(name="Radar", topic="/radar")],
                    ),
                ],
            ),
            TopicNode(
                name="Map",
                extension="Map",
                children=[TopicNode(name="Lanes", topic="/lanes")],
            ),
            TopicNode(name="Grid", extension="Grid"),
            TopicNode(name="Empty group", children=[]),
        ],
    )


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document to a temporary file and return its path."""
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
        return path
    return _write
