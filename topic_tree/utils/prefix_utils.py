#!/usr/bin/env python3
"""
Topic prefix helpers.

Topics of additional bags are namespaced as ``/webviz_bag_<n>/...``. Stripping
that prefix gives the canonical topic used to match the same topic across bags.
"""

import re
from typing import Iterable, List

from ..models import SECOND_BAG_PREFIX


BAG_PREFIX_PATTERN = re.compile(r"^(/webviz_bag_\d+)/")


def strip_source_prefix(topic_names: Iterable[str]) -> List[str]:
    """Remove bag prefixes and return unique names in first-seen order."""
    unique_names = dict.fromkeys(BAG_PREFIX_PATTERN.sub("/", name) for name in topic_names)
    return list(unique_names)


def get_topic_prefixes(topic_names: Iterable[str]) -> List[str]:
    """Get the distinct bag prefixes present in topic names."""
    prefixes = dict.fromkeys(
        match.group(1)
        for match in (BAG_PREFIX_PATTERN.match(name) for name in topic_names)
        if match
    )
    return list(prefixes)


def is_secondary_source_topic(topic_name: str) -> bool:
    """Check if a topic belongs to the second bag."""
    return topic_name.startswith(SECOND_BAG_PREFIX)
