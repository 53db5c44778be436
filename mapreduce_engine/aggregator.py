"""
Groups map output by key.
"""

from collections import defaultdict
from typing import Dict, Hashable, Iterable, List, Tuple


def group(pairs: Iterable[Tuple[Hashable, object]]) -> Dict[Hashable, List[object]]:
    """
    Group (key, value) pairs by key in a single pass.

    Args:
        pairs: Flat sequence of (key, value) tuples

    Returns:
        Dictionary mapping each key to its values, in the order they were seen
    """
    key_groups = defaultdict(list)
    for key, value in pairs:
        key_groups[key].append(value)
    return dict(key_groups)
