from __future__ import annotations

"""
Found-Paths Tree Aggregator.

Consumes the flat stream of found file paths and incrementally builds an
ordered forest of path segments. Shared prefixes collapse into a single
chain of nodes; repeated insertions of the same path create nothing new.
"""

import logging
import os
import threading
from typing import Dict, List, Optional, Tuple

from filesearch.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_path(path: str, sep: str = os.sep, altsep: Optional[str] = os.altsep) -> List[str]:
    """
    Split a path into its non-empty segments.

    Empty segments (leading separators, doubled separators) are discarded.

    Args:
        path: Path to split.
        sep: Primary separator.
        altsep: Optional alternate separator (Windows '/').

    Returns:
        List[str]: Ordered segments.
    """
    if altsep and altsep != sep:
        path = path.replace(altsep, sep)
    return [segment for segment in path.split(sep) if segment]


class TreeAggregator:
    """
    Forest container for the found-paths tree.

    Owns all root-level nodes. Several roots exist when found paths start
    with different drive or root segments. Access is serialized with an
    internal lock since the forest is read by renderers while it grows.
    """

    def __init__(self, sep: str = os.sep, altsep: Optional[str] = os.altsep):
        self._sep = sep
        self._altsep = altsep
        self._roots: List[TreeNode] = []
        self._root_index: Dict[str, TreeNode] = {}
        self._node_count = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self._node_count

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def roots(self) -> Tuple[TreeNode, ...]:
        with self._lock:
            return tuple(self._roots)

    def insert(self, path: str) -> List[TreeNode]:
        """
        Find-or-create the chain of nodes for `path`.

        Args:
            path: Found file path.

        Returns:
            List[TreeNode]: Nodes touched from the root-level node down to the
                            leaf. Empty if the path has no segments.
        """
        segments = split_path(path, self._sep, self._altsep)
        chain: List[TreeNode] = []

        with self._lock:
            current: Optional[TreeNode] = None
            for segment in segments:
                if current is None:
                    node = self._root_index.get(segment)
                    if node is None:
                        node = TreeNode(segment)
                        self._roots.append(node)
                        self._root_index[segment] = node
                        self._node_count += 1
                else:
                    node = current.get_child(segment)
                    if node is None:
                        node = current.add_child(segment)
                        self._node_count += 1
                chain.append(node)
                current = node

        return chain

    def find(self, path: str) -> Optional[TreeNode]:
        """Return the node for `path` without creating anything."""
        segments = split_path(path, self._sep, self._altsep)
        if not segments:
            return None

        with self._lock:
            node = self._root_index.get(segments[0])
            for segment in segments[1:]:
                if node is None:
                    return None
                node = node.get_child(segment)
            return node

    def clear(self) -> None:
        """Drop the whole forest (start of a new search)."""
        with self._lock:
            self._roots.clear()
            self._root_index.clear()
            self._node_count = 0
        logger.debug("Tree aggregator cleared.")
