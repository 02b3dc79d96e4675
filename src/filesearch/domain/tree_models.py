from __future__ import annotations

"""
Found-Paths Tree Data Models.

Provides the node type used by the tree aggregator to build a hierarchical
view of found paths. Nodes are owned by their parent (or by the forest for
root-level nodes) and only keep a weak reference back to it.
"""

import weakref
from typing import Dict, List, Optional, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class TreeNode:
    """
    One path segment in the found-paths tree.

    Children keep first-insertion order. A segment -> child index makes
    lookups constant time without changing that order.

    Attributes:
        segment: Exact path segment this node stands for.
    """

    __slots__ = ("segment", "_children", "_index", "_parent_ref", "__weakref__")

    def __init__(self, segment: str, parent: Optional[TreeNode] = None):
        self.segment = segment
        self._children: List[TreeNode] = []
        self._index: Dict[str, TreeNode] = {}
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    def __repr__(self) -> str:
        return f"TreeNode({self.segment!r}, children={len(self._children)})"

    @property
    def parent(self) -> Optional[TreeNode]:
        """Owning node, or None for root-level nodes."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def children(self) -> Tuple[TreeNode, ...]:
        return tuple(self._children)

    @property
    def is_leaf(self) -> bool:
        return not self._children

    def get_child(self, segment: str) -> Optional[TreeNode]:
        """Return the direct child whose segment equals `segment` exactly."""
        return self._index.get(segment)

    def add_child(self, segment: str) -> TreeNode:
        """
        Append a new child at the end of the children sequence.

        Raises:
            ValueError: If a child with the same segment already exists.
        """
        if segment in self._index:
            raise ValueError(f"Duplicate segment under {self.segment!r}: {segment!r}")
        child = TreeNode(segment, parent=self)
        self._children.append(child)
        self._index[segment] = child
        return child

    def path_segments(self) -> List[str]:
        """Segments from the root-level ancestor down to this node."""
        segments: List[str] = []
        node: Optional[TreeNode] = self
        while node is not None:
            segments.append(node.segment)
            node = node.parent
        segments.reverse()
        return segments

    def count(self) -> int:
        """Number of nodes in the subtree rooted here, self included."""
        total = 1
        stack = list(self._children)
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node._children)
        return total
