from __future__ import annotations

"""
Tree Renderer.

Converts the found-paths forest into visual ASCII lines or nested
dictionaries. Children are emitted in first-insertion order, never sorted.
"""

import logging
import os
from typing import Any, Dict, Iterable, List

from filesearch.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(roots: Iterable[TreeNode]) -> List[str]:
    """
    Render a forest into a list of strings.

    Root-level nodes are printed flush left; their descendants use standard
    ASCII connectors (├──, └──).

    Args:
        roots: Root-level nodes in insertion order.

    Returns:
        List[str]: Visual lines of the tree.
    """
    lines: List[str] = []
    for root in roots:
        lines.append(root.segment)
        render_tree_structure(root, lines, prefix="")
    return lines


def render_tree_structure(node: TreeNode, lines: List[str], prefix: str = "") -> None:
    """
    Append the descendants of `node` to `lines`.

    Args:
        node: Node whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current depth.
    """
    children = node.children
    total = len(children)

    for i, child in enumerate(children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{child.segment}")

        if not child.is_leaf:
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(child, lines, prefix=new_prefix)


def tree_to_dict(roots: Iterable[TreeNode]) -> Dict[str, Any]:
    """
    Convert a forest to nested dictionaries (leaves map to None).

    Insertion order is preserved by the dict itself.
    """
    out: Dict[str, Any] = {}
    for root in roots:
        out[root.segment] = _node_to_value(root)
    return out


def save_tree(save_path: str, lines: List[str]) -> bool:
    """
    Persist rendered tree lines to a UTF-8 text file.

    Returns:
        bool: True when the file was written.
    """
    try:
        out_dir = os.path.dirname(os.path.abspath(save_path))
        os.makedirs(out_dir, exist_ok=True)
        with open(save_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        logger.info(f"Tree saved to file: {save_path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save tree to '{save_path}': {e}")
        return False

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _node_to_value(node: TreeNode) -> Any:
    if node.is_leaf:
        return None
    return {child.segment: _node_to_value(child) for child in node.children}
