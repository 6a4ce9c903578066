"""
Expected-indent resolution.

A node's expected column is derived from the first recorded correction found
on the node or on an ancestor that starts on the same source line. This keeps
one misplaced construct from producing a diagnostic on every line nested
under it: its contents are measured against where it should have been.
"""

from typing import Dict, Optional

from indentlint.models import IndentCorrection, NodeKind, SyntaxNode, SyntaxTree


class CorrectionTable:
    """Per-pass side table of indent corrections keyed by node index."""

    def __init__(self):
        self._corrections: Dict[int, IndentCorrection] = {}

    def record(self, index: int, observed: int, expected: int) -> bool:
        """
        Record the correction for a node unless one is already present.

        Returns:
            True if the correction was stored, False if the node already had one
        """
        if index in self._corrections:
            return False

        self._corrections[index] = IndentCorrection(observed=observed, expected=expected)
        return True

    def get(self, index: int) -> Optional[IndentCorrection]:
        return self._corrections.get(index)

    def __contains__(self, index: int) -> bool:
        return index in self._corrections

    def __len__(self) -> int:
        return len(self._corrections)


def correct_indent_of(tree: SyntaxTree, corrections: CorrectionTable, index: int) -> int:
    """
    Column a node should start at, given corrections recorded so far.

    Walks from the node up through ancestors that start on the same line. The
    first one carrying a correction reprojects the node's column through it.
    """
    node = tree.node(index)
    current: Optional[SyntaxNode] = node

    for _ in range(len(tree)):
        correction = corrections.get(current.index)
        if correction is not None:
            return correction.reproject(node.column)

        current = tree.parent_of(current.index)
        if current is None or current.line != node.line:
            break

    return node.column


def first_node_of_line(tree: SyntaxTree, index: int) -> SyntaxNode:
    """
    Leftmost node sharing the physical line on which ``index`` starts.

    Climbs to the outermost ancestor starting on the same line (never past a
    source unit), then looks for earlier siblings that still end on that line,
    such as modifiers written before the brace-bearing construct. When such a
    sibling starts on an earlier line the search continues from it.
    """
    current = tree.node(index)

    for _ in range(len(tree)):
        root = current
        parent = tree.parent_of(root.index)
        while (parent is not None and root.line == parent.line
               and parent.kind != NodeKind.SOURCE_UNIT):
            root = parent
            parent = tree.parent_of(root.index)

        result = root
        if parent is not None:
            siblings = parent.children
            position = siblings.index(root.index)
            for sibling_index in reversed(siblings[:position]):
                sibling = tree.node(sibling_index)
                if sibling.stop_line == root.line:
                    result = sibling

        if result.line == current.line:
            return result
        current = result

    return current
