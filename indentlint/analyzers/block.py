"""Brace-delimited view over a syntax node."""

from typing import Callable, List, Optional

from indentlint.models import SyntaxNode, SyntaxTree

OPENING_BRACE = "{"
CLOSING_BRACE = "}"

NestedVisitor = Callable[[SyntaxNode, int, int], None]


class Block:
    """
    Wraps a node that may hold a braced body: a block, a contract, struct or
    enum body, an import clause, or braced call arguments.

    Brace positions are located once, when the view is built.
    """

    def __init__(self, tree: SyntaxTree, index: int):
        self.tree = tree
        self.node = tree.node(index)
        self.children: List[SyntaxNode] = tree.children_of(index)

        texts = [child.text for child in self.children]
        self.start_bracket_index: Optional[int] = (
            texts.index(OPENING_BRACE) if OPENING_BRACE in texts else None
        )
        self.end_bracket_index: Optional[int] = (
            texts.index(CLOSING_BRACE) if CLOSING_BRACE in texts else None
        )

    def has_opening_brace(self) -> bool:
        return self.start_bracket_index is not None

    @property
    def start_bracket(self) -> SyntaxNode:
        return self.children[self.start_bracket_index]

    @property
    def end_bracket(self) -> SyntaxNode:
        # The closing token is the last child, whatever its text.
        return self.children[-1]

    def brackets_on_same_line(self) -> bool:
        return self.start_bracket.line == self.end_bracket.line

    def for_each_nested_element(self, visit: NestedVisitor) -> None:
        """Call ``visit(node, line, column)`` for every non-terminal child between the braces."""
        if self.start_bracket_index is None or self.end_bracket_index is None:
            return

        for child in self.children[self.start_bracket_index + 1:self.end_bracket_index]:
            if not child.is_terminal:
                visit(child, child.line, child.column)
