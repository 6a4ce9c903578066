"""Depth-first enter/exit traversal of a syntax tree."""

from typing import Any, List, Tuple

from indentlint.models import SyntaxNode, SyntaxTree


class TreeWalker:
    """
    Walks a ``SyntaxTree`` depth first, calling ``enter_<kind>`` before a
    node's children and ``exit_<kind>`` after them on the listener, when the
    listener defines such methods. Hooks receive ``(tree, node)``.

    The walk uses an explicit stack, so tree depth is not limited by the
    interpreter's recursion limit.
    """

    def walk(self, listener: Any, tree: SyntaxTree) -> None:
        stack: List[Tuple[SyntaxNode, bool]] = [(tree.root, False)]

        while stack:
            node, children_done = stack.pop()

            if children_done:
                self._dispatch(listener, "exit", tree, node)
                continue

            self._dispatch(listener, "enter", tree, node)
            stack.append((node, True))
            for child in reversed(node.children):
                stack.append((tree.node(child), False))

    @staticmethod
    def _dispatch(listener: Any, phase: str, tree: SyntaxTree, node: SyntaxNode) -> None:
        hook = getattr(listener, f"{phase}_{node.kind.value}", None)
        if hook is not None:
            hook(tree, node)
