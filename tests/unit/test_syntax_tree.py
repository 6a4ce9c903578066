"""Unit tests for syntax tree models and traversal."""

import pytest
from pydantic import ValidationError

from indentlint.analyzers.walker import TreeWalker
from indentlint.models import (
    EOF_TYPE,
    HIDDEN_CHANNEL,
    NodeKind,
    ParseNode,
    SyntaxNode,
    SyntaxTree,
    Token,
)
from tree_helpers import block, build, call, node, tok


def test_parse_node_span_from_children():
    parsed = node(NodeKind.OTHER, tok("a", 2, 4), tok("(", 2, 5), tok(")", 3, 0))

    assert parsed.line == 2
    assert parsed.column == 4
    assert parsed.stop_line == 3
    assert parsed.text == "a()"


def test_terminal_stop_line_is_its_line():
    assert tok("x", 5, 2).stop_line == 5


def test_parse_node_without_position_is_rejected():
    with pytest.raises(ValidationError):
        ParseNode(kind=NodeKind.BLOCK)


def test_flattening_numbers_nodes_in_pre_order():
    tree = build(block((1, 0), call(2, 4), close_at=(3, 0)))

    root = tree.root
    assert root.kind == NodeKind.SOURCE_UNIT
    assert root.parent is None

    block_node = tree.node(root.children[0])
    assert block_node.index == 1
    assert block_node.kind == NodeKind.BLOCK
    assert tree.parent_of(block_node.index).index == root.index
    assert [child.text for child in tree.children_of(block_node.index)] == ["{", "y();", "}"]
    assert tree.node(block_node.children[0]).is_terminal
    assert not block_node.is_terminal


def test_tokens_in_source_order_with_hidden_tokens():
    parsed = node(NodeKind.SOURCE_UNIT, tok("b", 2, 0), tok("a", 1, 4))
    comment = Token(text="// c", line=1, column=0, channel=HIDDEN_CHANNEL)

    tree = SyntaxTree.from_parse_node(parsed, [comment])

    assert [t.text for t in tree.tokens] == ["// c", "a", "b"]
    assert [t.is_significant for t in tree.tokens] == [False, True, True]


def test_eof_token_is_not_significant():
    assert not Token(text="<EOF>", line=3, column=0, type=EOF_TYPE).is_significant


def test_inconsistent_arena_is_rejected():
    nodes = [
        SyntaxNode(index=0, kind=NodeKind.SOURCE_UNIT, children=[1], line=1, column=0, stop_line=1),
        SyntaxNode(index=1, kind=NodeKind.OTHER, parent=5, line=1, column=0, stop_line=1),
    ]

    with pytest.raises(ValueError):
        SyntaxTree(nodes)


def test_empty_arena_is_rejected():
    with pytest.raises(ValueError):
        SyntaxTree([])


class RecordingListener:
    def __init__(self):
        self.events = []

    def enter_block(self, tree, node):
        self.events.append(("enter", node.kind, node.line))

    def exit_block(self, tree, node):
        self.events.append(("exit", node.kind, node.line))

    def enter_source_unit(self, tree, node):
        self.events.append(("enter", node.kind, node.line))

    def exit_source_unit(self, tree, node):
        self.events.append(("exit", node.kind, node.line))


def test_walker_enters_and_exits_depth_first():
    inner = node(NodeKind.BLOCK, tok("{", 2, 4), tok("}", 2, 5))
    tree = build(node(NodeKind.BLOCK, tok("{", 1, 0), inner, tok("}", 3, 0)))
    listener = RecordingListener()

    TreeWalker().walk(listener, tree)

    assert listener.events == [
        ("enter", NodeKind.SOURCE_UNIT, 1),
        ("enter", NodeKind.BLOCK, 1),
        ("enter", NodeKind.BLOCK, 2),
        ("exit", NodeKind.BLOCK, 2),
        ("exit", NodeKind.BLOCK, 1),
        ("exit", NodeKind.SOURCE_UNIT, 1),
    ]
