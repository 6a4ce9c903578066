"""
Syntax tree data models.

This module defines the Position Source consumed by the indentation checker:
a recursive ``ParseNode`` input form produced by language front ends, and the
flattened ``SyntaxTree`` arena the checker actually walks.
"""

from enum import Enum
from typing import Iterator, List, Optional

from pydantic import BaseModel, model_validator


SIGNIFICANT_CHANNEL = 0
HIDDEN_CHANNEL = 1
EOF_TYPE = -1
EOF_TEXT = "<EOF>"


class NodeKind(str, Enum):
    """Closed set of node kinds the indentation checker distinguishes."""

    SOURCE_UNIT = "source_unit"
    CONTRACT_DEFINITION = "contract_definition"
    STRUCT_DEFINITION = "struct_definition"
    ENUM_DEFINITION = "enum_definition"
    IMPORT_DIRECTIVE = "import_directive"
    FUNCTION_CALL_ARGUMENTS = "function_call_arguments"
    BLOCK = "block"
    STATEMENT = "statement"
    IF_STATEMENT = "if_statement"
    WHILE_STATEMENT = "while_statement"
    DO_WHILE_STATEMENT = "do_while_statement"
    FOR_STATEMENT = "for_statement"
    TERMINAL = "terminal"
    OTHER = "other"


class Token(BaseModel):
    """A lexer token with its position."""

    text: str
    line: int
    column: int
    channel: int = SIGNIFICANT_CHANNEL
    type: int = 0

    @property
    def is_significant(self) -> bool:
        return self.channel == SIGNIFICANT_CHANNEL and self.type >= 0


class ParseNode(BaseModel):
    """
    Recursive parse tree node as produced by a language front end.

    Terminals carry their text and position directly. Composite nodes may
    omit ``line``/``column``/``stop_line``; they are then taken from the
    first and last child.
    """

    kind: NodeKind
    text: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    stop_line: Optional[int] = None
    children: List['ParseNode'] = []
    channel: int = SIGNIFICANT_CHANNEL
    token_type: int = 0

    @model_validator(mode="after")
    def _fill_span_from_children(self) -> "ParseNode":
        if self.children:
            first, last = self.children[0], self.children[-1]
            if self.line is None:
                self.line = first.line
            if self.column is None:
                self.column = first.column
            if self.stop_line is None:
                self.stop_line = last.stop_line
            if self.text is None:
                self.text = "".join(child.text or "" for child in self.children)
        elif self.stop_line is None:
            self.stop_line = self.line

        if self.line is None or self.column is None:
            raise ValueError(f"Node of kind '{self.kind.value}' has no position")
        return self


# Enable forward references for recursive model
ParseNode.model_rebuild()


class SyntaxNode(BaseModel):
    """A node record inside a ``SyntaxTree`` arena."""

    index: int
    kind: NodeKind
    parent: Optional[int] = None
    children: List[int] = []
    line: int
    column: int
    stop_line: int
    text: str = ""
    token: Optional[Token] = None

    @property
    def is_terminal(self) -> bool:
        return self.token is not None


class SyntaxTree:
    """
    Arena of syntax nodes addressed by integer index.

    The root is always index 0. Tokens are kept in source order and include
    hidden-channel tokens (comments) that are not part of the tree.
    """

    ROOT = 0

    def __init__(self, nodes: List[SyntaxNode], tokens: Optional[List[Token]] = None):
        if not nodes:
            raise ValueError("Syntax tree must contain at least one node")

        if nodes[self.ROOT].parent is not None:
            raise ValueError("Root node must not have a parent")

        for position, node in enumerate(nodes):
            if node.index != position:
                raise ValueError(f"Node at position {position} has index {node.index}")
            if node.parent is not None and not 0 <= node.parent < len(nodes):
                raise ValueError(f"Node {node.index} has dangling parent {node.parent}")
            for child in node.children:
                if not 0 <= child < len(nodes) or nodes[child].parent != node.index:
                    raise ValueError(f"Node {node.index} has inconsistent child {child}")

        self._nodes = nodes
        if tokens is None:
            tokens = [node.token for node in nodes if node.token is not None]
        self._tokens = sorted(tokens, key=lambda t: (t.line, t.column))

    @classmethod
    def from_parse_node(
        cls,
        root: ParseNode,
        hidden_tokens: Optional[List[Token]] = None
    ) -> "SyntaxTree":
        """
        Flatten a ``ParseNode`` tree into an arena.

        Args:
            root: Root of the parsed tree (normally a source unit)
            hidden_tokens: Trivia tokens (comments) kept outside the tree

        Returns:
            SyntaxTree with nodes numbered in pre-order
        """
        nodes: List[SyntaxNode] = []

        def add(parse_node: ParseNode, parent: Optional[int]) -> int:
            index = len(nodes)
            token = None
            if parse_node.kind == NodeKind.TERMINAL:
                token = Token(
                    text=parse_node.text or "",
                    line=parse_node.line,
                    column=parse_node.column,
                    channel=parse_node.channel,
                    type=parse_node.token_type,
                )
            nodes.append(SyntaxNode(
                index=index,
                kind=parse_node.kind,
                parent=parent,
                line=parse_node.line,
                column=parse_node.column,
                stop_line=parse_node.stop_line,
                text=parse_node.text or "",
                token=token,
            ))
            nodes[index].children = [add(child, index) for child in parse_node.children]
            return index

        add(root, None)

        tokens = [node.token for node in nodes if node.token is not None]
        tokens.extend(hidden_tokens or [])
        return cls(nodes, tokens)

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def root(self) -> SyntaxNode:
        return self._nodes[self.ROOT]

    @property
    def tokens(self) -> List[Token]:
        return list(self._tokens)

    def node(self, index: int) -> SyntaxNode:
        return self._nodes[index]

    def parent_of(self, index: int) -> Optional[SyntaxNode]:
        parent = self._nodes[index].parent
        return None if parent is None else self._nodes[parent]

    def children_of(self, index: int) -> List[SyntaxNode]:
        return [self._nodes[child] for child in self._nodes[index].children]

    def iter_nodes(self) -> Iterator[SyntaxNode]:
        return iter(self._nodes)
