"""
Java Language Plugin for indentation checking.

This plugin parses Java source with tree-sitter-java and converts the
concrete syntax tree into the SyntaxTree the indent checker walks.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Set

import tree_sitter
import tree_sitter_java
import yaml

from plugins.base import LanguagePlugin
from indentlint.models import (
    HIDDEN_CHANNEL,
    GrammarProfile,
    NodeKind,
    ParseNode,
    SyntaxTree,
    Token,
)

logger = logging.getLogger(__name__)


class JavaPlugin(LanguagePlugin):
    """Java language front end using tree-sitter."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize the Java plugin.

        Args:
            config_path: Path to config.yaml file. If None, uses default location.
        """
        if config_path is None:
            config_path = Path(__file__).parent / "config.yaml"

        with open(config_path, 'r') as f:
            self._config = yaml.safe_load(f)

        self._profile = GrammarProfile(**self._config.get('grammar', {}))
        self._node_kinds: Dict[str, NodeKind] = {
            ts_type: NodeKind(kind)
            for ts_type, kind in self._config.get('node_kinds', {}).items()
        }
        self._statement_parents: Set[str] = set(self._config.get('statement_parents', []))
        self._statement_types: Set[str] = set(self._config.get('statement_types', []))
        self._spliced_children: Dict[str, Set[str]] = {
            parent: set(types)
            for parent, types in self._config.get('spliced_children', {}).items()
        }

        self._parser = tree_sitter.Parser(tree_sitter.Language(tree_sitter_java.language()))

        logger.info("Java plugin initialized successfully")

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extensions(self) -> List[str]:
        return self._config.get('file_extensions', ['.java'])

    @property
    def grammar_profile(self) -> GrammarProfile:
        return self._profile

    async def parse_file(self, file_path: str, content: str) -> SyntaxTree:
        """
        Parse Java file using tree-sitter-java.

        Args:
            file_path: Path to the file being parsed
            content: File content as string

        Returns:
            SyntaxTree rooted at the program node

        Raises:
            ValueError: If the file cannot be parsed
        """
        try:
            source = bytes(content, "utf8")
            tree = self._parser.parse(source)

            if tree.root_node is None:
                raise ValueError(f"Failed to parse Java file: {file_path}")

            if tree.root_node.has_error:
                logger.warning(f"Syntax errors in {file_path}, checking the recoverable parts")

            hidden_tokens: List[Token] = []
            root = self._convert_node(tree.root_node, source, hidden_tokens)
            if root is None:
                raise ValueError(f"Failed to parse Java file: {file_path}")

            syntax_tree = SyntaxTree.from_parse_node(root, hidden_tokens)

            logger.debug(f"Successfully parsed Java file: {file_path}")
            return syntax_tree

        except Exception as e:
            logger.error(f"Error parsing Java file {file_path}: {e}")
            raise ValueError(f"Failed to parse Java file: {e}") from e

    def _convert_node(
        self,
        ts_node: tree_sitter.Node,
        source: bytes,
        hidden_tokens: List[Token],
    ) -> Optional[ParseNode]:
        """
        Convert a tree-sitter node into a ParseNode.

        Comments are collected into ``hidden_tokens`` instead of the tree and
        zero-width nodes inserted by error recovery are dropped. Children of
        configured wrapper nodes are lifted into their parent.

        Args:
            ts_node: tree-sitter Node
            source: Source bytes the tree was parsed from
            hidden_tokens: Collector for hidden-channel tokens

        Returns:
            ParseNode, or None if the node does not belong in the tree
        """
        line = ts_node.start_point[0] + 1
        column = ts_node.start_point[1]

        if ts_node.is_extra:
            hidden_tokens.append(Token(
                text=self._node_text(ts_node, source),
                line=line,
                column=column,
                channel=HIDDEN_CHANNEL,
                type=ts_node.kind_id,
            ))
            return None

        if ts_node.is_missing:
            return None

        if ts_node.child_count == 0:
            return ParseNode(
                kind=NodeKind.TERMINAL,
                text=self._node_text(ts_node, source),
                line=line,
                column=column,
                token_type=ts_node.kind_id,
            )

        children = []
        for ts_child in ts_node.children:
            child = self._convert_node(ts_child, source, hidden_tokens)
            if child is None:
                continue
            if ts_child.type in self._spliced_children.get(ts_node.type, ()):
                children.extend(child.children)
                continue
            if ts_node.type in self._statement_parents and ts_child.type in self._statement_types:
                child = ParseNode(kind=NodeKind.STATEMENT, children=[child])
            children.append(child)

        kind = self._node_kinds.get(ts_node.type, NodeKind.OTHER)
        if not children:
            return ParseNode(kind=kind, text="", line=line, column=column, stop_line=line)

        return ParseNode(kind=kind, line=line, column=column, children=children)

    @staticmethod
    def _node_text(ts_node: tree_sitter.Node, source: bytes) -> str:
        return source[ts_node.start_byte:ts_node.end_byte].decode("utf8", errors="replace")
