"""
Indentation validators.

Each validator reports through a ``Reporter`` and remembers the lines it
flagged, so the final base-multiplicity pass does not report them again.
"""

import logging
from typing import Callable, Dict, Iterable, List, Set

from indentlint.analyzers.block import Block
from indentlint.analyzers.resolver import CorrectionTable, correct_indent_of, first_node_of_line
from indentlint.config import IndentOptions
from indentlint.models import NodeKind, SyntaxNode, SyntaxTree
from indentlint.services.reporter import Reporter

logger = logging.getLogger(__name__)

INDENT_CATEGORY = "indent"

# Statements validated elsewhere: blocks by BlockValidator, if-chains by
# the single-line rule applied to the nested if itself.
_SELF_VALIDATED_KINDS = (NodeKind.BLOCK, NodeKind.IF_STATEMENT)


class KnownLineValidator:
    """Base for validators that know the exact indent a line should have."""

    def __init__(self, options: IndentOptions, reporter: Reporter, corrections: CorrectionTable):
        self.indent = options.effective_size
        self.indent_unit = options.indent_unit
        self.reporter = reporter
        self.corrections = corrections
        self.lines_with_error: List[int] = []

    def report_incorrect_indent(self, line: int, column: int, correct_indent: int) -> None:
        self.lines_with_error.append(line)

        message = f"Expected indentation of {correct_indent} {self.indent_unit.value} but found {column}"
        self.reporter.report(line, column, INDENT_CATEGORY, message)


class BlockValidator(KnownLineValidator):
    """Checks the members and the closing brace of braced bodies."""

    def validate_block(self, tree: SyntaxTree, index: int) -> None:
        block = Block(tree, index)

        if not block.has_opening_brace() or block.brackets_on_same_line():
            return

        self.validate_nested_elements(block)
        self.validate_end_bracket(block)

    def validate_nested_elements(self, block: Block) -> None:
        anchor = first_node_of_line(block.tree, block.node.index)
        required_indent = correct_indent_of(block.tree, self.corrections, anchor.index) + self.indent

        block.for_each_nested_element(self.validate_node(required_indent))

    def validate_node(self, required_indent: int) -> Callable[[SyntaxNode, int, int], None]:
        def validate(node: SyntaxNode, line: int, column: int) -> None:
            if column != required_indent:
                self.report_incorrect_indent(line, column, required_indent)
                self.corrections.record(node.index, observed=column, expected=required_indent)

        return validate

    def validate_end_bracket(self, block: Block) -> None:
        anchor = first_node_of_line(block.tree, block.node.index)
        correct_indent = correct_indent_of(block.tree, self.corrections, anchor.index)
        end_bracket = block.end_bracket

        if end_bracket.column != correct_indent:
            self.report_incorrect_indent(end_bracket.line, end_bracket.column, correct_indent)


class NestedSingleLineValidator(KnownLineValidator):
    """Checks un-braced bodies of if, while, do-while and for statements."""

    def validate_multiple(self, tree: SyntaxTree, construct: SyntaxNode, positions: Iterable[int]) -> None:
        for position in positions:
            self.validate(tree, construct, position)

    def validate(self, tree: SyntaxTree, construct: SyntaxNode, position: int) -> None:
        children = tree.children_of(construct.index)
        if position < 0 or len(children) <= position:
            return

        statement = children[position]
        if self._controlled_kind(tree, statement) in _SELF_VALIDATED_KINDS:
            return
        if statement.line == construct.line:
            return

        parent = tree.parent_of(construct.index)
        base_indent = 0 if parent is None else correct_indent_of(tree, self.corrections, parent.index)
        required_indent = base_indent + self.indent

        if statement.column != required_indent:
            self.report_incorrect_indent(statement.line, statement.column, required_indent)
            self.corrections.record(statement.index, observed=statement.column, expected=required_indent)

    @staticmethod
    def _controlled_kind(tree: SyntaxTree, statement: SyntaxNode) -> NodeKind:
        if statement.kind == NodeKind.STATEMENT and statement.children:
            return tree.node(statement.children[0]).kind
        return statement.kind


class BaseIndentMultiplicityValidator:
    """Whole-file check that every line starts on a multiple of the indent unit."""

    def __init__(self, options: IndentOptions, reporter: Reporter):
        self.indent = options.effective_size
        self.reporter = reporter

    def validate(self, lines_with_error: Iterable[int], tree: SyntaxTree) -> None:
        skipped: Set[int] = set(lines_with_error)
        first_indent = self._first_indent_by_line(tree)

        for line in sorted(first_indent):
            if line in skipped:
                continue

            indent = first_indent[line]
            if self.is_not_valid_for_base_indent(indent):
                self.reporter.report(line, indent, INDENT_CATEGORY, "Indentation is incorrect")

        logger.debug(f"Base indent check covered {len(first_indent)} line(s), skipped {len(skipped)}")

    @staticmethod
    def _first_indent_by_line(tree: SyntaxTree) -> Dict[int, int]:
        first_indent: Dict[int, int] = {}

        for token in tree.tokens:
            if not token.is_significant:
                continue

            current = first_indent.get(token.line)
            if current is None or current > token.column:
                first_indent[token.line] = token.column

        return first_indent

    def is_not_valid_for_base_indent(self, indent: int) -> bool:
        return indent % self.indent != 0
