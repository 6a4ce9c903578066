"""
Indentation rule.

``IndentChecker`` binds the block, single-line and base-multiplicity
validators to node kinds. One instance checks one source unit: corrections
recorded while walking the tree are only meaningful for that tree.
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from indentlint.analyzers.resolver import CorrectionTable
from indentlint.analyzers.validators import (
    BaseIndentMultiplicityValidator,
    BlockValidator,
    NestedSingleLineValidator,
)
from indentlint.analyzers.walker import TreeWalker
from indentlint.config import IndentOptions
from indentlint.models import DEFAULT_PROFILE, EOF_TEXT, GrammarProfile, SyntaxNode, SyntaxTree
from indentlint.services.reporter import Reporter

logger = logging.getLogger(__name__)

ConfigLike = Union[IndentOptions, Mapping[str, Any], None]


class IndentChecker:
    """Checks statement, declaration and closing-brace indentation of one source unit."""

    def __init__(
        self,
        reporter: Reporter,
        config: ConfigLike = None,
        profile: Optional[GrammarProfile] = None
    ):
        self.reporter = reporter
        self.options = self.parse_config(config)
        self.profile = profile or DEFAULT_PROFILE
        self.corrections = CorrectionTable()

        self.block_validator = BlockValidator(self.options, reporter, self.corrections)
        self.nested_single_line_validator = NestedSingleLineValidator(
            self.options, reporter, self.corrections
        )
        self.base_indent_multiplicity_validator = BaseIndentMultiplicityValidator(self.options, reporter)

    @staticmethod
    def parse_config(config: ConfigLike) -> IndentOptions:
        """
        Resolve indent options from an ``IndentOptions`` instance, a rules
        configuration (``{"rules": {"indent": [...]}}``) or an options object
        (``{"indentSize": 2, "indentUnit": "spaces"}``).
        """
        if isinstance(config, IndentOptions):
            return config
        if isinstance(config, Mapping) and "rules" in config:
            return IndentOptions.from_rules(config)
        return IndentOptions.from_options(config)

    def check(self, tree: SyntaxTree) -> None:
        """Walk the whole tree, reporting every indentation violation."""
        logger.debug(
            f"Checking indentation of {len(tree)} node(s) with "
            f"{self.options.effective_size} {self.options.indent_unit.value}"
        )
        TreeWalker().walk(self, tree)

    def enter_block(self, tree: SyntaxTree, node: SyntaxNode) -> None:
        self.block_validator.validate_block(tree, node.index)

    def enter_contract_definition(self, tree: SyntaxTree, node: SyntaxNode) -> None:
        self.block_validator.validate_block(tree, node.index)

    def enter_struct_definition(self, tree: SyntaxTree, node: SyntaxNode) -> None:
        self.block_validator.validate_block(tree, node.index)

    def enter_enum_definition(self, tree: SyntaxTree, node: SyntaxNode) -> None:
        self.block_validator.validate_block(tree, node.index)

    def enter_import_directive(self, tree: SyntaxTree, node: SyntaxNode) -> None:
        self.block_validator.validate_block(tree, node.index)

    def enter_function_call_arguments(self, tree: SyntaxTree, node: SyntaxNode) -> None:
        self.block_validator.validate_block(tree, node.index)

    def enter_if_statement(self, tree: SyntaxTree, node: SyntaxNode) -> None:
        positions = [self.profile.if_then, self.profile.if_else]
        self.nested_single_line_validator.validate_multiple(tree, node, positions)

    def enter_while_statement(self, tree: SyntaxTree, node: SyntaxNode) -> None:
        self.nested_single_line_validator.validate(tree, node, self.profile.while_body)

    def enter_do_while_statement(self, tree: SyntaxTree, node: SyntaxNode) -> None:
        self.nested_single_line_validator.validate(tree, node, self.profile.do_while_body)

    def enter_for_statement(self, tree: SyntaxTree, node: SyntaxNode) -> None:
        self.nested_single_line_validator.validate(tree, node, len(node.children) - 1)

    def enter_source_unit(self, tree: SyntaxTree, node: SyntaxNode) -> None:
        validate_top_level = self.block_validator.validate_node(0)

        for child in tree.children_of(node.index):
            if child.text != EOF_TEXT:
                validate_top_level(child, child.line, child.column)

    def exit_source_unit(self, tree: SyntaxTree, node: SyntaxNode) -> None:
        self.base_indent_multiplicity_validator.validate(self.get_lines_with_error(), tree)

    def get_lines_with_error(self) -> List[int]:
        return (
            self.nested_single_line_validator.lines_with_error
            + self.block_validator.lines_with_error
        )


def check_tree(
    tree: SyntaxTree,
    reporter: Reporter,
    config: ConfigLike = None,
    profile: Optional[GrammarProfile] = None
) -> IndentChecker:
    """
    Run a fresh indent checker over one tree.

    Returns:
        The checker, for access to recorded corrections and flagged lines
    """
    checker = IndentChecker(reporter, config, profile)
    checker.check(tree)
    return checker
