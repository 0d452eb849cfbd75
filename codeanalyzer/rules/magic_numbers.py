"""
Rule for detecting magic numbers.

Every integer or real literal anywhere in a file is a candidate, whatever
statement or expression it sits in. Literals whose numeric value is on the
allow-list (by default -1, 0, 1 and 2, sign included) are idiomatic loop
bounds, flags and indices and are skipped; everything else is reported once
per occurrence with its exact source text.

null, default, true/false, characters and strings are not numeric literals
and are never candidates.
"""

from typing import Iterator

from codeanalyzer.config import Config
from codeanalyzer.rules import Rule
from codeanalyzer.syntax import SyntaxTree
from codeanalyzer.utils.ast_utils import parse_numeric_literal
from codeanalyzer.utils.metadata import MagicNumberFinding
from codeanalyzer.utils.settings import CHECK_MAGIC_NUMBERS


class MagicNumberRule(Rule):
    def __init__(self, config: Config = None):
        super().__init__(config)
        self.allowed = self.config.allowed_numbers()

    @property
    def name(self) -> str:
        return CHECK_MAGIC_NUMBERS

    @property
    def description(self) -> str:
        return "Numeric literals that should be named constants"

    def is_common(self, text: str) -> bool:
        return parse_numeric_literal(text) in self.allowed

    def check(self, tree: SyntaxTree, source) -> Iterator[MagicNumberFinding]:
        for literal in tree.literals:
            if self.is_common(literal.text):
                continue
            yield MagicNumberFinding(
                value=literal.text,
                file=source.path,
                line=literal.line,
                column=literal.column,
                context=source.line_text(literal.line),
            )
